# backend/tests/test_notifications_service.py

from datetime import date
from typing import List, Optional

import pytest

from notifier.clock import FixedClock, MutableClock
from notifier.notifications.factory import build_notification_service
from notifier.notifications.generators import BirthdayNotificationGenerator
from notifier.notifications.schemas import Notification
from notifier.notifications.service import NotificationService
from notifier.people.schemas import Subject

AL = Subject(name="Al Einstein", birth_date=date(1879, 3, 14))


class StubGenerator:
    def __init__(self, result: Optional[Notification]) -> None:
        self.result = result
        self.seen: List[Subject] = []

    def generate(self, subject: Subject) -> Optional[Notification]:
        self.seen.append(subject)
        return self.result


class ExplodingGenerator:
    def generate(self, subject: Subject) -> Optional[Notification]:
        raise RuntimeError("boom")


def test_keeps_registration_order_and_skips_empty_results() -> None:
    first = Notification.of("first", "one")
    third = Notification.of("third", "three")
    service = NotificationService(
        [StubGenerator(first), StubGenerator(None), StubGenerator(third)]
    )

    assert service.generate(AL) == [first, third]


def test_every_generator_sees_the_subject() -> None:
    generators = [StubGenerator(None), StubGenerator(None)]
    service = NotificationService(generators)

    assert service.generate(AL) == []
    assert [g.seen for g in generators] == [[AL], [AL]]


def test_no_generators_yields_nothing() -> None:
    assert NotificationService([]).generate(AL) == []


def test_generator_list_is_fixed_at_construction() -> None:
    generators = [StubGenerator(Notification.of("t", "m"))]
    service = NotificationService(generators)

    generators.append(StubGenerator(Notification.of("late", "m")))

    assert len(service.generators) == 1
    assert service.generate(AL) == [Notification.of("t", "m")]


def test_generator_error_propagates_and_stops_remaining_generators() -> None:
    after = StubGenerator(Notification.of("after", "m"))
    service = NotificationService([StubGenerator(None), ExplodingGenerator(), after])

    with pytest.raises(RuntimeError, match="boom"):
        service.generate(AL)

    assert after.seen == []


def test_birthday_scenario_on_birthday() -> None:
    service = build_notification_service(FixedClock(date(2021, 3, 14)))

    assert service.generate(AL) == [
        Notification(title="Happy Birthday!", message="Have a fabulous birthday Al Einstein!")
    ]


@pytest.mark.parametrize(
    "birth_date, today, expected_count",
    [
        (date(1980, 3, 14), date(2021, 3, 15), 0),
        (date(1972, 2, 29), date(2021, 3, 1), 1),
        (date(1972, 2, 29), date(2020, 3, 1), 0),
        (date(1976, 2, 29), date(2024, 2, 29), 1),
    ],
)
def test_birthday_scenarios(birth_date: date, today: date, expected_count: int) -> None:
    service = build_notification_service(FixedClock(today))
    subject = Subject(name="Tom Hermann", birth_date=birth_date)

    assert len(service.generate(subject)) == expected_count


def test_generate_twice_gives_equal_results() -> None:
    service = build_notification_service(FixedClock(date(2021, 3, 14)))

    assert service.generate(AL) == service.generate(AL)


def test_mixed_birthday_and_stub_generators() -> None:
    clock = MutableClock(date(2021, 3, 14))
    extra = Notification.of("Work Anniversary", "Thanks for 5 years!")
    service = NotificationService(
        [StubGenerator(extra), BirthdayNotificationGenerator(clock)]
    )

    assert service.generate(AL) == [
        extra,
        Notification.of("Happy Birthday!", "Have a fabulous birthday Al Einstein!"),
    ]

    clock.advance()
    assert service.generate(AL) == [extra]


def test_iter_notifications_flattens_in_subject_then_generator_order() -> None:
    gosling = Subject(name="James Gosling", birth_date=date(1955, 5, 19))
    hamilton = Subject(name="Margaret Hamilton", birth_date=date(1936, 8, 17))
    born_today = Subject(name="Pi Day", birth_date=date(2000, 3, 14))
    service = build_notification_service(FixedClock(date(2021, 3, 14)))

    pairs = list(service.iter_notifications([AL, gosling, hamilton, born_today]))

    assert [subject.name for subject, _ in pairs] == ["Al Einstein", "Pi Day"]
    assert pairs[1][1].message == "Have a fabulous birthday Pi Day!"
