# backend/notifier/notifications/generators.py

"""
通知ジェネレータのインターフェースと誕生日ジェネレータ。

NotificationGenerator を満たすオブジェクトであれば、
NotificationService を変更せずに新しい通知ルール（入社記念日など）を追加できる。
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol, TypeVar

from notifier.clock import TimeSource
from notifier.people.schemas import Subject

from .rules import is_birthday_observed
from .schemas import Notification

logger = logging.getLogger(__name__)

SubjectT_contra = TypeVar("SubjectT_contra", contravariant=True)

BIRTHDAY_TITLE = "Happy Birthday!"
BIRTHDAY_MESSAGE_TEMPLATE = "Have a fabulous birthday {name}!"


class NotificationGenerator(Protocol[SubjectT_contra]):
    """
    通知生成の最小インターフェース。

    対象 1件につき、通知 0件（None）または 1件を返す。
    「通知なし」は正常系であり、例外で表現しない。
    """

    def generate(self, subject: SubjectT_contra) -> Optional[Notification]:  # pragma: no cover - Protocol
        ...


class BirthdayNotificationGenerator:
    """
    誕生日当日（2/29 生まれは非うるう年の 3/1）に通知を生成するジェネレータ。
    """

    def __init__(self, time_source: TimeSource) -> None:
        self._time_source = time_source

    def generate(self, subject: Subject) -> Optional[Notification]:
        # 1回の呼び出しでは today を一度だけ読む
        today = self._time_source.today()
        if not is_birthday_observed(subject.birth_date, today):
            return None

        logger.debug("Birthday observed for %s on %s", subject.name, today.isoformat())
        return self._create_notification(subject)

    @staticmethod
    def _create_notification(subject: Subject) -> Notification:
        return Notification.of(
            BIRTHDAY_TITLE,
            BIRTHDAY_MESSAGE_TEMPLATE.format(name=subject.name),
        )
