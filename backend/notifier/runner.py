# backend/notifier/runner.py
from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Sequence

from notifier.clock import FixedClock, TimeSource
from notifier.notifications.factory import build_notification_service
from notifier.notifications.presenter import OutputFormat, format_notification
from notifier.people.schemas import Subject
from notifier.settings import get_notifier_settings

logger = logging.getLogger(__name__)


def _years_before(day: date, years: int) -> date:
    """
    day の years 年前の日付を返す。

    2/29 から存在しない年に戻る場合は 2/28 に丸める。
    """
    try:
        return day.replace(year=day.year - years)
    except ValueError:
        return day.replace(year=day.year - years, day=28)


def default_subjects(today: date) -> List[Subject]:
    """
    --person 未指定時に使うサンプルの人物リスト。
    """
    return [
        Subject(name="Party Animal", birth_date=_years_before(today, 21)),
        Subject(name="Margaret Hamilton", birth_date=date(1936, 8, 17)),
        Subject(name="James Gosling", birth_date=date(1955, 5, 19)),
    ]


def parse_person(raw: str) -> Subject:
    """
    "Name=YYYY-MM-DD" 形式の文字列を Subject に変換する。
    """
    name, sep, birth = raw.rpartition("=")
    if not sep or not name.strip():
        raise ValueError(f"Expected NAME=YYYY-MM-DD, got {raw!r}")
    return Subject(name=name.strip(), birth_date=date.fromisoformat(birth.strip()))


def run(
    *,
    subjects: Iterable[Subject],
    time_source: TimeSource,
    fmt: OutputFormat = OutputFormat.TAB,
) -> List[str]:
    """
    subjects 全員分の通知を生成し、整形済みの行を返す。

    並びは subjects の順 → Generator の登録順。
    """
    service = build_notification_service(time_source)
    lines = [
        format_notification(notification, fmt)
        for _, notification in service.iter_notifications(subjects)
    ]
    logger.info("Generated %d notification line(s)", len(lines))
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    簡易 CLI エントリーポイント。

    例:
        python -m notifier.runner
        python -m notifier.runner --as-of 2021-03-01 --person "Saul Williams=1972-02-29"
        python -m notifier.runner --format bullet
    """
    import argparse

    settings = get_notifier_settings()

    parser = argparse.ArgumentParser(description="Birthday notification runner")
    parser.add_argument(
        "--as-of",
        type=date.fromisoformat,
        default=None,
        help="「今日」として扱う日付（YYYY-MM-DD）",
    )
    parser.add_argument(
        "--format",
        choices=[f.value for f in OutputFormat],
        default=settings.output_format.value,
        help="出力書式",
    )
    parser.add_argument(
        "--person",
        action="append",
        default=[],
        metavar="NAME=YYYY-MM-DD",
        help="判定対象の人物（複数指定可）",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level)

    if args.as_of is not None:
        time_source: TimeSource = FixedClock(args.as_of)
    else:
        time_source = settings.build_time_source()

    try:
        subjects = [parse_person(raw) for raw in args.person]
    except ValueError as exc:
        parser.error(str(exc))

    if not subjects:
        subjects = default_subjects(time_source.today())

    for line in run(subjects=subjects, time_source=time_source, fmt=OutputFormat(args.format)):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
