# backend/notifier/notifications/rules.py

"""
誕生日の判定ルール。

- 月日が一致すればその日が誕生日
- 2/29 生まれは、うるう年でない年に限り 3/1 に祝う
  （2/28 には祝わない。うるう年は 2/29 当日のみ）
"""

from __future__ import annotations

import calendar
from datetime import date
from typing import NamedTuple


class MonthDay(NamedTuple):
    """日付から年を落とした (月, 日) の組。比較専用。"""

    month: int
    day: int


LEAP_DAY = MonthDay(2, 29)
LEAP_DAY_OBSERVED = MonthDay(3, 1)


def month_day(value: date) -> MonthDay:
    return MonthDay(value.month, value.day)


def is_leap_birthday_observed(birthday: MonthDay, today: date) -> bool:
    """うるう年でない年の 3/1 に、2/29 生まれの誕生日を繰り下げて祝うかどうか。"""
    return (
        not calendar.isleap(today.year)
        and birthday == LEAP_DAY
        and month_day(today) == LEAP_DAY_OBSERVED
    )


def is_birthday_observed(birth_date: date, today: date) -> bool:
    """
    today が birth_date の誕生日（祝う日）にあたるかを返す。

    副作用なし・例外なし。任意の有効な日付 2つを受け付ける。
    """
    birthday = month_day(birth_date)
    if birthday == month_day(today):
        return True
    return is_leap_birthday_observed(birthday, today)
