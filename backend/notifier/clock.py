# backend/notifier/clock.py

"""
「今日」を提供する TimeSource の定義。

通知ロジックは date.today() を直接呼ばず、必ず注入された TimeSource を使う。

- SystemClock: 実行環境の現在日付（タイムゾーン指定可）
- FixedClock: 常に同じ日付を返す（CLI の --as-of や API の as_of 用）
- MutableClock: テストで日付を動かすための可変クロック
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Optional, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class TimeSource(Protocol):
    """現在日付を返す最小インターフェース。"""

    def today(self) -> date:  # pragma: no cover - Protocol
        ...


class SystemClock:
    """
    システム時計に基づく TimeSource。

    tz を指定した場合はそのタイムゾーンでの日付、未指定ならホストのローカル日付を返す。
    """

    def __init__(self, tz: Optional[str] = None) -> None:
        self._zone: Optional[ZoneInfo] = None
        if tz:
            try:
                self._zone = ZoneInfo(tz)
            except (ZoneInfoNotFoundError, ValueError) as exc:
                raise RuntimeError(f"Unknown time zone: {tz!r}") from exc

    @property
    def zone(self) -> Optional[ZoneInfo]:
        return self._zone

    def today(self) -> date:
        if self._zone is None:
            return date.today()
        return datetime.now(self._zone).date()


class FixedClock:
    """常に同じ日付を返す TimeSource。"""

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        return self._day


class MutableClock:
    """
    テスト用の可変クロック。

    set() / advance() で日付を動かせる。巻き戻しも許可する。
    """

    def __init__(self, start: Optional[date] = None) -> None:
        self._day = start or date(1970, 1, 1)

    def today(self) -> date:
        return self._day

    def set(self, day: date) -> None:
        self._day = day

    def advance(self, days: int = 1) -> None:
        self._day = self._day + timedelta(days=days)
