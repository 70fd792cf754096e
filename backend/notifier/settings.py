# backend/notifier/settings.py

"""
notifier の設定値読み出しモジュール。

- 環境変数からタイムゾーン / 出力書式 / 基準日 / ログレベルを取得する
- すべて任意項目で、未設定ならデフォルトに倒す
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

from notifier.clock import FixedClock, SystemClock, TimeSource
from notifier.notifications.presenter import OutputFormat
from notifier.utils.config import get_env, get_env_date


@dataclass
class NotifierSettings:
    """
    notifier 実行時の設定値のまとまり。

    as_of が設定されている場合、「今日」はその日付に固定される。
    """

    timezone: Optional[str]
    output_format: OutputFormat
    as_of: Optional[date]
    log_level: int

    def build_time_source(self) -> TimeSource:
        if self.as_of is not None:
            return FixedClock(self.as_of)
        return SystemClock(self.timezone)


def _get_output_format(name: str, default: OutputFormat) -> OutputFormat:
    raw = get_env(name, required=False)
    if raw is None:
        return default

    try:
        return OutputFormat(raw.lower())
    except ValueError as exc:  # noqa: TRY003
        choices = ", ".join(f.value for f in OutputFormat)
        raise RuntimeError(
            f"Invalid output format for env var {name}: {raw!r} (choose from {choices})"
        ) from exc


def _get_log_level(name: str, default: str) -> int:
    raw = (get_env(name, required=False) or default).upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        raise RuntimeError(f"Invalid log level for env var {name}: {raw!r}")
    return level


def get_notifier_settings() -> NotifierSettings:
    """
    NotifierSettings を構築して返す。
    """
    return NotifierSettings(
        timezone=get_env("NOTIFIER_TIMEZONE", required=False),
        output_format=_get_output_format("NOTIFIER_OUTPUT_FORMAT", OutputFormat.TAB),
        as_of=get_env_date("NOTIFIER_AS_OF"),
        log_level=_get_log_level("NOTIFIER_LOG_LEVEL", default="INFO"),
    )
