# backend/notifier/notifications/presenter.py

"""
通知の表示レイヤ。

通知サービス本体は書式を持たず、ここで 1行テキストに整形して出力する。
実際の配信（メール / SMS など）は扱わない。
"""

from __future__ import annotations

import logging
from enum import Enum

from .schemas import Notification

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """
    1行表示の書式。

    - TAB: "<title>\\t<message>"
    - BULLET: "* <title> <message>"
    """

    TAB = "tab"
    BULLET = "bullet"


def format_notification(
    notification: Notification, fmt: OutputFormat = OutputFormat.TAB
) -> str:
    if fmt == OutputFormat.BULLET:
        return f"* {notification.title} {notification.message}"
    return f"{notification.title}\t{notification.message}"


class LoggingNotificationPresenter:
    """
    Notification を整形して logger に INFO で記録する presenter。
    """

    def __init__(
        self,
        fmt: OutputFormat = OutputFormat.TAB,
        logger_: logging.Logger | None = None,
    ) -> None:
        self._fmt = fmt
        self._logger = logger_ or logger

    def present(self, notification: Notification) -> str:
        line = format_notification(notification, self._fmt)
        self._logger.info(line)
        return line
