# backend/notifier/notifications/factory.py

"""
通知サービスの簡易ファクトリ。

- build_notification_service(): 指定した TimeSource で既定の Generator 群を組み立てる
- get_notification_service(): アプリ全体で共有するインスタンスを返す（設定から TimeSource を決める）
"""

from __future__ import annotations

from typing import Optional

from notifier.clock import TimeSource
from notifier.people.schemas import Subject
from notifier.settings import get_notifier_settings

from .generators import BirthdayNotificationGenerator
from .service import NotificationService

_notification_service: Optional[NotificationService[Subject]] = None


def build_notification_service(time_source: TimeSource) -> NotificationService[Subject]:
    """
    既定の Generator 構成（現時点では誕生日のみ）で NotificationService を作る。
    """
    return NotificationService([BirthdayNotificationGenerator(time_source)])


def get_notification_service() -> NotificationService[Subject]:
    """
    アプリ全体で共有する NotificationService を返す。

    初回呼び出し時にのみ生成し、それ以降は同じインスタンスを返す。
    """
    global _notification_service
    if _notification_service is None:
        settings = get_notifier_settings()
        _notification_service = build_notification_service(settings.build_time_source())
    return _notification_service


def reset_notification_service() -> None:
    """
    テスト用に共有インスタンスをリセットする。
    """
    global _notification_service
    _notification_service = None
