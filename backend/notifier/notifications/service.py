# backend/notifier/notifications/service.py

"""
複数の NotificationGenerator を束ねる通知サービス。

- 登録順に各 Generator を呼び出す
- None 以外の結果だけを登録順のまま集める
- Generator の例外は握りつぶさずに呼び出し元へ伝播させる（残りの Generator は実行しない）
"""

from __future__ import annotations

import logging
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

from .generators import NotificationGenerator
from .schemas import Notification

logger = logging.getLogger(__name__)

SubjectT = TypeVar("SubjectT")


class NotificationService(Generic[SubjectT]):
    """
    Generator 群にファンアウトし、結果をファンインするサービス。

    Generator の並びはコンストラクタで確定し、以降は変更しない。
    """

    def __init__(self, generators: Iterable[NotificationGenerator[SubjectT]]) -> None:
        self._generators: Tuple[NotificationGenerator[SubjectT], ...] = tuple(generators)

    @property
    def generators(self) -> Tuple[NotificationGenerator[SubjectT], ...]:
        return self._generators

    def generate(self, subject: SubjectT) -> List[Notification]:
        """
        subject に対する通知を、Generator の登録順で返す。
        """
        notifications: List[Notification] = []
        for generator in self._generators:
            logger.debug("Running %s", type(generator).__name__)
            notification = generator.generate(subject)
            if notification is not None:
                notifications.append(notification)

        if notifications:
            logger.info("Generated %d notification(s) for %r", len(notifications), subject)
        return notifications

    def iter_notifications(
        self, subjects: Iterable[SubjectT]
    ) -> Iterator[Tuple[SubjectT, Notification]]:
        """
        複数の subject を順に処理し、(subject, notification) を遅延的に返す。

        並びは subject の順 → Generator の登録順。
        """
        for subject in subjects:
            for notification in self.generate(subject):
                yield subject, notification
