# backend/notifier/notifications/schemas.py

"""
通知メッセージの共通スキーマ定義。

- Notification: タイトル＋本文だけを持つ値オブジェクト。
  同じ title / message を持つ通知は区別しない（frozen による構造的等価性）。
- /notifications/generate のリクエスト / レスポンス
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from notifier.people.schemas import Subject


class Notification(BaseModel):
    """
    通知 1件分の情報。

    Generator が生成し、表示レイヤ（presenter）が消費する。
    """

    model_config = ConfigDict(frozen=True)

    title: str = Field(
        ...,
        description="短いタイトル（1行目など）。",
    )
    message: str = Field(
        ...,
        description="本文。プレーンテキスト想定。",
    )

    @classmethod
    def of(cls, title: str, message: str) -> "Notification":
        return cls(title=title, message=message)


class GenerateNotificationsRequest(BaseModel):
    """
    /notifications/generate のリクエストボディ。
    """

    subjects: List[Subject] = Field(
        ...,
        description="判定対象の人物の配列。",
    )
    as_of: Optional[date] = Field(
        None,
        description="基準日。省略時はサーバ設定の TimeSource（通常はシステム日付）を使う。",
    )


class SubjectNotifications(BaseModel):
    """1人分の判定結果。"""

    subject: Subject
    notifications: List[Notification] = Field(
        default_factory=list,
        description="Generator の登録順に並んだ通知。",
    )


class GenerateNotificationsResponse(BaseModel):
    """
    /notifications/generate のレスポンス全体。
    """

    results: List[SubjectNotifications] = Field(
        ...,
        description="入力 subjects と 1:1 に対応する。",
    )
    count: int = Field(..., description="results 全体に含まれる通知の総数。")
