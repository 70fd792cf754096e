# backend/notifier/people/schemas.py

"""
通知対象（Subject）のスキーマ定義。

- name: 表示名（空文字は不可、Unicode 可）
- birth_date: 生年月日

frozen モデルなので、等価性とハッシュはフィールド値で決まる。
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class Subject(BaseModel):
    """
    誕生日判定の対象となる人物。

    生成後は変更しない前提（frozen）。
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        description="通知メッセージに埋め込む表示名。",
    )
    birth_date: date = Field(
        ...,
        description="生年月日。年は判定に使わず、月日のみ比較する。",
    )
