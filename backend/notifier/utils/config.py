# backend/notifier/utils/config.py

"""
環境変数読み取り用のユーティリティ。
notifier.settings から利用し、文字列 / 日付の値を取り出す。
"""

import os
from datetime import date
from typing import Optional


class EnvVarMissingError(RuntimeError):
    """必須環境変数が設定されていない場合に投げる例外。"""

    def __init__(self, name: str) -> None:
        super().__init__(f"Required environment variable '{name}' is not set.")
        self.name = name


def get_env(
    name: str,
    default: Optional[str] = None,
    *,
    required: bool = True,
) -> Optional[str]:
    """
    環境変数を取得するヘルパー。

    :param name: 環境変数名
    :param default: デフォルト値（required=False の場合のみ使用）
    :param required: True の場合、未設定なら例外を投げる
    :return: 文字列値（未設定かつ required=False なら default）
    """
    value = os.getenv(name)

    if value is None or value.strip() == "":
        if required:
            raise EnvVarMissingError(name)
        return default

    return value.strip()


def get_env_date(name: str) -> Optional[date]:
    """
    ISO 形式（YYYY-MM-DD）の日付を環境変数から取得する。

    未設定なら None。不正な値は RuntimeError にする。
    """
    raw = get_env(name, required=False)
    if raw is None:
        return None

    try:
        return date.fromisoformat(raw)
    except ValueError as exc:  # noqa: TRY003
        raise RuntimeError(
            f"Invalid date value for env var {name}: {raw!r} (expected YYYY-MM-DD)"
        ) from exc
