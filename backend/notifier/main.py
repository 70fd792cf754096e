# backend/notifier/main.py

"""
HTTP 版のエントリーポイント。

- /notifications/generate エンドポイントを公開する
- /health でヘルスチェックを返す
"""

from fastapi import FastAPI

from notifier.notifications.router import router as notifications_router


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションファクトリ。

    - 通知生成エンドポイント (/notifications/generate)
    - ヘルスチェックエンドポイント (/health)
    """
    app = FastAPI(title="Birthday Notifier")

    # ルーター登録
    app.include_router(notifications_router)

    @app.get("/health", tags=["health"])
    def health_check() -> dict:
        """
        簡易ヘルスチェックエンドポイント。
        """
        return {"status": "ok"}

    return app


# uvicorn 実行時のエントリーポイント
app = create_app()
