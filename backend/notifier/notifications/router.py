# backend/notifier/notifications/router.py
"""
通知生成用の FastAPI ルーター定義。

- /notifications/generate
"""

from fastapi import APIRouter, HTTPException, status

from notifier.clock import FixedClock

from .factory import build_notification_service, get_notification_service
from .schemas import (
    GenerateNotificationsRequest,
    GenerateNotificationsResponse,
    SubjectNotifications,
)

router = APIRouter(prefix="/notifications", tags=["notifications"])


@router.post(
    "/generate",
    response_model=GenerateNotificationsResponse,
    summary="通知の生成",
    description=(
        "人物の配列を受け取り、それぞれについて基準日に発火する通知を返す。"
        "as_of を指定した場合はその日付を「今日」として判定する。"
    ),
)
def generate_notifications(
    request: GenerateNotificationsRequest,
) -> GenerateNotificationsResponse:
    """
    人物ごとの通知一覧を返すエンドポイント。

    - Generator が例外を投げた場合は 500 エラーとして扱う
    """
    if request.as_of is not None:
        service = build_notification_service(FixedClock(request.as_of))
    else:
        service = get_notification_service()

    try:
        results = [
            SubjectNotifications(subject=subject, notifications=service.generate(subject))
            for subject in request.subjects
        ]
    except Exception as exc:  # noqa: BLE001
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Notification generation failed unexpectedly.",
        ) from exc

    count = sum(len(r.notifications) for r in results)
    return GenerateNotificationsResponse(results=results, count=count)
