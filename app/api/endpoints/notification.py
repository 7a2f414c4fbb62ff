import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from app.core.exceptions import NotificationError
from app.schemas.notification import NotificationRequest
from app.services.notification import NotificationService, notification_service

logger = logging.getLogger(__name__)

router = APIRouter()


def get_notification_service() -> NotificationService:
    return notification_service


@router.post("/send-push-notification")
async def send_push_notification(
    request: Request,
    service: Annotated[NotificationService, Depends(get_notification_service)],
) -> JSONResponse:
    # body is parsed by hand so malformed JSON surfaces as a 500 with details
    try:
        payload = await request.json()
        notification_request = NotificationRequest.from_payload(payload)
        result = await service.dispatch(notification_request)
    except NotificationError:
        raise
    except Exception as e:
        logger.exception(f"Error in push notification handler: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Internal server error", "details": str(e)},
        )

    return JSONResponse(content=result.model_dump(exclude_none=True))
