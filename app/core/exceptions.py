from fastapi import Request, status
from fastapi.responses import JSONResponse

MISSING_FIELDS_MESSAGE = "Missing required fields: user_id, title, body"
TOKEN_FETCH_FAILED_MESSAGE = "Failed to fetch device tokens"


class NotificationError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotificationValidationError(NotificationError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = MISSING_FIELDS_MESSAGE


class StorageError(NotificationError):
    """A read against the preferences or device-token store failed or timed out."""


class PreferenceLookupError(StorageError):
    message = "Failed to look up notification preferences"


class TokenFetchError(StorageError):
    message = TOKEN_FETCH_FAILED_MESSAGE


async def notification_error_handler(request: Request, exc: NotificationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})
