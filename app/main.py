import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.endpoints import health, notification
from app.core.config import settings
from app.core.exceptions import NotificationError, notification_error_handler
from app.core.logging import setup_logging
from app.database.mongodb import client
from app.models.device_token import device_token_model
from app.models.notification_preference import notification_preference_model

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings)

    await notification_preference_model.create_indexes()
    await device_token_model.create_indexes()

    logger.info("Push notification service started")
    yield
    client.close()


app = FastAPI(lifespan=lifespan, title=settings.PROJECT_NAME)


class CORSHeadersMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        # answer preflight requests before routing
        if request.method == "OPTIONS":
            return PlainTextResponse("ok", headers=CORS_HEADERS)

        response = await call_next(request)
        response.headers.update(CORS_HEADERS)
        return response


app.add_middleware(CORSHeadersMiddleware)
app.add_exception_handler(NotificationError, notification_error_handler)

app.include_router(health.router, prefix="", tags=["health"])

app.include_router(notification.router, prefix="", tags=["notification"])
