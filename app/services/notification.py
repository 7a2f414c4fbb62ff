import asyncio
import logging

from pymongo.errors import PyMongoError

from app.core.config import settings
from app.core.exceptions import PreferenceLookupError, TokenFetchError
from app.models.device_token import device_token_model
from app.models.notification_preference import notification_preference_model
from app.schemas.device_token import DeviceToken
from app.schemas.notification import DispatchResult, NotificationPreference, NotificationRequest

logger = logging.getLogger(__name__)

PUSH_DISABLED_MESSAGE = "Push notifications disabled for this user and type"
NO_DEVICE_TOKENS_MESSAGE = "No device tokens found for user"
DISPATCHED_MESSAGE = "Push notification processed successfully"


class NotificationService:
    _instance: "NotificationService" = None

    def __init__(
        self,
        preference_model=notification_preference_model,
        device_token_model=device_token_model,
        timeout: float = settings.STORE_TIMEOUT_SECONDS,
        preference_failure_policy: str = settings.PREFERENCE_FAILURE_POLICY,
    ):
        self.preference_model = preference_model
        self.device_token_model = device_token_model
        self.timeout = timeout
        self.preference_failure_policy = preference_failure_policy

    @classmethod
    def get_instance(cls) -> "NotificationService":
        if NotificationService._instance is None:
            NotificationService._instance = cls()
        return NotificationService._instance

    async def get_preference(
        self, user_id: str, notification_type: str
    ) -> NotificationPreference | None:
        try:
            return await asyncio.wait_for(
                self.preference_model.get_preference(user_id, notification_type),
                timeout=self.timeout,
            )
        except (PyMongoError, TimeoutError) as e:
            raise PreferenceLookupError(f"Error checking preferences: {e!r}") from e

    async def get_device_tokens(self, user_id: str) -> list[DeviceToken]:
        try:
            return await asyncio.wait_for(
                self.device_token_model.get_tokens_by_user_id(user_id),
                timeout=self.timeout,
            )
        except (PyMongoError, TimeoutError) as e:
            logger.error(f"Error fetching device tokens for user {user_id}: {e!r}")
            raise TokenFetchError() from e

    async def is_push_allowed(self, request: NotificationRequest) -> bool:
        """
        A stored preference with push disabled blocks the notification; no
        preference at all means push is allowed. When the lookup itself fails
        the configured failure policy decides.
        """
        try:
            preference = await self.get_preference(request.user_id, request.type)
        except PreferenceLookupError as e:
            logger.error(str(e))
            return self.preference_failure_policy == "allow"

        if preference is None:
            return True
        # a row without a usable flag counts as disabled
        return bool(preference.push_enabled)

    async def dispatch(self, request: NotificationRequest) -> DispatchResult:
        if not await self.is_push_allowed(request):
            return DispatchResult(message=PUSH_DISABLED_MESSAGE)

        tokens = await self.get_device_tokens(request.user_id)
        if not tokens:
            return DispatchResult(message=NO_DEVICE_TOKENS_MESSAGE)

        logger.info(f"Found {len(tokens)} device tokens for user {request.user_id}")
        # delivery is logged only, no push gateway is called
        logger.info(
            "Push notification details: %s",
            {
                "user_id": request.user_id,
                "title": request.title,
                "body": request.body,
                "type": request.type,
                "data": request.data,
                "device_count": len(tokens),
            },
        )

        return DispatchResult(success=True, message=DISPATCHED_MESSAGE, device_count=len(tokens))


notification_service = NotificationService.get_instance()
