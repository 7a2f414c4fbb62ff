import logging

from motor.motor_asyncio import AsyncIOMotorCollection  # noqa: TCH002
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from app.database.mongodb import db
from app.schemas.notification import NotificationPreference

logger = logging.getLogger(__name__)


class NotificationPreferenceModel:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create_indexes(self) -> None:
        try:
            await self.collection.create_index(
                [("user_id", ASCENDING), ("type", ASCENDING)], unique=True
            )
        except PyMongoError as e:
            logger.warning(f"Could not create notification preference indexes: {e}")

    async def get_preference(
        self, user_id: str, notification_type: str
    ) -> NotificationPreference | None:
        doc = await self.collection.find_one(
            {"user_id": user_id, "type": notification_type},
            {"_id": 0, "user_id": 1, "type": 1, "push_enabled": 1},
        )
        return NotificationPreference(**doc) if doc else None


notification_preference_model = NotificationPreferenceModel(db["notification_preferences"])
