import logging

from motor.motor_asyncio import AsyncIOMotorCollection  # noqa: TCH002
from pymongo.errors import PyMongoError

from app.database.mongodb import db
from app.schemas.device_token import DeviceToken

logger = logging.getLogger(__name__)


class DeviceTokenModel:
    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create_indexes(self) -> None:
        try:
            await self.collection.create_index("user_id")
        except PyMongoError as e:
            logger.warning(f"Could not create device token indexes: {e}")

    async def get_tokens_by_user_id(self, user_id: str) -> list[DeviceToken]:
        device_tokens = await self.collection.find(
            {"user_id": user_id}, {"_id": 0, "device_token": 1, "platform": 1}
        ).to_list(length=None)
        return [DeviceToken(**device_token) for device_token in device_tokens]


device_token_model = DeviceTokenModel(db["push_tokens"])
