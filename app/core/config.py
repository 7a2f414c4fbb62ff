from typing import Literal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "Push Notification Service"
    MONGODB_URL: str
    DATABASE_NAME: str = "push_notifications"
    STORE_TIMEOUT_SECONDS: float = 5.0
    # what to do when the preferences store can't be read
    PREFERENCE_FAILURE_POLICY: Literal["allow", "suppress"] = "allow"
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"


settings = Settings()
