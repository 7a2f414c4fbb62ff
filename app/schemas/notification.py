from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from app.core.exceptions import NotificationValidationError

DEFAULT_NOTIFICATION_TYPE = "system"


class NotificationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    user_id: str
    title: str
    body: str
    type: Any = DEFAULT_NOTIFICATION_TYPE
    data: Any = Field(default_factory=dict)

    @field_validator("user_id", "title", "body")
    @classmethod
    def require_non_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("type", mode="before")
    @classmethod
    def default_type(cls, value):
        return DEFAULT_NOTIFICATION_TYPE if value is None else value

    @field_validator("data", mode="before")
    @classmethod
    def default_data(cls, value):
        return {} if value is None else value

    @classmethod
    def from_payload(cls, payload: Any) -> "NotificationRequest":
        if not isinstance(payload, dict):
            raise NotificationValidationError()
        try:
            return cls.model_validate(payload)
        except ValidationError as err:
            raise NotificationValidationError() from err


class NotificationPreference(BaseModel):
    user_id: str
    type: Any
    push_enabled: bool | None = None


class DispatchResult(BaseModel):
    success: bool | None = None
    message: str
    device_count: int | None = Field(default=None, ge=0)
