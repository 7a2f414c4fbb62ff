from pydantic import BaseModel


class DeviceToken(BaseModel):
    device_token: str
    platform: str
