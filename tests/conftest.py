"""Shared fixtures: settings env, in-memory stores and an ASGI test client."""

import os

# Settings are read at import time.
os.environ.setdefault("MONGODB_URL", "mongodb://localhost:27017")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from app.api.endpoints.notification import get_notification_service  # noqa: E402
from app.main import app  # noqa: E402
from app.schemas.device_token import DeviceToken  # noqa: E402
from app.schemas.notification import NotificationPreference  # noqa: E402
from app.services.notification import NotificationService  # noqa: E402


class InMemoryPreferenceModel:
    def __init__(self, preferences: list[NotificationPreference] | None = None, error=None):
        self.preferences = {(p.user_id, p.type): p for p in preferences or []}
        self.error = error
        self.calls: list[tuple[str, str]] = []

    async def get_preference(self, user_id: str, notification_type: str):
        self.calls.append((user_id, notification_type))
        if self.error is not None:
            raise self.error
        return self.preferences.get((user_id, notification_type))


class InMemoryDeviceTokenModel:
    def __init__(self, tokens: dict[str, list[DeviceToken]] | None = None, error=None):
        self.tokens = tokens or {}
        self.error = error
        self.calls: list[str] = []

    async def get_tokens_by_user_id(self, user_id: str):
        self.calls.append(user_id)
        if self.error is not None:
            raise self.error
        return list(self.tokens.get(user_id, []))


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def preference_model():
    return InMemoryPreferenceModel()


@pytest.fixture
def device_token_model():
    return InMemoryDeviceTokenModel()


@pytest.fixture
def service(preference_model, device_token_model):
    return NotificationService(
        preference_model=preference_model,
        device_token_model=device_token_model,
        timeout=1.0,
        preference_failure_policy="allow",
    )


@pytest.fixture
async def async_client(service):
    app.dependency_overrides[get_notification_service] = lambda: service
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
