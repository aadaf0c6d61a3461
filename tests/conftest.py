"""Shared test fixtures."""

import json
import os
import time
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient
from nacl.signing import SigningKey

SIGNING_KEY = SigningKey.generate()

# Must be set before the app reads settings
os.environ["DISCORD_PUBLIC_KEY"] = SIGNING_KEY.verify_key.encode().hex()
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ.pop("STORE_URL", None)

from curabot.app import app  # noqa: E402
from curabot.config import get_settings  # noqa: E402
from curabot.discord.router import get_reference_store  # noqa: E402
from curabot.store.memory import InMemoryReferenceStore  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Re-read settings for every test so patched env vars take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def signing_key() -> SigningKey:
    return SIGNING_KEY


@pytest.fixture
def store() -> InMemoryReferenceStore:
    return InMemoryReferenceStore()


@pytest.fixture
def client(store: InMemoryReferenceStore):
    """TestClient with lifespan running and the reference store overridden."""
    app.dependency_overrides[get_reference_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def post_interaction(client: TestClient):
    """Return a function that POSTs a correctly signed interaction payload.

    Raw ``bytes`` are signed and sent as-is; anything else is JSON-encoded.
    """

    def _post(payload, *, key: SigningKey = SIGNING_KEY):
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
        timestamp = str(int(time.time()))
        signature = key.sign(timestamp.encode() + body).signature.hex()
        return client.post(
            "/interactions",
            content=body,
            headers={
                "X-Signature-Ed25519": signature,
                "X-Signature-Timestamp": timestamp,
                "Content-Type": "application/json",
            },
        )

    return _post


@pytest.fixture
def discord_client():
    """Patch the outbound Discord client used by background tasks."""
    mock = AsyncMock()
    mock.create_followup.return_value = True
    mock.edit_original.return_value = True
    with patch("curabot.discord.handlers.get_discord_client", return_value=mock):
        yield mock
