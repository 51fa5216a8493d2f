"""Shared test fixtures for hashkit."""

import os
from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient

from hashkit.core.app import create_app
from hashkit.core.manager import HashManager
from hashkit.core.settings import ArgonSettings, BcryptSettings, HashingSettings

TEST_TOKEN = "test-internal-token"
FAST_ROUNDS = 4


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HASHING_* variables from the host out of test settings."""
    for key in list(os.environ):
        if key.startswith("HASHING_"):
            monkeypatch.delenv(key)


@pytest.fixture
def fast_settings() -> HashingSettings:
    """Settings with cheap cost parameters."""
    return HashingSettings(
        driver="bcrypt",
        internal_token=TEST_TOKEN,
        bcrypt=BcryptSettings(rounds=FAST_ROUNDS),
        argon=ArgonSettings(memory=1024, time=2, threads=2),
    )


@pytest.fixture
def manager(fast_settings: HashingSettings) -> HashManager:
    """A fresh HashManager over the fast settings."""
    return HashManager(fast_settings)


@pytest.fixture
async def client(fast_settings: HashingSettings) -> AsyncIterator[AsyncClient]:
    """Create an httpx test client for the hashing API."""
    app = create_app(fast_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
