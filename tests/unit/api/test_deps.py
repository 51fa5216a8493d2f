"""Tests for hashing dependency providers."""

from typing import Annotated

from fastapi import Depends
from httpx import ASGITransport, AsyncClient

from hashkit.api.deps import get_hash_driver, get_hash_manager
from hashkit.core.app import create_app
from hashkit.core.manager import HashManager
from hashkit.core.settings import HashingSettings
from hashkit.crypto.types import Hasher


class TestProviders:
    """The manager is one per application; the driver is its default."""

    async def test_injects_shared_manager_and_default_driver(self) -> None:
        app = create_app(HashingSettings(driver="argon2id"))
        seen: list[tuple[HashManager, Hasher]] = []

        @app.get("/probe")
        def probe(
            manager: Annotated[HashManager, Depends(get_hash_manager)],
            driver: Annotated[Hasher, Depends(get_hash_driver)],
        ) -> dict[str, str]:
            seen.append((manager, driver))
            return {"driver": type(driver).__name__}

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            first = await ac.get("/probe")
            await ac.get("/probe")

        assert first.json() == {"driver": "Argon2idHasher"}
        assert seen[0][0] is seen[1][0] is app.state.hash_manager
        assert seen[0][1] is seen[1][1]
