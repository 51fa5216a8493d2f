"""FastAPI dependency injection for the hashing manager and internal auth."""

import secrets
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from hashkit.core.manager import HashManager
from hashkit.crypto.types import Hasher

_security = HTTPBearer()


def get_hash_manager(request: Request) -> HashManager:
    """Return the HashManager owned by the running application."""
    manager: HashManager = request.app.state.hash_manager
    return manager


def get_hash_driver(
    manager: Annotated[HashManager, Depends(get_hash_manager)],
) -> Hasher:
    """Return the configured default hashing driver.

    Not used by the bundled routes, which take a per-request driver name;
    provided for applications that only need the default driver.
    """
    return manager.driver()


async def require_internal_token(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(_security)],
    manager: Annotated[HashManager, Depends(get_hash_manager)],
) -> str:
    """Verify the HASHING_INTERNAL_TOKEN Bearer token."""
    expected = manager.settings.internal_token
    if not expected:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    if not secrets.compare_digest(credentials.credentials, expected):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return credentials.credentials
