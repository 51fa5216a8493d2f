"""FastAPI application factory for the hashing service."""

from fastapi import FastAPI

from hashkit.api.router_hashing import router as hashing_router
from hashkit.core.manager import HashManager
from hashkit.core.settings import HashingSettings


def create_app(settings: HashingSettings | None = None) -> FastAPI:
    """Build the application with one HashManager for its lifetime."""
    app = FastAPI(
        title="hashkit",
        version="0.1.0",
    )
    app.state.hash_manager = HashManager(settings or HashingSettings())
    app.include_router(hashing_router)
    return app
