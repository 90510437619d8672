"""
FastAPI dependencies for dependency injection.

Provides the per-application store manager and settings to route
handlers. Both are attached to app.state by the application factory,
so two apps in one process never share collections.
"""

from fastapi import Request

from core.config import Settings
from manager.store import StoreManager


def get_app_settings(request: Request) -> Settings:
    """Dependency that provides the settings the app was built with."""
    return request.app.state.settings


def get_store(request: Request) -> StoreManager:
    """
    Dependency that provides the store manager.

    Usage:
        @router.get("/")
        async def show_index(
            store: StoreManager = Depends(get_store)
        ):
            ...
    """
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store manager not initialized")
    return store
