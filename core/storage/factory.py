"""
Storage factory for creating product repository instances.

This module provides factory functions to create the appropriate
storage implementation based on configuration.
"""

from enum import Enum
from typing import TYPE_CHECKING

from core.logging import get_logger
from core.storage.base import BaseProductRepository


if TYPE_CHECKING:
    from core.config import Settings


logger = get_logger(__name__)


class StorageBackend(str, Enum):
    """Supported product backends."""
    POSTGRES = "postgres"
    MEMORY = "memory"


def get_storage_backend(settings: "Settings") -> StorageBackend:
    """
    Determine which product backend to use based on settings.

    Args:
        settings: Application settings

    Returns:
        The configured storage backend
    """
    backend_str = settings.product_backend.lower()

    try:
        return StorageBackend(backend_str)
    except ValueError:
        raise ValueError(
            f"Unsupported storage backend: {backend_str}. "
            f"Supported backends: {[b.value for b in StorageBackend]}"
        )


def create_product_repository(settings: "Settings") -> BaseProductRepository:
    """
    Create a product repository instance based on settings.

    Args:
        settings: Application settings

    Returns:
        Configured repository instance (not yet initialized)
    """
    backend = get_storage_backend(settings)

    if backend == StorageBackend.POSTGRES:
        from core.storage.postgres import PostgresProductRepository

        missing = settings.missing_database_settings
        if missing:
            logger.error(
                "Product database settings missing",
                missing=missing,
            )
        else:
            logger.info(
                "Creating PostgreSQL product repository",
                host=settings.pg_host,
                database=settings.pg_db_store,
            )
        return PostgresProductRepository(
            async_connection_string=settings.products_database_url,
            query_timeout_seconds=settings.product_query_timeout_seconds,
            echo=settings.debug,
        )

    elif backend == StorageBackend.MEMORY:
        from core.storage.memory import InMemoryProductRepository

        logger.info("Creating in-memory product repository")
        return InMemoryProductRepository()

    else:
        raise ValueError(f"Unsupported backend: {backend}")
