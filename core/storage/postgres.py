"""
PostgreSQL storage backend implementation.

Provides the product catalog passthrough: every call checks a
connection out of the SQLAlchemy async engine, scans the products
table, and returns the connection before handing back the rows.
"""

import asyncio
from typing import Optional, Union

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from core.errors import StorageError
from core.logging import get_logger
from core.storage.base import BaseProductRepository, Product


logger = get_logger(__name__)


SELECT_ALL_PRODUCTS = "SELECT * FROM products"


class PostgresProductRepository(BaseProductRepository):
    """
    PostgreSQL-based product repository.

    Uses SQLAlchemy async (asyncpg driver) for database operations.
    A missing connection string is not an error at construction time;
    list_products() raises StorageError until it is configured.
    """

    def __init__(
        self,
        async_connection_string: Optional[Union[str, URL]],
        query_timeout_seconds: float = 5.0,
        echo: bool = False,
    ):
        """
        Initialize PostgreSQL product repository.

        Args:
            async_connection_string: PostgreSQL async connection URL (asyncpg driver),
                or None when the PG_* settings are incomplete
            query_timeout_seconds: Upper bound for one list_products() round trip
            echo: Whether to echo SQL statements
        """
        self._connection_string = async_connection_string
        self._query_timeout = query_timeout_seconds
        self._echo = echo
        self._engine: Optional[AsyncEngine] = None

    async def setup(self) -> None:
        """Create the engine and log whether the database answers."""
        if self._connection_string is None:
            logger.error("Product database is not configured")
            return

        self._engine = create_async_engine(
            self._connection_string,
            echo=self._echo,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
        )

        if await self.ping():
            logger.info("PostgreSQL product repository initialized")
        else:
            logger.error("Unable to connect to product database")

    def _require_engine(self) -> AsyncEngine:
        if self._engine is None:
            raise StorageError("Product database is not configured")
        return self._engine

    async def _fetch_products(self, engine: AsyncEngine) -> list[Product]:
        async with engine.connect() as conn:
            result = await conn.execute(text(SELECT_ALL_PRODUCTS))
            rows = result.fetchall()
        return [Product.from_row(tuple(row)) for row in rows]

    async def list_products(self) -> list[Product]:
        """Scan the products table."""
        engine = self._require_engine()

        try:
            return await asyncio.wait_for(
                self._fetch_products(engine),
                timeout=self._query_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error("Product query timed out", timeout=self._query_timeout)
            raise StorageError("Product query timed out") from e
        except (SQLAlchemyError, OSError) as e:
            logger.error("Product query failed", error=str(e))
            raise StorageError("Product query failed") from e
        except (ValueError, TypeError, ArithmeticError) as e:
            logger.error("Product row could not be decoded", error=str(e))
            raise StorageError("Product row could not be decoded") from e

    async def ping(self) -> bool:
        """Run SELECT 1 within the query timeout."""
        if self._engine is None:
            return False

        async def _select_one() -> None:
            async with self._engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

        try:
            await asyncio.wait_for(_select_one(), timeout=self._query_timeout)
        except (asyncio.TimeoutError, SQLAlchemyError, OSError) as e:
            logger.warning("Product database ping failed", error=str(e))
            return False
        return True

    async def close(self) -> None:
        """Close database engine."""
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
        logger.info("PostgreSQL product repository closed")
