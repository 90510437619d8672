"""
Application configuration management.

Uses pydantic-settings for type-safe environment variable parsing.
All configuration is centralized here to support dependency injection
and avoid scattering os.getenv() calls throughout the codebase.
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class Settings(BaseSettings):
    """
    Application settings with validation and type coercion.

    Values are loaded from environment variables or .env file.
    The product database credentials have no defaults: a missing
    value leaves the product catalog unconfigured.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Product catalog backend
    # Options: "postgres", "memory"
    product_backend: Literal["postgres", "memory"] = "postgres"
    product_query_timeout_seconds: float = 5.0

    # PostgreSQL connection parts (no defaults)
    pg_host: Optional[str] = None
    pg_port: int = 5432
    pg_db_store: Optional[str] = None
    pg_user: Optional[str] = None
    pg_pass: Optional[str] = None

    # Session indicator
    session_cookie_name: str = "token"
    session_cookie_max_age: int = 3600

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    debug: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def missing_database_settings(self) -> list[str]:
        """Names of the PG_* variables that are not set."""
        parts = {
            "PG_HOST": self.pg_host,
            "PG_DB_STORE": self.pg_db_store,
            "PG_USER": self.pg_user,
            "PG_PASS": self.pg_pass,
        }
        return [name for name, value in parts.items() if not value]

    @property
    def products_database_url(self) -> Optional[URL]:
        """
        Async SQLAlchemy URL for the products database.

        Built from the parts, so credentials containing URL
        delimiters (@ / : # ?) stay intact. Returns None when any
        connection part is missing.
        """
        if self.missing_database_settings:
            return None
        return URL.create(
            drivername="postgresql+asyncpg",
            username=self.pg_user,
            password=self.pg_pass,
            host=self.pg_host,
            port=self.pg_port,
            database=self.pg_db_store,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings singleton.

    Use this function to get settings instance throughout the application.
    The @lru_cache ensures we only parse environment once.
    """
    return Settings()


# Convenience export for direct import
settings = get_settings()
