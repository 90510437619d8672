"""
Pytest configuration and fixtures.
"""

import os
import sys
from decimal import Decimal
from pathlib import Path

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Set test environment
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "false")
os.environ.setdefault("PRODUCT_BACKEND", "memory")

from fastapi.testclient import TestClient  # noqa: E402

from api.server import create_app  # noqa: E402
from core.config import Settings  # noqa: E402
from core.storage import InMemoryProductRepository, Product  # noqa: E402


@pytest.fixture
def test_settings():
    """Settings isolated from any local .env file."""
    return Settings(
        _env_file=None,
        product_backend="memory",
        session_cookie_name="token",
        environment="development",
    )


@pytest.fixture
def products():
    return [
        Product(id=1, name="Keyboard", description="Tenkeyless", price=Decimal("49.90"), quantity=3),
        Product(id=2, name="Mouse", description="Wireless", price=Decimal("19.00"), quantity=10),
    ]


@pytest.fixture
def app(test_settings, products):
    """A fresh app with freshly seeded stores for every test."""
    return create_app(
        settings=test_settings,
        product_repository=InMemoryProductRepository(products),
    )


@pytest.fixture
def client(app):
    """Anonymous client; the context manager runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_client(client):
    """Client carrying the session cookie, i.e. a logged-in visitor."""
    client.cookies.set("token", "123")
    return client


@pytest.fixture
def store(app):
    return app.state.store
