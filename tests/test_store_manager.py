"""
Tests for the store manager lifecycle.
"""

import pytest

from core.storage import InMemoryProductRepository
from manager.store import StoreManager


@pytest.fixture
def manager(test_settings, products):
    return StoreManager(
        settings=test_settings,
        product_repository=InMemoryProductRepository(products),
    )


@pytest.mark.asyncio
async def test_products_require_initialization(manager):
    with pytest.raises(RuntimeError):
        await manager.list_products()

    assert not await manager.products_ready()


@pytest.mark.asyncio
async def test_lifecycle(manager, products):
    await manager.initialize()
    await manager.initialize()  # idempotent

    assert await manager.list_products() == products
    assert await manager.products_ready()

    await manager.shutdown()
    assert not await manager.products_ready()


@pytest.mark.asyncio
async def test_manager_builds_repository_from_settings(test_settings):
    manager = StoreManager(settings=test_settings)

    await manager.initialize()

    assert await manager.list_products() == []
    await manager.shutdown()


@pytest.mark.asyncio
async def test_each_manager_owns_its_collections(test_settings):
    first = StoreManager(settings=test_settings)
    second = StoreManager(settings=test_settings)

    await first.create_article("only here", "body")
    await first.register_user("someone", "pw")

    assert len(await first.list_articles()) == 3
    assert len(await second.list_articles()) == 2
    assert await second.is_username_available("someone")
    assert await first.validate_credentials("someone", "pw")
