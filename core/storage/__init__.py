"""
Storage abstraction layer.

Provides:
- In-memory article and user stores
- Pluggable product catalog backends

Supported product backends:
- PostgreSQL (default)
- In-memory (development and tests)
"""

from core.storage.base import (
    Article,
    BaseProductRepository,
    Product,
    User,
)
from core.storage.factory import (
    create_product_repository,
    get_storage_backend,
    StorageBackend,
)
from core.storage.memory import (
    ArticleStore,
    InMemoryProductRepository,
    UserStore,
)

__all__ = [
    # Records
    "Article",
    "Product",
    "User",
    # Stores
    "ArticleStore",
    "UserStore",
    "BaseProductRepository",
    "InMemoryProductRepository",
    # Factory functions
    "create_product_repository",
    "get_storage_backend",
    "StorageBackend",
]
