"""
Store manager.

Bridges the API layer and the storage layer: owns one article store,
one user store and one product repository, and manages their
lifecycle. A fresh manager is created per application instance, so
nothing in here is process-global.
"""

from typing import Optional

from core.config import Settings
from core.logging import get_logger
from core.storage import (
    Article,
    ArticleStore,
    BaseProductRepository,
    Product,
    User,
    UserStore,
    create_product_repository,
)


logger = get_logger(__name__)


class StoreManager:
    """
    Owner of every collection the web store reads and writes.

    - Articles: list, look up, create
    - Users: register, check availability, validate credentials
    - Products: passthrough to the configured repository
    """

    def __init__(
        self,
        settings: Settings,
        articles: Optional[ArticleStore] = None,
        users: Optional[UserStore] = None,
        product_repository: Optional[BaseProductRepository] = None,
    ):
        """
        Initialize the manager.

        Args:
            settings: Application settings
            articles: Optional article store (default: seeded store)
            users: Optional user store (default: seeded store)
            product_repository: Optional product repository (default: created from settings)
        """
        self.settings = settings
        self.articles = articles or ArticleStore()
        self.users = users or UserStore()
        self._product_repo = product_repository
        self._initialized = False

    async def initialize(self) -> None:
        """Create and set up the product repository."""
        if self._initialized:
            return

        logger.info(
            "Initializing store manager",
            product_backend=self.settings.product_backend,
        )

        if self._product_repo is None:
            self._product_repo = create_product_repository(self.settings)

        # Connection problems are logged by the repository, never raised here
        await self._product_repo.setup()

        self._initialized = True
        logger.info("Store manager initialized")

    async def shutdown(self) -> None:
        """Release the product repository."""
        logger.info("Shutting down store manager")

        if self._product_repo is not None:
            await self._product_repo.close()

        self._initialized = False
        logger.info("Store manager shut down")

    def _ensure_initialized(self) -> BaseProductRepository:
        if not self._initialized or self._product_repo is None:
            raise RuntimeError("Store manager not initialized. Call initialize() first.")
        return self._product_repo

    # =========================================
    # Articles
    # =========================================

    async def list_articles(self) -> list[Article]:
        return await self.articles.list_articles()

    async def get_article(self, article_id: int) -> Article:
        return await self.articles.get_article(article_id)

    async def create_article(self, title: str, content: str) -> Article:
        return await self.articles.create_article(title, content)

    # =========================================
    # Users
    # =========================================

    async def is_username_available(self, username: str) -> bool:
        return await self.users.is_username_available(username)

    async def register_user(self, username: str, password: str) -> User:
        return await self.users.register_user(username, password)

    async def validate_credentials(self, username: str, password: str) -> bool:
        return await self.users.validate_credentials(username, password)

    # =========================================
    # Products
    # =========================================

    async def list_products(self) -> list[Product]:
        return await self._ensure_initialized().list_products()

    async def products_ready(self) -> bool:
        if not self._initialized or self._product_repo is None:
            return False
        return await self._product_repo.ping()
