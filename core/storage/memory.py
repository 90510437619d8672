"""
In-memory storage backends.

Holds the article and user collections for the lifetime of the
process, plus a fixed product list for running without a database.
Every store guards its collection with an asyncio.Lock so concurrent
requests never interleave a check with the append that depends on it.
"""

import asyncio
from typing import Iterable, Optional

from core.errors import EmptyPasswordError, NotFoundError, UsernameTakenError
from core.logging import get_logger
from core.storage.base import Article, BaseProductRepository, Product, User


logger = get_logger(__name__)


SEED_ARTICLES: tuple[Article, ...] = (
    Article(id=1, title="Article 1", content="Article 1 body"),
    Article(id=2, title="Article 2", content="Article 2 body"),
)

# Demo accounts. Passwords are plaintext on purpose: the login flow
# compares them verbatim and nothing here is meant for production use.
SEED_USERS: tuple[User, ...] = (
    User(username="user1", password="pass1"),
    User(username="user2", password="pass2"),
    User(username="user3", password="pass3"),
)


class ArticleStore:
    """
    Append-only article collection.

    Identifiers are assigned as current count + 1, which keeps them
    unique and strictly increasing because nothing is ever removed.

    Usage:
        store = ArticleStore()
        article = await store.create_article("Title", "Body")
        same = await store.get_article(article.id)
    """

    def __init__(self, seed: Optional[Iterable[Article]] = SEED_ARTICLES):
        self._articles: list[Article] = list(seed or ())
        self._lock = asyncio.Lock()

    async def list_articles(self) -> list[Article]:
        """Return all articles in creation order."""
        async with self._lock:
            return list(self._articles)

    async def get_article(self, article_id: int) -> Article:
        """
        Look up an article by identifier.

        Raises:
            NotFoundError: If no article has that identifier
        """
        async with self._lock:
            for article in self._articles:
                if article.id == article_id:
                    return article
        raise NotFoundError(f"Article {article_id} not found")

    async def create_article(self, title: str, content: str) -> Article:
        """Append a new article. Empty title or content is accepted."""
        async with self._lock:
            article = Article(
                id=len(self._articles) + 1,
                title=title,
                content=content,
            )
            self._articles.append(article)

        logger.info("Article created", article_id=article.id)
        return article

    async def count(self) -> int:
        async with self._lock:
            return len(self._articles)


class UserStore:
    """
    Append-only user collection with case-sensitive usernames.
    """

    def __init__(self, seed: Optional[Iterable[User]] = SEED_USERS):
        self._users: list[User] = list(seed or ())
        self._lock = asyncio.Lock()

    def _is_available(self, username: str) -> bool:
        # Caller must hold self._lock
        return all(user.username != username for user in self._users)

    async def is_username_available(self, username: str) -> bool:
        """True iff no user has exactly this username."""
        async with self._lock:
            return self._is_available(username)

    async def register_user(self, username: str, password: str) -> User:
        """
        Register a new user.

        The password check runs before the availability check, so an
        empty password is reported even for a taken username.

        Raises:
            EmptyPasswordError: If the password is blank after trimming
            UsernameTakenError: If the username already exists
        """
        if not password.strip():
            raise EmptyPasswordError()

        async with self._lock:
            if not self._is_available(username):
                raise UsernameTakenError()
            user = User(username=username, password=password)
            self._users.append(user)

        logger.info("User registered", username=username)
        return user

    async def validate_credentials(self, username: str, password: str) -> bool:
        """True iff some user matches both fields exactly."""
        async with self._lock:
            return any(
                user.username == username and user.password == password
                for user in self._users
            )

    async def list_users(self) -> list[User]:
        async with self._lock:
            return list(self._users)


class InMemoryProductRepository(BaseProductRepository):
    """
    Product repository backed by a fixed list.

    Used when PRODUCT_BACKEND=memory and throughout the test suite.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self._products: list[Product] = list(products or ())

    async def setup(self) -> None:
        logger.info("In-memory product repository ready", count=len(self._products))

    async def list_products(self) -> list[Product]:
        return list(self._products)

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass
