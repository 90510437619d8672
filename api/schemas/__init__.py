"""
Pydantic schemas for API responses.
"""

from api.schemas.article import ArticleResponse
from api.schemas.product import ProductResponse
from api.schemas.user import UserResponse

__all__ = [
    "ArticleResponse",
    "ProductResponse",
    "UserResponse",
]
