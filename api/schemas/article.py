"""
Article response schemas.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from core.storage import Article


class ArticleResponse(BaseModel):
    """Public representation of an article."""

    xml_tag: ClassVar[str] = "article"
    xml_list_tag: ClassVar[str] = "articles"

    id: int = Field(
        ...,
        description="Article identifier, assigned in creation order",
        examples=[1],
    )
    title: str = Field(
        ...,
        description="Article title",
        examples=["Article 1"],
    )
    content: str = Field(
        ...,
        description="Article body text",
        examples=["Article 1 body"],
    )

    @classmethod
    def from_record(cls, article: Article) -> "ArticleResponse":
        return cls(**article.to_dict())
