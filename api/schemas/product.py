"""
Product response schemas.
"""

from decimal import Decimal
from typing import ClassVar

from pydantic import BaseModel, Field

from core.storage import Product


class ProductResponse(BaseModel):
    """Public representation of a catalog entry."""

    xml_tag: ClassVar[str] = "product"
    xml_list_tag: ClassVar[str] = "products"

    id: int = Field(..., description="Product identifier")
    name: str = Field(..., description="Product name", examples=["Keyboard"])
    description: str = Field(default="", description="Free-text description")
    price: Decimal = Field(
        ...,
        description="Unit price, serialized as a decimal string",
        examples=["49.90"],
    )
    quantity: int = Field(..., description="Units in stock")

    @classmethod
    def from_record(cls, product: Product) -> "ProductResponse":
        return cls(**product.to_dict())
