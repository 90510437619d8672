"""
User response schemas.

Passwords never leave the store, so they have no field here.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from core.storage import User


class UserResponse(BaseModel):
    """Public representation of a registered or logged-in user."""

    xml_tag: ClassVar[str] = "user"
    xml_list_tag: ClassVar[str] = "users"

    username: str = Field(
        ...,
        description="Case-sensitive username",
        examples=["user1"],
    )

    @classmethod
    def from_record(cls, user: User) -> "UserResponse":
        return cls(**user.to_dict())
