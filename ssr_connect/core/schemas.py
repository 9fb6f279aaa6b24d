"""
Base schemas for the API.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema


class BaseSchema(Schema):
    """
    Base schema with common fields.

    Provides standard fields for models inheriting from BaseModel.
    """

    id: UUID
    created: datetime
    modified: datetime


class MessageSchema(Schema):
    """Schema for simple message responses."""

    success: bool = True
    message: str


class UserMinimalSchema(Schema):
    """Minimal user information for display."""

    id: UUID
    email: str
    first_name: str
    last_name: str

    @classmethod
    def from_user(cls, user) -> "UserMinimalSchema":
        """Create from User model instance."""
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name or "",
            last_name=user.last_name or "",
        )
