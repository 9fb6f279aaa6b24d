"""
Admin user management and directory schemas.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID

from ninja import Schema

if TYPE_CHECKING:
    from ssr_connect.users.models import User


class UserListSchema(Schema):
    """Schema for user list response."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: str
    roll_number: str
    is_registered: bool
    can_login: bool
    is_active: bool
    date_joined: datetime
    last_login: datetime | None

    @staticmethod
    def from_user(user: "User") -> "UserListSchema":
        """Create schema from User model."""
        return UserListSchema(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            roll_number=user.roll_number,
            is_registered=user.is_registered,
            can_login=user.can_login,
            is_active=user.is_active,
            date_joined=user.date_joined,
            last_login=user.last_login,
        )


class MentorSchema(Schema):
    """Mentor directory entry shown to students choosing a mentor."""

    id: UUID
    email: str
    name: str

    @staticmethod
    def from_user(user: "User") -> "MentorSchema":
        return MentorSchema(id=user.id, email=user.email, name=user.get_full_name())
