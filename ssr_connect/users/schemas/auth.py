"""
Authentication schemas for login and registration.
"""

from typing import TYPE_CHECKING
from uuid import UUID

from ninja import Schema
from pydantic import EmailStr
from pydantic import field_validator

if TYPE_CHECKING:
    from ssr_connect.users.models import User


class LoginSchema(Schema):
    """Login request schema."""

    email: EmailStr
    password: str


class RegisterSchema(Schema):
    """
    Registration request schema.

    Mentor-domain emails must carry the secret issued with their roster
    entry; their names come from the roster.
    """

    email: EmailStr
    password: str
    password_confirm: str
    first_name: str = ""
    last_name: str = ""
    roll_number: str = ""
    phone: str = ""
    secret_key: str | None = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()

    @field_validator("first_name", "last_name", "roll_number", "phone")
    @classmethod
    def strip_text(cls, v: str) -> str:
        return v.strip()

    @field_validator("password_confirm")
    @classmethod
    def passwords_match(cls, v: str, info) -> str:
        if "password" in info.data and v != info.data["password"]:
            msg = "Passwords do not match."
            raise ValueError(msg)
        return v


class UserSchema(Schema):
    """Current user response schema."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    role: str
    roll_number: str
    phone: str
    is_registered: bool
    is_staff: bool
    is_superuser: bool

    @staticmethod
    def from_user(user: "User") -> "UserSchema":
        """Create schema from User model."""
        return UserSchema(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            role=user.role,
            roll_number=user.roll_number,
            phone=user.phone,
            is_registered=user.is_registered,
            is_staff=user.is_staff,
            is_superuser=user.is_superuser,
        )


class LoginResponseSchema(Schema):
    """Login response schema."""

    success: bool
    user: UserSchema | None = None
    csrf_token: str | None = None


class CSRFTokenSchema(Schema):
    """CSRF token response."""

    csrf_token: str
