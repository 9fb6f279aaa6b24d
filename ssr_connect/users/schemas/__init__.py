"""
User schemas for API requests and responses.
"""

from ssr_connect.users.schemas.admin import MentorSchema
from ssr_connect.users.schemas.admin import UserListSchema
from ssr_connect.users.schemas.auth import CSRFTokenSchema
from ssr_connect.users.schemas.auth import LoginResponseSchema
from ssr_connect.users.schemas.auth import LoginSchema
from ssr_connect.users.schemas.auth import RegisterSchema
from ssr_connect.users.schemas.auth import UserSchema

__all__ = [
    # Auth schemas
    "LoginSchema",
    "RegisterSchema",
    "UserSchema",
    "LoginResponseSchema",
    "CSRFTokenSchema",
    # Admin schemas
    "UserListSchema",
    "MentorSchema",
]
