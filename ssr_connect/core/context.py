"""
Request-scoped identity passed into service functions.

Services never read ``request.user`` themselves; the API layer builds a
RequestContext once per request and hands it down.
"""

from dataclasses import dataclass
from typing import Any

from django.http import HttpRequest

from ssr_connect.core.exceptions import NotAuthenticatedError
from ssr_connect.core.roles import Role
from ssr_connect.core.roles import get_user_role


@dataclass(frozen=True)
class RequestContext:
    """Authenticated caller and the role it acts under."""

    user: Any
    role: Role

    @property
    def user_id(self):
        return self.user.pk

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @property
    def is_mentor(self) -> bool:
        return self.role == Role.MENTOR

    @property
    def is_student(self) -> bool:
        return self.role == Role.STUDENT

    @classmethod
    def for_user(cls, user) -> "RequestContext":
        role = get_user_role(user)
        if role is None:
            raise NotAuthenticatedError()
        return cls(user=user, role=role)

    @classmethod
    def from_request(cls, request: HttpRequest) -> "RequestContext":
        """Build the context for an authenticated request."""
        return cls.for_user(getattr(request, "user", None))
