"""
Permission classes for API controllers.

Role checks go through the capability table in ``core.policies``.
"""

from typing import Any

from django.http import HttpRequest
from ninja_extra import permissions

from ssr_connect.core.context import RequestContext
from ssr_connect.core.policies import Capability
from ssr_connect.core.policies import can
from ssr_connect.core.roles import Role
from ssr_connect.core.roles import get_user_role


def _context(request: HttpRequest) -> RequestContext | None:
    user = getattr(request, "user", None)
    if get_user_role(user) is None:
        return None
    return RequestContext.for_user(user)


class IsAuthenticated(permissions.BasePermission):
    """
    Permission class that requires authentication.

    Checks if the user is authenticated before allowing access.
    """

    message = "Authentication required."

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Check if the user is authenticated."""
        return _context(request) is not None


class _RolePermission(permissions.BasePermission):
    role: Role

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        ctx = _context(request)
        return ctx is not None and ctx.role == self.role


class IsStudent(_RolePermission):
    """Student-only endpoints."""

    role = Role.STUDENT
    message = "Access restricted to students."


class IsMentor(_RolePermission):
    """Mentor-only endpoints."""

    role = Role.MENTOR
    message = "Access restricted to mentors."


class IsAdmin(_RolePermission):
    """Admin-only endpoints. Superusers resolve to the admin role."""

    role = Role.ADMIN
    message = "Access restricted to administrators."


def requires_capability(capability: Capability) -> type[permissions.BasePermission]:
    """
    Build a permission class from a capability.

    Example:
        @http_post("/", permissions=[requires_capability(Capability.UPLOAD_FILE)])
    """

    class _HasCapability(permissions.BasePermission):
        message = "You do not have permission to perform this action."

        def has_permission(self, request: HttpRequest, controller: Any) -> bool:
            return can(_context(request), capability)

    _HasCapability.__name__ = f"Requires_{capability.value}"
    return _HasCapability


class AllowAny(permissions.BasePermission):
    """
    Permission class that allows any access.

    Used for public endpoints that don't require authentication.
    """

    def has_permission(self, request: HttpRequest, controller: Any) -> bool:
        """Always return True."""
        return True
