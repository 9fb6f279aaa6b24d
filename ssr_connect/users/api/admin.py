"""
Admin API controller for user management.
"""

import logging
from uuid import UUID

from django.db.models import ProtectedError
from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_delete
from ninja_extra import http_get

from ssr_connect.core.api import BaseAPI
from ssr_connect.core.api import IsAdmin
from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import ErrorSchema
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.policies import Capability
from ssr_connect.core.policies import require
from ssr_connect.core.roles import Role
from ssr_connect.core.schemas import MessageSchema
from ssr_connect.users.models import User
from ssr_connect.users.schemas import UserListSchema

logger = logging.getLogger(__name__)


@api_controller("/users", tags=["Users (Admin)"], permissions=[IsAdmin])
class UserAdminController(BaseAPI):
    """Admin endpoints for user management."""

    @http_get(
        "/",
        response={200: list[UserListSchema], 400: ErrorSchema, 403: ErrorSchema},
        url_name="users_list",
    )
    def list_users(self, request: HttpRequest, role: str | None = None):
        """List all users, optionally filtered by role."""
        require(self.request_context(request), Capability.MANAGE_USERS)

        users = User.objects.all()
        if role:
            if role not in Role.values:
                return ValidationError(f"Unknown role: {role}.").to_response()
            users = users.filter(role=role)

        return 200, [UserListSchema.from_user(user) for user in users]

    @http_get(
        "/{user_id}",
        response={200: UserListSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="users_detail",
    )
    def get_user(self, request: HttpRequest, user_id: UUID):
        """Get user details by ID."""
        require(self.request_context(request), Capability.MANAGE_USERS)

        try:
            user = User.objects.get(id=user_id)
        except User.DoesNotExist:
            return NotFoundError("User not found.").to_response()

        return 200, UserListSchema.from_user(user)

    @http_delete(
        "/{user_id}",
        response={200: MessageSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="users_delete",
    )
    def delete_user(self, request: HttpRequest, user_id: UUID):
        """Delete a user account. Admins cannot delete themselves."""
        ctx = self.request_context(request)
        require(ctx, Capability.MANAGE_USERS)

        if user_id == ctx.user_id:
            return ValidationError("You cannot delete your own account.").to_response()

        try:
            user = User.objects.get(id=user_id)
        except User.DoesNotExist:
            return NotFoundError("User not found.").to_response()

        email = user.email
        try:
            user.delete()
        except ProtectedError:
            return ConflictError("This user is the mentor of existing teams.").to_response()
        logger.info("Admin %s deleted user %s", ctx.user_id, email)

        return 200, MessageSchema(success=True, message=f"User {email} deleted.")
