"""
Authentication API controller.
"""

import logging

from django.contrib.auth import authenticate
from django.contrib.auth import login
from django.contrib.auth import logout
from django.http import HttpRequest
from django.middleware.csrf import get_token
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post

from ssr_connect.core.api import AllowAny
from ssr_connect.core.api import BaseAPI
from ssr_connect.core.exceptions import AccountDisabledError
from ssr_connect.core.exceptions import ErrorSchema
from ssr_connect.core.exceptions import InvalidCredentialsError
from ssr_connect.core.exceptions import NotAuthenticatedError
from ssr_connect.core.schemas import MessageSchema
from ssr_connect.users.models import User
from ssr_connect.users.schemas import CSRFTokenSchema
from ssr_connect.users.schemas import LoginResponseSchema
from ssr_connect.users.schemas import LoginSchema
from ssr_connect.users.schemas import RegisterSchema
from ssr_connect.users.schemas import UserSchema
from ssr_connect.users.services import register_user

logger = logging.getLogger(__name__)


@api_controller("/auth", tags=["Authentication"], permissions=[AllowAny])
class AuthController(BaseAPI):
    """Authentication endpoints for login, logout and registration."""

    @http_get("/csrf", response=CSRFTokenSchema, url_name="auth_csrf")
    def get_csrf_token(self, request: HttpRequest):
        """Get a CSRF token for subsequent POST requests."""
        return CSRFTokenSchema(csrf_token=get_token(request))

    @http_post(
        "/login",
        response={200: LoginResponseSchema, 401: ErrorSchema, 400: ErrorSchema},
        url_name="auth_login",
    )
    def login_view(self, request: HttpRequest, data: LoginSchema):
        """Authenticate user with email and password."""
        email = data.email.lower()
        candidate = User.objects.filter(email__iexact=email).first()
        if candidate is not None and not (candidate.can_login and candidate.is_registered):
            return AccountDisabledError().to_response()

        user = authenticate(request, username=email, password=data.password)

        if user is None:
            return InvalidCredentialsError().to_response()

        if not user.is_active:
            return AccountDisabledError().to_response()

        login(request, user)
        logger.debug("User %s logged in", user.pk)

        return 200, LoginResponseSchema(
            success=True,
            user=UserSchema.from_user(user),
            csrf_token=get_token(request),
        )

    @http_post("/logout", response={200: MessageSchema}, url_name="auth_logout")
    def logout_view(self, request: HttpRequest):
        """Logout the current user and clear session."""
        logout(request)
        return 200, MessageSchema(success=True, message="Logged out.")

    @http_get(
        "/me",
        response={200: UserSchema, 401: ErrorSchema},
        url_name="auth_me",
    )
    def me_view(self, request: HttpRequest):
        """Get the current authenticated user's information."""
        if not request.user.is_authenticated:
            return NotAuthenticatedError().to_response()

        return 200, UserSchema.from_user(request.user)

    @http_post(
        "/register",
        response={201: UserSchema, 400: ErrorSchema, 409: ErrorSchema},
        url_name="auth_register",
    )
    def register_view(self, request: HttpRequest, data: RegisterSchema):
        """
        Register a new account.

        The role follows from the email domain. Mentors must present the
        secret from the mentor roster.
        """
        user = register_user(data)
        return 201, UserSchema.from_user(user)
