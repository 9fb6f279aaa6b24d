import uuid
from typing import ClassVar

from django.contrib.auth.models import AbstractUser
from django.db import models
from django.utils.translation import gettext_lazy as _

from ssr_connect.core.models import BaseModel
from ssr_connect.core.roles import Role

from .managers import UserManager


class User(AbstractUser):
    """
    Custom user model for SSR Connect.
    Uses email as the unique identifier instead of username.
    Uses UUID as primary key.

    The role is derived from the email domain when the account is created.
    Team members added by a leader before they register get a placeholder
    account (is_registered=False, can_login=False) that registration claims.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    first_name = models.CharField(_("first name"), max_length=150)
    last_name = models.CharField(_("last name"), max_length=150, blank=True)
    email = models.EmailField(_("email address"), unique=True)
    username = None  # type: ignore[assignment]

    role = models.CharField(
        _("role"),
        max_length=10,
        choices=Role.choices,
        default=Role.STUDENT,
        editable=False,
    )
    roll_number = models.CharField(_("roll number"), max_length=50, blank=True)
    phone = models.CharField(_("phone"), max_length=20, blank=True)
    is_registered = models.BooleanField(
        _("registered"),
        default=True,
        help_text=_("False for accounts created on behalf of a team member"),
    )
    can_login = models.BooleanField(_("can log in"), default=True)

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["first_name"]

    objects: ClassVar[UserManager] = UserManager()

    class Meta:
        verbose_name = _("user")
        verbose_name_plural = _("users")
        ordering = ["email"]

    def __str__(self) -> str:
        return self.email

    def get_full_name(self) -> str:
        """Return first_name + last_name."""
        full_name = f"{self.first_name} {self.last_name}".strip()
        return full_name or self.email


class MentorVerification(BaseModel):
    """
    Roster of staff allowed to register as mentors.

    A mentor-domain registration must present the secret issued with its
    roster entry; the roster also supplies the mentor's name.
    """

    email = models.EmailField(_("email address"), unique=True)
    first_name = models.CharField(_("first name"), max_length=150)
    last_name = models.CharField(_("last name"), max_length=150, blank=True)
    secret_id = models.CharField(_("secret"), max_length=128)

    class Meta:
        verbose_name = _("mentor verification")
        verbose_name_plural = _("mentor verifications")
        ordering = ["email"]

    def __str__(self) -> str:
        return self.email

    def matches(self, secret: str) -> bool:
        return bool(secret) and secret == self.secret_id
