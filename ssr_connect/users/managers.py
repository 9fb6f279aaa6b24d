from typing import TYPE_CHECKING

from django.contrib.auth.hashers import make_password
from django.contrib.auth.models import UserManager as DjangoUserManager

from ssr_connect.core.roles import Role
from ssr_connect.core.roles import role_for_email

if TYPE_CHECKING:
    from .models import User  # noqa: F401


class UserManager(DjangoUserManager["User"]):
    """Custom manager for the User model: email login, role from email domain."""

    def _create_user(self, email: str, password: str | None, **extra_fields):
        """
        Create and save a user with the given email and password.

        The role is derived from the email domain unless given explicitly;
        admins and mentors are staff.
        """
        if not email:
            msg = "The given email must be set"
            raise ValueError(msg)
        email = self.normalize_email(email).lower()
        role = extra_fields.setdefault("role", role_for_email(email))
        extra_fields.setdefault("is_staff", role in (Role.ADMIN, Role.MENTOR))
        user = self.model(email=email, **extra_fields)
        if password is None:
            user.set_unusable_password()
        else:
            user.password = make_password(password)
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields):  # type: ignore[override]
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields):  # type: ignore[override]
        extra_fields["role"] = Role.ADMIN
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            msg = "Superuser must have is_staff=True."
            raise ValueError(msg)
        if extra_fields.get("is_superuser") is not True:
            msg = "Superuser must have is_superuser=True."
            raise ValueError(msg)

        return self._create_user(email, password, **extra_fields)

    def create_placeholder(self, email: str, name: str, roll_number: str = ""):
        """
        Create an account for a team member who has not registered yet.

        The account cannot log in until it is claimed through registration.
        """
        first_name, _, last_name = name.strip().partition(" ")
        return self._create_user(
            email,
            None,
            first_name=first_name,
            last_name=last_name.strip(),
            roll_number=roll_number,
            is_registered=False,
            can_login=False,
        )

    def mentors(self):
        return self.filter(role=Role.MENTOR)

    def students(self):
        return self.filter(role=Role.STUDENT)
