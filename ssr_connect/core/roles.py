"""
Role definitions for SSR Connect.

Defines the 3 roles used across the portal:
- Student: forms a team, submits the proposal and the project record
- Mentor: staff member who approves or rejects the teams and proposals assigned to them
- Admin: views and exports aggregate data

A role is derived from the email domain when the account is created and
never changes afterwards.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _


class Role(models.TextChoices):
    """Enum of available roles in SSR Connect."""

    STUDENT = "STUDENT", _("Student")
    MENTOR = "MENTOR", _("Mentor")
    ADMIN = "ADMIN", _("Admin")


# Role descriptions for documentation and admin interfaces
ROLE_DESCRIPTIONS = {
    Role.STUDENT: "Student - Forms a team, submits proposals and project details",
    Role.MENTOR: "Mentor - Approves or rejects assigned teams and proposals",
    Role.ADMIN: "Admin - Views and exports all portal data",
}


def _domain_of(email: str) -> str:
    return email.rsplit("@", 1)[-1].strip().lower() if "@" in email else ""


def role_for_email(email: str) -> Role:
    """
    Derive the role for a new account from its email domain.

    The admin domain is checked first; the mentor domain is a subdomain of
    it, so the comparison is on the exact domain, not on a suffix.
    """
    domain = _domain_of(email)
    if domain == settings.ADMIN_EMAIL_DOMAIN.lower():
        return Role.ADMIN
    if domain == settings.MENTOR_EMAIL_DOMAIN.lower():
        return Role.MENTOR
    return Role.STUDENT


def is_student_email(email: str) -> bool:
    """Check whether an email belongs to the student domain."""
    return _domain_of(email) == settings.STUDENT_EMAIL_DOMAIN.lower()


def get_user_role(user) -> Role | None:
    """Return the role of an authenticated user, None for anonymous users."""
    if not user or not user.is_authenticated:
        return None
    if user.is_superuser:
        return Role.ADMIN
    return Role(user.role)


def user_has_role(user, role: Role | str) -> bool:
    """
    Check if a user has a specific role.

    Args:
        user: Django User instance
        role: Role enum value or role name string

    Returns:
        True if user has the role
    """
    user_role = get_user_role(user)
    if user_role is None:
        return False
    return user_role == Role(role)


def is_admin(user) -> bool:
    """Check if user has admin privileges (superusers included)."""
    return user_has_role(user, Role.ADMIN)


def is_mentor(user) -> bool:
    return user_has_role(user, Role.MENTOR)


def is_student(user) -> bool:
    return user_has_role(user, Role.STUDENT)
