"""
Account registration.
"""

import logging

from django.contrib.auth.password_validation import validate_password
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import transaction

from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.roles import Role
from ssr_connect.core.roles import role_for_email
from ssr_connect.users.models import MentorVerification
from ssr_connect.users.models import User
from ssr_connect.users.schemas import RegisterSchema

logger = logging.getLogger(__name__)


def _verify_mentor(email: str, secret_key: str | None) -> MentorVerification:
    if not secret_key:
        raise ValidationError("A secret key is required for mentor registration.")
    entry = MentorVerification.objects.filter(email__iexact=email).first()
    if entry is None or not entry.matches(secret_key):
        raise ValidationError("Invalid email or secret key combination.")
    return entry


def register_user(data: RegisterSchema) -> User:
    """
    Create an account, or claim the placeholder created for a team member.

    Raises:
        ValidationError: missing name, weak password, bad mentor secret
        ConflictError: the email already belongs to a registered account
    """
    first_name, last_name = data.first_name, data.last_name
    if role_for_email(data.email) == Role.MENTOR:
        entry = _verify_mentor(data.email, data.secret_key)
        first_name, last_name = entry.first_name, entry.last_name

    if not first_name:
        raise ValidationError("First name is required.", details={"fields": ["first_name"]})

    with transaction.atomic():
        existing = User.objects.select_for_update().filter(email__iexact=data.email).first()
        if existing is not None and existing.is_registered:
            raise ConflictError("An account with this email already exists.")

        try:
            validate_password(data.password, user=existing)
        except DjangoValidationError as e:
            raise ValidationError(
                message=" ".join(e.messages),
                details={"password_errors": e.messages},
            ) from e

        if existing is not None:
            existing.first_name = first_name
            existing.last_name = last_name
            existing.roll_number = data.roll_number or existing.roll_number
            existing.phone = data.phone
            existing.is_registered = True
            existing.can_login = True
            existing.set_password(data.password)
            existing.save()
            logger.info("Placeholder account %s claimed by registration", existing.pk)
            return existing

        user = User.objects.create_user(
            email=data.email,
            password=data.password,
            first_name=first_name,
            last_name=last_name,
            roll_number=data.roll_number,
            phone=data.phone,
        )
    logger.info("Registered %s account %s", user.role, user.pk)
    return user
