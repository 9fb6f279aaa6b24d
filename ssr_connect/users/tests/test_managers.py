"""
Tests for account creation and role derivation.
"""

import pytest

from ssr_connect.core.roles import Role
from ssr_connect.users.models import User


@pytest.mark.django_db
class TestUserManager:
    def test_create_user_derives_student_role(self):
        user = User.objects.create_user(email="Ravi@am.students.amrita.edu", password="x-Portal-99")

        assert user.email == "ravi@am.students.amrita.edu"
        assert user.role == Role.STUDENT
        assert user.is_staff is False
        assert user.check_password("x-Portal-99")

    def test_create_user_derives_mentor_role(self):
        user = User.objects.create_user(email="lakshmi@am.amrita.edu", password="x-Portal-99")

        assert user.role == Role.MENTOR
        assert user.is_staff is True

    def test_create_user_derives_admin_role(self):
        user = User.objects.create_user(email="office@amrita.edu", password="x-Portal-99")

        assert user.role == Role.ADMIN
        assert user.is_staff is True
        assert user.is_superuser is False

    def test_create_superuser_is_always_admin(self):
        user = User.objects.create_superuser(email="root@example.com", password="x-Portal-99")

        assert user.role == Role.ADMIN
        assert user.is_superuser is True
        assert user.is_staff is True

    def test_create_user_without_email_fails(self):
        with pytest.raises(ValueError, match="email must be set"):
            User.objects.create_user(email="", password="x")

    def test_create_placeholder(self):
        user = User.objects.create_placeholder(
            email="anu@am.students.amrita.edu",
            name="Anu Krishnan Nair",
            roll_number="AM.EN.U4CSE25042",
        )

        assert user.first_name == "Anu"
        assert user.last_name == "Krishnan Nair"
        assert user.roll_number == "AM.EN.U4CSE25042"
        assert user.is_registered is False
        assert user.can_login is False
        assert user.has_usable_password() is False
