from collections.abc import Sequence
from typing import Any

from django.conf import settings
from factory import Faker
from factory import Sequence as FactorySequence
from factory import post_generation
from factory.django import DjangoModelFactory

from ssr_connect.users.models import MentorVerification
from ssr_connect.users.models import User

DEFAULT_PASSWORD = "Portal-Pass-2025!"


class UserFactory(DjangoModelFactory[User]):
    """Student account by default; the role follows the email domain."""

    email = FactorySequence(lambda n: f"student{n}@{settings.STUDENT_EMAIL_DOMAIN}")
    first_name = Faker("first_name")
    last_name = Faker("last_name")
    roll_number = FactorySequence(lambda n: f"AM.EN.U4CSE25{n:03d}")

    @post_generation
    def password(self, create: bool, extracted: Sequence[Any], **kwargs):  # noqa: FBT001
        password = extracted or DEFAULT_PASSWORD
        self.set_password(password)

    @classmethod
    def _after_postgeneration(cls, instance, create, results=None):
        """Save again the instance if creating and at least one hook ran."""
        if create and results and not cls._meta.skip_postgeneration_save:
            instance.save()

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        manager = cls._get_manager(model_class)
        return manager.create_user(*args, **kwargs)

    class Meta:
        model = User


class StudentFactory(UserFactory):
    pass


class MentorFactory(UserFactory):
    email = FactorySequence(lambda n: f"mentor{n}@{settings.MENTOR_EMAIL_DOMAIN}")
    roll_number = ""


class AdminFactory(UserFactory):
    email = FactorySequence(lambda n: f"admin{n}@{settings.ADMIN_EMAIL_DOMAIN}")
    roll_number = ""


class MentorVerificationFactory(DjangoModelFactory[MentorVerification]):
    email = FactorySequence(lambda n: f"staff{n}@{settings.MENTOR_EMAIL_DOMAIN}")
    first_name = Faker("first_name")
    last_name = Faker("last_name")
    secret_id = FactorySequence(lambda n: f"secret-{n:04d}")

    class Meta:
        model = MentorVerification
