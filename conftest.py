import pytest
from django.test import Client

from ssr_connect.users.models import User
from ssr_connect.users.tests.factories import AdminFactory
from ssr_connect.users.tests.factories import MentorFactory
from ssr_connect.users.tests.factories import StudentFactory


@pytest.fixture(autouse=True)
def _media_storage(settings, tmpdir) -> None:
    settings.MEDIA_ROOT = tmpdir.strpath


@pytest.fixture
def student(db) -> User:
    return StudentFactory()


@pytest.fixture
def mentor(db) -> User:
    return MentorFactory()


@pytest.fixture
def portal_admin(db) -> User:
    return AdminFactory()


def _client_for(user: User) -> Client:
    client = Client()
    client.force_login(user)
    return client


@pytest.fixture
def student_client(student) -> Client:
    return _client_for(student)


@pytest.fixture
def mentor_client(mentor) -> Client:
    return _client_for(mentor)


@pytest.fixture
def admin_api_client(portal_admin) -> Client:
    return _client_for(portal_admin)


@pytest.fixture
def login_as():
    """Return a Client logged in as the given user."""
    return _client_for
