"""
Tests for the admin user management endpoints.
"""

import pytest

from ssr_connect.users.models import User
from ssr_connect.users.tests.factories import MentorFactory
from ssr_connect.users.tests.factories import StudentFactory


@pytest.mark.django_db
class TestListUsers:
    def test_admin_lists_all_users(self, admin_api_client, portal_admin):
        StudentFactory.create_batch(2)
        MentorFactory()

        response = admin_api_client.get("/api/users/")

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_filter_by_role(self, admin_api_client):
        StudentFactory.create_batch(2)
        mentor = MentorFactory()

        response = admin_api_client.get("/api/users/?role=MENTOR")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == [str(mentor.id)]

    def test_unknown_role_is_rejected(self, admin_api_client):
        response = admin_api_client.get("/api/users/?role=DEAN")

        assert response.status_code == 400

    @pytest.mark.parametrize("client_fixture", ["student_client", "mentor_client"])
    def test_non_admin_denied(self, request, client_fixture):
        client = request.getfixturevalue(client_fixture)

        response = client.get("/api/users/")

        assert response.status_code == 403

    def test_superuser_is_admin(self, login_as):
        root = User.objects.create_superuser(email="root@example.com", password="Root-Pass-2025!")

        response = login_as(root).get("/api/users/")

        assert response.status_code == 200


@pytest.mark.django_db
class TestGetAndDeleteUser:
    def test_get_user(self, admin_api_client, student):
        response = admin_api_client.get(f"/api/users/{student.id}")

        assert response.status_code == 200
        assert response.json()["email"] == student.email

    def test_get_missing_user(self, admin_api_client):
        response = admin_api_client.get("/api/users/00000000-0000-0000-0000-000000000000")

        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"

    def test_delete_user(self, admin_api_client, student):
        response = admin_api_client.delete(f"/api/users/{student.id}")

        assert response.status_code == 200
        assert not User.objects.filter(id=student.id).exists()

    def test_admin_cannot_delete_self(self, admin_api_client, portal_admin):
        response = admin_api_client.delete(f"/api/users/{portal_admin.id}")

        assert response.status_code == 400
        assert User.objects.filter(id=portal_admin.id).exists()
