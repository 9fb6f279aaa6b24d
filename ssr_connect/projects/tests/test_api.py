"""
Tests for the project and upload API endpoints.
"""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from ssr_connect.projects.models import Attachment
from ssr_connect.projects.tests.factories import ProjectFactory
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.tests.factories import TeamFactory


@pytest.mark.django_db
class TestProjectEndpoints:
    def test_create_and_read_back(self, login_as):
        team = TeamFactory(status=TeamStatus.APPROVED)
        client = login_as(team.leader)

        response = client.post(
            "/api/projects/",
            data={
                "title": "Kitchen gardens",
                "description": "Start kitchen gardens with ten households.",
                "location": {"type": "OFFLINE", "city": "Palakkad", "state": "Kerala"},
            },
            content_type="application/json",
        )

        assert response.status_code == 201
        assert response.json()["location"]["city"] == "Palakkad"
        mine = client.get("/api/projects/my")
        assert mine.status_code == 200
        assert mine.json()["team_number"] == team.team_number

    def test_blank_title_is_rejected(self, login_as):
        team = TeamFactory(status=TeamStatus.APPROVED)

        response = login_as(team.leader).post(
            "/api/projects/",
            data={"title": "  ", "description": "Something useful."},
            content_type="application/json",
        )

        assert response.status_code == 400

    def test_update_my_project(self, login_as):
        project = ProjectFactory()

        response = login_as(project.team.leader).put(
            "/api/projects/my",
            data={"status": "COMPLETED", "achievements": "120 households reached"},
            content_type="application/json",
        )

        assert response.status_code == 200
        assert response.json()["status"] == "COMPLETED"
        assert response.json()["achievements"] == "120 households reached"

    def test_my_project_missing(self, student_client):
        assert student_client.get("/api/projects/my").status_code == 404

    def test_team_project_for_admin(self, admin_api_client):
        project = ProjectFactory()

        response = admin_api_client.get(f"/api/projects/team/{project.team_id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(project.id)

    def test_team_project_hidden_from_outsiders(self, student_client):
        project = ProjectFactory()

        assert student_client.get(f"/api/projects/team/{project.team_id}").status_code == 403


@pytest.mark.django_db
class TestUploadEndpoint:
    def test_student_uploads_pdf(self, student_client):
        upload = SimpleUploadedFile("my plan (v2).pdf", b"%PDF-1.4 body", content_type="application/pdf")

        response = student_client.post("/api/uploads/", {"file": upload})

        assert response.status_code == 201
        data = response.json()
        assert data["url"].startswith("/media/uploads/")
        assert data["url"].endswith("-my_plan__v2_.pdf")
        assert data["original_filename"] == "my plan (v2).pdf"
        assert Attachment.objects.count() == 1

    def test_mentor_may_upload(self, mentor_client):
        upload = SimpleUploadedFile("notes.docx", b"PK data", content_type=(
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
        ))

        assert mentor_client.post("/api/uploads/", {"file": upload}).status_code == 201

    def test_too_large(self, student_client, settings):
        settings.UPLOAD_MAX_SIZE = 8
        upload = SimpleUploadedFile("big.pdf", b"%PDF-1.4 way too long", content_type="application/pdf")

        response = student_client.post("/api/uploads/", {"file": upload})

        assert response.status_code == 413
        assert response.json()["code"] == "FILE_TOO_LARGE"

    def test_wrong_type(self, student_client):
        upload = SimpleUploadedFile("notes.txt", b"hello", content_type="text/plain")

        response = student_client.post("/api/uploads/", {"file": upload})

        assert response.status_code == 415
        assert response.json()["code"] == "INVALID_FILE_TYPE"
        assert Attachment.objects.count() == 0

    def test_admin_is_forbidden(self, admin_api_client):
        upload = SimpleUploadedFile("a.pdf", b"%PDF", content_type="application/pdf")

        assert admin_api_client.post("/api/uploads/", {"file": upload}).status_code == 403

    def test_missing_file(self, student_client):
        assert student_client.post("/api/uploads/", {}).status_code == 400
