"""
Tests for project records and uploads.
"""

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile

from ssr_connect.core.context import RequestContext
from ssr_connect.core.exceptions import AuthorizationError
from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.projects import services
from ssr_connect.projects.models import LocationType
from ssr_connect.projects.models import Project
from ssr_connect.projects.models import ProjectStatus
from ssr_connect.projects.schemas import ProjectCreateSchema
from ssr_connect.projects.schemas import ProjectUpdateSchema
from ssr_connect.projects.tests.factories import ProjectFactory
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.tests.factories import TeamFactory
from ssr_connect.users.tests.factories import MentorFactory


def ctx_for(user) -> RequestContext:
    return RequestContext.for_user(user)


def create_payload(**overrides) -> ProjectCreateSchema:
    payload = {
        "title": "Solar lamps for evening classes",
        "description": "Install and maintain solar lamps in two village study centres.",
        "theme": "Energy",
        "target_beneficiaries": "School children",
        "location": {"type": "OFFLINE", "city": "Ettimadai", "state": "Tamil Nadu"},
    }
    payload.update(overrides)
    return ProjectCreateSchema(**payload)


@pytest.mark.django_db
class TestCreateProject:
    def test_member_of_approved_team_creates_project(self):
        team = TeamFactory(status=TeamStatus.APPROVED)

        project = services.create_project(ctx_for(team.leader), create_payload())

        assert project.team == team
        assert project.status == ProjectStatus.PLANNING
        assert project.location_type == LocationType.OFFLINE
        assert project.city == "Ettimadai"

    def test_pending_team_is_rejected(self):
        team = TeamFactory()

        with pytest.raises(ValidationError):
            services.create_project(ctx_for(team.leader), create_payload())
        assert Project.objects.count() == 0

    def test_second_project_conflicts(self):
        project = ProjectFactory()

        with pytest.raises(ConflictError):
            services.create_project(ctx_for(project.team.leader), create_payload())

    def test_without_team(self, student):
        with pytest.raises(NotFoundError):
            services.create_project(ctx_for(student), create_payload())

    def test_mentor_cannot_create(self):
        team = TeamFactory(status=TeamStatus.APPROVED)

        with pytest.raises(AuthorizationError):
            services.create_project(ctx_for(team.mentor), create_payload())


@pytest.mark.django_db
class TestUpdateProject:
    def test_partial_update_keeps_other_fields(self):
        project = ProjectFactory(challenges="Monsoon delays")

        updated = services.update_project(
            ctx_for(project.team.leader),
            ProjectUpdateSchema(status="IN_PROGRESS", current_milestone="Survey done"),
        )

        stored = Project.objects.get(pk=updated.pk)
        assert stored.status == ProjectStatus.IN_PROGRESS
        assert stored.current_milestone == "Survey done"
        assert stored.challenges == "Monsoon delays"
        assert stored.title == project.title

    def test_location_is_replaced_as_a_whole(self):
        project = ProjectFactory()

        services.update_project(ctx_for(project.team.leader), ProjectUpdateSchema(location={"type": "ONLINE"}))

        stored = Project.objects.get(pk=project.pk)
        assert stored.location_type == LocationType.ONLINE
        assert stored.city == ""

    def test_team_without_project(self):
        team = TeamFactory(status=TeamStatus.APPROVED)

        with pytest.raises(NotFoundError):
            services.update_project(ctx_for(team.leader), ProjectUpdateSchema(theme="Water"))


@pytest.mark.django_db
class TestTeamProject:
    def test_assigned_mentor_may_read(self):
        project = ProjectFactory()

        assert services.get_team_project(ctx_for(project.team.mentor), project.team_id) == project

    def test_other_mentor_may_not(self):
        project = ProjectFactory()

        with pytest.raises(AuthorizationError):
            services.get_team_project(ctx_for(MentorFactory()), project.team_id)


@pytest.mark.django_db
class TestStoreUpload:
    def test_stores_file_under_upload_dir(self, student):
        upload = SimpleUploadedFile("site photo.png", b"\x89PNG data", content_type="image/png")

        attachment = services.store_upload(ctx_for(student), upload)

        assert attachment.owner == student
        assert attachment.original_filename == "site photo.png"
        assert attachment.file.name.startswith("uploads/")
        assert attachment.file.name.endswith("-site_photo.png")
        assert attachment.url.startswith("/media/uploads/")

    def test_admin_cannot_upload(self, portal_admin):
        upload = SimpleUploadedFile("a.pdf", b"%PDF", content_type="application/pdf")

        with pytest.raises(AuthorizationError):
            services.store_upload(ctx_for(portal_admin), upload)
