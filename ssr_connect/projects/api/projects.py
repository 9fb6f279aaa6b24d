"""
Project record and upload API controllers.
"""

from uuid import UUID

from django.http import HttpRequest
from ninja import File
from ninja import UploadedFile
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from ssr_connect.core.api import BaseAPI
from ssr_connect.core.api import IsAuthenticated
from ssr_connect.core.api import requires_capability
from ssr_connect.core.exceptions import ErrorSchema
from ssr_connect.core.policies import Capability
from ssr_connect.projects import services
from ssr_connect.projects.models import Attachment
from ssr_connect.projects.models import Project
from ssr_connect.projects.schemas import AttachmentSchema
from ssr_connect.projects.schemas import ProjectCreateSchema
from ssr_connect.projects.schemas import ProjectLocationSchema
from ssr_connect.projects.schemas import ProjectSchema
from ssr_connect.projects.schemas import ProjectUpdateSchema


def project_to_schema(project: Project) -> ProjectSchema:
    return ProjectSchema(
        id=project.id,
        team_id=project.team_id,
        team_number=project.team.team_number,
        title=project.title,
        description=project.description,
        theme=project.theme,
        status=project.status,
        target_beneficiaries=project.target_beneficiaries,
        social_impact=project.social_impact,
        implementation_approach=project.implementation_approach,
        current_milestone=project.current_milestone,
        next_milestone=project.next_milestone,
        challenges=project.challenges,
        achievements=project.achievements,
        location=ProjectLocationSchema(
            type=project.location_type,
            address=project.address,
            city=project.city,
            state=project.state,
        ),
        created=project.created,
        modified=project.modified,
    )


def attachment_to_schema(attachment: Attachment) -> AttachmentSchema:
    return AttachmentSchema(
        id=attachment.id,
        url=attachment.url,
        original_filename=attachment.original_filename,
        content_type=attachment.content_type,
        size=attachment.size,
        created=attachment.created,
    )


@api_controller("/projects", tags=["Projects"], permissions=[IsAuthenticated])
class ProjectController(BaseAPI):
    """Project record of the caller's team."""

    @http_post(
        "/",
        response={201: ProjectSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="projects_create",
    )
    def create_project(self, request: HttpRequest, data: ProjectCreateSchema):
        """Create the project record once the team is approved."""
        project = services.create_project(self.request_context(request), data)
        return 201, project_to_schema(project)

    @http_get(
        "/my",
        response={200: ProjectSchema, 404: ErrorSchema},
        url_name="projects_my",
    )
    def my_project(self, request: HttpRequest):
        return 200, project_to_schema(services.get_my_project(self.request_context(request)))

    @http_put(
        "/my",
        response={200: ProjectSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="projects_update",
    )
    def update_project(self, request: HttpRequest, data: ProjectUpdateSchema):
        """Update progress fields of the team's project."""
        return 200, project_to_schema(services.update_project(self.request_context(request), data))

    @http_get(
        "/team/{team_id}",
        response={200: ProjectSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="projects_team",
    )
    def team_project(self, request: HttpRequest, team_id: UUID):
        """Project of a team, for its members, its mentor and admins."""
        return 200, project_to_schema(services.get_team_project(self.request_context(request), team_id))


@api_controller("/uploads", tags=["Uploads"], permissions=[requires_capability(Capability.UPLOAD_FILE)])
class UploadController(BaseAPI):
    """File uploads referenced from proposals and projects."""

    @http_post(
        "/",
        response={201: AttachmentSchema, 400: ErrorSchema, 413: ErrorSchema, 415: ErrorSchema},
        url_name="uploads_create",
    )
    def upload_file(self, request: HttpRequest, file: UploadedFile = File(...)):
        """Store a file and return its public URL."""
        attachment = services.store_upload(self.request_context(request), file)
        return 201, attachment_to_schema(attachment)
