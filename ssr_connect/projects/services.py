"""
Project records and file uploads.
"""

import logging
from uuid import UUID

from django.db import IntegrityError
from django.db import transaction

from ssr_connect.core.context import RequestContext
from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.policies import Capability
from ssr_connect.core.policies import require
from ssr_connect.projects.models import Attachment
from ssr_connect.projects.models import Project
from ssr_connect.projects.schemas import ProjectCreateSchema
from ssr_connect.projects.schemas import ProjectUpdateSchema
from ssr_connect.projects.uploads import validate_upload
from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.services import get_team
from ssr_connect.teams.services import get_user_team

logger = logging.getLogger(__name__)

PROJECT_TEXT_FIELDS = (
    "title",
    "description",
    "theme",
    "status",
    "target_beneficiaries",
    "social_impact",
    "implementation_approach",
    "current_milestone",
    "next_milestone",
    "challenges",
    "achievements",
)


def _apply(project: Project, data: ProjectCreateSchema | ProjectUpdateSchema) -> None:
    for field in PROJECT_TEXT_FIELDS:
        value = getattr(data, field)
        if value is not None:
            setattr(project, field, value)
    if data.location is not None:
        project.location_type = data.location.type
        project.address = data.location.address
        project.city = data.location.city
        project.state = data.location.state


def _caller_team(ctx: RequestContext) -> Team:
    team = get_user_team(ctx.user)
    if team is None:
        raise NotFoundError("You are not part of a team.")
    return team


def create_project(ctx: RequestContext, data: ProjectCreateSchema) -> Project:
    """
    Create the project record of the caller's team.

    Raises:
        NotFoundError: caller is not on a team
        ValidationError: the team is not approved
        ConflictError: the team already has a project
    """
    require(ctx, Capability.MANAGE_PROJECT)
    team = _caller_team(ctx)
    if team.status != TeamStatus.APPROVED:
        raise ValidationError("Your team must be approved before creating a project.")
    if Project.objects.filter(team=team).exists():
        raise ConflictError("Your team already has a project.")

    project = Project(team=team)
    _apply(project, data)
    try:
        with transaction.atomic():
            project.save()
    except IntegrityError as e:
        raise ConflictError("Your team already has a project.") from e

    logger.info("Project %s created for team %s", project.pk, team.team_number)
    return project


def get_my_project(ctx: RequestContext) -> Project:
    project = Project.objects.select_related("team").filter(team=_caller_team(ctx)).first()
    if project is None:
        raise NotFoundError("Your team has no project yet.")
    return project


def update_project(ctx: RequestContext, data: ProjectUpdateSchema) -> Project:
    """Partially update the project of the caller's team."""
    require(ctx, Capability.MANAGE_PROJECT)
    team = _caller_team(ctx)
    with transaction.atomic():
        project = Project.objects.select_for_update().filter(team=team).first()
        if project is None:
            raise NotFoundError("Your team has no project yet.")
        _apply(project, data)
        project.save()

    logger.info("Project %s updated by %s", project.pk, ctx.user_id)
    return project


def get_team_project(ctx: RequestContext, team_id: UUID) -> Project:
    """Project of a team the caller may view: members, its mentor, admins."""
    team = get_team(ctx, team_id)
    project = Project.objects.select_related("team").filter(team=team).first()
    if project is None:
        raise NotFoundError("This team has no project yet.")
    return project


def store_upload(ctx: RequestContext, file) -> Attachment:
    """Validate and store an uploaded file."""
    require(ctx, Capability.UPLOAD_FILE)
    validate_upload(file)
    attachment = Attachment.objects.create(
        file=file,
        original_filename=file.name,
        content_type=file.content_type,
        size=file.size,
        owner=ctx.user,
    )
    logger.info("Stored upload %s (%d bytes) for %s", attachment.file.name, attachment.size, ctx.user_id)
    return attachment
