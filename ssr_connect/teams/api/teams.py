"""
Teams API controllers.
"""

import logging
from uuid import UUID

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post
from ninja_extra import http_put

from ssr_connect.core.api import BaseAPI
from ssr_connect.core.api import IsAuthenticated
from ssr_connect.core.api import IsMentor
from ssr_connect.core.exceptions import ErrorSchema
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.schemas import UserMinimalSchema
from ssr_connect.teams import services
from ssr_connect.teams.models import Batch
from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamMember
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.numbering import available_team_numbers
from ssr_connect.teams.numbering import team_numbers_for_batch
from ssr_connect.teams.schemas import BatchSchema
from ssr_connect.teams.schemas import TeamCreateSchema
from ssr_connect.teams.schemas import TeamDecisionSchema
from ssr_connect.teams.schemas import TeamDetailSchema
from ssr_connect.teams.schemas import TeamListSchema
from ssr_connect.teams.schemas import TeamMemberSchema
from ssr_connect.teams.schemas import TeamNumbersSchema
from ssr_connect.teams.schemas import TeamUpdateSchema

logger = logging.getLogger(__name__)


def member_to_schema(member: TeamMember) -> TeamMemberSchema:
    return TeamMemberSchema(
        id=member.id,
        name=member.name,
        email=member.email,
        roll_number=member.roll_number,
        role=member.role,
        user_id=member.user_id,
        is_registered=bool(member.user and member.user.is_registered),
    )


def team_to_list_schema(team: Team) -> TeamListSchema:
    """Convert Team to list schema."""
    return TeamListSchema(
        id=team.id,
        team_number=team.team_number,
        project_title=team.project_title,
        pillar=team.pillar,
        batch=team.batch,
        status=team.status,
        status_message=team.status_message,
        leader=UserMinimalSchema.from_user(team.leader),
        mentor=UserMinimalSchema.from_user(team.mentor),
        member_count=len(team.members.all()),
        created=team.created,
        modified=team.modified,
    )


def team_to_detail_schema(team: Team) -> TeamDetailSchema:
    """Convert Team to detail schema."""
    return TeamDetailSchema(
        **team_to_list_schema(team).model_dump(),
        members=[member_to_schema(m) for m in team.members.all()],
    )


@api_controller("/teams", tags=["Teams"], permissions=[IsAuthenticated])
class TeamController(BaseAPI):
    """Team registration for students; read access for mentors and admins."""

    @http_get("/batches", response=list[BatchSchema], url_name="teams_batches")
    def list_batches(self, request: HttpRequest):
        """Batches with their team number capacity."""
        result = []
        for batch in Batch:
            numbers = team_numbers_for_batch(batch.value)
            free = available_team_numbers(batch.value, services.taken_team_numbers(batch.value))
            result.append(
                BatchSchema(value=batch.value, label=batch.label, available=len(free), total=len(numbers))
            )
        return result

    @http_get(
        "/numbers",
        response={200: TeamNumbersSchema, 400: ErrorSchema},
        url_name="teams_numbers",
    )
    def list_numbers(self, request: HttpRequest, batch: str):
        """Unused team numbers of a batch."""
        if batch not in Batch.values:
            return ValidationError(f"Unknown batch {batch}.").to_response()
        free = available_team_numbers(batch, services.taken_team_numbers(batch))
        return 200, TeamNumbersSchema(batch=batch, available=free, next=free[0] if free else None)

    @http_post(
        "/",
        response={201: TeamDetailSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="teams_create",
    )
    def create_team(self, request: HttpRequest, data: TeamCreateSchema):
        """
        Register a team led by the current student.

        The team number is allocated from the batch range unless one is given.
        """
        team = services.create_team(self.request_context(request), data)
        return 201, team_to_detail_schema(services.team_queryset().get(pk=team.pk))

    @http_get(
        "/my",
        response={200: TeamDetailSchema, 404: ErrorSchema},
        url_name="teams_my",
    )
    def my_team(self, request: HttpRequest):
        """Get the team of the current user."""
        team = services.get_user_team(request.user)
        if team is None:
            return NotFoundError("You are not part of a team.").to_response()
        return 200, team_to_detail_schema(team)

    @http_put(
        "/my",
        response={200: TeamDetailSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="teams_update",
    )
    def update_my_team(self, request: HttpRequest, data: TeamUpdateSchema):
        """Edit a rejected team and resubmit it to the mentor."""
        team = services.update_team(self.request_context(request), data)
        return 200, team_to_detail_schema(team)

    @http_get(
        "/{team_id}",
        response={200: TeamDetailSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="teams_detail",
    )
    def get_team(self, request: HttpRequest, team_id: UUID):
        """Get team details."""
        team = services.get_team(self.request_context(request), team_id)
        return 200, team_to_detail_schema(team)


@api_controller("/mentor/teams", tags=["Mentor"], permissions=[IsMentor])
class MentorTeamController(BaseAPI):
    """Teams assigned to the current mentor."""

    @http_get(
        "/",
        response={200: list[TeamDetailSchema], 400: ErrorSchema},
        url_name="mentor_teams_list",
    )
    def list_teams(self, request: HttpRequest, status: str | None = None):
        """List assigned teams, optionally filtered by status."""
        if status and status not in TeamStatus.values:
            return ValidationError(f"Unknown status {status}.").to_response()
        teams = services.list_mentor_teams(self.request_context(request), status)
        return 200, [team_to_detail_schema(t) for t in teams]

    @http_post(
        "/{team_id}/decision",
        response={200: TeamDetailSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="mentor_teams_decision",
    )
    def decide(self, request: HttpRequest, team_id: UUID, data: TeamDecisionSchema):
        """Approve or reject a pending team."""
        team = services.decide_team(self.request_context(request), team_id, data.decision, data.reason)
        return 200, team_to_detail_schema(services.team_queryset().get(pk=team.pk))
