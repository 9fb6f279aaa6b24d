"""
Admin export and dashboard controllers.
"""

from django.http import HttpRequest
from django.http import HttpResponse
from ninja_extra import api_controller
from ninja_extra import http_get
from ninja_extra import http_post

from ssr_connect.core.api import BaseAPI
from ssr_connect.core.api import IsAdmin
from ssr_connect.core.api import IsMentor
from ssr_connect.core.exceptions import ErrorSchema
from ssr_connect.core.schemas import UserMinimalSchema
from ssr_connect.reports import exports
from ssr_connect.reports import services
from ssr_connect.reports.schemas import AdminStatsSchema
from ssr_connect.reports.schemas import AdminTeamSchema
from ssr_connect.reports.schemas import ExportColumnSchema
from ssr_connect.reports.schemas import ExportRequestSchema
from ssr_connect.reports.schemas import MentorStatsSchema
from ssr_connect.teams.api.teams import member_to_schema
from ssr_connect.teams.models import Team


def _csv_response(columns) -> HttpResponse:
    response = HttpResponse(exports.export_teams_csv(columns), content_type="text/csv")
    response["Content-Disposition"] = f"attachment; filename={exports.export_filename()}"
    return response


def admin_team_to_schema(team: Team) -> AdminTeamSchema:
    proposals = list(team.proposals.all())
    project = exports.team_project(team)
    return AdminTeamSchema(
        id=team.id,
        team_number=team.team_number,
        project_title=team.project_title,
        pillar=team.pillar,
        batch=team.batch,
        status=team.status,
        leader=UserMinimalSchema.from_user(team.leader),
        mentor=UserMinimalSchema.from_user(team.mentor),
        members=[member_to_schema(m) for m in team.members.all()],
        proposal_state=proposals[0].state if proposals else None,
        project_status=project.status if project else None,
    )


@api_controller("/admin", tags=["Admin"], permissions=[IsAdmin])
class AdminReportController(BaseAPI):
    """Exports and dashboards for administrators."""

    @http_get("/export", response={200: None, 403: ErrorSchema}, url_name="admin_export")
    def export(self, request: HttpRequest):
        """Download every team as CSV with the standard columns."""
        return _csv_response(exports.DEFAULT_COLUMNS)

    @http_post(
        "/export",
        response={200: None, 400: ErrorSchema, 403: ErrorSchema},
        url_name="admin_export_columns",
    )
    def export_columns(self, request: HttpRequest, data: ExportRequestSchema):
        """Download every team as CSV with the selected columns, in the given order."""
        return _csv_response(data.columns)

    @http_get("/export/columns", response=list[ExportColumnSchema], url_name="admin_export_catalogue")
    def list_columns(self, request: HttpRequest):
        """Columns available to the custom export."""
        return [
            ExportColumnSchema(key=key, label=label, default=key in exports.DEFAULT_COLUMNS)
            for key, (label, _) in exports.COLUMNS.items()
        ]

    @http_get("/stats", response=AdminStatsSchema, url_name="admin_stats")
    def stats(self, request: HttpRequest):
        return services.admin_stats(self.request_context(request))

    @http_get("/teams", response=list[AdminTeamSchema], url_name="admin_teams")
    def teams(self, request: HttpRequest):
        """All teams with mentor, members, proposal state and project status."""
        return [admin_team_to_schema(team) for team in services.admin_teams(self.request_context(request))]


@api_controller("/mentor/stats", tags=["Mentor"], permissions=[IsMentor])
class MentorStatsController(BaseAPI):
    @http_get("/", response=MentorStatsSchema, url_name="mentor_stats")
    def stats(self, request: HttpRequest):
        """Counts for the teams and proposals assigned to the current mentor."""
        return services.mentor_stats(self.request_context(request))
