"""
Reporting schemas.
"""

from uuid import UUID

from ninja import Schema

from ssr_connect.core.schemas import UserMinimalSchema
from ssr_connect.teams.schemas import TeamMemberSchema


class ExportRequestSchema(Schema):
    """Column selection for a custom export."""

    columns: list[str]


class ExportColumnSchema(Schema):
    key: str
    label: str
    default: bool


class AdminStatsSchema(Schema):
    total_students: int
    total_mentors: int
    total_teams: int
    teams_by_status: dict[str, int]
    total_projects: int
    projects_by_status: dict[str, int]
    total_proposals: int
    proposals_by_state: dict[str, int]


class MentorStatsSchema(Schema):
    total_teams: int
    teams_by_status: dict[str, int]
    total_proposals: int
    proposals_by_state: dict[str, int]
    pending_teams: int
    pending_proposals: int


class AdminTeamSchema(Schema):
    """Team overview for administrators."""

    id: UUID
    team_number: str
    project_title: str
    pillar: str
    batch: str
    status: str
    leader: UserMinimalSchema
    mentor: UserMinimalSchema
    members: list[TeamMemberSchema]
    proposal_state: str | None
    project_status: str | None
