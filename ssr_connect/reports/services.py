"""
Aggregate counts for the admin and mentor dashboards.
"""

from django.db.models import Count

from ssr_connect.core.context import RequestContext
from ssr_connect.core.policies import Capability
from ssr_connect.core.policies import require
from ssr_connect.core.roles import Role
from ssr_connect.projects.models import Project
from ssr_connect.projects.models import ProjectStatus
from ssr_connect.proposals.models import Proposal
from ssr_connect.proposals.models import ProposalState
from ssr_connect.reports.schemas import AdminStatsSchema
from ssr_connect.reports.schemas import MentorStatsSchema
from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamStatus
from ssr_connect.users.models import User


def count_by(queryset, field: str, choices) -> dict[str, int]:
    """Row counts per choice value; choices without rows count as zero."""
    counts = dict.fromkeys(choices.values, 0)
    for row in queryset.order_by().values(field).annotate(total=Count("pk")):
        counts[row[field]] = row["total"]
    return counts


def admin_stats(ctx: RequestContext) -> AdminStatsSchema:
    require(ctx, Capability.VIEW_ALL_TEAMS)
    teams = count_by(Team.objects.all(), "status", TeamStatus)
    projects = count_by(Project.objects.all(), "status", ProjectStatus)
    proposals = count_by(Proposal.objects.all(), "state", ProposalState)
    return AdminStatsSchema(
        # placeholder accounts of listed members count as students too
        total_students=User.objects.filter(role=Role.STUDENT).count(),
        total_mentors=User.objects.filter(role=Role.MENTOR).count(),
        total_teams=sum(teams.values()),
        teams_by_status=teams,
        total_projects=sum(projects.values()),
        projects_by_status=projects,
        total_proposals=sum(proposals.values()),
        proposals_by_state=proposals,
    )


def mentor_stats(ctx: RequestContext) -> MentorStatsSchema:
    require(ctx, Capability.VIEW_ASSIGNED_TEAMS)
    teams = count_by(Team.objects.filter(mentor_id=ctx.user_id), "status", TeamStatus)
    proposals = count_by(Proposal.objects.filter(team__mentor_id=ctx.user_id), "state", ProposalState)
    return MentorStatsSchema(
        total_teams=sum(teams.values()),
        teams_by_status=teams,
        total_proposals=sum(proposals.values()),
        proposals_by_state=proposals,
        pending_teams=teams[TeamStatus.PENDING],
        pending_proposals=proposals[ProposalState.DRAFT],
    )


def admin_teams(ctx: RequestContext):
    """All teams with mentor, members, proposal and project, newest first."""
    require(ctx, Capability.VIEW_ALL_TEAMS)
    return (
        Team.objects.select_related("leader", "mentor", "project")
        .prefetch_related("members__user", "proposals")
        .order_by("-created")
    )
