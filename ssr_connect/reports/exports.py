"""
Flattening of teams into CSV rows.

One row per team, joined with its mentor, members, proposals and project
record. ``DEFAULT_COLUMNS`` is the fixed layout of the standard export;
``COLUMNS`` is the full catalogue a caller may pick from.
"""

import csv
import io
import logging
from collections.abc import Callable
from collections.abc import Iterable
from typing import Any

from django.db.models import Prefetch
from django.utils import timezone

from ssr_connect.core.exceptions import ValidationError
from ssr_connect.projects.models import Project
from ssr_connect.proposals.models import Proposal
from ssr_connect.teams.models import Team

logger = logging.getLogger(__name__)

MEMBER_SEPARATOR = "; "


def team_project(team: Team) -> Project | None:
    try:
        return team.project
    except Project.DoesNotExist:
        return None


def _members(team: Team):
    return list(team.members.all())


def _latest_proposal_state(team: Team) -> str:
    proposals = list(team.proposals.all())
    return proposals[-1].state if proposals else ""


def _project_field(name: str) -> Callable[[Team], str]:
    return lambda team: getattr(team_project(team), name, "")


COLUMNS: dict[str, tuple[str, Callable[[Team], Any]]] = {
    "teamCode": ("Team Code", lambda t: t.team_number),
    "teamStatus": ("Team Status", lambda t: t.status),
    "mentorName": ("Mentor Name", lambda t: t.mentor.get_full_name()),
    "mentorEmail": ("Mentor Email", lambda t: t.mentor.email),
    "memberCount": ("Member Count", lambda t: len(_members(t))),
    "members": ("Members", lambda t: MEMBER_SEPARATOR.join(m.name for m in _members(t))),
    "memberEmails": ("Member Emails", lambda t: MEMBER_SEPARATOR.join(m.email for m in _members(t))),
    "proposalCount": ("Proposal Count", lambda t: len(t.proposals.all())),
    "latestProposalStatus": ("Latest Proposal Status", _latest_proposal_state),
    "projectTitle": ("Project Title", lambda t: t.project_title),
    "projectDescription": ("Project Description", _project_field("description")),
    "createdAt": ("Created At", lambda t: t.created.isoformat()),
    "updatedAt": ("Updated At", lambda t: t.modified.isoformat()),
    "teamNumber": ("Team Number", lambda t: t.team_number),
    "pillar": ("Pillar", lambda t: t.get_pillar_display()),
    "batch": ("Batch", lambda t: t.get_batch_display()),
    "leadName": ("Lead Name", lambda t: t.leader.get_full_name()),
    "leadEmail": ("Lead Email", lambda t: t.leader.email),
    "memberRoles": (
        "Member Roles",
        lambda t: MEMBER_SEPARATOR.join(f"{m.name}: {m.role}" for m in _members(t)),
    ),
    "projectTheme": ("Project Theme", _project_field("theme")),
}

DEFAULT_COLUMNS = (
    "teamCode",
    "teamStatus",
    "mentorName",
    "mentorEmail",
    "memberCount",
    "members",
    "memberEmails",
    "proposalCount",
    "latestProposalStatus",
    "projectTitle",
    "projectDescription",
    "createdAt",
    "updatedAt",
)


def export_queryset():
    """Teams with everything a row needs, newest first."""
    return (
        Team.objects.select_related("leader", "mentor", "project")
        .prefetch_related(
            "members",
            Prefetch("proposals", queryset=Proposal.objects.order_by("created")),
        )
        .order_by("-created")
    )


def validate_columns(columns: Iterable[str] | None) -> list[str]:
    """
    Check a column selection against the catalogue.

    Raises:
        ValidationError: empty selection or unknown column names
    """
    columns = list(columns or [])
    if not columns:
        raise ValidationError("Select at least one column.")
    unknown = [c for c in columns if c not in COLUMNS]
    if unknown:
        raise ValidationError(
            f"Invalid columns: {', '.join(unknown)}",
            details={"columns": unknown},
        )
    return columns


def team_row(team: Team, columns: Iterable[str]) -> list[Any]:
    return [COLUMNS[column][1](team) for column in columns]


def export_teams_csv(columns: Iterable[str] = DEFAULT_COLUMNS, teams=None) -> str:
    """Render teams as CSV text with a header row of column names."""
    columns = validate_columns(columns)
    teams = export_queryset() if teams is None else teams

    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(columns)
    count = 0
    for team in teams:
        writer.writerow(team_row(team, columns))
        count += 1

    logger.info("Exported %d teams with %d columns", count, len(columns))
    return buffer.getvalue()


def export_filename() -> str:
    return f"teams_export_{timezone.localdate().isoformat()}.csv"
