"""
Capability checks shared by every API handler.

Each role maps to a fixed set of capabilities. Permission classes and
services both consult ``can`` / ``require`` so that role branching lives
in one table.
"""

import logging
from enum import Enum

from ssr_connect.core.context import RequestContext
from ssr_connect.core.exceptions import AuthorizationError
from ssr_connect.core.roles import Role

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Actions gated by role."""

    CREATE_TEAM = "create_team"
    VIEW_OWN_TEAM = "view_own_team"
    SUBMIT_PROPOSAL = "submit_proposal"
    MANAGE_PROJECT = "manage_project"
    UPLOAD_FILE = "upload_file"
    DECIDE_TEAM = "decide_team"
    REVIEW_PROPOSAL = "review_proposal"
    VIEW_ASSIGNED_TEAMS = "view_assigned_teams"
    VIEW_ALL_TEAMS = "view_all_teams"
    EXPORT_DATA = "export_data"
    MANAGE_USERS = "manage_users"


ROLE_CAPABILITIES: dict[Role, frozenset[Capability]] = {
    Role.STUDENT: frozenset(
        {
            Capability.CREATE_TEAM,
            Capability.VIEW_OWN_TEAM,
            Capability.SUBMIT_PROPOSAL,
            Capability.MANAGE_PROJECT,
            Capability.UPLOAD_FILE,
        }
    ),
    Role.MENTOR: frozenset(
        {
            Capability.DECIDE_TEAM,
            Capability.REVIEW_PROPOSAL,
            Capability.VIEW_ASSIGNED_TEAMS,
            Capability.UPLOAD_FILE,
        }
    ),
    Role.ADMIN: frozenset(
        {
            Capability.VIEW_ALL_TEAMS,
            Capability.EXPORT_DATA,
            Capability.MANAGE_USERS,
        }
    ),
}


def can(ctx: RequestContext | None, capability: Capability) -> bool:
    """Check whether the caller's role grants a capability."""
    if ctx is None:
        return False
    return capability in ROLE_CAPABILITIES.get(ctx.role, frozenset())


def require(ctx: RequestContext, capability: Capability) -> None:
    """Raise AuthorizationError unless the caller's role grants the capability."""
    if not can(ctx, capability):
        logger.info(
            "Denied %s to user %s with role %s", capability.value, ctx.user_id, ctx.role
        )
        raise AuthorizationError()


def require_assigned_mentor(ctx: RequestContext, team) -> None:
    """Ensure the caller is the mentor assigned to the team."""
    require(ctx, Capability.DECIDE_TEAM)
    if team.mentor_id != ctx.user_id:
        logger.info("User %s is not the assigned mentor of team %s", ctx.user_id, team.pk)
        raise AuthorizationError("You are not the assigned mentor of this team.")


def can_view_team(ctx: RequestContext, team) -> bool:
    """Team members, the assigned mentor and admins may read a team."""
    if can(ctx, Capability.VIEW_ALL_TEAMS):
        return True
    if ctx.is_mentor:
        return team.mentor_id == ctx.user_id
    return team.has_member(ctx.user)
