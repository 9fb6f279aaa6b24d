"""
Team lifecycle: creation, mentor decision and resubmission.

Every function takes the caller's RequestContext and raises
``ssr_connect.core.exceptions`` errors on failure.
"""

import logging
from uuid import UUID

from django.conf import settings
from django.db import IntegrityError
from django.db import transaction
from django.db.models import Q

from ssr_connect.core.context import RequestContext
from ssr_connect.core.exceptions import AuthorizationError
from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.policies import Capability
from ssr_connect.core.policies import can_view_team
from ssr_connect.core.policies import require
from ssr_connect.core.policies import require_assigned_mentor
from ssr_connect.core.roles import Role
from ssr_connect.core.roles import is_student_email
from ssr_connect.teams.models import Batch
from ssr_connect.teams.models import MemberRole
from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamMember
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.numbering import BATCH_RANGES
from ssr_connect.teams.numbering import is_valid_team_number
from ssr_connect.teams.numbering import next_team_number
from ssr_connect.teams.schemas import TeamCreateSchema
from ssr_connect.teams.schemas import TeamDecision
from ssr_connect.teams.schemas import TeamMemberInputSchema
from ssr_connect.teams.schemas import TeamUpdateSchema
from ssr_connect.users.models import User

logger = logging.getLogger(__name__)


def team_queryset():
    return Team.objects.select_related("leader", "mentor").prefetch_related("members__user")


def get_user_team(user) -> Team | None:
    """The team a user leads or belongs to, if any."""
    return (
        team_queryset()
        .filter(Q(leader_id=user.pk) | Q(members__user_id=user.pk))
        .distinct()
        .first()
    )


def get_team(ctx: RequestContext, team_id: UUID) -> Team:
    """A team visible to the caller: members, the assigned mentor, admins."""
    team = team_queryset().filter(pk=team_id).first()
    if team is None:
        raise NotFoundError("Team not found.")
    if not can_view_team(ctx, team):
        raise AuthorizationError("You cannot view this team.")
    return team


def taken_team_numbers(batch: str) -> list[str]:
    return list(Team.objects.filter(batch=batch).values_list("team_number", flat=True))


def _get_mentor(mentor_id: UUID) -> User:
    mentor = User.objects.filter(pk=mentor_id, role=Role.MENTOR).first()
    if mentor is None:
        raise NotFoundError("Mentor not found.")
    return mentor


def _validate_members(leader, members: list[TeamMemberInputSchema], team: Team | None = None) -> None:
    """
    Member count, email domain and identity checks.

    Leader and members may not share an email, a roll number or a name,
    and no member may already be listed on another team.
    """
    minimum, maximum = settings.TEAM_MIN_MEMBERS, settings.TEAM_MAX_MEMBERS
    if not minimum <= len(members) <= maximum:
        raise ValidationError(
            f"A team needs between {minimum} and {maximum} members besides the leader.",
            details={"member_count": len(members)},
        )

    outsiders = [m.email for m in members if not is_student_email(m.email)]
    if outsiders:
        raise ValidationError(
            f"Member emails must belong to {settings.STUDENT_EMAIL_DOMAIN}.",
            details={"emails": outsiders},
        )

    identities = {
        "email": [leader.email.lower()] + [m.email for m in members],
        "roll_number": [leader.roll_number.lower()] + [m.roll_number.lower() for m in members],
        "name": [leader.get_full_name().lower()] + [m.name.lower() for m in members],
    }
    for field, values in identities.items():
        values = [v for v in values if v]
        duplicates = sorted({v for v in values if values.count(v) > 1})
        if duplicates:
            raise ValidationError(
                f"Duplicate {field.replace('_', ' ')} in team members.",
                details={field: duplicates},
            )

    elsewhere = TeamMember.objects.filter(email__in=identities["email"])
    if team is not None:
        elsewhere = elsewhere.exclude(team=team)
    taken = sorted(elsewhere.values_list("email", flat=True))
    if taken:
        raise ConflictError("Some members already belong to another team.", details={"emails": taken})


def _add_members(team: Team, members: list[TeamMemberInputSchema]) -> None:
    for member in members:
        user = User.objects.filter(email__iexact=member.email).first()
        if user is None:
            user = User.objects.create_placeholder(member.email, member.name, member.roll_number)
        TeamMember.objects.create(
            team=team,
            user=user,
            name=member.name,
            email=member.email,
            roll_number=member.roll_number,
            role=MemberRole.MEMBER,
        )


def _allocate_team_number(batch: str, requested: str | None) -> str:
    taken = taken_team_numbers(batch)
    if requested is not None:
        if not is_valid_team_number(batch, requested):
            raise ValidationError(
                f"Team number {requested} is not in the range of batch {batch}.",
                details={"team_number": requested},
            )
        if requested in taken:
            raise ConflictError(f"Team number {requested} is already taken.")
        return requested
    number = next_team_number(batch, taken)
    if number is None:
        raise ConflictError(f"No team numbers left for batch {batch}.")
    return number


def create_team(ctx: RequestContext, data: TeamCreateSchema) -> Team:
    """
    Register a team led by the caller, in PENDING state.

    Raises:
        AuthorizationError: caller is not a student
        ConflictError: caller already on a team, member on another team,
            team number taken or batch exhausted
        ValidationError: member count or identity rules, team number out of range
        NotFoundError: mentor does not exist
    """
    require(ctx, Capability.CREATE_TEAM)
    leader = ctx.user

    if get_user_team(leader) is not None:
        raise ConflictError("You are already part of a team.")
    batch = Batch(data.batch).value
    if batch not in BATCH_RANGES:
        raise ValidationError(f"Unknown batch {batch}.")

    _validate_members(leader, data.members)
    mentor = _get_mentor(data.mentor_id)

    try:
        with transaction.atomic():
            team = Team.objects.create(
                project_title=data.project_title,
                pillar=data.pillar,
                batch=batch,
                team_number=_allocate_team_number(batch, data.team_number),
                leader=leader,
                mentor=mentor,
            )
            TeamMember.objects.create(
                team=team,
                user=leader,
                name=leader.get_full_name(),
                email=leader.email,
                roll_number=leader.roll_number,
                role=MemberRole.LEADER,
            )
            _add_members(team, data.members)
    except IntegrityError as e:
        raise ConflictError("The team number or a member email was taken concurrently.") from e

    logger.info("Team %s (%s) created by %s", team.team_number, team.pk, leader.pk)
    return team


def decide_team(ctx: RequestContext, team_id: UUID, decision: TeamDecision, reason: str | None = None) -> Team:
    """
    Approve or reject a pending team as its assigned mentor.

    Raises:
        NotFoundError: no such team, or the team is not PENDING
        AuthorizationError: caller is not the assigned mentor
        ValidationError: rejection without a reason
    """
    require(ctx, Capability.DECIDE_TEAM)
    reason = (reason or "").strip()

    with transaction.atomic():
        team = Team.objects.select_for_update().filter(pk=team_id).first()
        if team is None:
            raise NotFoundError("Team not found.")
        require_assigned_mentor(ctx, team)
        if team.status != TeamStatus.PENDING:
            raise NotFoundError("No pending team with this id.")

        if decision == TeamDecision.APPROVE:
            team.approve()
        else:
            if not reason:
                raise ValidationError("A reason is required to reject a team.")
            team.reject(reason)
        team.save()

    logger.info("Team %s %s by mentor %s", team.team_number, team.status, ctx.user_id)
    return team


def update_team(ctx: RequestContext, data: TeamUpdateSchema) -> Team:
    """
    Edit the caller's rejected team and send it back to its mentor.

    Raises:
        NotFoundError: caller has no team, or the new mentor does not exist
        AuthorizationError: caller is not the team leader
        ConflictError: the team is not REJECTED, or a member is on another team
        ValidationError: member rules
    """
    require(ctx, Capability.CREATE_TEAM)
    team = get_user_team(ctx.user)
    if team is None:
        raise NotFoundError("You are not part of a team.")
    if not team.is_leader(ctx.user):
        raise AuthorizationError("Only the team leader can edit the team.")
    if team.status != TeamStatus.REJECTED:
        raise ConflictError("Only a rejected team can be edited.")

    if data.members is not None:
        _validate_members(ctx.user, data.members, team=team)
    mentor = _get_mentor(data.mentor_id) if data.mentor_id is not None else None

    try:
        with transaction.atomic():
            team = Team.objects.select_for_update().get(pk=team.pk)
            if team.status != TeamStatus.REJECTED:
                raise ConflictError("Only a rejected team can be edited.")
            if data.project_title is not None:
                team.project_title = data.project_title
            if data.pillar is not None:
                team.pillar = data.pillar
            if mentor is not None:
                team.mentor = mentor
            if data.members is not None:
                team.members.filter(role=MemberRole.MEMBER).delete()
                _add_members(team, data.members)
            team.resubmit()
            team.save()
    except IntegrityError as e:
        raise ConflictError("A member email was taken concurrently.") from e

    logger.info("Team %s resubmitted by %s", team.team_number, ctx.user_id)
    return team_queryset().get(pk=team.pk)


def list_mentor_teams(ctx: RequestContext, status: str | None = None):
    """Teams assigned to the calling mentor."""
    require(ctx, Capability.VIEW_ASSIGNED_TEAMS)
    teams = team_queryset().filter(mentor_id=ctx.user_id)
    if status:
        teams = teams.filter(status=status)
    return teams
