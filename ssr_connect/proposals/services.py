"""
Proposal lifecycle: submission, edits and mentor review.

State machine::

    DRAFT --approve--> APPROVED (final)
    DRAFT --reject---> REJECTED --resubmit--> DRAFT
"""

import logging
from uuid import UUID

from django.db import IntegrityError
from django.db import transaction

from ssr_connect.core.context import RequestContext
from ssr_connect.core.exceptions import AuthorizationError
from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.policies import Capability
from ssr_connect.core.policies import can_view_team
from ssr_connect.core.policies import require
from ssr_connect.core.policies import require_assigned_mentor
from ssr_connect.proposals.models import Proposal
from ssr_connect.proposals.models import ProposalState
from ssr_connect.proposals.schemas import ProposalDecision
from ssr_connect.proposals.schemas import ProposalSubmitSchema
from ssr_connect.proposals.schemas import ProposalUpdateSchema
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.services import get_user_team

logger = logging.getLogger(__name__)


def proposal_queryset():
    return Proposal.objects.select_related("team", "author", "reviewed_by")


def _metadata_dict(metadata) -> dict:
    if metadata is None:
        return {}
    return metadata.model_dump(exclude_none=True)


def _apply(proposal: Proposal, data: ProposalSubmitSchema | ProposalUpdateSchema) -> None:
    for field in ("title", "description", "content", "attachments"):
        value = getattr(data, field)
        if value is not None:
            setattr(proposal, field, value)
    if data.link is not None:
        proposal.link = data.link
    if data.metadata is not None:
        proposal.metadata = _metadata_dict(data.metadata)


def submit_proposal(ctx: RequestContext, data: ProposalSubmitSchema) -> Proposal:
    """
    Submit the proposal of the caller's team.

    A rejected proposal is overwritten and goes back to DRAFT; there is
    no version history.

    Raises:
        NotFoundError: caller is not on a team
        ValidationError: the team is not approved yet
        ConflictError: the team already has a DRAFT or APPROVED proposal
    """
    require(ctx, Capability.SUBMIT_PROPOSAL)
    team = get_user_team(ctx.user)
    if team is None:
        raise NotFoundError("You are not part of a team.")
    if team.status != TeamStatus.APPROVED:
        raise ValidationError("Your team must be approved before submitting a proposal.")

    try:
        with transaction.atomic():
            proposal = Proposal.objects.select_for_update().filter(team=team).first()
            if proposal is not None and proposal.is_active:
                raise ConflictError("Your team already has an active proposal.")

            if proposal is None:
                proposal = Proposal(team=team, author=ctx.user, link="")
                _apply(proposal, data)
                proposal.save()
                logger.info("Proposal %s submitted for team %s", proposal.pk, team.team_number)
            else:
                proposal.author = ctx.user
                proposal.link = ""
                proposal.attachments = []
                proposal.metadata = {}
                _apply(proposal, data)
                proposal.resubmit()
                proposal.save()
                logger.info("Proposal %s resubmitted for team %s", proposal.pk, team.team_number)
    except IntegrityError as e:
        raise ConflictError("Your team already has an active proposal.") from e

    return proposal


def get_proposal(ctx: RequestContext, proposal_id: UUID) -> Proposal:
    proposal = proposal_queryset().filter(pk=proposal_id).first()
    if proposal is None:
        raise NotFoundError("Proposal not found.")
    if not can_view_team(ctx, proposal.team):
        raise AuthorizationError("You cannot view this proposal.")
    return proposal


def get_my_proposal(ctx: RequestContext) -> Proposal:
    team = get_user_team(ctx.user)
    proposal = proposal_queryset().filter(team=team).first() if team is not None else None
    if proposal is None:
        raise NotFoundError("Your team has no proposal.")
    return proposal


def update_proposal(ctx: RequestContext, proposal_id: UUID, data: ProposalUpdateSchema) -> Proposal:
    """
    Edit a proposal as a member of its team.

    DRAFT proposals are edited in place; REJECTED ones are resubmitted.

    Raises:
        NotFoundError: no such proposal
        AuthorizationError: caller is not on the proposal's team
        ConflictError: the proposal is APPROVED
    """
    require(ctx, Capability.SUBMIT_PROPOSAL)
    with transaction.atomic():
        proposal = Proposal.objects.select_for_update().select_related("team").filter(pk=proposal_id).first()
        if proposal is None:
            raise NotFoundError("Proposal not found.")
        if not proposal.team.has_member(ctx.user):
            raise AuthorizationError("Only team members can edit this proposal.")
        if proposal.state == ProposalState.APPROVED:
            raise ConflictError("An approved proposal cannot be edited.")

        _apply(proposal, data)
        if proposal.state == ProposalState.REJECTED:
            proposal.resubmit()
            logger.info("Proposal %s resubmitted by %s", proposal.pk, ctx.user_id)
        proposal.save()

    return proposal_queryset().get(pk=proposal.pk)


def review_proposal(
    ctx: RequestContext,
    proposal_id: UUID,
    decision: ProposalDecision,
    remarks: str | None = None,
) -> Proposal:
    """
    Approve or reject a draft proposal as the team's assigned mentor.

    Raises:
        NotFoundError: no such proposal
        AuthorizationError: caller is not the assigned mentor
        ConflictError: the proposal is not a DRAFT
    """
    require(ctx, Capability.REVIEW_PROPOSAL)
    remarks = (remarks or "").strip()

    with transaction.atomic():
        proposal = Proposal.objects.select_for_update().select_related("team").filter(pk=proposal_id).first()
        if proposal is None:
            raise NotFoundError("Proposal not found.")
        require_assigned_mentor(ctx, proposal.team)
        if proposal.state != ProposalState.DRAFT:
            raise ConflictError(f"This proposal was already {proposal.state.lower()}.")

        if decision == ProposalDecision.APPROVE:
            proposal.approve(ctx.user, remarks)
        else:
            proposal.reject(ctx.user, remarks)
        proposal.save()

    logger.info("Proposal %s %s by mentor %s", proposal.pk, proposal.state, ctx.user_id)
    return proposal_queryset().get(pk=proposal.pk)


def list_mentor_proposals(ctx: RequestContext, state: str | None = None):
    """Proposals of the teams assigned to the calling mentor."""
    require(ctx, Capability.REVIEW_PROPOSAL)
    proposals = proposal_queryset().filter(team__mentor_id=ctx.user_id)
    if state:
        proposals = proposals.filter(state=state)
    return proposals
