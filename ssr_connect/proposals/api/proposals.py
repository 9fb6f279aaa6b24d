"""
Proposals API controllers.
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
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.core.schemas import UserMinimalSchema
from ssr_connect.proposals import services
from ssr_connect.proposals.models import Proposal
from ssr_connect.proposals.models import ProposalState
from ssr_connect.proposals.schemas import ProposalReviewSchema
from ssr_connect.proposals.schemas import ProposalSchema
from ssr_connect.proposals.schemas import ProposalSubmitSchema
from ssr_connect.proposals.schemas import ProposalUpdateSchema

logger = logging.getLogger(__name__)


def proposal_to_schema(proposal: Proposal) -> ProposalSchema:
    """Convert Proposal to schema."""
    return ProposalSchema(
        id=proposal.id,
        team_id=proposal.team_id,
        team_number=proposal.team.team_number,
        project_title=proposal.team.project_title,
        author=UserMinimalSchema.from_user(proposal.author) if proposal.author else None,
        title=proposal.title,
        description=proposal.description,
        content=proposal.content,
        metadata=proposal.metadata or {},
        attachments=proposal.attachments or [],
        link=proposal.link,
        state=proposal.state,
        remarks=proposal.remarks,
        reviewed_at=proposal.reviewed_at,
        reviewed_by=UserMinimalSchema.from_user(proposal.reviewed_by) if proposal.reviewed_by else None,
        created=proposal.created,
        modified=proposal.modified,
    )


@api_controller("/proposals", tags=["Proposals"], permissions=[IsAuthenticated])
class ProposalController(BaseAPI):
    """Proposal submission and editing by team members."""

    @http_post(
        "/",
        response={201: ProposalSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="proposals_submit",
    )
    def submit(self, request: HttpRequest, data: ProposalSubmitSchema):
        """Submit the team's proposal, or resubmit a rejected one."""
        proposal = services.submit_proposal(self.request_context(request), data)
        return 201, proposal_to_schema(services.proposal_queryset().get(pk=proposal.pk))

    @http_get(
        "/my",
        response={200: ProposalSchema, 404: ErrorSchema},
        url_name="proposals_my",
    )
    def my_proposal(self, request: HttpRequest):
        """Get the proposal of the current user's team."""
        return 200, proposal_to_schema(services.get_my_proposal(self.request_context(request)))

    @http_get(
        "/{proposal_id}",
        response={200: ProposalSchema, 403: ErrorSchema, 404: ErrorSchema},
        url_name="proposals_detail",
    )
    def get_proposal(self, request: HttpRequest, proposal_id: UUID):
        """Get proposal details."""
        return 200, proposal_to_schema(services.get_proposal(self.request_context(request), proposal_id))

    @http_put(
        "/{proposal_id}",
        response={200: ProposalSchema, 400: ErrorSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="proposals_update",
    )
    def update_proposal(self, request: HttpRequest, proposal_id: UUID, data: ProposalUpdateSchema):
        """Edit a draft, or edit and resubmit a rejected proposal."""
        proposal = services.update_proposal(self.request_context(request), proposal_id, data)
        return 200, proposal_to_schema(proposal)


@api_controller("/mentor/proposals", tags=["Mentor"], permissions=[IsMentor])
class MentorProposalController(BaseAPI):
    """Review of proposals from assigned teams."""

    @http_get(
        "/",
        response={200: list[ProposalSchema], 400: ErrorSchema},
        url_name="mentor_proposals_list",
    )
    def list_proposals(self, request: HttpRequest, state: str | None = None):
        """List proposals of assigned teams, optionally filtered by state."""
        if state and state not in ProposalState.values:
            return ValidationError(f"Unknown state {state}.").to_response()
        proposals = services.list_mentor_proposals(self.request_context(request), state)
        return 200, [proposal_to_schema(p) for p in proposals]

    @http_post(
        "/{proposal_id}/review",
        response={200: ProposalSchema, 403: ErrorSchema, 404: ErrorSchema, 409: ErrorSchema},
        url_name="mentor_proposals_review",
    )
    def review(self, request: HttpRequest, proposal_id: UUID, data: ProposalReviewSchema):
        """Approve or reject a draft proposal."""
        proposal = services.review_proposal(self.request_context(request), proposal_id, data.decision, data.remarks)
        return 200, proposal_to_schema(proposal)
