"""
Proposal schemas for API requests and responses.
"""

from ssr_connect.proposals.schemas.proposals import ProposalDecision
from ssr_connect.proposals.schemas.proposals import ProposalMetadataSchema
from ssr_connect.proposals.schemas.proposals import ProposalReviewSchema
from ssr_connect.proposals.schemas.proposals import ProposalSchema
from ssr_connect.proposals.schemas.proposals import ProposalSubmitSchema
from ssr_connect.proposals.schemas.proposals import ProposalUpdateSchema

__all__ = [
    "ProposalDecision",
    "ProposalMetadataSchema",
    "ProposalReviewSchema",
    "ProposalSchema",
    "ProposalSubmitSchema",
    "ProposalUpdateSchema",
]
