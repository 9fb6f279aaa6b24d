"""
Proposal API controllers.
"""

from ssr_connect.proposals.api.proposals import MentorProposalController
from ssr_connect.proposals.api.proposals import ProposalController

__all__ = ["ProposalController", "MentorProposalController"]
