"""
Team schemas for API requests and responses.
"""

from ssr_connect.teams.schemas.teams import BatchSchema
from ssr_connect.teams.schemas.teams import TeamCreateSchema
from ssr_connect.teams.schemas.teams import TeamDecision
from ssr_connect.teams.schemas.teams import TeamDecisionSchema
from ssr_connect.teams.schemas.teams import TeamDetailSchema
from ssr_connect.teams.schemas.teams import TeamListSchema
from ssr_connect.teams.schemas.teams import TeamMemberInputSchema
from ssr_connect.teams.schemas.teams import TeamMemberSchema
from ssr_connect.teams.schemas.teams import TeamNumbersSchema
from ssr_connect.teams.schemas.teams import TeamUpdateSchema

__all__ = [
    "BatchSchema",
    "TeamCreateSchema",
    "TeamDecision",
    "TeamDecisionSchema",
    "TeamDetailSchema",
    "TeamListSchema",
    "TeamMemberInputSchema",
    "TeamMemberSchema",
    "TeamNumbersSchema",
    "TeamUpdateSchema",
]
