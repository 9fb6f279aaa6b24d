"""
Team schemas for API requests and responses.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from ninja import Schema
from pydantic import EmailStr
from pydantic import field_validator

from ssr_connect.core.schemas import UserMinimalSchema
from ssr_connect.teams.models import Batch
from ssr_connect.teams.models import Pillar


class TeamMemberInputSchema(Schema):
    """Member entered by the leader."""

    name: str
    email: EmailStr
    roll_number: str

    @field_validator("name", "roll_number")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("This field is required.")
        return " ".join(v.split())

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.strip().lower()


class TeamCreateSchema(Schema):
    """Schema for creating a team. The caller becomes its leader."""

    project_title: str
    pillar: Pillar
    batch: Batch
    mentor_id: UUID
    members: list[TeamMemberInputSchema]
    team_number: str | None = None

    @field_validator("project_title")
    @classmethod
    def title_not_empty(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("The project title is required.")
        return v.strip()

    @field_validator("team_number")
    @classmethod
    def blank_number_is_none(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return v.strip()


class TeamUpdateSchema(Schema):
    """Edits to a rejected team; any provided field replaces the current value."""

    project_title: str | None = None
    pillar: Pillar | None = None
    mentor_id: UUID | None = None
    members: list[TeamMemberInputSchema] | None = None

    @field_validator("project_title")
    @classmethod
    def title_not_empty(cls, v: str | None) -> str | None:
        if v is not None:
            if not v.strip():
                raise ValueError("The project title cannot be empty.")
            return v.strip()
        return v


class TeamDecision(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"


class TeamDecisionSchema(Schema):
    """Mentor decision on a pending team."""

    decision: TeamDecision
    reason: str | None = None


class TeamMemberSchema(Schema):
    id: UUID
    name: str
    email: str
    roll_number: str
    role: str
    user_id: UUID | None
    is_registered: bool


class TeamListSchema(Schema):
    """Schema for team list view."""

    id: UUID
    team_number: str
    project_title: str
    pillar: str
    batch: str
    status: str
    status_message: str
    leader: UserMinimalSchema
    mentor: UserMinimalSchema
    member_count: int
    created: datetime
    modified: datetime


class TeamDetailSchema(TeamListSchema):
    """Detailed team schema with members."""

    members: list[TeamMemberSchema]


class BatchSchema(Schema):
    value: str
    label: str
    available: int
    total: int


class TeamNumbersSchema(Schema):
    batch: str
    available: list[str]
    next: str | None

