"""
Project record schemas.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema
from pydantic import field_validator

from ssr_connect.projects.models import LocationType
from ssr_connect.projects.models import ProjectStatus


def _required(value: str, label: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(f"{label} is required.")
    return value


class ProjectLocationSchema(Schema):
    type: LocationType = LocationType.OFFLINE
    address: str = ""
    city: str = ""
    state: str = ""


class ProjectCreateSchema(Schema):
    """Schema for creating the project record of the caller's team."""

    title: str
    description: str
    theme: str = ""
    status: ProjectStatus = ProjectStatus.PLANNING
    target_beneficiaries: str = ""
    social_impact: str = ""
    implementation_approach: str = ""
    current_milestone: str = ""
    next_milestone: str = ""
    challenges: str = ""
    achievements: str = ""
    location: ProjectLocationSchema | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str) -> str:
        return _required(v, "Title")

    @field_validator("description")
    @classmethod
    def description_required(cls, v: str) -> str:
        return _required(v, "Description")


class ProjectUpdateSchema(Schema):
    """Partial update; only provided fields change."""

    title: str | None = None
    description: str | None = None
    theme: str | None = None
    status: ProjectStatus | None = None
    target_beneficiaries: str | None = None
    social_impact: str | None = None
    implementation_approach: str | None = None
    current_milestone: str | None = None
    next_milestone: str | None = None
    challenges: str | None = None
    achievements: str | None = None
    location: ProjectLocationSchema | None = None

    @field_validator("title")
    @classmethod
    def title_required(cls, v: str | None) -> str | None:
        return None if v is None else _required(v, "Title")

    @field_validator("description")
    @classmethod
    def description_required(cls, v: str | None) -> str | None:
        return None if v is None else _required(v, "Description")


class ProjectSchema(Schema):
    """Project response schema."""

    id: UUID
    team_id: UUID
    team_number: str
    title: str
    description: str
    theme: str
    status: str
    target_beneficiaries: str
    social_impact: str
    implementation_approach: str
    current_milestone: str
    next_milestone: str
    challenges: str
    achievements: str
    location: ProjectLocationSchema
    created: datetime
    modified: datetime
