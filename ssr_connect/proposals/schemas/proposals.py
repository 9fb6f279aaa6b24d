"""
Proposal schemas for API requests and responses.
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from django.core.exceptions import ValidationError as DjangoValidationError
from django.core.validators import URLValidator
from ninja import Schema
from pydantic import field_validator

from ssr_connect.core.schemas import UserMinimalSchema
from ssr_connect.proposals.metadata import strip_metadata

TITLE_MIN_LENGTH = 5
TEXT_MIN_LENGTH = 100

_url_validator = URLValidator(schemes=["http", "https"])


def _check_url(value: str) -> str:
    try:
        _url_validator(value)
    except DjangoValidationError as e:
        raise ValueError("Enter a valid URL.") from e
    return value


def _check_attachment(value: str) -> str:
    value = value.strip()
    # files served by this portal are referenced by path
    if value.startswith("/") and not value.startswith("//") and " " not in value:
        return value
    return _check_url(value)


def _check_title(value: str) -> str:
    value = value.strip()
    if len(value) < TITLE_MIN_LENGTH:
        raise ValueError(f"Title must be at least {TITLE_MIN_LENGTH} characters.")
    return value


def _check_text(value: str, label: str) -> str:
    value = value.strip()
    if len(strip_metadata(value).strip()) < TEXT_MIN_LENGTH:
        raise ValueError(f"{label} must be at least {TEXT_MIN_LENGTH} characters.")
    return value


class ProposalMetadataSchema(Schema):
    """Category, location and timing details of a proposal."""

    category: str | None = None
    location_mode: str | None = None
    state: str | None = None
    district: str | None = None
    city: str | None = None
    place_visited: str | None = None
    travel_time: str | None = None
    execution_time: str | None = None
    completion_date: str | None = None


class ProposalSubmitSchema(Schema):
    """Schema for submitting a proposal for the caller's team."""

    title: str
    description: str
    content: str
    metadata: ProposalMetadataSchema | None = None
    attachments: list[str] = []
    link: str | None = None

    @field_validator("title")
    @classmethod
    def title_length(cls, v: str) -> str:
        return _check_title(v)

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str) -> str:
        return _check_text(v, "Description")

    @field_validator("content")
    @classmethod
    def content_length(cls, v: str) -> str:
        return _check_text(v, "Content")

    @field_validator("attachments")
    @classmethod
    def attachment_urls(cls, v: list[str]) -> list[str]:
        return [_check_attachment(url) for url in v]

    @field_validator("link")
    @classmethod
    def link_url(cls, v: str | None) -> str | None:
        if v is None or not v.strip():
            return None
        return _check_url(v.strip())


class ProposalUpdateSchema(Schema):
    """Partial update; only provided fields change."""

    title: str | None = None
    description: str | None = None
    content: str | None = None
    metadata: ProposalMetadataSchema | None = None
    attachments: list[str] | None = None
    link: str | None = None

    @field_validator("title")
    @classmethod
    def title_length(cls, v: str | None) -> str | None:
        return None if v is None else _check_title(v)

    @field_validator("description")
    @classmethod
    def description_length(cls, v: str | None) -> str | None:
        return None if v is None else _check_text(v, "Description")

    @field_validator("content")
    @classmethod
    def content_length(cls, v: str | None) -> str | None:
        return None if v is None else _check_text(v, "Content")

    @field_validator("attachments")
    @classmethod
    def attachment_urls(cls, v: list[str] | None) -> list[str] | None:
        return None if v is None else [_check_attachment(url) for url in v]

    @field_validator("link")
    @classmethod
    def link_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        if not v.strip():
            return ""
        return _check_url(v.strip())


class ProposalDecision(str, Enum):
    APPROVE = "APPROVE"
    REJECT = "REJECT"


class ProposalReviewSchema(Schema):
    """Mentor review of a draft proposal."""

    decision: ProposalDecision
    remarks: str | None = None


class ProposalSchema(Schema):
    """Proposal response schema; metadata is returned as a structured object."""

    id: UUID
    team_id: UUID
    team_number: str
    project_title: str
    author: UserMinimalSchema | None
    title: str
    description: str
    content: str
    metadata: dict
    attachments: list[str]
    link: str
    state: str
    remarks: str
    reviewed_at: datetime | None
    reviewed_by: UserMinimalSchema | None
    created: datetime
    modified: datetime
