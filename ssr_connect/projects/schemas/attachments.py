"""
Upload schemas.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema


class AttachmentSchema(Schema):
    """Stored upload; ``url`` is what proposals and projects reference."""

    id: UUID
    url: str
    original_filename: str
    content_type: str
    size: int
    created: datetime
