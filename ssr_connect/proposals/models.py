"""
Models for team proposals.

Contains:
- Proposal: the single project plan of a team, reviewed by its mentor
"""

import logging

from django.conf import settings
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField
from django_fsm import transition

from ssr_connect.core.models import BaseModel
from ssr_connect.proposals.metadata import embed_metadata
from ssr_connect.proposals.metadata import extract_metadata

logger = logging.getLogger(__name__)

DEFAULT_APPROVE_REMARKS = "Proposal approved"
DEFAULT_REJECT_REMARKS = "Proposal needs revision"


class ProposalState(models.TextChoices):
    """Review states (FSM states)."""

    DRAFT = "DRAFT", _("Draft")  # Waiting for the mentor
    APPROVED = "APPROVED", _("Approved")  # Final
    REJECTED = "REJECTED", _("Rejected")  # May be edited and resubmitted


class Proposal(BaseModel):
    """
    Project plan submitted by a team.

    A team holds at most one proposal; resubmitting after a rejection
    overwrites it in place.

    Uses django-fsm for state management with protected transitions:
    - DRAFT: submitted, waiting for the assigned mentor
    - APPROVED: accepted, no further changes
    - REJECTED: sent back with remarks; back to DRAFT when resubmitted
    """

    team = models.ForeignKey(
        "teams.Team",
        on_delete=models.CASCADE,
        related_name="proposals",
        verbose_name=_("team"),
    )
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        related_name="authored_proposals",
        verbose_name=_("author"),
    )

    title = models.CharField(_("title"), max_length=200)
    description = models.TextField(_("description"))
    content = models.TextField(_("content"))
    metadata = models.JSONField(
        _("metadata"),
        default=dict,
        blank=True,
        help_text=_("Category, location and timing details"),
    )
    attachments = models.JSONField(
        _("attachments"),
        default=list,
        blank=True,
        help_text=_("URLs of uploaded files"),
    )
    link = models.URLField(_("link"), max_length=500, blank=True)

    # FSM state field with protected transitions
    state = FSMField(
        _("state"),
        default=ProposalState.DRAFT,
        choices=ProposalState.choices,
        protected=True,
    )
    remarks = models.TextField(_("remarks"), blank=True)
    reviewed_at = models.DateTimeField(_("reviewed at"), null=True, blank=True)
    reviewed_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="reviewed_proposals",
        verbose_name=_("reviewed by"),
    )

    class Meta:
        verbose_name = _("proposal")
        verbose_name_plural = _("proposals")
        ordering = ["-created"]
        constraints = [
            models.UniqueConstraint(fields=["team"], name="one_proposal_per_team"),
        ]

    def __str__(self) -> str:
        return f"{self.title} ({self.get_state_display()})"

    def save(self, *args, **kwargs):
        """Move a legacy metadata marker out of the content."""
        content, embedded = extract_metadata(self.content)
        if content != self.content:
            self.content = content
            if embedded:
                # explicit metadata wins over the embedded copy
                self.metadata = {**embedded, **(self.metadata or {})}
        super().save(*args, **kwargs)

    @property
    def legacy_content(self) -> str:
        """Content with metadata embedded, for consumers of the marker format."""
        return embed_metadata(self.content, self.metadata or None)

    # FSM Transitions

    def _record_review(self, reviewer, remarks: str):
        self.remarks = remarks
        self.reviewed_by = reviewer
        self.reviewed_at = timezone.now()

    @transition(field=state, source=ProposalState.DRAFT, target=ProposalState.APPROVED)
    def approve(self, reviewer, remarks: str = ""):
        """Transition from DRAFT to APPROVED. Terminal."""
        self._record_review(reviewer, remarks or DEFAULT_APPROVE_REMARKS)

    @transition(field=state, source=ProposalState.DRAFT, target=ProposalState.REJECTED)
    def reject(self, reviewer, remarks: str = ""):
        """Transition from DRAFT to REJECTED."""
        self._record_review(reviewer, remarks or DEFAULT_REJECT_REMARKS)

    @transition(field=state, source=ProposalState.REJECTED, target=ProposalState.DRAFT)
    def resubmit(self):
        """Transition from REJECTED back to DRAFT after the team edits it."""

    @property
    def is_active(self) -> bool:
        """DRAFT and APPROVED proposals block a new submission."""
        return self.state != ProposalState.REJECTED
