"""
Models for team formation.

Contains:
- Team: a leader, 3 to 5 members and an assigned mentor, working on one pillar
- TeamMember: denormalized member roster, optionally linked to a User
"""

import logging

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _
from django_fsm import FSMField
from django_fsm import transition

from ssr_connect.core.models import BaseModel

logger = logging.getLogger(__name__)


class Pillar(models.TextChoices):
    DRUG_AWARENESS = "DRUG_AWARENESS", _("Drug Awareness")
    CYBERSECURITY_AWARENESS = "CYBERSECURITY_AWARENESS", _("Cybersecurity Awareness")
    HEALTH_AND_WELLBEING = "HEALTH_AND_WELLBEING", _("Health and Wellbeing")
    INDIAN_CULTURE_AND_HERITAGE = "INDIAN_CULTURE_AND_HERITAGE", _("Indian Culture and Heritage")
    SKILL_BUILDING = "SKILL_BUILDING", _("Skill Building")
    ENVIRONMENTAL_INITIATIVES = "ENVIRONMENTAL_INITIATIVES", _("Environmental Initiatives")
    WOMEN_EMPOWERMENT = "WOMEN_EMPOWERMENT", _("Women Empowerment")
    PEER_MENTORSHIP = "PEER_MENTORSHIP", _("Peer Mentorship")
    TECHNICAL_PROJECTS = "TECHNICAL_PROJECTS", _("Technical Projects")
    FINANCIAL_LITERACY = "FINANCIAL_LITERACY", _("Financial Literacy")


class Batch(models.TextChoices):
    """Academic sections; each owns a range of team numbers."""

    AI_A = "AI_A", "AI-A"
    AI_B = "AI_B", "AI-B"
    AI_DS = "AI_DS", "AI-DS"
    CYS = "CYS", "CYS"
    CSE_A = "CSE_A", "CSE-A"
    CSE_B = "CSE_B", "CSE-B"
    CSE_C = "CSE_C", "CSE-C"
    CSE_D = "CSE_D", "CSE-D"
    ECE_A = "ECE_A", "ECE-A"
    ECE_B = "ECE_B", "ECE-B"
    EAC = "EAC", "EAC"
    ELC = "ELC", "ELC"
    EEE = "EEE", "EEE"
    ME = "ME", "ME"
    RAE = "RAE", "RAE"


class TeamStatus(models.TextChoices):
    """Status choices for teams (FSM states)."""

    PENDING = "PENDING", _("Pending")  # Waiting for the mentor
    APPROVED = "APPROVED", _("Approved")
    REJECTED = "REJECTED", _("Rejected")  # Leader may edit and resubmit


class Team(BaseModel):
    """
    Student team registered under a mentor.

    Uses django-fsm for state management with protected transitions:
    - PENDING: submitted, waiting for the assigned mentor
    - APPROVED: accepted; the team may submit a proposal and a project
    - REJECTED: sent back with a reason; the leader may edit and resubmit

    Inherits from BaseModel:
        - id: UUID primary key
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    project_title = models.CharField(_("project title"), max_length=200)
    pillar = models.CharField(_("pillar"), max_length=40, choices=Pillar.choices)
    batch = models.CharField(_("batch"), max_length=10, choices=Batch.choices)
    team_number = models.CharField(
        _("team number"),
        max_length=20,
        unique=True,
        help_text=_("Drawn from the batch's number range, e.g. SSR 25-078"),
    )

    leader = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="led_teams",
        verbose_name=_("leader"),
    )
    mentor = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name="mentored_teams",
        verbose_name=_("mentor"),
    )

    # FSM status field with protected transitions
    status = FSMField(
        _("status"),
        default=TeamStatus.PENDING,
        choices=TeamStatus.choices,
        protected=True,
    )
    status_message = models.TextField(
        _("status message"),
        blank=True,
        help_text=_("Reason given by the mentor when rejecting"),
    )

    class Meta:
        verbose_name = _("team")
        verbose_name_plural = _("teams")
        ordering = ["-created"]

    def __str__(self) -> str:
        return f"{self.team_number} {self.project_title} ({self.get_status_display()})"

    # FSM Transitions

    @transition(field=status, source=TeamStatus.PENDING, target=TeamStatus.APPROVED)
    def approve(self):
        """Transition from PENDING to APPROVED. Clears any earlier rejection reason."""
        self.status_message = ""

    @transition(field=status, source=TeamStatus.PENDING, target=TeamStatus.REJECTED)
    def reject(self, reason: str):
        """Transition from PENDING to REJECTED, recording the reason."""
        self.status_message = reason

    @transition(field=status, source=TeamStatus.REJECTED, target=TeamStatus.PENDING)
    def resubmit(self):
        """Transition from REJECTED back to PENDING after the leader edits the team."""

    # Helper methods

    def has_member(self, user) -> bool:
        """Leader or listed member."""
        if user.pk == self.leader_id:
            return True
        return self.members.filter(user_id=user.pk).exists()

    def is_leader(self, user) -> bool:
        return self.leader_id == user.pk

    @property
    def member_count(self) -> int:
        """Number of roster entries, leader included."""
        return self.members.count()


class MemberRole(models.TextChoices):
    LEADER = "LEADER", _("Leader")
    MEMBER = "MEMBER", _("Member")


class TeamMember(BaseModel):
    """
    Roster entry of a team.

    Name, email and roll number are kept as entered by the leader; ``user``
    points at the matching account, which may be an unregistered placeholder.
    An email can appear on one team only.
    """

    team = models.ForeignKey(
        Team,
        on_delete=models.CASCADE,
        related_name="members",
        verbose_name=_("team"),
    )
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="team_memberships",
        verbose_name=_("user"),
    )
    name = models.CharField(_("name"), max_length=150)
    email = models.EmailField(_("email"), unique=True)
    roll_number = models.CharField(_("roll number"), max_length=50)
    role = models.CharField(
        _("role"),
        max_length=10,
        choices=MemberRole.choices,
        default=MemberRole.MEMBER,
    )

    class Meta:
        verbose_name = _("team member")
        verbose_name_plural = _("team members")
        ordering = ["team", "role", "created"]

    def __str__(self) -> str:
        return f"{self.name} ({self.get_role_display()})"
