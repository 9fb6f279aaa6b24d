"""
Models for team project records and uploaded files.
"""

from django.conf import settings
from django.db import models
from django.utils.translation import gettext_lazy as _

from ssr_connect.core.models import BaseModel
from ssr_connect.projects.uploads import upload_path


class ProjectStatus(models.TextChoices):
    PLANNING = "PLANNING", _("Planning")
    IN_PROGRESS = "IN_PROGRESS", _("In progress")
    COMPLETED = "COMPLETED", _("Completed")


class LocationType(models.TextChoices):
    ONLINE = "ONLINE", _("Online")
    OFFLINE = "OFFLINE", _("Offline")


class Project(BaseModel):
    """
    Running record of a team's project, filled in after approval.

    One per team; progress fields are free text edited by the members.
    """

    team = models.OneToOneField(
        "teams.Team",
        on_delete=models.CASCADE,
        related_name="project",
        verbose_name=_("team"),
    )
    title = models.CharField(_("title"), max_length=200)
    description = models.TextField(_("description"))
    theme = models.CharField(_("theme"), max_length=100, blank=True)
    status = models.CharField(
        _("status"),
        max_length=20,
        choices=ProjectStatus.choices,
        default=ProjectStatus.PLANNING,
    )

    target_beneficiaries = models.TextField(_("target beneficiaries"), blank=True)
    social_impact = models.TextField(_("social impact"), blank=True)
    implementation_approach = models.TextField(_("implementation approach"), blank=True)
    current_milestone = models.TextField(_("current milestone"), blank=True)
    next_milestone = models.TextField(_("next milestone"), blank=True)
    challenges = models.TextField(_("challenges"), blank=True)
    achievements = models.TextField(_("achievements"), blank=True)

    location_type = models.CharField(
        _("location type"),
        max_length=10,
        choices=LocationType.choices,
        default=LocationType.OFFLINE,
    )
    address = models.CharField(_("address"), max_length=255, blank=True)
    city = models.CharField(_("city"), max_length=100, blank=True)
    state = models.CharField(_("state"), max_length=100, blank=True)

    class Meta:
        verbose_name = _("project")
        verbose_name_plural = _("projects")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.title


class Attachment(BaseModel):
    """
    Uploaded file.

    Inherits from BaseModel:
        - id: UUID primary key
        - created: auto-set on creation
        - modified: auto-updated on save
    """

    file = models.FileField(_("file"), upload_to=upload_path, max_length=255)
    original_filename = models.CharField(_("original filename"), max_length=255)
    content_type = models.CharField(_("content type"), max_length=100)
    size = models.PositiveIntegerField(_("file size"), help_text=_("Size in bytes"))
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="attachments",
        verbose_name=_("owner"),
    )

    class Meta:
        verbose_name = _("attachment")
        verbose_name_plural = _("attachments")
        ordering = ["-created"]

    def __str__(self) -> str:
        return self.original_filename

    @property
    def url(self) -> str:
        return self.file.url
