import uuid

import django.db.models.deletion
import django.utils.timezone
import model_utils.fields
from django.conf import settings
from django.db import migrations
from django.db import models

import ssr_connect.projects.uploads


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        ("teams", "0001_initial"),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Attachment",
            fields=[
                (
                    "created",
                    model_utils.fields.AutoCreatedField(
                        default=django.utils.timezone.now, editable=False, verbose_name="created"
                    ),
                ),
                (
                    "modified",
                    model_utils.fields.AutoLastModifiedField(
                        default=django.utils.timezone.now, editable=False, verbose_name="modified"
                    ),
                ),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "file",
                    models.FileField(
                        max_length=255, upload_to=ssr_connect.projects.uploads.upload_path, verbose_name="file"
                    ),
                ),
                ("original_filename", models.CharField(max_length=255, verbose_name="original filename")),
                ("content_type", models.CharField(max_length=100, verbose_name="content type")),
                ("size", models.PositiveIntegerField(help_text="Size in bytes", verbose_name="file size")),
                (
                    "owner",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="attachments",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="owner",
                    ),
                ),
            ],
            options={
                "verbose_name": "attachment",
                "verbose_name_plural": "attachments",
                "ordering": ["-created"],
            },
        ),
        migrations.CreateModel(
            name="Project",
            fields=[
                (
                    "created",
                    model_utils.fields.AutoCreatedField(
                        default=django.utils.timezone.now, editable=False, verbose_name="created"
                    ),
                ),
                (
                    "modified",
                    model_utils.fields.AutoLastModifiedField(
                        default=django.utils.timezone.now, editable=False, verbose_name="modified"
                    ),
                ),
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("title", models.CharField(max_length=200, verbose_name="title")),
                ("description", models.TextField(verbose_name="description")),
                ("theme", models.CharField(blank=True, max_length=100, verbose_name="theme")),
                (
                    "status",
                    models.CharField(
                        choices=[("PLANNING", "Planning"), ("IN_PROGRESS", "In progress"), ("COMPLETED", "Completed")],
                        default="PLANNING",
                        max_length=20,
                        verbose_name="status",
                    ),
                ),
                ("target_beneficiaries", models.TextField(blank=True, verbose_name="target beneficiaries")),
                ("social_impact", models.TextField(blank=True, verbose_name="social impact")),
                ("implementation_approach", models.TextField(blank=True, verbose_name="implementation approach")),
                ("current_milestone", models.TextField(blank=True, verbose_name="current milestone")),
                ("next_milestone", models.TextField(blank=True, verbose_name="next milestone")),
                ("challenges", models.TextField(blank=True, verbose_name="challenges")),
                ("achievements", models.TextField(blank=True, verbose_name="achievements")),
                (
                    "location_type",
                    models.CharField(
                        choices=[("ONLINE", "Online"), ("OFFLINE", "Offline")],
                        default="OFFLINE",
                        max_length=10,
                        verbose_name="location type",
                    ),
                ),
                ("address", models.CharField(blank=True, max_length=255, verbose_name="address")),
                ("city", models.CharField(blank=True, max_length=100, verbose_name="city")),
                ("state", models.CharField(blank=True, max_length=100, verbose_name="state")),
                (
                    "team",
                    models.OneToOneField(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="project",
                        to="teams.team",
                        verbose_name="team",
                    ),
                ),
            ],
            options={
                "verbose_name": "project",
                "verbose_name_plural": "projects",
                "ordering": ["-created"],
            },
        ),
    ]
