import uuid

import django.db.models.deletion
import django.utils.timezone
import django_fsm
import model_utils.fields
from django.conf import settings
from django.db import migrations
from django.db import models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Team",
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
                ("project_title", models.CharField(max_length=200, verbose_name="project title")),
                (
                    "pillar",
                    models.CharField(
                        choices=[
                            ("DRUG_AWARENESS", "Drug Awareness"),
                            ("CYBERSECURITY_AWARENESS", "Cybersecurity Awareness"),
                            ("HEALTH_AND_WELLBEING", "Health and Wellbeing"),
                            ("INDIAN_CULTURE_AND_HERITAGE", "Indian Culture and Heritage"),
                            ("SKILL_BUILDING", "Skill Building"),
                            ("ENVIRONMENTAL_INITIATIVES", "Environmental Initiatives"),
                            ("WOMEN_EMPOWERMENT", "Women Empowerment"),
                            ("PEER_MENTORSHIP", "Peer Mentorship"),
                            ("TECHNICAL_PROJECTS", "Technical Projects"),
                            ("FINANCIAL_LITERACY", "Financial Literacy"),
                        ],
                        max_length=40,
                        verbose_name="pillar",
                    ),
                ),
                (
                    "batch",
                    models.CharField(
                        choices=[
                            ("AI_A", "AI-A"),
                            ("AI_B", "AI-B"),
                            ("AI_DS", "AI-DS"),
                            ("CYS", "CYS"),
                            ("CSE_A", "CSE-A"),
                            ("CSE_B", "CSE-B"),
                            ("CSE_C", "CSE-C"),
                            ("CSE_D", "CSE-D"),
                            ("ECE_A", "ECE-A"),
                            ("ECE_B", "ECE-B"),
                            ("EAC", "EAC"),
                            ("ELC", "ELC"),
                            ("EEE", "EEE"),
                            ("ME", "ME"),
                            ("RAE", "RAE"),
                        ],
                        max_length=10,
                        verbose_name="batch",
                    ),
                ),
                (
                    "team_number",
                    models.CharField(
                        help_text="Drawn from the batch's number range, e.g. SSR 25-078",
                        max_length=20,
                        unique=True,
                        verbose_name="team number",
                    ),
                ),
                (
                    "status",
                    django_fsm.FSMField(
                        choices=[("PENDING", "Pending"), ("APPROVED", "Approved"), ("REJECTED", "Rejected")],
                        default="PENDING",
                        max_length=50,
                        protected=True,
                        verbose_name="status",
                    ),
                ),
                (
                    "status_message",
                    models.TextField(
                        blank=True,
                        help_text="Reason given by the mentor when rejecting",
                        verbose_name="status message",
                    ),
                ),
                (
                    "leader",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="led_teams",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="leader",
                    ),
                ),
                (
                    "mentor",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="mentored_teams",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="mentor",
                    ),
                ),
            ],
            options={
                "verbose_name": "team",
                "verbose_name_plural": "teams",
                "ordering": ["-created"],
            },
        ),
        migrations.CreateModel(
            name="TeamMember",
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
                ("name", models.CharField(max_length=150, verbose_name="name")),
                ("email", models.EmailField(max_length=254, unique=True, verbose_name="email")),
                ("roll_number", models.CharField(max_length=50, verbose_name="roll number")),
                (
                    "role",
                    models.CharField(
                        choices=[("LEADER", "Leader"), ("MEMBER", "Member")],
                        default="MEMBER",
                        max_length=10,
                        verbose_name="role",
                    ),
                ),
                (
                    "team",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="members",
                        to="teams.team",
                        verbose_name="team",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="team_memberships",
                        to=settings.AUTH_USER_MODEL,
                        verbose_name="user",
                    ),
                ),
            ],
            options={
                "verbose_name": "team member",
                "verbose_name_plural": "team members",
                "ordering": ["team", "role", "created"],
            },
        ),
    ]
