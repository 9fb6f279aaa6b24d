"""
Seed command to populate the database with demo data for frontend development.

Usage:
    python manage.py seed_demo
    python manage.py seed_demo --clear  # Clear existing demo data first
"""

import logging

from django.conf import settings
from django.core.management.base import BaseCommand
from django.db import transaction

from ssr_connect.core.context import RequestContext
from ssr_connect.projects.schemas import ProjectCreateSchema
from ssr_connect.projects.services import create_project
from ssr_connect.proposals.schemas import ProposalSubmitSchema
from ssr_connect.proposals.services import submit_proposal
from ssr_connect.teams.models import Team
from ssr_connect.teams.schemas import TeamCreateSchema
from ssr_connect.teams.schemas import TeamDecision
from ssr_connect.teams.services import create_team
from ssr_connect.teams.services import decide_team
from ssr_connect.users.models import MentorVerification
from ssr_connect.users.models import User

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "Ssr-Demo-2025!"

MENTORS = [
    ("lakshmi.nair", "Lakshmi", "Nair", "MENTOR-001"),
    ("arun.kumar", "Arun", "Kumar", "MENTOR-002"),
]

STUDENTS = [
    ("ananya", "Ananya", "Menon", "AM.EN.U4CSE25001"),
    ("rahul", "Rahul", "Varma", "AM.EN.U4CSE25002"),
    ("divya", "Divya", "Pillai", "AM.EN.U4CSE25003"),
    ("karthik", "Karthik", "Das", "AM.EN.U4CSE25004"),
    ("meera", "Meera", "Joseph", "AM.EN.U4AIE25001"),
    ("nikhil", "Nikhil", "Raj", "AM.EN.U4AIE25002"),
    ("sneha", "Sneha", "Thomas", "AM.EN.U4AIE25003"),
    ("vishnu", "Vishnu", "Prasad", "AM.EN.U4AIE25004"),
]

PLAN = (
    "Weekly evening sessions in the panchayat library teaching elders to use "
    "smartphones safely: video calls, UPI payments and spotting common scams."
)


class Command(BaseCommand):
    help = "Seed database with demo data for frontend development"

    def add_arguments(self, parser):
        parser.add_argument(
            "--clear",
            action="store_true",
            help="Clear existing demo data before seeding",
        )

    def handle(self, *args, **options):
        if options["clear"]:
            self.clear_demo_data()

        self.stdout.write("Creating demo data...")

        with transaction.atomic():
            admin = self.create_user(f"ssr.admin@{settings.ADMIN_EMAIL_DOMAIN}", "SSR", "Admin")
            mentors = []
            for local, first_name, last_name, secret in MENTORS:
                email = f"{local}@{settings.MENTOR_EMAIL_DOMAIN}"
                MentorVerification.objects.get_or_create(
                    email=email,
                    defaults={"first_name": first_name, "last_name": last_name, "secret_id": secret},
                )
                mentors.append(self.create_user(email, first_name, last_name))
            students = [
                self.create_user(f"{local}@{settings.STUDENT_EMAIL_DOMAIN}", first, last, roll)
                for local, first, last, roll in STUDENTS
            ]

            if Team.objects.filter(leader__in=students).exists():
                self.stdout.write(self.style.WARNING("  Demo teams already exist, skipping"))
            else:
                self.create_demo_teams(mentors, students)

        self.stdout.write(self.style.SUCCESS("\nDemo data created successfully!"))
        self.stdout.write("\nSummary:")
        self.stdout.write(f"  - 1 Admin: {admin.email}")
        self.stdout.write(f"  - {len(mentors)} Mentors: {', '.join(m.email for m in mentors)}")
        self.stdout.write(f"  - {len(students)} Students")
        self.stdout.write(f"\nDefault password for all users: {DEMO_PASSWORD}")

    def create_demo_teams(self, mentors, students):
        approved = create_team(
            RequestContext.for_user(students[0]),
            TeamCreateSchema(
                project_title="Digital safety for senior citizens",
                pillar="CYBERSECURITY_AWARENESS",
                batch="CSE_D",
                mentor_id=mentors[0].id,
                members=[self.member(s) for s in students[1:4]],
            ),
        )
        decide_team(RequestContext.for_user(mentors[0]), approved.id, TeamDecision.APPROVE)
        self.stdout.write(f"  Created team: {approved.team_number} (APPROVED)")

        leader_ctx = RequestContext.for_user(students[0])
        submit_proposal(
            leader_ctx,
            ProposalSubmitSchema(
                title="Smartphone clinics at the village library",
                description=PLAN,
                content=PLAN,
                metadata={"category": "Awareness", "location_mode": "OFFLINE", "city": "Ettimadai"},
            ),
        )
        create_project(
            leader_ctx,
            ProjectCreateSchema(
                title="Smartphone clinics",
                description=PLAN,
                theme="Digital literacy",
                location={"type": "OFFLINE", "city": "Ettimadai", "state": "Tamil Nadu"},
            ),
        )
        self.stdout.write("  Created proposal (DRAFT) and project record")

        pending = create_team(
            RequestContext.for_user(students[4]),
            TeamCreateSchema(
                project_title="Millet recipes for school lunches",
                pillar="HEALTH_AND_WELLBEING",
                batch="AI_A",
                mentor_id=mentors[1].id,
                members=[self.member(s) for s in students[5:8]],
            ),
        )
        self.stdout.write(f"  Created team: {pending.team_number} (PENDING)")

    @staticmethod
    def member(user: User) -> dict:
        return {"name": user.get_full_name(), "email": user.email, "roll_number": user.roll_number}

    def create_user(self, email, first_name, last_name, roll_number=""):
        """Create a user or get existing one."""
        user = User.objects.filter(email=email).first()
        if user is not None:
            return user
        user = User.objects.create_user(
            email,
            DEMO_PASSWORD,
            first_name=first_name,
            last_name=last_name,
            roll_number=roll_number,
        )
        self.stdout.write(f"  Created user: {email} ({user.role})")
        return user

    def clear_demo_data(self):
        """Remove demo teams and users."""
        self.stdout.write("Clearing existing demo data...")
        student_emails = [f"{local}@{settings.STUDENT_EMAIL_DOMAIN}" for local, *_ in STUDENTS]
        mentor_emails = [f"{local}@{settings.MENTOR_EMAIL_DOMAIN}" for local, *_ in MENTORS]

        # Proposals and projects cascade with their team
        Team.objects.filter(leader__email__in=student_emails).delete()
        User.objects.filter(
            email__in=[*student_emails, *mentor_emails, f"ssr.admin@{settings.ADMIN_EMAIL_DOMAIN}"]
        ).delete()
        MentorVerification.objects.filter(email__in=mentor_emails).delete()
        self.stdout.write(self.style.WARNING("  Demo data cleared"))
