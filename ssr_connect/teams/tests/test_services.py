"""
Tests for team creation, mentor decisions and resubmission.
"""

import pytest

from ssr_connect.core.context import RequestContext
from ssr_connect.core.exceptions import AuthorizationError
from ssr_connect.core.exceptions import ConflictError
from ssr_connect.core.exceptions import NotFoundError
from ssr_connect.core.exceptions import ValidationError
from ssr_connect.teams import services
from ssr_connect.teams.models import MemberRole
from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamMember
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.numbering import team_numbers_for_batch
from ssr_connect.teams.schemas import TeamCreateSchema
from ssr_connect.teams.schemas import TeamDecision
from ssr_connect.teams.schemas import TeamUpdateSchema
from ssr_connect.teams.tests.factories import TeamFactory
from ssr_connect.teams.tests.factories import member_payload
from ssr_connect.users.models import User
from ssr_connect.users.tests.factories import MentorFactory
from ssr_connect.users.tests.factories import StudentFactory


def create_payload(mentor, **overrides) -> TeamCreateSchema:
    payload = {
        "project_title": "Digital literacy for village elders",
        "pillar": "SKILL_BUILDING",
        "batch": "CSE_D",
        "mentor_id": str(mentor.id),
        "members": member_payload(3),
    }
    payload.update(overrides)
    return TeamCreateSchema(**payload)


@pytest.fixture
def student_ctx(student):
    return RequestContext.for_user(student)


@pytest.fixture
def mentor_ctx(mentor):
    return RequestContext.for_user(mentor)


@pytest.mark.django_db
class TestCreateTeam:
    def test_creates_pending_team_with_first_number(self, student_ctx, mentor):
        team = services.create_team(student_ctx, create_payload(mentor))

        assert team.status == TeamStatus.PENDING
        assert team.team_number == "SSR 25-078"
        assert team.leader == student_ctx.user
        assert team.mentor == mentor
        assert team.members.count() == 4
        assert team.members.get(role=MemberRole.LEADER).email == student_ctx.user.email

    def test_unknown_members_get_placeholder_accounts(self, student_ctx, mentor):
        team = services.create_team(student_ctx, create_payload(mentor))

        member = team.members.get(email="member0@am.students.amrita.edu")
        assert member.user is not None
        assert member.user.is_registered is False
        assert member.user.can_login is False

    def test_existing_student_is_linked(self, student_ctx, mentor):
        existing = StudentFactory(email="member1@am.students.amrita.edu")

        team = services.create_team(student_ctx, create_payload(mentor))

        assert team.members.get(email=existing.email).user == existing
        assert User.objects.filter(email=existing.email).count() == 1

    def test_two_members_is_rejected_and_nothing_saved(self, student_ctx, mentor):
        with pytest.raises(ValidationError):
            services.create_team(student_ctx, create_payload(mentor, members=member_payload(2)))

        assert Team.objects.count() == 0
        assert TeamMember.objects.count() == 0

    def test_six_members_is_rejected(self, student_ctx, mentor):
        with pytest.raises(ValidationError):
            services.create_team(student_ctx, create_payload(mentor, members=member_payload(6)))

    def test_duplicate_member_email(self, student_ctx, mentor):
        members = member_payload(3)
        members[2]["email"] = members[0]["email"]

        with pytest.raises(ValidationError) as exc:
            services.create_team(student_ctx, create_payload(mentor, members=members))

        assert exc.value.details == {"email": ["member0@am.students.amrita.edu"]}

    def test_duplicate_roll_number(self, student_ctx, mentor):
        members = member_payload(3)
        members[1]["roll_number"] = members[0]["roll_number"].lower()

        with pytest.raises(ValidationError):
            services.create_team(student_ctx, create_payload(mentor, members=members))

    def test_member_matching_leader_name(self, student_ctx, mentor):
        members = member_payload(3)
        members[0]["name"] = student_ctx.user.get_full_name()

        with pytest.raises(ValidationError):
            services.create_team(student_ctx, create_payload(mentor, members=members))

    def test_member_outside_student_domain(self, student_ctx, mentor):
        members = member_payload(3)
        members[0]["email"] = "friend@gmail.com"

        with pytest.raises(ValidationError):
            services.create_team(student_ctx, create_payload(mentor, members=members))

    def test_mentor_must_be_a_mentor(self, student_ctx):
        not_a_mentor = StudentFactory()

        with pytest.raises(NotFoundError):
            services.create_team(student_ctx, create_payload(not_a_mentor))

    def test_leader_already_on_a_team(self, student_ctx, mentor):
        services.create_team(student_ctx, create_payload(mentor))

        with pytest.raises(ConflictError):
            services.create_team(student_ctx, create_payload(mentor, members=member_payload(3, start=10)))

    def test_member_already_on_another_team(self, student_ctx, mentor):
        services.create_team(student_ctx, create_payload(mentor))
        other = RequestContext.for_user(StudentFactory())

        with pytest.raises(ConflictError):
            services.create_team(other, create_payload(mentor, members=member_payload(3, start=2)))

    def test_requested_number(self, student_ctx, mentor):
        team = services.create_team(student_ctx, create_payload(mentor, team_number="SSR 25-161"))

        assert team.team_number == "SSR 25-161"

    def test_requested_number_out_of_range(self, student_ctx, mentor):
        with pytest.raises(ValidationError):
            services.create_team(student_ctx, create_payload(mentor, team_number="SSR 25-090"))

    def test_requested_number_taken(self, student_ctx, mentor):
        TeamFactory(batch="CSE_D", team_number="SSR 25-080")

        with pytest.raises(ConflictError):
            services.create_team(student_ctx, create_payload(mentor, team_number="SSR 25-080"))

    def test_allocation_skips_taken_numbers(self, student_ctx, mentor):
        TeamFactory(batch="CSE_D", team_number="SSR 25-078")

        team = services.create_team(student_ctx, create_payload(mentor))

        assert team.team_number == "SSR 25-079"

    def test_number_taken_between_read_and_insert(self, student_ctx, mentor, monkeypatch):
        TeamFactory(batch="CSE_D", team_number="SSR 25-078")
        teams, members = Team.objects.count(), TeamMember.objects.count()
        # another request took the number after the taken list was read
        monkeypatch.setattr(services, "taken_team_numbers", lambda batch: [])

        with pytest.raises(ConflictError):
            services.create_team(student_ctx, create_payload(mentor))

        assert Team.objects.count() == teams
        assert TeamMember.objects.count() == members
        assert not Team.objects.filter(leader=student_ctx.user).exists()

    def test_exhausted_batch(self, student_ctx, mentor):
        for number in team_numbers_for_batch("CSE_D"):
            TeamFactory(batch="CSE_D", team_number=number, members=[])

        with pytest.raises(ConflictError):
            services.create_team(student_ctx, create_payload(mentor))

    def test_mentor_cannot_create(self, mentor_ctx, mentor):
        with pytest.raises(AuthorizationError):
            services.create_team(mentor_ctx, create_payload(mentor))


@pytest.mark.django_db
class TestDecideTeam:
    def test_assigned_mentor_approves(self):
        team = TeamFactory()
        ctx = RequestContext.for_user(team.mentor)

        services.decide_team(ctx, team.id, TeamDecision.APPROVE)

        assert Team.objects.get(pk=team.pk).status == TeamStatus.APPROVED

    def test_reject_requires_reason(self):
        team = TeamFactory()
        ctx = RequestContext.for_user(team.mentor)

        with pytest.raises(ValidationError):
            services.decide_team(ctx, team.id, TeamDecision.REJECT, "  ")

        assert Team.objects.get(pk=team.pk).status == TeamStatus.PENDING

    def test_reject_with_reason(self):
        team = TeamFactory()
        ctx = RequestContext.for_user(team.mentor)

        services.decide_team(ctx, team.id, TeamDecision.REJECT, "Add a fourth member")

        stored = Team.objects.get(pk=team.pk)
        assert stored.status == TeamStatus.REJECTED
        assert stored.status_message == "Add a fourth member"

    def test_other_mentor_is_rejected_and_status_unchanged(self):
        team = TeamFactory()
        ctx = RequestContext.for_user(MentorFactory())

        with pytest.raises(AuthorizationError):
            services.decide_team(ctx, team.id, TeamDecision.APPROVE)

        assert Team.objects.get(pk=team.pk).status == TeamStatus.PENDING

    def test_missing_team(self, mentor_ctx):
        with pytest.raises(NotFoundError):
            services.decide_team(mentor_ctx, "00000000-0000-0000-0000-000000000000", TeamDecision.APPROVE)

    def test_team_not_pending(self):
        team = TeamFactory(status=TeamStatus.APPROVED)
        ctx = RequestContext.for_user(team.mentor)

        with pytest.raises(NotFoundError):
            services.decide_team(ctx, team.id, TeamDecision.REJECT, "changed my mind")

    def test_student_cannot_decide(self, student_ctx):
        team = TeamFactory()

        with pytest.raises(AuthorizationError):
            services.decide_team(student_ctx, team.id, TeamDecision.APPROVE)


@pytest.mark.django_db
class TestUpdateTeam:
    def test_leader_resubmits_rejected_team(self):
        team = TeamFactory(status=TeamStatus.REJECTED)
        ctx = RequestContext.for_user(team.leader)

        updated = services.update_team(ctx, TeamUpdateSchema(project_title="Clean water awareness drive"))

        assert updated.status == TeamStatus.PENDING
        assert updated.project_title == "Clean water awareness drive"

    def test_replace_members(self):
        team = TeamFactory(status=TeamStatus.REJECTED)
        ctx = RequestContext.for_user(team.leader)

        updated = services.update_team(ctx, TeamUpdateSchema(members=member_payload(4, start=20)))

        emails = set(updated.members.filter(role=MemberRole.MEMBER).values_list("email", flat=True))
        assert emails == {f"member{n}@am.students.amrita.edu" for n in range(20, 24)}
        assert updated.members.filter(role=MemberRole.LEADER).count() == 1

    def test_change_mentor(self):
        team = TeamFactory(status=TeamStatus.REJECTED)
        new_mentor = MentorFactory()

        updated = services.update_team(
            RequestContext.for_user(team.leader), TeamUpdateSchema(mentor_id=new_mentor.id)
        )

        assert updated.mentor == new_mentor

    def test_pending_team_cannot_be_edited(self):
        team = TeamFactory()

        with pytest.raises(ConflictError):
            services.update_team(RequestContext.for_user(team.leader), TeamUpdateSchema(project_title="Other"))

    def test_member_cannot_edit(self):
        team = TeamFactory(status=TeamStatus.REJECTED)
        member = team.members.filter(role=MemberRole.MEMBER).first().user

        with pytest.raises(AuthorizationError):
            services.update_team(RequestContext.for_user(member), TeamUpdateSchema(project_title="Other"))

    def test_no_team(self, student_ctx):
        with pytest.raises(NotFoundError):
            services.update_team(student_ctx, TeamUpdateSchema(project_title="Other"))
