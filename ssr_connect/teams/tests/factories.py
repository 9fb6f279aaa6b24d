from django.conf import settings
from factory import Faker
from factory import LazyAttribute
from factory import Sequence
from factory import SubFactory
from factory import post_generation
from factory.django import DjangoModelFactory

from ssr_connect.teams.models import Batch
from ssr_connect.teams.models import MemberRole
from ssr_connect.teams.models import Pillar
from ssr_connect.teams.models import Team
from ssr_connect.teams.models import TeamMember
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.numbering import format_team_number
from ssr_connect.users.tests.factories import MentorFactory
from ssr_connect.users.tests.factories import StudentFactory


class TeamFactory(DjangoModelFactory[Team]):
    """
    PENDING team with a leader row and three members.

    Pass ``status=TeamStatus.APPROVED`` (or REJECTED) to run the transition
    after creation; the status field cannot be assigned directly.
    """

    project_title = Faker("sentence", nb_words=4)
    pillar = Pillar.SKILL_BUILDING
    batch = Batch.CSE_C
    # CSE_C covers 65..77; tests stay well below the range size.
    team_number = Sequence(lambda n: format_team_number(65 + n % 13))
    leader = SubFactory(StudentFactory)
    mentor = SubFactory(MentorFactory)

    class Meta:
        model = Team
        skip_postgeneration_save = True

    @post_generation
    def members(self, create: bool, extracted, **kwargs):  # noqa: FBT001
        if not create:
            return
        TeamMember.objects.create(
            team=self,
            user=self.leader,
            name=self.leader.get_full_name(),
            email=self.leader.email,
            roll_number=self.leader.roll_number,
            role=MemberRole.LEADER,
        )
        users = extracted if extracted is not None else StudentFactory.create_batch(3)
        for user in users:
            TeamMemberFactory(team=self, user=user)

    @post_generation
    def status(self, create: bool, extracted, **kwargs):  # noqa: FBT001
        if not create or extracted in (None, TeamStatus.PENDING):
            return
        if extracted == TeamStatus.APPROVED:
            self.approve()
        elif extracted == TeamStatus.REJECTED:
            self.reject(kwargs.get("reason", "Please rework the project title."))
        self.save()


class TeamMemberFactory(DjangoModelFactory[TeamMember]):
    team = SubFactory(TeamFactory)
    user = SubFactory(StudentFactory)
    name = LazyAttribute(lambda o: o.user.get_full_name())
    email = LazyAttribute(lambda o: o.user.email)
    roll_number = LazyAttribute(lambda o: o.user.roll_number)
    role = MemberRole.MEMBER

    class Meta:
        model = TeamMember


def member_payload(count: int = 3, start: int = 0) -> list[dict]:
    """Member entries for team creation requests."""
    return [
        {
            "name": f"Member {chr(65 + start + i)} Student",
            "email": f"member{start + i}@{settings.STUDENT_EMAIL_DOMAIN}",
            "roll_number": f"AM.EN.U4ECE25{start + i:03d}",
        }
        for i in range(count)
    ]
