from factory import LazyAttribute
from factory import SubFactory
from factory import post_generation
from factory.django import DjangoModelFactory

from ssr_connect.proposals.models import Proposal
from ssr_connect.proposals.models import ProposalState
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.tests.factories import TeamFactory

LONG_TEXT = (
    "We will run weekly sessions in the nearby panchayat school, teaching basic "
    "smartphone safety, UPI payments and how to spot common online scams."
)


class ProposalFactory(DjangoModelFactory[Proposal]):
    """
    DRAFT proposal for an approved team.

    Pass ``state=ProposalState.APPROVED`` (or REJECTED) to run the review
    transition as the team's mentor after creation.
    """

    team = SubFactory(TeamFactory, status=TeamStatus.APPROVED)
    author = LazyAttribute(lambda o: o.team.leader)
    title = "Digital safety for rural families"
    description = LONG_TEXT
    content = LONG_TEXT
    metadata = LazyAttribute(lambda o: {"category": "Awareness", "city": "Coimbatore"})
    attachments = LazyAttribute(lambda o: [])

    class Meta:
        model = Proposal
        skip_postgeneration_save = True

    @post_generation
    def state(self, create: bool, extracted, **kwargs):  # noqa: FBT001
        if not create or extracted in (None, ProposalState.DRAFT):
            return
        if extracted == ProposalState.APPROVED:
            self.approve(self.team.mentor, kwargs.get("remarks", ""))
        elif extracted == ProposalState.REJECTED:
            self.reject(self.team.mentor, kwargs.get("remarks", "Add a timeline."))
        self.save()
