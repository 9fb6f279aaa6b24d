from factory import Faker
from factory import SubFactory
from factory.django import DjangoModelFactory

from ssr_connect.projects.models import LocationType
from ssr_connect.projects.models import Project
from ssr_connect.projects.models import ProjectStatus
from ssr_connect.teams.models import TeamStatus
from ssr_connect.teams.tests.factories import TeamFactory


class ProjectFactory(DjangoModelFactory[Project]):
    team = SubFactory(TeamFactory, status=TeamStatus.APPROVED)
    title = Faker("sentence", nb_words=4)
    description = Faker("paragraph")
    theme = "Digital literacy"
    status = ProjectStatus.PLANNING
    location_type = LocationType.OFFLINE
    city = "Coimbatore"
    state = "Tamil Nadu"

    class Meta:
        model = Project
