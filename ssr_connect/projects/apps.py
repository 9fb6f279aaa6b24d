from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class ProjectsConfig(AppConfig):
    name = "ssr_connect.projects"
    verbose_name = _("Projects")
