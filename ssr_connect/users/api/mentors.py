"""
Mentor directory.
"""

from django.http import HttpRequest
from ninja_extra import api_controller
from ninja_extra import http_get

from ssr_connect.core.api import BaseAPI
from ssr_connect.core.api import IsAuthenticated
from ssr_connect.users.models import User
from ssr_connect.users.schemas import MentorSchema


@api_controller("/mentors", tags=["Mentors"], permissions=[IsAuthenticated])
class MentorDirectoryController(BaseAPI):
    @http_get("/", response=list[MentorSchema], url_name="mentors_list")
    def list_mentors(self, request: HttpRequest):
        """Registered mentors, by name."""
        mentors = User.objects.mentors().filter(is_registered=True).order_by("first_name", "last_name")
        return [MentorSchema.from_user(m) for m in mentors]
