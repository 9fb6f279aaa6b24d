"""
User API controllers.
"""

from ssr_connect.users.api.admin import UserAdminController
from ssr_connect.users.api.auth import AuthController
from ssr_connect.users.api.mentors import MentorDirectoryController

__all__ = ["AuthController", "UserAdminController", "MentorDirectoryController"]
