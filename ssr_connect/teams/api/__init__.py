"""
Team API controllers.
"""

from ssr_connect.teams.api.teams import MentorTeamController
from ssr_connect.teams.api.teams import TeamController

__all__ = ["TeamController", "MentorTeamController"]
