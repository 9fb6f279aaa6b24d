"""
Project and upload API controllers.
"""

from ssr_connect.projects.api.projects import ProjectController
from ssr_connect.projects.api.projects import UploadController

__all__ = ["ProjectController", "UploadController"]
