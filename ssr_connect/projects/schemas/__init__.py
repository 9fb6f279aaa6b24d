"""
Project and upload schemas.
"""

from ssr_connect.projects.schemas.attachments import AttachmentSchema
from ssr_connect.projects.schemas.projects import ProjectCreateSchema
from ssr_connect.projects.schemas.projects import ProjectLocationSchema
from ssr_connect.projects.schemas.projects import ProjectSchema
from ssr_connect.projects.schemas.projects import ProjectUpdateSchema

__all__ = [
    "AttachmentSchema",
    "ProjectCreateSchema",
    "ProjectLocationSchema",
    "ProjectSchema",
    "ProjectUpdateSchema",
]
