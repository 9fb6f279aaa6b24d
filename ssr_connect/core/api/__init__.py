from ssr_connect.core.api.base import BaseAPI
from ssr_connect.core.api.permissions import AllowAny
from ssr_connect.core.api.permissions import IsAdmin
from ssr_connect.core.api.permissions import IsAuthenticated
from ssr_connect.core.api.permissions import IsMentor
from ssr_connect.core.api.permissions import IsStudent
from ssr_connect.core.api.permissions import requires_capability

__all__ = [
    "BaseAPI",
    "IsAuthenticated",
    "IsStudent",
    "IsMentor",
    "IsAdmin",
    "AllowAny",
    "requires_capability",
]
