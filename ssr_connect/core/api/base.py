"""
Base API class for auto-discovery of controllers.

All API controllers should inherit from BaseAPI to be automatically
registered with the NinjaExtraAPI instance.
"""

from django.http import HttpRequest

from ssr_connect.core.context import RequestContext


class BaseAPI:
    """
    Marker class for API controllers.

    Controllers inheriting from this class will be automatically
    discovered and registered by the API configuration.

    Example:
        @api_controller("/teams", tags=["Teams"])
        class TeamController(BaseAPI):
            @http_get("/my")
            def my_team(self, request):
                ctx = self.request_context(request)
                ...
    """

    @staticmethod
    def request_context(request: HttpRequest) -> RequestContext:
        """Build the request context handed to service functions."""
        return RequestContext.from_request(request)
