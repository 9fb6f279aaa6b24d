"""
Main API configuration for Django Ninja Extra.
All API controllers are automatically registered here.
"""

import importlib
import inspect
import logging

from django.http import HttpRequest
from ninja.errors import ValidationError as SchemaValidationError
from ninja_extra import NinjaExtraAPI
from ninja_extra.exceptions import APIException as ControllerAPIException
from ninja_extra.exceptions import NotAuthenticated
from ninja_extra.exceptions import PermissionDenied

from ssr_connect.core.api.base import BaseAPI
from ssr_connect.core.exceptions import APIException
from ssr_connect.core.exceptions import AuthorizationError
from ssr_connect.core.exceptions import NotAuthenticatedError
from ssr_connect.core.exceptions import ValidationError

logger = logging.getLogger(__name__)

api = NinjaExtraAPI(
    title="SSR Connect API",
    version="1.0.0",
    description="Backend API for the SSR Connect team and proposal portal",
    docs_url="/docs",
    openapi_url="/openapi.json",
)


@api.exception_handler(APIException)
def handle_api_exception(request: HttpRequest, exc: APIException):
    """Render domain errors raised by services as ErrorSchema bodies."""
    status, body = exc.to_response()
    return api.create_response(request, body.model_dump(), status=status)


@api.exception_handler(ControllerAPIException)
def handle_controller_exception(request: HttpRequest, exc: ControllerAPIException):
    """Render denials from the permission classes as ErrorSchema bodies."""
    message = str(exc.detail) if isinstance(exc.detail, str) else None
    if isinstance(exc, NotAuthenticated):
        error = NotAuthenticatedError(message)
    elif isinstance(exc, PermissionDenied):
        error = AuthorizationError(message)
    else:
        error = APIException(message, code=str(exc.default_code).upper())
        error.status_code = exc.status_code
    status, body = error.to_response()
    return api.create_response(request, body.model_dump(), status=status)


@api.exception_handler(SchemaValidationError)
def handle_schema_validation_error(request: HttpRequest, exc: SchemaValidationError):
    """Reject malformed request bodies before they reach business logic."""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": str(error.get("msg", "")),
        }
        for error in exc.errors
    ]
    status, body = ValidationError(
        "Invalid request data.",
        details={"errors": errors},
    ).to_response()
    return api.create_response(request, body.model_dump(), status=status)


def register_controllers_from_module(api_instance: NinjaExtraAPI, module_path: str) -> None:
    """
    Dynamically import and register API controllers from a module.

    Controllers must inherit from BaseAPI to be registered.
    """
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError:
        logger.debug("Module %s not found, skipping", module_path)
        return

    for attr_name in dir(module):
        attr = getattr(module, attr_name)
        if (
            inspect.isclass(attr)
            and issubclass(attr, BaseAPI)
            and attr is not BaseAPI
        ):
            logger.debug("Registering controller: %s.%s", module_path, attr_name)
            api_instance.register_controllers(attr)


# Register controllers from each local app
LOCAL_APPS = [
    "ssr_connect.users",
    "ssr_connect.teams",
    "ssr_connect.proposals",
    "ssr_connect.projects",
    "ssr_connect.reports",
]

for app in LOCAL_APPS:
    register_controllers_from_module(api, f"{app}.api")
