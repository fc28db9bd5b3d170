"""API routers for the REST API."""

from configurator.web.routers.configuration import router as configuration_router
from configurator.web.routers.options import router as options_router
from configurator.web.routers.rules import router as rules_router
from configurator.web.routers.session import router as session_router
from configurator.web.routers.validate import router as validate_router

__all__ = [
    "configuration_router",
    "options_router",
    "rules_router",
    "session_router",
    "validate_router",
]
