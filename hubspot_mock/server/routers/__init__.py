"""Routers package for the CRM API server."""

from hubspot_mock.server.routers.associations import router as associations_router
from hubspot_mock.server.routers.forms import router as forms_router
from hubspot_mock.server.routers.health import router as health_router
from hubspot_mock.server.routers.oauth import router as oauth_router
from hubspot_mock.server.routers.objects import router as objects_router

__all__ = [
    "associations_router",
    "forms_router",
    "health_router",
    "oauth_router",
    "objects_router",
]
