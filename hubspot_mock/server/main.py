"""ASGI app exposing the CRM API stand-in.

This module is a thin orchestrator that:
1. Builds the per-app CrmService from settings
2. Maps domain errors to HTTP responses
3. Sets up middleware and includes the routers
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response, status
from fastapi.responses import JSONResponse

from hubspot_mock import __version__
from hubspot_mock.conf.config import Settings, get_settings
from hubspot_mock.core.errors import ObjectNotFoundError, WebhookDeliveryError
from hubspot_mock.core.logging import setup_logging
from hubspot_mock.server.exceptions import APIError, ExternalServiceError
from hubspot_mock.server.middleware import setup_middleware
from hubspot_mock.server.routers import (
    associations_router,
    forms_router,
    health_router,
    oauth_router,
    objects_router,
)
from hubspot_mock.services.crm import CrmService


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup/shutdown events."""
    settings: Settings = app.state.settings
    setup_logging(
        level=settings.LOG_LEVEL,
        json_format=settings.LOG_JSON,
        service_name="hubspot-mock",
    )

    logger.info("Starting CRM API stand-in (portal=%s, app=%s)", settings.CUSTOMER_ID, settings.APP_ID)
    if settings.webhooks_enabled:
        logger.info("Webhook events will be delivered to %s", settings.WEBHOOK_URL)
    else:
        logger.info("WEBHOOK_URL not set, webhook events are disabled")

    yield

    logger.info("Shutting down CRM API stand-in")


async def object_not_found_handler(request: Request, exc: ObjectNotFoundError) -> Response:
    """Not-found answers carry no body, like the real API's 404 for unknown ids."""
    return Response(status_code=status.HTTP_404_NOT_FOUND)


async def webhook_error_handler(request: Request, exc: WebhookDeliveryError) -> JSONResponse:
    """The mutation is already stored; report the failed notification as a bad gateway."""
    return await api_error_handler(request, ExternalServiceError("webhook", exc.message))


async def api_error_handler(request: Request, exc: APIError) -> JSONResponse:
    """Handle custom API exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "detail": exc.detail or exc.message,
            "error": exc.message,
        },
    )


def create_app(
    settings: Settings | None = None,
    *,
    crm_service: CrmService | None = None,
    enable_logging: bool = True,
) -> FastAPI:
    """Build an application with its own isolated CRM state."""
    settings = settings or get_settings()

    app = FastAPI(
        title="HubSpot CRM API mock",
        description="In-memory stand-in for the HubSpot CRM API for integration tests",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.crm_service = crm_service or CrmService.from_settings(settings)

    app.add_exception_handler(ObjectNotFoundError, object_not_found_handler)
    app.add_exception_handler(WebhookDeliveryError, webhook_error_handler)
    app.add_exception_handler(APIError, api_error_handler)

    setup_middleware(app, enable_logging=enable_logging)

    app.include_router(health_router)
    app.include_router(oauth_router)
    app.include_router(objects_router)
    app.include_router(associations_router)
    app.include_router(forms_router)

    return app


app = create_app()
