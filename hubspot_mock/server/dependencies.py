"""FastAPI dependency injection module.

The CrmService and Settings live on ``app.state`` (created once by
``create_app``) instead of module globals, so each app instance, including
the ones built per test, owns isolated state.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from hubspot_mock.conf.config import Settings
from hubspot_mock.services.crm import CrmService


def get_crm_service(request: Request) -> CrmService:
    """Return the application's CRM service."""
    return request.app.state.crm_service


def get_app_settings(request: Request) -> Settings:
    """Return the settings the application was built with."""
    return request.app.state.settings


# Type aliases for endpoint injection
CrmServiceDep = Annotated[CrmService, Depends(get_crm_service)]
SettingsDep = Annotated[Settings, Depends(get_app_settings)]
