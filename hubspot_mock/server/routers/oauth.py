"""OAuth routes returning canned, stateless payloads."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from fastapi import APIRouter, HTTPException
from fastapi.responses import RedirectResponse

from hubspot_mock.server.dependencies import SettingsDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/oauth", tags=["oauth"])


def _append_query(url: str, **params: str) -> str:
    parts = urlsplit(url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.extend(params.items())
    return urlunsplit(parts._replace(query=urlencode(query)))


@router.post("/v1/token")
async def exchange_token(settings: SettingsDep) -> dict[str, Any]:
    return {
        "access_token": settings.OAUTH_ACCESS_TOKEN,
        "refresh_token": settings.OAUTH_REFRESH_TOKEN,
        "expires_in": settings.OAUTH_EXPIRES_IN,
        "message": None,
        "user": settings.CUSTOMER_ID,
    }


@router.get("/authorize")
async def authorize(redirect_uri: str, settings: SettingsDep) -> RedirectResponse:
    """Redirect straight back to ``redirect_uri`` with a fixed exchange code."""
    parts = urlsplit(redirect_uri)
    if not parts.scheme or not parts.netloc:
        raise HTTPException(status_code=400, detail="redirect_uri must be an absolute URL")

    target = _append_query(redirect_uri, code=settings.OAUTH_AUTHORIZATION_CODE)
    logger.info("Redirecting OAuth authorize to %s", redirect_uri)
    return RedirectResponse(target, status_code=302)


@router.get("/v1/access-tokens/{token}")
async def access_token_info(token: str, settings: SettingsDep) -> dict[str, Any]:
    return {
        "hub_id": settings.CUSTOMER_ID,
        "token": token,
        "hub_domain": settings.OAUTH_HUB_DOMAIN,
        "app_id": settings.APP_ID,
        "expires_in": settings.OAUTH_EXPIRES_IN,
        "user_id": settings.CUSTOMER_ID,
        "token_type": "access",
    }
