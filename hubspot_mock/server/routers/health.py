"""Health check and test-control routes."""

from __future__ import annotations

from fastapi import APIRouter, Response
from fastapi.responses import PlainTextResponse

from hubspot_mock.server.dependencies import CrmServiceDep


router = APIRouter(tags=["health"])


@router.get("/ping", response_class=PlainTextResponse)
async def ping() -> str:
    return "pong"


@router.get("/reset")
async def reset(crm: CrmServiceDep) -> Response:
    """Restore the empty cold-start state. Intended for test isolation only."""
    crm.reset()
    return Response(status_code=200)
