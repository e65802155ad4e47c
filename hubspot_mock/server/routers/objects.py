"""CRM v3 object routes: list, create, read, update, archive and search."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Query, Response, status

from hubspot_mock.core.constants import ResourceType
from hubspot_mock.server.dependencies import CrmServiceDep
from hubspot_mock.server.models.requests import (
    ObjectCreateRequest,
    ObjectUpdateRequest,
    SearchRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/crm/v3/objects", tags=["crm", "objects"])


def _split_names(values: list[str] | None) -> list[str]:
    """Accept both ``associations=a,b`` and repeated ``associations=a&associations=b``."""
    names: list[str] = []
    for value in values or []:
        names.extend(part.strip() for part in value.split(",") if part.strip())
    return names


@router.get("/{resource}")
async def list_objects(
    resource: ResourceType,
    crm: CrmServiceDep,
    archived: bool = False,
) -> dict[str, Any]:
    """List objects of a type in creation order, filtered by archived state."""
    return {"results": [obj.to_api() for obj in crm.list_objects(resource, archived=archived)]}


@router.post("/{resource}", status_code=status.HTTP_201_CREATED)
async def create_object(
    resource: ResourceType,
    payload: ObjectCreateRequest,
    crm: CrmServiceDep,
) -> dict[str, Any]:
    obj = await crm.create(resource, payload.properties)
    return obj.to_api()


@router.post("/{resource}/search")
async def search_objects(
    resource: ResourceType,
    payload: SearchRequest,
    crm: CrmServiceDep,
) -> dict[str, Any]:
    """Search by filter groups (OR across groups, AND within a group)."""
    result = crm.search(resource, payload.filter_groups)
    return {**result, "results": [obj.to_api() for obj in result["results"]]}


@router.get("/{resource}/{resource_id}")
async def get_object(
    resource: ResourceType,
    resource_id: str,
    crm: CrmServiceDep,
    associations: list[str] | None = Query(default=None),
    archived: bool = False,
) -> dict[str, Any]:
    obj = crm.get(resource, resource_id, archived=archived, associations=_split_names(associations))
    return obj.to_api()


@router.patch("/{resource}/{resource_id}")
async def update_object(
    resource: ResourceType,
    resource_id: str,
    payload: ObjectUpdateRequest,
    crm: CrmServiceDep,
) -> dict[str, Any]:
    obj = await crm.update(resource, resource_id, payload.properties)
    return obj.to_api()


@router.delete("/{resource}/{resource_id}", status_code=status.HTTP_204_NO_CONTENT)
async def archive_object(resource: ResourceType, resource_id: str, crm: CrmServiceDep) -> Response:
    crm.archive(resource, resource_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
