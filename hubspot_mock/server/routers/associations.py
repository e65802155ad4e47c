"""CRM v4 association routes."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Body, status

from hubspot_mock.core.constants import ResourceType
from hubspot_mock.server.dependencies import CrmServiceDep
from hubspot_mock.server.models.requests import AssociationSpec

router = APIRouter(prefix="/crm/v4/objects", tags=["crm", "associations"])


@router.get("/{resource}/{resource_id}/associations/{to_object_type}")
async def list_associations(
    resource: ResourceType,
    resource_id: str,
    to_object_type: str,
    crm: CrmServiceDep,
) -> dict[str, Any]:
    records = crm.list_associations(resource, resource_id, to_object_type)
    return {"results": [record.compact_view() for record in records]}


@router.put(
    "/{resource}/{resource_id}/associations/{to_object_type}/{object_id}",
    status_code=status.HTTP_201_CREATED,
)
async def create_association(
    resource: ResourceType,
    resource_id: str,
    to_object_type: str,
    object_id: int,
    specs: Annotated[list[AssociationSpec], Body(min_length=1)],
    crm: CrmServiceDep,
) -> dict[str, Any]:
    """Link the source object to ``object_id`` with the given association types.

    Repeating the call appends another record; links are not deduplicated.
    """
    return crm.associate(
        resource,
        resource_id,
        to_object_type,
        object_id,
        [spec.to_association_type() for spec in specs],
    )
