"""Process-local object storage keyed by resource type and id."""

from __future__ import annotations

from collections.abc import Mapping

from hubspot_mock.core.constants import ResourceType
from hubspot_mock.core.errors import ObjectNotFoundError
from hubspot_mock.core.models import CrmObject, PropertyValue


class _TypeStore:
    """Objects of a single resource type plus their insertion order."""

    def __init__(self) -> None:
        self.order: list[int] = []
        self.objects: dict[int, CrmObject] = {}

    def clear(self) -> None:
        self.order.clear()
        self.objects.clear()


class InMemoryObjectStore:
    """Lightweight, process-local object storage.

    Objects are never physically deleted except by ``clear``/``clear_all``;
    archiving only flips a flag. Listing preserves creation order, which is
    observable to clients paging through results.
    """

    def __init__(self) -> None:
        self._stores: dict[ResourceType, _TypeStore] = {
            resource: _TypeStore() for resource in ResourceType
        }

    def insert(self, resource: ResourceType, object_id: int, obj: CrmObject) -> None:
        store = self._stores[resource]
        if object_id in store.objects:
            raise ValueError(f"{resource.value} {object_id} already exists")
        store.objects[object_id] = obj
        store.order.append(object_id)

    def get(self, resource: ResourceType, object_id: int) -> CrmObject | None:
        return self._stores[resource].objects.get(object_id)

    def require(self, resource: ResourceType, object_id: int) -> CrmObject:
        obj = self.get(resource, object_id)
        if obj is None:
            raise ObjectNotFoundError(resource.value, object_id)
        return obj

    def list_all(self, resource: ResourceType) -> list[CrmObject]:
        store = self._stores[resource]
        return [store.objects[object_id] for object_id in store.order]

    def set_properties(
        self,
        resource: ResourceType,
        object_id: int,
        properties: Mapping[str, PropertyValue],
    ) -> CrmObject:
        obj = self.require(resource, object_id)
        obj.properties = dict(properties)
        return obj

    def set_archived(self, resource: ResourceType, object_id: int, archived: bool) -> CrmObject:
        obj = self.require(resource, object_id)
        obj.archived = archived
        return obj

    def clear(self, resource: ResourceType) -> None:
        self._stores[resource].clear()

    def clear_all(self) -> None:
        for resource in ResourceType:
            self.clear(resource)
