"""Resource operation layer.

CrmService composes the object store, identity generator, association index,
query engine and webhook notifier, and enforces the data-model rules:

- ids are unique per resource type and never reused
- archived objects stay stored but are masked from default reads and lists
- every create emits exactly one creation event; every update emits one
  property-change event per property whose value actually changed
- the store is mutated before the webhook is awaited, and the caller gets
  its answer only after delivery completes

One instance is created per application and injected into the routers; no
module-level state exists, so several isolated instances can live in one
process.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from hubspot_mock.core.constants import ResourceType, normalize_object_type
from hubspot_mock.core.errors import ObjectNotFoundError
from hubspot_mock.core.logging import log_event
from hubspot_mock.core.models import (
    AssociationRecord,
    AssociationType,
    CrmObject,
    FilterGroup,
    PropertyValue,
    utc_timestamp,
)
from hubspot_mock.services import search as query_engine
from hubspot_mock.services.associations import AssociationIndex
from hubspot_mock.services.ids import IdentityGenerator
from hubspot_mock.services.object_store import InMemoryObjectStore
from hubspot_mock.services.webhooks import (
    WebhookNotifier,
    creation_event,
    property_change_event,
)


if TYPE_CHECKING:
    from hubspot_mock.conf.config import Settings


logger = logging.getLogger(__name__)

FORM_MATCH_PROPERTY = "email"


def coerce_id(resource: ResourceType, raw_id: int | str) -> int:
    """Parse an object id from a path segment; anything but plain ASCII digits is not found."""
    if isinstance(raw_id, int) and not isinstance(raw_id, bool):
        return raw_id
    if isinstance(raw_id, str) and raw_id.isascii() and raw_id.isdigit():
        return int(raw_id)
    raise ObjectNotFoundError(resource.value, raw_id)


class CrmService:
    """Per-resource CRUD, association and search operations over shared state."""

    def __init__(
        self,
        *,
        portal_id: int,
        notifier: WebhookNotifier,
        store: InMemoryObjectStore | None = None,
        ids: IdentityGenerator | None = None,
        associations: AssociationIndex | None = None,
    ) -> None:
        self.portal_id = portal_id
        self.notifier = notifier
        self.store = store or InMemoryObjectStore()
        self.ids = ids or IdentityGenerator()
        self.associations = associations or AssociationIndex()

    @classmethod
    def from_settings(cls, settings: Settings, **overrides: Any) -> CrmService:
        """Build a service wired to the configured portal, app and webhook target."""
        notifier = overrides.pop("notifier", None) or WebhookNotifier(
            settings.WEBHOOK_URL,
            settings.APP_ID,
            timeout=settings.WEBHOOK_TIMEOUT,
        )
        return cls(
            portal_id=settings.CUSTOMER_ID,
            notifier=notifier,
            ids=overrides.pop("ids", None) or IdentityGenerator(settings.ID_SEED),
            **overrides,
        )

    # =========================================================================
    # Objects
    # =========================================================================

    async def create(
        self,
        resource: ResourceType,
        properties: Mapping[str, PropertyValue] | None = None,
    ) -> CrmObject:
        object_id = self.ids.next(resource)
        timestamp = utc_timestamp()
        obj = CrmObject(
            id=str(object_id),
            properties=dict(properties or {}),
            created_at=timestamp,
            updated_at=timestamp,
            archived=False,
        )
        self.store.insert(resource, object_id, obj)
        log_event(logger, event="object_created", resource=resource.value, object_id=object_id)

        await self.notifier.send([creation_event(self.portal_id, resource, object_id)])
        return obj.model_copy(deep=True)

    def get(
        self,
        resource: ResourceType,
        object_id: int | str,
        *,
        archived: bool = False,
        associations: Iterable[str] = (),
    ) -> CrmObject:
        """Read one object.

        Objects whose archived flag differs from ``archived`` are reported as
        not found. Each requested association type with at least one link is
        attached under its plural name as ``{"results": [{id, type}, ...]}``.
        """
        numeric_id = coerce_id(resource, object_id)
        stored = self.store.get(resource, numeric_id)
        if stored is None or stored.archived != archived:
            raise ObjectNotFoundError(resource.value, object_id)

        result = stored.model_copy(deep=True)
        expanded: dict[str, dict[str, list[dict[str, Any]]]] = {}
        for name in associations:
            links = self.associations.list_links(resource, numeric_id, name)
            if links:
                expanded[normalize_object_type(name)] = {
                    "results": [link.expanded_view() for link in links]
                }
        result.associations = expanded or None
        return result

    def list_objects(self, resource: ResourceType, *, archived: bool = False) -> list[CrmObject]:
        return [
            obj.model_copy(deep=True)
            for obj in self.store.list_all(resource)
            if obj.archived == archived
        ]

    async def update(
        self,
        resource: ResourceType,
        object_id: int | str,
        properties: Mapping[str, PropertyValue],
    ) -> CrmObject:
        """Apply a partial property update.

        Keys absent from ``properties`` are left untouched. ``updatedAt`` keeps
        its creation value, matching the behaviour clients were built against.
        """
        numeric_id = coerce_id(resource, object_id)
        before = dict(self.store.require(resource, numeric_id).properties)
        after = {**before, **properties}
        obj = self.store.set_properties(resource, numeric_id, after)

        changed = [
            name for name, value in properties.items()
            if name not in before or before[name] != value or type(before[name]) is not type(value)
        ]
        log_event(
            logger,
            event="object_updated",
            resource=resource.value,
            object_id=numeric_id,
            changed=",".join(changed) or None,
        )

        await self.notifier.send(
            [property_change_event(self.portal_id, resource, numeric_id, name) for name in changed]
        )
        return obj.model_copy(deep=True)

    def archive(self, resource: ResourceType, object_id: int | str) -> None:
        numeric_id = coerce_id(resource, object_id)
        self.store.set_archived(resource, numeric_id, True)
        log_event(logger, event="object_archived", resource=resource.value, object_id=numeric_id)

    # =========================================================================
    # Associations
    # =========================================================================

    def associate(
        self,
        resource: ResourceType,
        object_id: int | str,
        to_object_type: str,
        to_object_id: int,
        types: Sequence[AssociationType],
    ) -> dict[str, Any]:
        numeric_id = coerce_id(resource, object_id)
        self.store.require(resource, numeric_id)
        self.associations.link(resource, numeric_id, to_object_type, to_object_id, types)
        log_event(
            logger,
            event="association_created",
            resource=resource.value,
            object_id=numeric_id,
            to_object_type=normalize_object_type(to_object_type),
            to_object_id=to_object_id,
        )
        return {
            "fromObjectTypeId": resource.value,
            "fromObjectId": numeric_id,
            "toObjectTypeId": to_object_type,
            "toObjectId": to_object_id,
            "labels": [],
        }

    def list_associations(
        self,
        resource: ResourceType,
        object_id: int | str,
        to_object_type: str,
    ) -> list[AssociationRecord]:
        numeric_id = coerce_id(resource, object_id)
        self.store.require(resource, numeric_id)
        return self.associations.list_links(resource, numeric_id, to_object_type)

    # =========================================================================
    # Search / forms / reset
    # =========================================================================

    def search(self, resource: ResourceType, filter_groups: Sequence[FilterGroup]) -> dict[str, Any]:
        results = query_engine.search(self.store.list_all(resource), filter_groups)
        log_event(
            logger,
            event="search_executed",
            level="debug",
            resource=resource.value,
            groups=len(filter_groups),
            total=len(results),
        )
        return {
            "total": len(results),
            "results": [obj.model_copy(deep=True) for obj in results],
            "paging": [],
        }

    async def submit_form(self, fields: Mapping[str, PropertyValue]) -> CrmObject:
        """Upsert a contact from a form submission, matching on email."""
        email = fields.get(FORM_MATCH_PROPERTY)
        existing = None
        if email is not None:
            existing = next(
                (
                    obj for obj in self.store.list_all(ResourceType.CONTACT)
                    if not obj.archived and obj.properties.get(FORM_MATCH_PROPERTY) == email
                ),
                None,
            )

        if existing is None:
            contact = await self.create(ResourceType.CONTACT, fields)
        else:
            contact = await self.update(ResourceType.CONTACT, existing.id, fields)

        log_event(
            logger,
            event="form_submitted",
            resource=ResourceType.CONTACT.value,
            object_id=contact.id,
            matched=existing is not None,
        )
        return contact

    def reset(self) -> None:
        """Wipe every store, the association index and the id counters."""
        self.store.clear_all()
        self.associations.clear()
        self.ids.reset()
        log_event(logger, event="state_reset")
