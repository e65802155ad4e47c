"""Stateful services: storage, identity, associations, search and webhooks."""

from hubspot_mock.services.associations import AssociationIndex
from hubspot_mock.services.crm import CrmService
from hubspot_mock.services.ids import IdentityGenerator
from hubspot_mock.services.object_store import InMemoryObjectStore
from hubspot_mock.services.webhooks import DeliveryResult, DeliveryStatus, WebhookNotifier


__all__ = [
    "AssociationIndex",
    "CrmService",
    "DeliveryResult",
    "DeliveryStatus",
    "IdentityGenerator",
    "InMemoryObjectStore",
    "WebhookNotifier",
]
