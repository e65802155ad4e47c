"""Webhook notifier: delivers mutation events to a configured endpoint.

Events follow the CRM webhook payload shape:

    {"portalId": 62515, "subscriptionType": "contacts.creation",
     "objectId": 10000000, "appId": 1234}

Property changes use ``"<singular>.propertyChange"`` and carry
``propertyName``. A batch is POSTed as one JSON array. Callers await the
delivery before answering the request that triggered it, so tests can
observe the webhook deterministically.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

from hubspot_mock.core.constants import ResourceType, SubscriptionKind
from hubspot_mock.core.errors import WebhookDeliveryError
from hubspot_mock.core.logging import log_event, log_with_root_cause


logger = logging.getLogger(__name__)


def creation_event(portal_id: int, resource: ResourceType, object_id: int) -> dict[str, Any]:
    return {
        "portalId": portal_id,
        "subscriptionType": f"{resource.plural}.{SubscriptionKind.CREATION.value}",
        "objectId": object_id,
    }


def property_change_event(
    portal_id: int,
    resource: ResourceType,
    object_id: int,
    property_name: str,
) -> dict[str, Any]:
    return {
        "portalId": portal_id,
        "subscriptionType": f"{resource.singular}.{SubscriptionKind.PROPERTY_CHANGE.value}",
        "objectId": object_id,
        "propertyName": property_name,
    }


class DeliveryStatus(str, Enum):
    SKIPPED = "skipped"
    DELIVERED = "delivered"


@dataclass(frozen=True)
class DeliveryResult:
    """Outcome of a successful ``send``; failures raise WebhookDeliveryError."""

    status: DeliveryStatus
    events: int = 0
    status_code: int | None = None


class WebhookNotifier:
    """Sends event batches to ``url``, stamping each event with ``app_id``.

    With no ``url`` configured every send is a no-op. Failed deliveries are
    not retried; the error propagates to the mutation that triggered them.
    """

    def __init__(
        self,
        url: str | None,
        app_id: int,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = (url or "").strip() or None
        self.app_id = app_id
        self.timeout = timeout
        self._transport = transport

    @property
    def enabled(self) -> bool:
        return self.url is not None

    async def send(self, events: list[dict[str, Any]]) -> DeliveryResult:
        if not self.enabled or not events:
            log_event(logger, event="webhook_skipped", level="debug", events_count=len(events))
            return DeliveryResult(DeliveryStatus.SKIPPED, events=len(events))

        payload = [{**event, "appId": self.app_id} for event in events]

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            error = WebhookDeliveryError(self.url, f"Webhook request failed: {e}")
            log_with_root_cause(logger, "error", "Webhook delivery failed", error=error)
            raise error from e

        if not response.is_success:
            error = WebhookDeliveryError(
                self.url,
                f"Webhook endpoint answered {response.status_code}",
                status_code=response.status_code,
            )
            log_with_root_cause(
                logger,
                "error",
                "Webhook delivery rejected",
                error=error,
                status_code=response.status_code,
            )
            raise error

        log_event(
            logger,
            event="webhook_sent",
            events_count=len(payload),
            status_code=response.status_code,
        )
        return DeliveryResult(
            DeliveryStatus.DELIVERED,
            events=len(payload),
            status_code=response.status_code,
        )
