"""Shared fixtures: isolated settings, CRM service, app and webhook recorder."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field

import httpx
import pytest
from fastapi.testclient import TestClient

from hubspot_mock.conf.config import Settings
from hubspot_mock.server.main import create_app
from hubspot_mock.services.crm import CrmService
from hubspot_mock.services.webhooks import WebhookNotifier


WEBHOOK_URL = "http://webhooks.test/hubspot"
PORTAL_ID = 62515
APP_ID = 1234


@dataclass
class WebhookRecorder:
    """Captures webhook batches posted through an httpx.MockTransport.

    ``on_delivery`` runs inside the request handler, while the mutation that
    triggered the webhook is still awaiting its response.
    """

    status_code: int = 200
    batches: list[list[dict]] = field(default_factory=list)
    on_delivery: Callable[[list[dict]], None] | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        batch = json.loads(request.content)
        self.batches.append(batch)
        if self.on_delivery is not None:
            self.on_delivery(batch)
        return httpx.Response(self.status_code)

    @property
    def events(self) -> list[dict]:
        return [event for batch in self.batches for event in batch]

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        CUSTOMER_ID=PORTAL_ID,
        APP_ID=APP_ID,
        WEBHOOK_URL="",
    )


@pytest.fixture
def webhook_recorder() -> WebhookRecorder:
    return WebhookRecorder()


@pytest.fixture
def notifier(webhook_recorder: WebhookRecorder) -> WebhookNotifier:
    return WebhookNotifier(WEBHOOK_URL, APP_ID, transport=webhook_recorder.transport())


@pytest.fixture
def crm(settings: Settings, notifier: WebhookNotifier) -> CrmService:
    """CRM service whose webhooks land in ``webhook_recorder``."""
    return CrmService.from_settings(settings, notifier=notifier)


@pytest.fixture
def quiet_crm(settings: Settings) -> CrmService:
    """CRM service without a webhook destination."""
    return CrmService.from_settings(settings)


@pytest.fixture
def client(settings: Settings, crm: CrmService):
    app = create_app(settings, crm_service=crm, enable_logging=False)
    with TestClient(app) as client:
        yield client
