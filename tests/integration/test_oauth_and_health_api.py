"""Integration tests for canned OAuth endpoints and the control plane."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

import pytest

from tests.conftest import APP_ID, PORTAL_ID

pytestmark = [pytest.mark.integration]


class TestOAuth:
    def test_token_exchange(self, client):
        response = client.post("/oauth/v1/token", data={"grant_type": "authorization_code", "code": "x"})

        assert response.status_code == 200
        assert response.json() == {
            "access_token": "access-token",
            "refresh_token": "refresh-token",
            "expires_in": 999999,
            "message": None,
            "user": PORTAL_ID,
        }

    def test_authorize_redirects_with_code(self, client):
        response = client.get(
            "/oauth/authorize",
            params={"redirect_uri": "http://app.test/callback?state=abc", "client_id": "id"},
            follow_redirects=False,
        )

        assert response.status_code == 302
        location = urlsplit(response.headers["location"])
        assert location.netloc == "app.test"
        assert location.path == "/callback"
        assert parse_qs(location.query) == {"state": ["abc"], "code": ["code-to-exchange"]}

    def test_authorize_requires_absolute_redirect(self, client):
        response = client.get("/oauth/authorize", params={"redirect_uri": "/callback"}, follow_redirects=False)

        assert response.status_code == 400

    def test_authorize_requires_redirect_uri(self, client):
        assert client.get("/oauth/authorize", follow_redirects=False).status_code == 422

    def test_access_token_info(self, client):
        response = client.get("/oauth/v1/access-tokens/my-token")

        assert response.status_code == 200
        body = response.json()
        assert body["token"] == "my-token"
        assert body["hub_id"] == PORTAL_ID
        assert body["user_id"] == PORTAL_ID
        assert body["app_id"] == APP_ID
        assert body["hub_domain"] == "ReplaceWithHubDomainHere"
        assert body["expires_in"] == 999999


class TestControlPlane:
    def test_ping(self, client):
        response = client.get("/ping")

        assert response.status_code == 200
        assert response.text == "pong"

    def test_reset_restores_cold_start(self, client):
        created = client.post("/crm/v3/objects/contacts", json={"properties": {"email": "a@x.test"}}).json()
        client.put(
            f"/crm/v4/objects/contacts/{created['id']}/associations/companies/10000000",
            json=[{"associationCategory": "HUBSPOT_DEFINED", "associationTypeId": 1}],
        )

        response = client.get("/reset")
        assert response.status_code == 200

        assert client.get("/crm/v3/objects/contacts").json() == {"results": []}
        assert client.get(f"/crm/v3/objects/contacts/{created['id']}").status_code == 404

        again = client.post("/crm/v3/objects/contacts", json={"properties": {}}).json()
        assert again["id"] == created["id"]
        listed = client.get(f"/crm/v4/objects/contacts/{again['id']}/associations/companies")
        assert listed.json() == {"results": []}

    def test_apps_do_not_share_state(self, settings):
        from fastapi.testclient import TestClient

        from hubspot_mock.server.main import create_app

        with TestClient(create_app(settings, enable_logging=False)) as first, \
                TestClient(create_app(settings, enable_logging=False)) as second:
            first.post("/crm/v3/objects/deals", json={"properties": {"dealname": "only here"}})

            assert len(first.get("/crm/v3/objects/deals").json()["results"]) == 1
            assert second.get("/crm/v3/objects/deals").json() == {"results": []}
