"""Integration tests for v4 associations and read-time expansion."""

from __future__ import annotations

import pytest

pytestmark = [pytest.mark.integration]

CONTACT_TO_COMPANY = [{"associationCategory": "HUBSPOT_DEFINED", "associationTypeId": 1}]


@pytest.fixture
def contact_and_company(client) -> tuple[str, str]:
    contact = client.post("/crm/v3/objects/contacts", json={"properties": {"email": "a@x.test"}}).json()
    company = client.post("/crm/v3/objects/companies", json={"properties": {"name": "Acme"}}).json()
    return contact["id"], company["id"]


def test_create_and_list_association(client, contact_and_company):
    contact_id, company_id = contact_and_company

    response = client.put(
        f"/crm/v4/objects/contacts/{contact_id}/associations/companies/{company_id}",
        json=CONTACT_TO_COMPANY,
    )
    assert response.status_code == 201
    assert response.json()["toObjectId"] == int(company_id)
    assert response.json()["fromObjectId"] == int(contact_id)

    listed = client.get(f"/crm/v4/objects/contacts/{contact_id}/associations/companies")
    assert listed.status_code == 200
    assert listed.json() == {
        "results": [
            {
                "toObjectId": int(company_id),
                "associationTypes": [{"category": "HUBSPOT_DEFINED", "typeId": 1}],
            }
        ]
    }


def test_singular_and_plural_names_share_links(client, contact_and_company):
    contact_id, company_id = contact_and_company
    client.put(
        f"/crm/v4/objects/contacts/{contact_id}/associations/company/{company_id}",
        json=CONTACT_TO_COMPANY,
    )

    listed = client.get(f"/crm/v4/objects/contacts/{contact_id}/associations/companies")

    assert len(listed.json()["results"]) == 1


def test_read_expands_requested_associations(client, contact_and_company):
    contact_id, company_id = contact_and_company
    client.put(
        f"/crm/v4/objects/contacts/{contact_id}/associations/companies/{company_id}",
        json=CONTACT_TO_COMPANY,
    )

    response = client.get(f"/crm/v3/objects/contacts/{contact_id}", params={"associations": "company,deals"})

    assert response.status_code == 200
    assert response.json()["associations"] == {
        "companies": {"results": [{"id": int(company_id), "type": "HUBSPOT_DEFINED"}]}
    }

    plain = client.get(f"/crm/v3/objects/contacts/{contact_id}").json()
    assert "associations" not in plain


def test_associations_are_directed(client, contact_and_company):
    contact_id, company_id = contact_and_company
    client.put(
        f"/crm/v4/objects/contacts/{contact_id}/associations/companies/{company_id}",
        json=CONTACT_TO_COMPANY,
    )

    reverse = client.get(f"/crm/v4/objects/companies/{company_id}/associations/contacts")

    assert reverse.json() == {"results": []}


def test_associate_unknown_source_is_404(client):
    response = client.put(
        "/crm/v4/objects/contacts/10000500/associations/companies/10000000",
        json=CONTACT_TO_COMPANY,
    )

    assert response.status_code == 404


def test_associate_requires_type_descriptor(client, contact_and_company):
    contact_id, company_id = contact_and_company

    response = client.put(
        f"/crm/v4/objects/contacts/{contact_id}/associations/companies/{company_id}",
        json=[],
    )

    assert response.status_code == 422
