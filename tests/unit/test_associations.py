import pytest

from hubspot_mock.core.constants import ResourceType
from hubspot_mock.core.models import AssociationType
from hubspot_mock.services.associations import AssociationIndex


pytestmark = [pytest.mark.unit]

PRIMARY = AssociationType(category="HUBSPOT_DEFINED", type_id=1)
LABELED = AssociationType(category="USER_DEFINED", type_id=42)


def test_link_is_listed_under_plural_target_type():
    index = AssociationIndex()
    index.link(ResourceType.CONTACT, 1, "company", 99, [PRIMARY])

    records = index.list_links(ResourceType.CONTACT, 1, "companies")

    assert len(records) == 1
    assert records[0].to_object_id == 99
    assert records[0].association_types == [PRIMARY]


def test_links_are_not_deduplicated():
    index = AssociationIndex()
    index.link(ResourceType.CONTACT, 1, "company", 99, [PRIMARY])
    index.link(ResourceType.CONTACT, 1, "companies", 99, [PRIMARY])

    assert len(index.list_links(ResourceType.CONTACT, 1, "company")) == 2


def test_links_are_directed():
    index = AssociationIndex()
    index.link(ResourceType.CONTACT, 1, "company", 99, [PRIMARY])

    assert index.list_links(ResourceType.COMPANY, 99, "contact") == []


def test_missing_source_yields_empty_list():
    assert AssociationIndex().list_links(ResourceType.DEAL, 5, "tickets") == []


def test_views():
    index = AssociationIndex()
    record = index.link(ResourceType.CONTACT, 1, "company", 99, [LABELED, PRIMARY])

    assert record.compact_view() == {
        "toObjectId": 99,
        "associationTypes": [
            {"category": "USER_DEFINED", "typeId": 42},
            {"category": "HUBSPOT_DEFINED", "typeId": 1},
        ],
    }
    # Only the first descriptor's category is surfaced
    assert record.expanded_view() == {"id": 99, "type": "USER_DEFINED"}


def test_clear():
    index = AssociationIndex()
    index.link(ResourceType.CONTACT, 1, "company", 99, [PRIMARY])

    index.clear()

    assert index.list_links(ResourceType.CONTACT, 1, "company") == []
