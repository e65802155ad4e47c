import pytest

from hubspot_mock.core.constants import ResourceType, normalize_object_type
from hubspot_mock.core.errors import UnsupportedResourceError


pytestmark = [pytest.mark.unit]


@pytest.mark.parametrize(
    ("resource", "singular"),
    [
        (ResourceType.CONTACT, "contact"),
        (ResourceType.COMPANY, "company"),
        (ResourceType.DEAL, "deal"),
        (ResourceType.TICKET, "ticket"),
    ],
)
def test_singular_names(resource, singular):
    assert resource.singular == singular


def test_from_name_accepts_both_forms():
    assert ResourceType.from_name("company") is ResourceType.COMPANY
    assert ResourceType.from_name("companies") is ResourceType.COMPANY
    assert ResourceType.from_name(" Contact ") is ResourceType.CONTACT
    assert ResourceType.from_name("line_item") is None


@pytest.mark.parametrize(
    ("name", "plural"),
    [
        ("company", "companies"),
        ("companies", "companies"),
        ("contact", "contacts"),
        ("line_item", "line_items"),
        ("address", "addresses"),
        ("category", "categories"),
        ("key", "keys"),
        ("person", "people"),
        ("people", "people"),
        ("status", "statuses"),
        ("statuses", "statuses"),
        ("child", "children"),
    ],
)
def test_normalize_object_type(name, plural):
    assert normalize_object_type(name) == plural


def test_unsupported_resource_error_is_not_implemented():
    error = UnsupportedResourceError("widgets")

    assert isinstance(error, NotImplementedError)
    assert error.error_code == "RESOURCE_NOT_IMPLEMENTED"
