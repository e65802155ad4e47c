"""Centralized constants and enumerations for the CRM stand-in.

ResourceType is the closed set of first-class object categories. Everything
that dispatches by resource (stores, id counters, webhook subscription types)
keys on it instead of on free-form strings.
"""

from __future__ import annotations

from enum import Enum

import inflect

from hubspot_mock.core.errors import UnsupportedResourceError


_inflector = inflect.engine()


class ResourceType(str, Enum):
    """First-class CRM object categories, valued by their plural collection name."""

    CONTACT = "contacts"
    COMPANY = "companies"
    DEAL = "deals"
    TICKET = "tickets"

    @property
    def plural(self) -> str:
        return self.value

    @property
    def singular(self) -> str:
        """Display name used in property-change subscription types."""
        try:
            return _SINGULAR_NAMES[self]
        except KeyError:
            raise UnsupportedResourceError(self.value) from None

    @classmethod
    def from_name(cls, name: str) -> ResourceType | None:
        """Resolve a singular or plural type name, or None if it is not a resource type."""
        key = (name or "").strip().lower()
        for member in cls:
            if key in (member.value, _SINGULAR_NAMES.get(member)):
                return member
        return None


_SINGULAR_NAMES: dict[ResourceType, str] = {
    ResourceType.CONTACT: "contact",
    ResourceType.COMPANY: "company",
    ResourceType.DEAL: "deal",
    ResourceType.TICKET: "ticket",
}


class SubscriptionKind(str, Enum):
    """Suffixes of webhook subscription types."""

    CREATION = "creation"
    PROPERTY_CHANGE = "propertyChange"


class FilterOperator(str, Enum):
    """Search filter operators with implemented semantics."""

    EQ = "EQ"
    NEQ = "NEQ"
    HAS_PROPERTY = "HAS_PROPERTY"
    NOT_HAS_PROPERTY = "NOT_HAS_PROPERTY"


def normalize_object_type(name: str) -> str:
    """Return the plural form of an object type name.

    Known resource types resolve through ResourceType. Anything else (custom
    objects, line items, ...) is pluralized with inflect, and names that are
    already plural are kept, so singular and plural spellings land under the
    same key.
    """
    resource = ResourceType.from_name(name)
    if resource is not None:
        return resource.plural

    word = (name or "").strip().lower()
    if not word:
        return word

    singular = _inflector.singular_noun(word)
    if singular and _inflector.plural_noun(singular) == word:
        return word
    return _inflector.plural_noun(word)


# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_ID_SEED = 10_000_000
