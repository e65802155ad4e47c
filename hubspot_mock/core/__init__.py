"""Core building blocks for the CRM stand-in.

- constants: ResourceType and other enumerations
- models: pydantic data models for stored objects and associations
- errors: domain error types
- logging: structured logging configuration
"""

from hubspot_mock.core.constants import ResourceType, normalize_object_type
from hubspot_mock.core.errors import (
    CrmError,
    ObjectNotFoundError,
    UnsupportedResourceError,
    WebhookDeliveryError,
)
from hubspot_mock.core.models import (
    AssociationRecord,
    AssociationType,
    CrmObject,
    Filter,
    FilterGroup,
    PropertyValue,
)


__all__ = [
    "AssociationRecord",
    "AssociationType",
    "CrmError",
    "CrmObject",
    "Filter",
    "FilterGroup",
    "ObjectNotFoundError",
    "PropertyValue",
    "ResourceType",
    "UnsupportedResourceError",
    "WebhookDeliveryError",
    "normalize_object_type",
]
