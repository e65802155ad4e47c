"""Request models for the CRM API routes.

Wire names are camelCase; unknown keys (paging cursors, sort orders, form
context, ...) are accepted and ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from hubspot_mock.core.models import AssociationType, FilterGroup, PropertyValue


_WIRE_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ObjectCreateRequest(BaseModel):
    """Body of ``POST /crm/v3/objects/{resource}``."""

    properties: dict[str, PropertyValue] = Field(default_factory=dict)

    model_config = _WIRE_CONFIG


class ObjectUpdateRequest(BaseModel):
    """Body of ``PATCH /crm/v3/objects/{resource}/{id}``: only listed keys change."""

    properties: dict[str, PropertyValue]

    model_config = _WIRE_CONFIG


class AssociationSpec(BaseModel):
    """One ``{associationCategory, associationTypeId}`` entry of a v4 association PUT."""

    association_category: str
    association_type_id: int

    model_config = _WIRE_CONFIG

    def to_association_type(self) -> AssociationType:
        return AssociationType(category=self.association_category, type_id=self.association_type_id)


class SearchRequest(BaseModel):
    """Body of ``POST /crm/v3/objects/{resource}/search``."""

    filter_groups: list[FilterGroup] = Field(default_factory=list)

    model_config = _WIRE_CONFIG


class FormField(BaseModel):
    name: str
    value: PropertyValue = None

    model_config = _WIRE_CONFIG


class FormSubmissionRequest(BaseModel):
    """Body of a secure form submission: ``{"fields": [{"name", "value"}, ...]}``."""

    fields: list[FormField] = Field(default_factory=list)

    model_config = _WIRE_CONFIG

    def as_properties(self) -> dict[str, PropertyValue]:
        """Collapse fields into a property mapping; later duplicates win."""
        return {field.name: field.value for field in self.fields}
