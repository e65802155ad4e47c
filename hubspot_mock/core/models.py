"""Typed contracts for stored CRM objects, associations and search filters.

Field names are snake_case in Python and camelCase on the wire; every model
accepts either on input and ``to_api()`` produces the wire shape.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Open-schema property values: a small scalar union instead of Any.
PropertyValue = str | int | float | bool | None


def utc_timestamp(moment: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision and trailing Z."""
    moment = moment or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    def to_api(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class CrmObject(_WireModel):
    """A stored object of one resource type.

    ``associations`` is never persisted: reads with an associations expansion
    fill it on a copy of the stored object.
    """

    id: str
    properties: dict[str, PropertyValue] = Field(default_factory=dict)
    created_at: str
    updated_at: str
    archived: bool = False
    associations: dict[str, dict[str, list[dict[str, Any]]]] | None = None

    def to_api(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True, exclude={"associations"})
        if self.associations:
            data["associations"] = self.associations
        return data


class AssociationType(_WireModel):
    """A ``{category, typeId}`` descriptor classifying an association."""

    category: str
    type_id: int


class AssociationRecord(_WireModel):
    """One directed link from a source object to a target object."""

    to_object_id: int
    association_types: list[AssociationType] = Field(default_factory=list)

    def compact_view(self) -> dict[str, Any]:
        return {
            "toObjectId": self.to_object_id,
            "associationTypes": [t.to_api() for t in self.association_types],
        }

    def expanded_view(self) -> dict[str, Any]:
        """Summary used in object reads: only the first descriptor's category is kept."""
        first = self.association_types[0] if self.association_types else None
        return {"id": self.to_object_id, "type": first.category if first else None}


class Filter(_WireModel):
    """A single ``{propertyName, operator, value}`` search condition."""

    property_name: str
    operator: str = "EQ"
    value: PropertyValue = None


class FilterGroup(_WireModel):
    """Filters combined with AND."""

    filters: list[Filter] = Field(default_factory=list)
