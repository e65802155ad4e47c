"""Association index: typed, directed links between stored objects."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable

from hubspot_mock.core.constants import ResourceType, normalize_object_type
from hubspot_mock.core.models import AssociationRecord, AssociationType


class AssociationIndex:
    """Per-source, per-target-type ordered lists of association records.

    Links are not symmetric and are not deduplicated: linking the same pair
    twice yields two records.
    """

    def __init__(self) -> None:
        self._links: dict[tuple[ResourceType, int], dict[str, list[AssociationRecord]]] = (
            defaultdict(dict)
        )

    def link(
        self,
        source: ResourceType,
        source_id: int,
        target_type: str,
        target_id: int,
        types: Iterable[AssociationType],
    ) -> AssociationRecord:
        record = AssociationRecord(to_object_id=target_id, association_types=list(types))
        by_type = self._links[(source, source_id)]
        by_type.setdefault(normalize_object_type(target_type), []).append(record)
        return record

    def list_links(
        self,
        source: ResourceType,
        source_id: int,
        target_type: str,
    ) -> list[AssociationRecord]:
        by_type = self._links.get((source, source_id))
        if not by_type:
            return []
        return list(by_type.get(normalize_object_type(target_type), []))

    def clear(self) -> None:
        self._links.clear()
