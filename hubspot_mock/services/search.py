"""Query engine: disjunctive-normal-form property filters over stored objects.

An object matches when at least one filter group matches, and a group
matches when every filter in it holds. No groups means no matches.

Implemented operators are EQ, NEQ, HAS_PROPERTY and NOT_HAS_PROPERTY. Any
other operator is treated as satisfied.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence

from hubspot_mock.core.constants import FilterOperator
from hubspot_mock.core.models import CrmObject, Filter, FilterGroup


_MISSING = object()


def _eq(actual: object, expected: object) -> bool:
    # Strict comparison: "1" != 1 and True != 1, but 1 == 1.0
    if actual is _MISSING:
        return False
    if isinstance(actual, bool) or isinstance(expected, bool):
        return type(actual) is type(expected) and actual == expected
    if isinstance(actual, (int, float)) and isinstance(expected, (int, float)):
        return actual == expected
    return type(actual) is type(expected) and actual == expected


_OPERATORS: dict[str, Callable[[object, object], bool]] = {
    FilterOperator.EQ.value: _eq,
    FilterOperator.NEQ.value: lambda actual, expected: not _eq(actual, expected),
    FilterOperator.HAS_PROPERTY.value: lambda actual, _: actual is not _MISSING and actual is not None,
    FilterOperator.NOT_HAS_PROPERTY.value: lambda actual, _: actual is _MISSING or actual is None,
}


def matches_filter(obj: CrmObject, flt: Filter) -> bool:
    check = _OPERATORS.get(flt.operator.upper())
    if check is None:
        return True
    return check(obj.properties.get(flt.property_name, _MISSING), flt.value)


def matches_group(obj: CrmObject, group: FilterGroup) -> bool:
    return all(matches_filter(obj, flt) for flt in group.filters)


def matches(obj: CrmObject, filter_groups: Sequence[FilterGroup]) -> bool:
    return any(matches_group(obj, group) for group in filter_groups)


def search(objects: Iterable[CrmObject], filter_groups: Sequence[FilterGroup]) -> list[CrmObject]:
    """Return the objects matching ``filter_groups``, preserving input order."""
    return [obj for obj in objects if matches(obj, filter_groups)]
