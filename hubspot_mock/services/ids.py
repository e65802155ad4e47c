"""Identity generator: unique, increasing ids per resource type."""

from __future__ import annotations

from hubspot_mock.core.constants import DEFAULT_ID_SEED, ResourceType


class IdentityGenerator:
    """Per-type monotonic counters seeded at a large base value.

    Counters advance on every call whether or not the object is later
    archived, so ids are never reused while the process lives. ``reset``
    returns every counter to its seed, which only happens together with a
    full wipe of the stores.
    """

    def __init__(self, seed: int = DEFAULT_ID_SEED) -> None:
        if seed < 1:
            raise ValueError("id seed must be positive")
        self.seed = seed
        self._counters: dict[ResourceType, int] = {}
        self.reset()

    def next(self, resource: ResourceType) -> int:
        value = self._counters[resource]
        self._counters[resource] = value + 1
        return value

    def reset(self) -> None:
        self._counters = {resource: self.seed for resource in ResourceType}
