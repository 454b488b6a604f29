"""
Persistence adapters.

Services depend on the StateStore protocol rather than on a concrete file, so
the JSON document can be swapped for the in-memory store in tests.
"""
from __future__ import annotations

from typing import Protocol

from inventory_api.domain.products import InventoryState

from .json_storage import JSONStateStore
from .memory import InMemoryStateStore


class StateStore(Protocol):
    def initialize(self) -> None: ...

    def load(self) -> InventoryState: ...

    def save(self, state: InventoryState) -> bool: ...


__all__ = ["StateStore", "JSONStateStore", "InMemoryStateStore"]
