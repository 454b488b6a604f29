"""In-memory state store with the same contract as JSONStateStore."""
from __future__ import annotations

import copy
import json
import logging

from inventory_api.domain.products import InventoryState, default_state

logger = logging.getLogger(__name__)


class InMemoryStateStore:
    def __init__(self, document: dict | None = None, *, fail_saves: bool = False) -> None:
        self.document = copy.deepcopy(document) if document is not None else None
        self.fail_saves = fail_saves
        self.saves = 0

    def initialize(self) -> None:
        if self.document is None:
            self.document = default_state()

    def load(self) -> InventoryState:
        try:
            return InventoryState.from_dict(copy.deepcopy(self.document or default_state()))
        except (ValueError, KeyError, TypeError):
            logger.exception("Error reading in-memory inventory")
            return InventoryState()

    def save(self, state: InventoryState) -> bool:
        if self.fail_saves:
            logger.error("Error writing in-memory inventory: saves disabled")
            return False
        document = state.to_dict()
        try:
            json.dumps(document, allow_nan=False)
        except ValueError:
            logger.exception("Error writing in-memory inventory")
            return False
        self.document = copy.deepcopy(document)
        self.saves += 1
        return True
