"""
JSON-file persistence adapter.

The whole inventory lives in one pretty-printed document that is read in full
at the start of every request and replaced in full by every save.
"""

from __future__ import annotations

from pathlib import Path
import json
import logging
import os
import tempfile

from inventory_api.domain.products import InventoryState, default_state

logger = logging.getLogger(__name__)


class JSONStateStore:
    """Loads and saves the inventory state as a single JSON document."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def initialize(self) -> None:
        """Create the storage directory and an empty document if missing. Safe to call repeatedly."""
        data_dir = self.path.parent
        if not data_dir.exists():
            data_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created data directory %s", data_dir)
        if not self.path.exists():
            self._write(default_state())
            logger.info("Created database file %s", self.path)

    def load(self) -> InventoryState:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                raw = json.load(f)
            return InventoryState.from_dict(raw)
        except (OSError, ValueError, KeyError, TypeError):
            logger.exception("Error reading database %s", self.path)
            return InventoryState()

    def save(self, state: InventoryState) -> bool:
        try:
            self._write(state.to_dict())
        except (OSError, TypeError, ValueError):
            logger.exception("Error writing database %s", self.path)
            return False
        return True

    def _write(self, document: dict) -> None:
        """Write to a temp file beside the document and swap it in with os.replace."""
        payload = json.dumps(document, ensure_ascii=False, indent=2, allow_nan=False)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, self.path)
        except BaseException:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
            raise
