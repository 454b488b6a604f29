from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the inventory_api package importable when running tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from inventory_api.core import config as core_config  # noqa: E402


@pytest.fixture()
def data_file(tmp_path, monkeypatch):
    """Point INVENTORY_DATA_FILE at a temporary path and reset the settings cache."""
    path = tmp_path / "data" / "inventory.json"
    monkeypatch.setenv("INVENTORY_DATA_FILE", str(path))
    core_config.get_settings.cache_clear()
    yield path
    core_config.get_settings.cache_clear()
