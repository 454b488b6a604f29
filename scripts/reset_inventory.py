#!/usr/bin/env python3
"""
Reset the inventory document to the empty default state (no products, zero revenue).

Usage:
  python scripts/reset_inventory.py --yes
"""
from __future__ import annotations

import argparse
import sys

from inventory_api.core.config import get_settings
from inventory_api.domain.products import InventoryState
from inventory_api.repositories import JSONStateStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Reset the inventory document")
    ap.add_argument("--yes", action="store_true", help="Confirm the reset")
    args = ap.parse_args()

    store = JSONStateStore(get_settings().data_file)
    if not args.yes:
        raise SystemExit(f"Refusing to reset {store.path} without --yes")
    store.initialize()
    previous = store.load()
    if not store.save(InventoryState()):
        raise SystemExit(f"Could not write {store.path}")
    print(f"OK: {store.path} reset ({len(previous.products)} products removed)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
