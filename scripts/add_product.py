#!/usr/bin/env python3
"""
Add a product straight to the inventory document, bypassing HTTP.

Usage:
  python scripts/add_product.py --name Widget --quantity 10 --purchase-price 2.5 --selling-price 5
"""
from __future__ import annotations

import argparse
import sys

from inventory_api.core.config import get_settings
from inventory_api.core.errors import InventoryError
from inventory_api.core.logging_config import configure_logging
from inventory_api.repositories import JSONStateStore
from inventory_api.services.inventory_service import InventoryService


def main() -> None:
    ap = argparse.ArgumentParser(description="Add a product to the inventory")
    ap.add_argument("--name", required=True, help="Product name")
    ap.add_argument("--quantity", required=True, help="Units in stock")
    ap.add_argument("--purchase-price", required=True, help="Unit purchase price")
    ap.add_argument("--selling-price", required=True, help="Unit selling price")
    args = ap.parse_args()

    settings = get_settings()
    configure_logging(settings.log_level)
    store = JSONStateStore(settings.data_file)
    store.initialize()
    svc = InventoryService(store)
    try:
        product = svc.create_product(args.name, args.quantity, args.purchase_price, args.selling_price)
    except InventoryError as exc:
        raise SystemExit(exc.message)
    print("OK: product added")
    print(f"  ID: {product.id}")
    print(f"  Name: {product.name}")
    print(f"  Quantity: {product.quantity}")
    print(f"  Purchase price: {product.purchase_price:.2f}")
    print(f"  Selling price: {product.selling_price:.2f}")
    print(f"  File: {store.path}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
