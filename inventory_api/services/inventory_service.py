"""Inventory use cases: list, create, sell and delete products."""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Any

from inventory_api.core.errors import (
    InsufficientStockError,
    NotFoundError,
    StorageError,
    ValidationError,
)
from inventory_api.domain.products import (
    InventoryState,
    Product,
    coerce_float,
    coerce_int,
    coerce_whole,
    parse_product_id,
    utc_timestamp,
)
from inventory_api.repositories import StateStore

logger = logging.getLogger(__name__)


@dataclass
class SaleResult:
    revenue: float
    product: Product


class InventoryService:
    """Runs each operation as load -> mutate -> save against the injected store.

    Mutations are serialized by a lock so two requests handled by the same
    process cannot overwrite each other's changes.
    """

    def __init__(self, store: StateStore) -> None:
        self.store = store
        self._write_lock = threading.Lock()

    # -------------------------------------- helpers --------------------------------------
    def _now_ms(self) -> int:
        return int(time.time() * 1000)

    def _require_product(self, state: InventoryState, product_id: Any) -> Product:
        product = state.find(parse_product_id(product_id))
        if product is None:
            raise NotFoundError("Product not found!")
        return product

    def _persist(self, state: InventoryState, failure_message: str) -> None:
        if not self.store.save(state):
            raise StorageError(failure_message)

    # -------------------------------------- queries --------------------------------------
    def list_products(self) -> InventoryState:
        return self.store.load()

    def get_product(self, product_id: Any) -> Product:
        return self._require_product(self.store.load(), product_id)

    # -------------------------------------- mutations --------------------------------------
    def create_product(self, name: Any, quantity: Any, purchase_price: Any, selling_price: Any) -> Product:
        clean_name = name.strip() if isinstance(name, str) else ""
        if not clean_name or quantity is None or purchase_price is None or selling_price is None:
            raise ValidationError("All fields are required!")

        qty = coerce_int(quantity)
        if qty is None or qty < 0:
            raise ValidationError("Quantity must be a non-negative number")
        purchase = coerce_float(purchase_price)
        if purchase is None or purchase < 0:
            raise ValidationError("Purchase price must be a non-negative number")
        selling = coerce_float(selling_price)
        if selling is None or selling < 0:
            raise ValidationError("Selling price must be a non-negative number")

        with self._write_lock:
            state = self.store.load()
            product = Product(
                id=state.next_id(self._now_ms()),
                name=clean_name,
                quantity=qty,
                purchase_price=purchase,
                selling_price=selling,
                sold_quantity=0,
                created_at=utc_timestamp(),
            )
            state.products.append(product)
            self._persist(state, "Error saving product")
        logger.info("Product added: %s (id=%s)", product.name, product.id)
        return product

    def sell_product(self, product_id: Any, quantity: Any) -> SaleResult:
        qty = coerce_whole(quantity)
        if qty is None or qty <= 0:
            raise ValidationError("Invalid quantity!")

        with self._write_lock:
            state = self.store.load()
            product = self._require_product(state, product_id)
            if product.quantity < qty:
                raise InsufficientStockError("Not enough stock!")
            revenue = qty * product.selling_price
            if not math.isfinite(revenue) or not math.isfinite(state.total_revenue + revenue):
                raise ValidationError("Sale revenue is too large to record")
            product.quantity -= qty
            product.sold_quantity += qty
            state.total_revenue += revenue
            self._persist(state, "Error updating product")
        logger.info("Product sold: %s qty=%s revenue=%s", product.name, qty, revenue)
        return SaleResult(revenue=revenue, product=product)

    def delete_product(self, product_id: Any) -> Product:
        with self._write_lock:
            state = self.store.load()
            idx = state.index_of(parse_product_id(product_id))
            if idx == -1:
                raise NotFoundError("Product not found!")
            removed = state.products.pop(idx)
            self._persist(state, "Error deleting product")
        logger.info("Product deleted: %s (id=%s)", removed.name, removed.id)
        return removed
