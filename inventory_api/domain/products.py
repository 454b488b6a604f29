"""Product and inventory state types plus the coercion rules for client input."""
from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping


def utc_timestamp(now: datetime | None = None) -> str:
    """Return an ISO-8601 UTC timestamp with millisecond precision, e.g. 2026-10-17T10:00:00.000Z."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def coerce_int(value: Any) -> int | None:
    """Coerce numbers or numeric text to int, truncating toward zero. None when not numeric."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _number(value)
    if number is None:
        return None
    return int(number)


def coerce_float(value: Any) -> float | None:
    """Coerce numbers or numeric text to float. None when not numeric."""
    return _number(value)


def coerce_whole(value: Any) -> int | None:
    """Like coerce_int, but rejects values with a fractional part (2.5 -> None)."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    number = _number(value)
    if number is None or not number.is_integer():
        return None
    return int(number)


PRODUCT_ID_PATTERN = re.compile(r"-?[0-9]+")


def parse_product_id(value: Any) -> int | None:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip()
        if PRODUCT_ID_PATTERN.fullmatch(text):
            return int(text)
    return None


@dataclass
class Product:
    id: int
    name: str
    quantity: int
    purchase_price: float
    selling_price: float
    sold_quantity: int = 0
    created_at: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "quantity": self.quantity,
            "purchasePrice": self.purchase_price,
            "sellingPrice": self.selling_price,
            "soldQuantity": self.sold_quantity,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Product":
        """Build a Product from its persisted form. Raises ValueError/KeyError/TypeError on bad documents."""
        product_id = data["id"]
        if isinstance(product_id, bool) or not isinstance(product_id, int):
            raise ValueError(f"product id must be an integer, got {product_id!r}")
        return cls(
            id=product_id,
            name=str(data["name"]),
            quantity=int(data["quantity"]),
            purchase_price=float(data["purchasePrice"]),
            selling_price=float(data["sellingPrice"]),
            sold_quantity=int(data.get("soldQuantity") or 0),
            created_at=str(data.get("createdAt") or ""),
        )


@dataclass
class InventoryState:
    products: list[Product] = field(default_factory=list)
    total_revenue: float = 0

    def find(self, product_id: int | None) -> Product | None:
        if product_id is None:
            return None
        for product in self.products:
            if product.id == product_id:
                return product
        return None

    def index_of(self, product_id: int | None) -> int:
        if product_id is None:
            return -1
        for idx, product in enumerate(self.products):
            if product.id == product_id:
                return idx
        return -1

    def next_id(self, now_ms: int) -> int:
        """Timestamp-derived id that stays strictly above every existing id."""
        highest = max((p.id for p in self.products), default=0)
        return max(now_ms, highest + 1)

    def to_dict(self) -> dict:
        return {
            "products": [p.to_dict() for p in self.products],
            "totalRevenue": self.total_revenue,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "InventoryState":
        if not isinstance(data, Mapping):
            raise TypeError(f"inventory document must be an object, got {type(data).__name__}")
        raw_products = data.get("products") or []
        if not isinstance(raw_products, list):
            raise TypeError("inventory 'products' must be a list")
        revenue = data.get("totalRevenue") or 0
        if isinstance(revenue, bool) or not isinstance(revenue, (int, float)):
            raise TypeError("inventory 'totalRevenue' must be a number")
        return cls(
            products=[Product.from_dict(item) for item in raw_products],
            total_revenue=revenue,
        )


def default_state() -> dict:
    return {"products": [], "totalRevenue": 0}
