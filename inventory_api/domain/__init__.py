"""Domain types (products, inventory state) with no I/O of their own."""

from .products import InventoryState, Product

__all__ = ["InventoryState", "Product"]
