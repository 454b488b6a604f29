"""Inventory tracking backend: products, stock, sales and revenue over HTTP/JSON."""

__version__ = "0.1.0"
