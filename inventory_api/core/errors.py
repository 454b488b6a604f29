"""Error taxonomy raised by services and rendered by the app as JSON."""
from __future__ import annotations


class InventoryError(Exception):
    status_code = 400
    code = "invalid"

    def __init__(self, message: str, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if status_code is not None:
            self.status_code = status_code


class ValidationError(InventoryError):
    """Malformed or missing client input."""


class NotFoundError(InventoryError):
    """The referenced product does not exist."""

    status_code = 404
    code = "not_found"


class InsufficientStockError(InventoryError):
    """Requested sale exceeds the current stock."""

    code = "insufficient_stock"


class StorageError(InventoryError):
    """The state document could not be written."""

    status_code = 500
    code = "storage"
