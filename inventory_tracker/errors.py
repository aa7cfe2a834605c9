"""Exceptions shared across the inventory package."""


class InventoryError(Exception):
    """Base class for inventory errors."""


class RecordFormatError(InventoryError):
    """A persisted line could not be turned into a Product."""

    def __init__(self, line_number: int, raw: str, reason: str):
        self.line_number = line_number
        self.raw = raw
        self.reason = reason
        super().__init__(f"Line {line_number} {reason}: {raw}")


class SkuSpaceExhaustedError(InventoryError):
    """No unused SKU could be produced."""
