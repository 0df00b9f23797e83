"""Exception types raised by the fridge inventory."""

from __future__ import annotations


class FridgeError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(FridgeError):
    """The configuration file could not be read."""


class InventoryError(FridgeError):
    """A ledger operation was rejected. The ledger is left unchanged."""


class InvalidQuantityError(InventoryError):
    def __init__(self, quantity: float, action: str = "Product") -> None:
        self.quantity = quantity
        super().__init__(f"Error: {action} quantity must be greater than zero.")


class ItemNotFoundError(InventoryError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Product not found in refrigerator.")


class InsufficientQuantityError(InventoryError):
    def __init__(self, name: str, available: float, requested: float) -> None:
        self.name = name
        self.available = available
        self.requested = requested
        super().__init__("Not enough quantity to consume.")


class MalformedRecordError(FridgeError):
    """Text does not match either action record template."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Not an action record: {text!r}")
