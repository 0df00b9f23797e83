"""Perishable goods inventory for a single refrigerator."""

from .config import FridgeConfig, LoggingConfig, ShellConfig, load_config
from .errors import (
    ConfigError,
    FridgeError,
    InsufficientQuantityError,
    InvalidQuantityError,
    InventoryError,
    ItemNotFoundError,
    MalformedRecordError,
)
from .history import ActionLog, parse_record
from .ledger import ItemLedger
from .models import ActionKind, ActionRecord, Item, ShoppingEntry
from .refrigerator import Refrigerator
from .shell import MenuShell

__all__ = [
    "Refrigerator",
    "ItemLedger",
    "ActionLog",
    "parse_record",
    "MenuShell",
    "Item",
    "ActionKind",
    "ActionRecord",
    "ShoppingEntry",
    "FridgeConfig",
    "ShellConfig",
    "LoggingConfig",
    "load_config",
    "FridgeError",
    "ConfigError",
    "InventoryError",
    "InvalidQuantityError",
    "ItemNotFoundError",
    "InsufficientQuantityError",
    "MalformedRecordError",
]
