"""Data models for fridge items, action records and shopping entries."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


def format_quantity(quantity: float) -> str:
    """Render a quantity in its shortest general form (``2``, ``2.5``)."""
    return f"{quantity:g}"


def format_exact_quantity(quantity: float) -> str:
    """Render a quantity without losing digits (``1234567``, ``0.1``)."""
    text = repr(float(quantity))
    return text[:-2] if text.endswith(".0") else text


@dataclass
class Item:
    """A product currently stored in the refrigerator."""

    name: str
    quantity: float
    expiration_date: str   # "YYYY-MM-DD", compared as a string

    def __iter__(self) -> Iterator[str | float]:
        yield self.name
        yield self.quantity
        yield self.expiration_date

    def is_expired(self, current_date: str) -> bool:
        return self.expiration_date <= current_date


class ActionKind(Enum):
    INSERT = "Inserted"
    CONSUME = "Consumed"


@dataclass(frozen=True)
class ActionRecord:
    """One entry of the action log.

    ``str(record)`` gives one of the two fixed templates
    ``"Inserted <qty> of <name>"`` / ``"Consumed <qty> of <name>"``.
    """

    kind: ActionKind
    name: str
    quantity: float

    def __str__(self) -> str:
        return f"{self.kind.value} {format_exact_quantity(self.quantity)} of {self.name}"


@dataclass(frozen=True)
class ShoppingEntry:
    """A restock suggestion derived from consumption history."""

    name: str
    total_consumed: float

    def __str__(self) -> str:
        return f"Buy more {self.name} ({format_quantity(self.total_consumed)})"
