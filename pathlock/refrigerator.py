"""Refrigerator: the ledger and its action log, kept in step."""

from __future__ import annotations

from collections.abc import Iterator

from .history import ActionLog
from .ledger import ItemLedger
from .models import ActionKind, ActionRecord, Item, ShoppingEntry


class Refrigerator:
    """Single-location perishable inventory.

    A record is appended to the action log only after the ledger accepted
    the change, so a rejected operation leaves both untouched.
    """

    def __init__(
        self,
        ledger: ItemLedger | None = None,
        log: ActionLog | None = None,
    ) -> None:
        self.ledger = ledger if ledger is not None else ItemLedger()
        self.log = log if log is not None else ActionLog()

    def insert(self, name: str, quantity: float, expiration_date: str) -> Item:
        item = self.ledger.insert(name, quantity, expiration_date)
        self.log.append(ActionRecord(ActionKind.INSERT, name, quantity))
        return item

    def consume(self, name: str, quantity: float) -> float:
        remaining = self.ledger.consume(name, quantity)
        self.log.append(ActionRecord(ActionKind.CONSUME, name, quantity))
        return remaining

    def expire_sweep(self, current_date: str) -> list[Item]:
        return self.ledger.expire_sweep(current_date)

    def status(self) -> Iterator[Item]:
        return self.ledger.status()

    def history(self) -> Iterator[ActionRecord]:
        return self.log.history()

    def shopping_list(self) -> list[ShoppingEntry]:
        return self.log.shopping_list()

    @property
    def is_empty(self) -> bool:
        return len(self.ledger) == 0
