"""Item ledger: current fridge contents keyed by product name."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .errors import InsufficientQuantityError, InvalidQuantityError, ItemNotFoundError
from .models import Item

logger = logging.getLogger(__name__)


class ItemLedger:
    """Manages the name -> Item mapping.

    Every operation validates before it mutates, so a rejected call leaves
    the ledger exactly as it was.
    """

    def __init__(self) -> None:
        self._items: dict[str, Item] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def get(self, name: str) -> Item | None:
        """Return a copy of the stored item, or None if absent."""
        item = self._items.get(name)
        if item is None:
            return None
        return Item(item.name, item.quantity, item.expiration_date)

    def insert(self, name: str, quantity: float, expiration_date: str) -> Item:
        """Add stock for a product.

        An existing product keeps the expiration date it was first stored
        with; only its quantity grows.

        Raises:
            InvalidQuantityError: If quantity is not positive.
        """
        if not quantity > 0:
            raise InvalidQuantityError(quantity, "Product")

        item = self._items.get(name)
        if item is not None:
            item.quantity += quantity
        else:
            item = Item(name, quantity, expiration_date)
            self._items[name] = item
        logger.info("Inserted %s of %s (now %s)", quantity, name, item.quantity)
        return item

    def consume(self, name: str, quantity: float) -> float:
        """Take stock out of the fridge.

        The item is removed once its quantity is exactly zero.

        Returns:
            The quantity left after consumption.

        Raises:
            InvalidQuantityError: If quantity is not positive.
            ItemNotFoundError: If the product is not stored.
            InsufficientQuantityError: If less than ``quantity`` is stored.
        """
        if not quantity > 0:
            raise InvalidQuantityError(quantity, "Consumed")

        item = self._items.get(name)
        if item is None:
            raise ItemNotFoundError(name)
        if item.quantity < quantity:
            raise InsufficientQuantityError(name, item.quantity, quantity)

        item.quantity -= quantity
        remaining = item.quantity
        logger.info("Consumed %s of %s (left %s)", quantity, name, remaining)
        if remaining == 0:
            del self._items[name]
            logger.info("Removed %s: quantity reached zero", name)
        return remaining

    def expire_sweep(self, current_date: str) -> list[Item]:
        """Remove every item whose expiration date is on or before current_date.

        Returns:
            The removed items, in no particular order.
        """
        expired = [
            item for item in self._items.values() if item.is_expired(current_date)
        ]
        for item in expired:
            del self._items[item.name]
        if expired:
            logger.info("Expired %d item(s) as of %s", len(expired), current_date)
        return expired

    def status(self) -> Iterator[Item]:
        """Yield a snapshot of every stored item, in no particular order."""
        for item in list(self._items.values()):
            yield Item(item.name, item.quantity, item.expiration_date)
