"""Tests for ItemLedger insert/consume/expire operations."""

import pytest

from pathlock.errors import (
    InsufficientQuantityError,
    InvalidQuantityError,
    ItemNotFoundError,
)
from pathlock.ledger import ItemLedger
from pathlock.models import Item


@pytest.fixture
def ledger():
    return ItemLedger()


@pytest.fixture
def stocked(ledger):
    """Ledger with three items at different expiration dates."""
    ledger.insert("milk", 2, "2025-05-01")
    ledger.insert("cheese", 1, "2025-06-01")
    ledger.insert("butter", 3, "2025-07-15")
    return ledger


def test_insert_new_item(ledger):
    """Inserting a new name creates a record."""
    item = ledger.insert("milk", 2, "2025-05-01")
    assert item == Item("milk", 2, "2025-05-01")
    assert "milk" in ledger
    assert len(ledger) == 1


def test_insert_same_name_sums_and_keeps_first_expiration(ledger):
    """Repeated inserts add up; the first expiration date wins."""
    ledger.insert("milk", 2, "2025-05-01")
    ledger.insert("milk", 3, "2025-05-10")
    ledger.insert("milk", 1.5, "2025-04-01")

    item = ledger.get("milk")
    assert item.quantity == 6.5
    assert item.expiration_date == "2025-05-01"


@pytest.mark.parametrize("quantity", [0, -1, -0.5])
def test_insert_rejects_non_positive_quantity(ledger, quantity):
    """Non-positive quantities are rejected without touching the ledger."""
    with pytest.raises(InvalidQuantityError) as exc:
        ledger.insert("milk", quantity, "2025-05-01")
    assert "must be greater than zero" in str(exc.value)
    assert len(ledger) == 0


def test_consume_partial(stocked):
    """Partial consumption keeps the item with reduced quantity."""
    remaining = stocked.consume("butter", 1)
    assert remaining == 2
    assert stocked.get("butter").quantity == 2


def test_consume_full_removes_item(stocked):
    """Consuming exactly the held quantity removes the item."""
    stocked.consume("milk", 2)
    assert "milk" not in stocked
    assert {item.name for item in stocked.status()} == {"cheese", "butter"}


def test_consume_not_found(stocked):
    """Consuming an absent item raises ItemNotFoundError."""
    with pytest.raises(ItemNotFoundError) as exc:
        stocked.consume("bread", 1)
    assert str(exc.value) == "Product not found in refrigerator."


def test_consume_insufficient_leaves_ledger_unchanged(stocked):
    """Over-consumption is rejected and nothing changes."""
    before = {tuple(item) for item in stocked.status()}
    with pytest.raises(InsufficientQuantityError) as exc:
        stocked.consume("cheese", 5)
    assert exc.value.available == 1
    assert exc.value.requested == 5
    assert {tuple(item) for item in stocked.status()} == before


def test_consume_rejects_non_positive_quantity(stocked):
    """Zero consumption is a validation error, checked before lookup."""
    with pytest.raises(InvalidQuantityError) as exc:
        stocked.consume("bread", 0)
    assert str(exc.value) == "Error: Consumed quantity must be greater than zero."


def test_consume_float_residue_is_not_pruned(ledger):
    """Only an exact zero prunes; float residue stays in the ledger."""
    ledger.insert("juice", 0.3, "2025-05-01")
    ledger.consume("juice", 0.1)
    remaining = ledger.consume("juice", 0.1)

    # 0.3 - 0.1 - 0.1 lands just below 0.1 in binary floating point
    assert 0 < remaining < 0.1
    assert "juice" in ledger
    with pytest.raises(InsufficientQuantityError):
        ledger.consume("juice", 0.1)


def test_expire_sweep_uses_string_comparison(stocked):
    """Items dated on or before the reference date are removed."""
    expired = stocked.expire_sweep("2025-06-01")
    assert {item.name for item in expired} == {"milk", "cheese"}
    assert {item.name for item in stocked.status()} == {"butter"}


def test_expire_sweep_nothing_expired(stocked):
    """No items removed when all are later than the reference date."""
    assert stocked.expire_sweep("2025-01-01") == []
    assert len(stocked) == 3


def test_status_empty(ledger):
    """An empty ledger yields nothing."""
    assert list(ledger.status()) == []


def test_status_yields_snapshots(stocked):
    """Mutating a yielded item does not change the ledger."""
    for item in stocked.status():
        item.quantity = 0
    assert stocked.get("butter").quantity == 3


def test_status_items_unpack_to_triples(stocked):
    """Status entries unpack as (name, quantity, expiration_date)."""
    triples = {tuple(item) for item in stocked.status()}
    assert ("milk", 2, "2025-05-01") in triples


def test_insert_rejects_nan(ledger):
    """NaN is not a positive quantity."""
    with pytest.raises(InvalidQuantityError):
        ledger.insert("milk", float("nan"), "2025-05-01")
    assert len(ledger) == 0


def test_consume_rejects_nan(stocked):
    """A NaN consume leaves the stored quantity untouched."""
    with pytest.raises(InvalidQuantityError):
        stocked.consume("milk", float("nan"))
    assert stocked.get("milk").quantity == 2
