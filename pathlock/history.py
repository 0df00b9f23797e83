"""Action log and the shopping list report derived from it."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from .errors import MalformedRecordError
from .models import ActionKind, ActionRecord, ShoppingEntry

logger = logging.getLogger(__name__)

# Quantity is the token after the first space, name is everything after " of ".
_RECORD_RE = re.compile(r"^(Inserted|Consumed) ([^ ]+) of (.*)$")


def parse_record(text: str) -> ActionRecord:
    """Rebuild an ActionRecord from its rendered template.

    Only ``"Inserted <qty> of <name>"`` and ``"Consumed <qty> of <name>"``
    are understood.

    Raises:
        MalformedRecordError: If the text matches neither template.
    """
    m = _RECORD_RE.match(text)
    if m is None:
        raise MalformedRecordError(text)
    try:
        quantity = float(m.group(2))
    except ValueError:
        raise MalformedRecordError(text) from None
    return ActionRecord(ActionKind(m.group(1)), m.group(3), quantity)


class ActionLog:
    """Append-only, process-lifetime log of successful inserts and consumes."""

    def __init__(self) -> None:
        self._records: list[ActionRecord] = []

    def __len__(self) -> int:
        return len(self._records)

    def append(self, record: ActionRecord) -> None:
        self._records.append(record)
        logger.debug("Logged action: %s", record)

    def history(self) -> Iterator[ActionRecord]:
        """Yield every record, oldest first."""
        yield from list(self._records)

    def shopping_list(self) -> list[ShoppingEntry]:
        """Aggregate consumed quantity per product over the whole history.

        Recomputed on every call; products that were only inserted do not
        appear.
        """
        totals: dict[str, float] = {}
        for record in self._records:
            if record.kind is ActionKind.CONSUME:
                totals[record.name] = totals.get(record.name, 0.0) + record.quantity
        return [ShoppingEntry(name, total) for name, total in totals.items()]
