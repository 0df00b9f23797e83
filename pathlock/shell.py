"""Interactive numbered menu driving a Refrigerator."""

from __future__ import annotations

import logging
import math
import re
import sys
from typing import TextIO

from .config import ShellConfig
from .errors import InventoryError
from .models import format_quantity
from .refrigerator import Refrigerator

logger = logging.getLogger(__name__)

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

MENU = """
*** Refrigerator Menu ***
1. Insert Product
2. Consume Product
3. Show Refrigerator Status
4. Show Action History
5. Check Expired Products
6. Generate Shopping List
7. Exit"""


class _TokenReader:
    """Whitespace-separated tokens from a stream, one line at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: list[str] = []

    def next(self) -> str | None:
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending = line.split()
        return self._pending.pop(0)

    def discard_line(self) -> None:
        self._pending = []


class _EndOfInput(Exception):
    pass


class MenuShell:
    """Reads menu choices and arguments, calls the refrigerator, prints results.

    This is the operation boundary: inventory errors are printed and the
    loop carries on with the next command.
    """

    def __init__(
        self,
        fridge: Refrigerator,
        config: ShellConfig | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.fridge = fridge
        self.config = config or ShellConfig()
        self._reader = _TokenReader(stdin or sys.stdin)
        self._out = stdout or sys.stdout

    # --- IO helpers -------------------------------------------------------
    def _print(self, text: str = "", end: str = "\n") -> None:
        print(text, end=end, file=self._out)

    def _ask(self, prompt: str) -> str:
        self._print(prompt, end="")
        token = self._reader.next()
        if token is None:
            raise _EndOfInput
        return token

    def _ask_quantity(self, prompt: str) -> float | None:
        token = self._ask(prompt)
        try:
            value = float(token)
        except ValueError:
            value = math.nan
        if not math.isfinite(value):
            self._print(f"Error: '{token}' is not a valid quantity.")
            self._reader.discard_line()
            return None
        return value

    def _ask_date(self, prompt: str) -> str | None:
        token = self._ask(prompt)
        if self.config.strict_dates and not _DATE_RE.match(token):
            self._print(f"Error: '{token}' is not a date in YYYY-MM-DD format.")
            self._reader.discard_line()
            return None
        return token

    # --- Loop ---------------------------------------------------------------
    def run(self) -> int:
        """Run until Exit or end of input. Returns the process exit status."""
        if self.config.show_banner:
            self._print("WELCOME!")
            self._print("Refrigerator PathLock 2025!")
            self._print("Note: Use the date format YYYY-MM-DD for expiration dates.\n")

        while True:
            self._print(MENU)
            try:
                token = self._ask(self.config.prompt)
                if not self.dispatch(token):
                    return 0
            except _EndOfInput:
                self._print()
                self._print("Exiting program. Goodbye!")
                return 0

    def dispatch(self, choice: str) -> bool:
        """Handle one menu choice. Returns False when the user asked to exit."""
        match choice:
            case "1":
                self._cmd_insert()
            case "2":
                self._cmd_consume()
            case "3":
                self._cmd_status()
            case "4":
                self._cmd_history()
            case "5":
                self._cmd_expire()
            case "6":
                self._cmd_shopping_list()
            case "7":
                self._print("Exiting program. Goodbye!")
                return False
            case _:
                self._print("Invalid choice. Please try again.")
        return True

    # --- Commands -----------------------------------------------------------
    def _cmd_insert(self) -> None:
        name = self._ask("Enter product name: ")
        quantity = self._ask_quantity("Enter product quantity: ")
        if quantity is None:
            return
        expiration_date = self._ask_date("Enter expiration date (YYYY-MM-DD): ")
        if expiration_date is None:
            return
        try:
            self.fridge.insert(name, quantity, expiration_date)
        except InventoryError as e:
            logger.warning("Insert of %s rejected: %s", name, e)
            self._print(str(e))

    def _cmd_consume(self) -> None:
        name = self._ask("Enter product name: ")
        quantity = self._ask_quantity("Enter quantity to consume: ")
        if quantity is None:
            return
        try:
            self.fridge.consume(name, quantity)
        except InventoryError as e:
            logger.warning("Consume of %s rejected: %s", name, e)
            self._print(str(e))

    def _cmd_status(self) -> None:
        self._print("\n--- Current Refrigerator Status ---")
        if self.fridge.is_empty:
            self._print("The refrigerator is empty.")
            return
        for name, quantity, expiration_date in self.fridge.status():
            self._print(
                f"- {name}: {format_quantity(quantity)} (Expires: {expiration_date})"
            )

    def _cmd_history(self) -> None:
        self._print("\n--- History of Actions ---")
        records = list(self.fridge.history())
        if not records:
            self._print("No actions recorded yet.")
            return
        for record in records:
            self._print(f"- {record}")

    def _cmd_expire(self) -> None:
        current_date = self._ask_date("Enter current date (YYYY-MM-DD): ")
        if current_date is None:
            return
        self._print("\n--- Checking Expired Products ---")
        expired = self.fridge.expire_sweep(current_date)
        for item in expired:
            self._print(f"Product {item.name} has expired. Please remove it.")
        if not expired:
            self._print("No expired products found.")

    def _cmd_shopping_list(self) -> None:
        self._print("\n--- Generated Shopping List ---")
        entries = self.fridge.shopping_list()
        if not entries:
            self._print("No items to suggest for shopping.")
            return
        for entry in entries:
            self._print(f"- {entry}")
