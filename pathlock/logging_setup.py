"""Root logging configuration for the command-line entry point."""

from __future__ import annotations

import logging
import sys

from .config import LoggingConfig


def configure_logging(config: LoggingConfig, level: str | None = None) -> None:
    """Send package log records to stderr.

    Args:
        config: The ``[logging]`` section of the loaded config.
        level: Overrides ``config.level`` when given (``--log-level``).
    """
    name = (level or config.level).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {name}")

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(config.format))

    root = logging.getLogger("pathlock")
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric)
    root.propagate = False
