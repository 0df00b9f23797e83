"""TOML configuration loader for the fridge shell."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .errors import ConfigError

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class ShellConfig:
    prompt: str = "Enter your choice: "
    strict_dates: bool = True
    show_banner: bool = True


@dataclass
class LoggingConfig:
    level: str = "WARNING"
    format: str = DEFAULT_LOG_FORMAT


@dataclass
class FridgeConfig:
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> FridgeConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The log level can be supplied via ``PATHLOCK_LOG_LEVEL`` when the file
    leaves it unset.

    Raises:
        ConfigError: If the file exists but cannot be read or is not valid
            TOML.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path).expanduser()
        if p.exists():
            try:
                with open(p, "rb") as f:
                    raw = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid config file {p}: {e}") from e
            except (OSError, UnicodeDecodeError) as e:
                raise ConfigError(f"Cannot read config file {p}: {e}") from e

    shl = raw.get("shell", {})
    lg = raw.get("logging", {})

    # Resolve log level: config file → environment variable → default
    level = lg.get("level", "") or os.environ.get("PATHLOCK_LOG_LEVEL", "") or "WARNING"

    return FridgeConfig(
        shell=ShellConfig(
            prompt=shl.get("prompt", "Enter your choice: "),
            strict_dates=shl.get("strict_dates", True),
            show_banner=shl.get("show_banner", True),
        ),
        logging=LoggingConfig(
            level=level.upper(),
            format=lg.get("format", DEFAULT_LOG_FORMAT),
        ),
    )
