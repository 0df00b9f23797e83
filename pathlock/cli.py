"""CLI entry point for the fridge inventory."""

from __future__ import annotations

import argparse
import sys

from dotenv import find_dotenv, load_dotenv

from .config import load_config
from .errors import ConfigError
from .logging_setup import configure_logging
from .refrigerator import Refrigerator
from .shell import MenuShell


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="pathlock-fridge",
        description="Refrigerator PathLock: perishable inventory with expiry checks and restock suggestions",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML config file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level for stderr (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--script",
        type=str,
        default=None,
        metavar="FILE",
        help="Read menu input from FILE instead of stdin",
    )

    args = parser.parse_args(argv)

    load_dotenv(find_dotenv(usecwd=True))

    try:
        config = load_config(args.config)
        configure_logging(config.logging, args.log_level)
    except (ConfigError, ValueError) as e:
        print(str(e), file=sys.stderr)
        sys.exit(2)

    fridge = Refrigerator()

    if args.script:
        try:
            stream = open(args.script, encoding="utf-8")
        except OSError as e:
            print(f"Cannot read script: {e}", file=sys.stderr)
            sys.exit(2)
        with stream:
            status = MenuShell(fridge, config.shell, stdin=stream).run()
    else:
        status = MenuShell(fridge, config.shell).run()

    sys.exit(status)


if __name__ == "__main__":
    main()
