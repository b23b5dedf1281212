"""CLI entry point for mdtrack."""

import argparse
import sys
from typing import NoReturn

from loguru import logger

from ..core.config import Config
from . import commands


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="mdtrack",
        description="Markdown tracker - daily time series from dated notes",
    )
    parser.add_argument("-V", "--version", action="version", version="%(prog)s 0.1.0")
    parser.add_argument("-c", "--config", help="Path to a TOML config file")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log scan details to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", required=False)

    series_parser = subparsers.add_parser(
        "series", help="Print per-day series for one or more queries"
    )
    commands.add_series_arguments(series_parser)

    return parser


def main() -> NoReturn:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args()

    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if args.verbose else "WARNING")

    try:
        config = Config.from_env_or_file(args.config)
        if args.command == "series":
            commands.handle_series(args, config)
        else:
            parser.print_help()

        sys.exit(0)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
