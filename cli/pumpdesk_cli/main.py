"""Main entry point for the PumpDesk console."""
from __future__ import annotations

import asyncio
import logging
import sys

from pumpdesk.config import settings
from pumpdesk.kernel.controller import TableController
from pumpdesk.kernel.loader import load_into

from pumpdesk_cli import __version__
from pumpdesk_cli.repl import Repl


def print_help():
    """Print help message."""
    print(f"""
PumpDesk v{__version__}

Usage:
  pumpdesk [options]

Options:
  --source URL|PATH   Dataset to load (default: {settings.DATA_SOURCE})
  --page-size N       Rows per page (default: {settings.PAGE_SIZE})
  --log-level LEVEL   DEBUG, INFO, WARNING, ERROR (default: {settings.LOG_LEVEL})
  -h, --help          Show this help
  -v, --version       Show version

Environment:
  PUMPDESK_DATA_SOURCE     Dataset URL or file path (same as --source)
  PUMPDESK_PAGE_SIZE       Default rows per page
  PUMPDESK_PAGE_SIZES      Allowed page sizes, comma-separated
  PUMPDESK_FETCH_TIMEOUT   Dataset fetch timeout in seconds
  PUMPDESK_LOG_LEVEL       Log level

Examples:
  pumpdesk                                           # Load from default URL
  pumpdesk --source ./public/pumps_data.json         # Load from a file
  pumpdesk --source http://localhost:3000/pumps_data.json --page-size 25
""")


def parse_args(args: list[str]) -> dict:
    """
    Parse command line arguments.

    Returns dict with:
        source: str | None
        page_size: int | None
        log_level: str | None
        show_help: bool
        show_version: bool
    """
    result = {
        "source": None,
        "page_size": None,
        "log_level": None,
        "show_help": False,
        "show_version": False,
    }

    i = 0
    while i < len(args):
        arg = args[i]

        if arg == "--source":
            if i + 1 < len(args):
                result["source"] = args[i + 1]
                i += 1
            else:
                print("Error: --source requires a URL or path")
                sys.exit(1)
        elif arg == "--page-size":
            if i + 1 < len(args) and args[i + 1].isdigit():
                result["page_size"] = int(args[i + 1])
                i += 1
            else:
                print("Error: --page-size requires a number")
                sys.exit(1)
        elif arg == "--log-level":
            if i + 1 < len(args):
                result["log_level"] = args[i + 1].upper()
                i += 1
            else:
                print("Error: --log-level requires a level")
                sys.exit(1)
        elif arg in ("--help", "-h"):
            result["show_help"] = True
        elif arg in ("--version", "-v"):
            result["show_version"] = True
        elif arg.startswith("-"):
            print(f"Unknown option: {arg}")
            print("Run 'pumpdesk --help' for usage.")
            sys.exit(1)
        else:
            print(f"Unknown argument: {arg}")
            print("Run 'pumpdesk --help' for usage.")
            sys.exit(1)

        i += 1

    return result


def build_controller(args: dict) -> TableController:
    """Create the controller and run the one-shot dataset load."""
    controller = TableController(
        page_size=args["page_size"] or settings.PAGE_SIZE,
        page_sizes=settings.PAGE_SIZES,
    )
    source = args["source"] or settings.DATA_SOURCE
    count = asyncio.run(load_into(controller, source, timeout=settings.FETCH_TIMEOUT))
    if count == 0:
        print(f"  No pumps loaded from {source}.")
    return controller


def main():
    """Main entry point."""
    args = parse_args(sys.argv[1:])

    if args["show_help"]:
        print_help()
        return

    if args["show_version"]:
        print(f"pumpdesk {__version__}")
        return

    level_name = args["log_level"] or settings.LOG_LEVEL
    logging.basicConfig(
        level=logging.getLevelNamesMapping().get(level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    controller = build_controller(args)
    Repl(controller).start()


if __name__ == "__main__":
    main()
