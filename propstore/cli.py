#!/usr/bin/env python3
"""
propstore Command Line Entry Point

Loads a properties file, applies the requested changes and prints the
result.

Usage:
    propstore app.properties                          # Print all properties
    propstore app.properties --get db.host            # Print one value
    propstore app.properties --set db.port=5433       # Add or update
    propstore app.properties --delete legacy.flag     # Remove
    propstore app.properties --debug                  # Enable debug logging

Operations run in a fixed order: sets, then deletes, then gets. Without
--get the whole store is printed. The file on disk is never modified.

Environment Variables:
    PROPSTORE_ENCODING          - Encoding of the file (default utf-8)
    PROPSTORE_MAX_TOKEN_LENGTH  - Longest accepted key or value
    PROPSTORE_MAX_ENTRIES       - Maximum number of properties
    PROPSTORE_DEBUG             - Enable debug mode (true/false)
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config.settings import settings
from .loader import load


def parse_assignment(text: str) -> Tuple[str, str]:
    """Split a ``KEY=VALUE`` argument on its first '='."""
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got {text!r}")
    return key, value


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="propstore",
        description="Load a .properties file and print or change its entries",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    parser.add_argument(
        "file",
        help="Properties file to load",
    )

    parser.add_argument(
        "--get",
        metavar="KEY",
        action="append",
        default=[],
        help="Print the value of KEY (repeatable)",
    )

    parser.add_argument(
        "--set",
        metavar="KEY=VALUE",
        type=parse_assignment,
        action="append",
        default=[],
        help="Add or update a property (repeatable)",
    )

    parser.add_argument(
        "--delete",
        metavar="KEY",
        action="append",
        default=[],
        help="Remove a property (repeatable)",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Enable debug logging",
    )

    return parser.parse_args(argv)


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr),
        ]
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    args = parse_args(argv)

    setup_logging(debug=args.debug)
    logger = logging.getLogger(__name__)

    result = load(args.file)
    if not result.is_ok:
        print(f"propstore: {result.message}", file=sys.stderr)
        return 1

    properties = result.properties
    try:
        for key, value in args.set:
            if not properties.set(key, value):
                print(f"propstore: cannot set {key!r}", file=sys.stderr)
                return 1
            logger.debug(f"Set {key!r}")

        for key in args.delete:
            if not properties.delete(key):
                logger.warning(f"Cannot delete {key!r}: not found")

        if args.get:
            for key in args.get:
                value = properties.get(key)
                if value is None:
                    print(f"{key}: not found")
                else:
                    print(f"{key} = {value}")
        else:
            properties.print(sys.stdout)
    finally:
        properties.destroy()

    return 0


if __name__ == "__main__":
    sys.exit(main())
