#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""
SSI CLI - self-sovereign identities as single-line URIs.

Commands:
  ssi new --uid "Alice <dns:alice.example>"    Generate key and identity
  ssi sign --secret ssi-priv:... --uid ...     Sign identity with a known key
  ssi check ssi:...                            Verify identity text
"""

from __future__ import annotations

import argparse
import logging
import sys

from ssi import __version__
from ssi.core.logging import configure_logging

from .commands import COMMAND_MODULES

logger = logging.getLogger(__name__)


def app() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ssi",
        description="Self-sovereign identities: portable, self-certifying identifiers",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ssi new --uid "Alice <dns:alice.example>" --expiry 2030-01-01
  ssi new --algo ed25519 --network testnet --uid "Bob <mailto:bob@example.org>"
  ssi sign --secret ssi-priv:... --uid "Alice <dns:alice.example>"
  ssi check "ssi:...?uid=Alice+dns%3Aalice.example&sig=..."
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)
    for module in COMMAND_MODULES:
        module.register(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = app()
    args = parser.parse_args(argv)

    configure_logging(level="DEBUG" if args.verbose else None)

    handler = getattr(args, "func", None)
    if handler is None:
        parser.print_help()
        return 1
    return handler(args)


if __name__ == "__main__":
    sys.exit(main())
