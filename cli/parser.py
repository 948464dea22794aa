"""Argument parser for Note Keeper CLI.

Updates:
  v0.1.0 - 2026-10-15 - Add launcher flags plus list/search subcommands.
"""

from __future__ import annotations

import argparse
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the Note Keeper launcher."""
    parser = argparse.ArgumentParser(description="Note Keeper launcher")
    parser.add_argument(
        "--logging-config",
        type=Path,
        default=None,
        help="Path to logging configuration file (INI format)",
    )
    parser.add_argument(
        "--print-settings",
        action="store_true",
        help="Print resolved settings and exit",
    )
    parser.add_argument(
        "--gui",
        dest="gui",
        action="store_true",
        default=None,
        help="Launch the PySide6 interface after services are initialised (default behaviour).",
    )
    parser.add_argument(
        "--no-gui",
        dest="gui",
        action="store_false",
        help="Skip launching the GUI and exit once services are initialised.",
    )

    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser(
        "list",
        help="Print stored notes in collection order.",
    )

    search_parser = subparsers.add_parser(
        "search",
        help="Print notes whose title, content, or tags contain the query.",
    )
    search_parser.add_argument(
        "query",
        type=str,
        help="Case-insensitive substring to look for.",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Return parsed CLI arguments for the Note Keeper launcher."""
    return build_parser().parse_args(argv)
