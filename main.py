"""Application entry point for Note Keeper.

Updates:
  v0.1.1 - 2026-10-19 - Only build the note manager for commands that need it.
  v0.1.0 - 2026-10-15 - Wire settings, logging, the note manager, and CLI commands.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cli.commands import COMMAND_SPECS
from cli.gui_launcher import run_default_mode
from cli.parser import parse_args
from cli.runtime import setup_logging
from cli.settings_summary import print_settings_summary
from config import NoteKeeperSettings, SettingsError, load_settings
from core import NoteKeeperError, build_note_manager

if TYPE_CHECKING:  # pragma: no cover - typing helpers
    from core.note_manager import NoteManager


def _initialise_manager(
    settings: NoteKeeperSettings,
    logger: logging.Logger,
) -> NoteManager | None:
    try:
        return build_note_manager(settings)
    except NoteKeeperError as exc:
        logger.error("Failed to initialise services: %s", exc)
        return None


def main(argv: list[str] | None = None) -> int:
    """Entrypoint that wires settings, services, and CLI commands."""
    args = parse_args(argv)
    setup_logging(args.logging_config)

    logger = logging.getLogger("note_keeper.main")
    try:
        settings = load_settings()
    except SettingsError as exc:
        logger.error("Failed to load settings: %s", exc)
        return 2

    if args.print_settings:
        print_settings_summary(settings)
        return 0

    command = getattr(args, "command", None)
    spec = COMMAND_SPECS.get(command)

    manager = None
    manager_required = spec is None or spec.requires_manager
    if manager_required:
        manager = _initialise_manager(settings, logger)
        if manager is None:
            return 3

    try:
        if spec is not None:
            return spec.handler(manager, args, logger)
        return run_default_mode(manager, settings, args, logger)
    finally:
        if manager is not None:
            manager.close()


if __name__ == "__main__":
    raise SystemExit(main())
