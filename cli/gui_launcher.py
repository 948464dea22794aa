"""Default CLI behaviour for launching the Note Keeper GUI."""

from __future__ import annotations

import importlib
import logging

from .utils import print_and_log


def run_default_mode(
    manager,
    settings,
    args,
    logger: logging.Logger,
) -> int:
    """Print readiness messages and optionally launch the GUI."""
    if manager is None:
        raise ValueError("Note Keeper must be initialised before launching GUI mode.")

    print_and_log(logger, logging.INFO, f"Note Keeper ready. Database at {settings.db_path}")
    launch_requested = args.gui if args.gui is not None else True
    if not launch_requested:
        return 0

    try:
        gui_module = importlib.import_module("gui")
    except ModuleNotFoundError as exc:  # pragma: no cover - import failure path
        logger.error(
            "GUI launch requested but dependency %s is missing. Install the project with "
            "`pip install -e .` or rerun with --no-gui.",
            exc.name,
        )
        return 4

    try:
        return gui_module.launch_note_keeper(manager, settings)
    except gui_module.GuiDependencyError as exc:
        logger.error("Unable to start GUI: %s", exc)
        return 4
