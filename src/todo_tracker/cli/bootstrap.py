# src/todo_tracker/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads settings once,
- ensures local (gitignored) directories exist,
- wires the SQLite store and the rich console into AppState.
"""

from __future__ import annotations

import logging

from rich.console import Console

from ..config import get_settings
from ..core.state import AppState
from ..tasks.task_store import TodoStore

logger = logging.getLogger(__name__)


def _ensure_local_dirs(settings) -> None:
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    settings.db_path.parent.mkdir(parents=True, exist_ok=True)


def build_console(settings=None) -> Console:
    color = bool(getattr(settings, "color", True))
    return Console(highlight=False, no_color=not color, soft_wrap=True)


def create_initial_state(*, settings=None, console: Console | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    Keeping settings injectable makes the app easier to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    _ensure_local_dirs(settings)

    state = AppState(
        settings=settings,
        store=TodoStore(settings.db_path),
        console=console if console is not None else build_console(settings),
    )
    logger.debug("State ready db=%s", settings.db_path)
    return state
