# src/todo_tracker/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Nothing is read at import time except the optional .env file.
- Tests build Settings directly instead of going through the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TODO"

EMPTY_SELECTION_POLICIES = ("none", "all")

logger = logging.getLogger(__name__)


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


def _env_choice(name: str, choices: tuple[str, ...], default: str) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw not in choices:
        logger.warning("Ignoring %s=%r (expected one of %s).", name, raw, ", ".join(choices))
        return default
    return raw


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    db_path: Path
    log_file: Path

    # ---- Behaviour / output ----
    empty_selection: str
    date_format: str
    color: bool

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "todo") or "todo"
        log_level = _env(_k("LOG_LEVEL"), "WARNING")

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/todo"))
        db_path = _env_path(_k("DB_PATH"), data_dir / "todos.sqlite3")
        log_file = _env_path(_k("LOG_FILE"), data_dir / "todo.log")

        empty_selection = _env_choice(
            _k("EMPTY_SELECTION"), EMPTY_SELECTION_POLICIES, "none"
        )
        date_format = _env(_k("DATE_FORMAT"), "%m/%d") or "%m/%d"
        color = _env_bool(_k("COLOR"), True)

        return Settings(
            app_name=app_name,
            log_level=log_level,
            data_dir=data_dir,
            db_path=db_path,
            log_file=log_file,
            empty_selection=empty_selection,
            date_format=date_format,
            color=color,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Load .env locally; real environment variables win.
    load_dotenv(override=False)
    return Settings.from_env()
