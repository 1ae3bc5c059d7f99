# tests/conftest.py

from __future__ import annotations

import io
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from todo_tracker.core.state import AppState
from todo_tracker.tasks.task_store import TodoStore

from .fakes import FakeLineReader


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the CLI handlers.

    We intentionally use a SimpleNamespace rather than importing real config,
    to keep unit tests isolated from the environment and any local .env.
    """
    return SimpleNamespace(
        app_name="todo-test",
        log_level="WARNING",
        data_dir=tmp_path,
        db_path=tmp_path / "todos.sqlite3",
        log_file=tmp_path / "todo.log",
        empty_selection="none",
        date_format="%m/%d",
        color=False,
    )


@pytest.fixture()
def store(settings: SimpleNamespace) -> TodoStore:
    return TodoStore(settings.db_path)


@pytest.fixture()
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def reader() -> FakeLineReader:
    return FakeLineReader()


@pytest.fixture()
def state(
    settings: SimpleNamespace, store: TodoStore, output: io.StringIO, reader: FakeLineReader
) -> AppState:
    """
    AppState wired with a real SQLite store, scripted input and a captured console.
    """
    console = Console(file=output, highlight=False, no_color=True, soft_wrap=True, width=200)
    return AppState(settings=settings, store=store, console=console, read_line=reader)
