# src/todo_tracker/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from rich.console import Console

from .ports import LineReader, TodoRepo


def _read_stdin_line() -> str:
    return input()


@dataclass
class AppState:
    # Settings object (config.Settings in production, SimpleNamespace in tests).
    settings: object

    store: TodoRepo
    console: Console

    read_line: LineReader = field(default=_read_stdin_line)

    def emit(self, text: str) -> None:
        self.console.print(text, markup=False)
