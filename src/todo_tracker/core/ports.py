# src/todo_tracker/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the task helpers.

task_api depends on Protocols instead of concrete implementations,
so tests can swap the SQLite store or stdin for in-memory fakes.
"""

from collections.abc import Callable
from typing import Protocol

from ..tasks.task_models import Todo

LineReader = Callable[[], str]
# Returns one line of user input (without the trailing newline).

Emitter = Callable[[str], None]
# Sends one line of user-visible output.


class TodoRepo(Protocol):
    def add_todo(self, description: str) -> int: ...

    def list_todos(self, *, unchecked_only: bool = False) -> list[Todo]: ...

    def get_todo(self, todo_id: int) -> Todo | None: ...

    def toggle_todo(self, todo_id: int) -> None: ...

    def delete_todo(self, todo_id: int) -> None: ...

    def count_todos(self, *, unchecked_only: bool = False) -> int: ...
