# src/todo_tracker/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True)
class Todo:
    id: int
    created_at: float
    description: str
    checked: bool = False

    @property
    def mark(self) -> str:
        return "x" if self.checked else " "

    def created_local(self) -> datetime:
        return datetime.fromtimestamp(self.created_at).astimezone()
