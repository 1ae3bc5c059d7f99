# tests/test_task_store.py

from __future__ import annotations

from pathlib import Path

import pytest

from todo_tracker.tasks.task_store import TodoStore


def test_add_list_toggle_delete(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")

    first = store.add_todo("  Buy milk  ")
    second = store.add_todo("Write report")
    assert first > 0
    assert second > first

    todos = store.list_todos()
    assert [t.description for t in todos] == ["Buy milk", "Write report"]
    assert not any(t.checked for t in todos)

    store.toggle_todo(first)
    assert store.get_todo(first).checked is True
    assert [t.id for t in store.list_todos(unchecked_only=True)] == [second]
    assert store.count_todos() == 2
    assert store.count_todos(unchecked_only=True) == 1

    store.toggle_todo(first)
    assert store.get_todo(first).checked is False

    store.delete_todo(second)
    assert store.get_todo(second) is None
    assert [t.id for t in store.list_todos()] == [first]


def test_blank_description_rejected(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")
    with pytest.raises(ValueError, match="description is required"):
        store.add_todo("   ")
    assert store.count_todos() == 0


def test_store_persists_between_instances(tmp_path: Path) -> None:
    db = tmp_path / "nested" / "todos.sqlite3"
    TodoStore(db).add_todo("Persist me")

    reopened = TodoStore(db)
    assert [t.description for t in reopened.list_todos()] == ["Persist me"]


def test_missing_ids_are_ignored(tmp_path: Path) -> None:
    store = TodoStore(tmp_path / "todos.sqlite3")
    store.toggle_todo(999)
    store.delete_todo(999)
    assert store.count_todos() == 0
