# tests/test_task_api.py

from __future__ import annotations

import pytest

from todo_tracker.selection.range_selector import (
    IndexOutOfRangeError,
    InvalidCharacterError,
    MultipleHyphensError,
)
from todo_tracker.tasks.task_api import (
    enumerate_todos,
    format_applied,
    format_todo,
    resolve_selection,
    select_and_apply,
)
from todo_tracker.tasks.task_models import Todo

from .fakes import FakeLineReader, FakeTodoRepo


def _todo(todo_id: int, checked: bool = False) -> Todo:
    return Todo(id=todo_id, created_at=1_700_000_000.0, description=f"task {todo_id}", checked=checked)


def test_format_todo_marks_checked_state() -> None:
    date = _todo(1).created_local().strftime("%m/%d")
    assert format_todo(_todo(1)) == f"  [ ]    {date}     : task 1"
    assert format_todo(_todo(1, checked=True)).startswith("  [x]    ")


def test_enumerate_todos_aligns_indices() -> None:
    lines = enumerate_todos([_todo(i) for i in range(10)])
    assert lines[0].startswith(" 0)   [ ]")
    assert lines[9].startswith(" 9)   [ ]")

    short = enumerate_todos([_todo(1), _todo(2)])
    assert short[1].startswith("1)   [ ]")


def test_resolve_selection_maps_indices_to_ids() -> None:
    todos = [_todo(7), _todo(8), _todo(9)]
    assert resolve_selection(todos, [2, 0, 0]) == [9, 7, 7]


def test_resolve_selection_rejects_out_of_range() -> None:
    todos = [_todo(7), _todo(8)]
    with pytest.raises(IndexOutOfRangeError) as exc:
        resolve_selection(todos, [0, 2])
    assert exc.value.index == 2
    assert "0-1" in str(exc.value)


def test_format_applied() -> None:
    assert format_applied([1, 2, 3], "toggled") == "Task(s) [1 2 3] toggled"


def test_select_and_apply_toggles_selected_tasks() -> None:
    repo = FakeTodoRepo(["a", "b", "c", "d", "e"])
    emitted: list[str] = []

    msg = select_and_apply(
        repo, FakeLineReader("1-3"), emitted.append, action=repo.toggle_todo, label="toggled"
    )

    assert msg == "Task(s) [1 2 3] toggled"
    assert repo.toggled == [11, 12, 13]
    assert emitted[0] == "Select task to toggle:"
    assert len(emitted) == 6


def test_select_and_apply_deletes_by_persistent_id() -> None:
    repo = FakeTodoRepo(["a", "b", "c"])

    msg = select_and_apply(
        repo, FakeLineReader("0,2"), lambda _: None, action=repo.delete_todo, label="deleted"
    )

    assert msg == "Task(s) [0 2] deleted"
    assert repo.deleted == [10, 12]
    assert [t.description for t in repo.list_todos()] == ["b"]


@pytest.mark.parametrize(
    ("raw", "error"),
    [("0,9", IndexOutOfRangeError), ("0;1", InvalidCharacterError), ("0--1", MultipleHyphensError)],
)
def test_select_and_apply_applies_nothing_on_error(raw: str, error: type[Exception]) -> None:
    repo = FakeTodoRepo(["a", "b"])

    with pytest.raises(error):
        select_and_apply(
            repo, FakeLineReader(raw), lambda _: None, action=repo.toggle_todo, label="toggled"
        )

    assert repo.toggled == []


def test_blank_selection_selects_nothing_by_default() -> None:
    repo = FakeTodoRepo(["a", "b"])

    msg = select_and_apply(
        repo, FakeLineReader("  "), lambda _: None, action=repo.toggle_todo, label="toggled"
    )

    assert msg == "No task selected."
    assert repo.toggled == []


def test_blank_selection_can_select_everything() -> None:
    repo = FakeTodoRepo(["a", "b"])

    msg = select_and_apply(
        repo,
        FakeLineReader(""),
        lambda _: None,
        action=repo.toggle_todo,
        label="toggled",
        empty_selection="all",
    )

    assert msg == "Task(s) [0 1] toggled"
    assert repo.toggled == [10, 11]


def test_no_tasks_skips_prompt() -> None:
    repo = FakeTodoRepo()
    reader = FakeLineReader("0")

    msg = select_and_apply(repo, reader, lambda _: None, action=repo.toggle_todo, label="toggled")

    assert msg == "No tasks."
    assert reader.calls == 0


def test_huge_range_stops_at_first_out_of_range_index() -> None:
    repo = FakeTodoRepo(["a", "b", "c"])

    with pytest.raises(IndexOutOfRangeError) as exc:
        select_and_apply(
            repo,
            FakeLineReader("0-9999999999"),
            lambda _: None,
            action=repo.toggle_todo,
            label="toggled",
        )

    assert exc.value.index == 3
    assert repo.toggled == []


def test_resolve_selection_accepts_lazy_indices() -> None:
    todos = [_todo(7), _todo(8)]
    assert resolve_selection(todos, iter([1, 0])) == [8, 7]
