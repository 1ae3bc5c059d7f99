# src/todo_tracker/tasks/task_api.py

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence

from ..core.ports import Emitter, LineReader, TodoRepo
from ..selection.range_selector import IndexOutOfRangeError, iter_selection
from .task_models import Todo

logger = logging.getLogger(__name__)

TodoAction = Callable[[int], None]

# Past-tense label -> verb used in the selection prompt.
_PROMPT_VERBS = {"toggled": "toggle", "deleted": "delete"}


def format_todo(todo: Todo, date_format: str = "%m/%d") -> str:
    return f"  [{todo.mark}]    {todo.created_local().strftime(date_format)}     : {todo.description}"


def enumerate_todos(todos: Sequence[Todo], date_format: str = "%m/%d") -> list[str]:
    """Number todos from 0, right-aligning the index to the width of len(todos)."""
    width = len(str(len(todos)))
    return [f"{i:>{width}}) {format_todo(t, date_format)}" for i, t in enumerate(todos)]


def resolve_selection(todos: Sequence[Todo], indices: Iterable[int]) -> list[int]:
    """
    Map list indices to persistent todo ids.

    Every index is checked before anything is returned, so a bad index
    means no action runs at all. `indices` may be lazy: resolution stops at
    the first out-of-range index instead of expanding the rest.
    """
    ids: list[int] = []
    for index in indices:
        if index < 0 or index >= len(todos):
            raise IndexOutOfRangeError(index, len(todos))
        ids.append(todos[index].id)
    return ids


def format_applied(indices: Sequence[int], label: str) -> str:
    return f"Task(s) [{' '.join(str(i) for i in indices)}] {label}"


def select_and_apply(
    store: TodoRepo,
    read_line: LineReader,
    emit: Emitter,
    *,
    action: TodoAction,
    label: str,
    empty_selection: str = "none",
    date_format: str = "%m/%d",
) -> str:
    """
    Interactive bulk action:
    list todos -> print enumerated list -> read selection -> parse -> resolve -> apply.

    Returns the user-facing summary line. Raises SelectionError on bad input
    (nothing is applied in that case).
    """
    todos = store.list_todos()
    if not todos:
        return "No tasks."

    verb = _PROMPT_VERBS.get(label, label)
    emit(f"Select task to {verb}:")
    for line in enumerate_todos(todos, date_format):
        emit(line)

    raw = read_line()
    if not raw.strip() and empty_selection != "all":
        logger.debug("Empty selection, nothing to %s.", verb)
        return "No task selected."

    ids = resolve_selection(todos, iter_selection(raw, len(todos)))
    position = {t.id: i for i, t in enumerate(todos)}
    indices = [position[todo_id] for todo_id in ids]

    for todo_id in ids:
        action(todo_id)

    logger.info("Applied %s to %d task(s) ids=%s", verb, len(ids), ids)
    return format_applied(indices, label)
