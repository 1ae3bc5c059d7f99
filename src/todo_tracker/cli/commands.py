# src/todo_tracker/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from ..core.state import AppState
from ..tasks.task_api import format_todo, select_and_apply

CommandHandler = Callable[[AppState, argparse.Namespace], int]

logger = logging.getLogger(__name__)

MODULE_DOC = "CLI tool to manage your tasks."

LIST_TITLE = "            Tasks             "
LIST_COLUMNS = "Checked  Added     : Task"


@dataclass(slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    aliases: list[str] = field(default_factory=list)


class CommandRegistry:
    """Subcommand registry (add, list, toggle, ...). Built once per process by build_registry()."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._commands[key] = Command(name=key, handler=handler, help_text=help_text, aliases=aliases)
        for alias in aliases:
            self._aliases[alias.lower()] = key

    def get(self, name: str) -> Command | None:
        key = name.lower()
        key = self._aliases.get(key, key)
        return self._commands.get(key)

    def names(self) -> list[str]:
        return sorted(self._commands)

    def commands(self) -> list[Command]:
        return [self._commands[name] for name in self.names()]

    def build_help(self) -> str:
        names = self.names()
        width = max((len(n) for n in names), default=0)
        lines = [MODULE_DOC, "List of available subcommands:"]
        for name in names:
            lines.append(f"  {name:<{width}} : {self._commands[name].help_text}")
        return "\n".join(lines)

    def expected_message(self) -> str:
        return "Expected one subcommands of `" + "`, `".join(self.names()) + "`"


def cmd_add(state: AppState, args: argparse.Namespace) -> int:
    description = " ".join(args.words)
    todo_id = state.store.add_todo(description)
    logger.info("Added todo id=%s", todo_id)
    return 0


def cmd_list(state: AppState, args: argparse.Namespace) -> int:
    date_format = getattr(state.settings, "date_format", "%m/%d")
    todos = state.store.list_todos(unchecked_only=bool(args.unchecked_only))

    state.console.print(LIST_TITLE, style="bold underline", markup=False)
    state.console.print(LIST_COLUMNS, style="bold", markup=False)
    for todo in todos:
        state.emit(format_todo(todo, date_format))
    return 0


def _select(state: AppState, action: Callable[[int], None], label: str) -> int:
    message = select_and_apply(
        state.store,
        state.read_line,
        state.emit,
        action=action,
        label=label,
        empty_selection=getattr(state.settings, "empty_selection", "none"),
        date_format=getattr(state.settings, "date_format", "%m/%d"),
    )
    state.emit(message)
    return 0


def cmd_toggle(state: AppState, args: argparse.Namespace) -> int:
    return _select(state, state.store.toggle_todo, "toggled")


def cmd_delete(state: AppState, args: argparse.Namespace) -> int:
    return _select(state, state.store.delete_todo, "deleted")


def build_registry() -> CommandRegistry:
    registry = CommandRegistry()

    def cmd_help(state: AppState, args: argparse.Namespace) -> int:
        state.emit(registry.build_help())
        return 0

    registry.register("add", cmd_add, help_text="Add a new task")
    registry.register("list", cmd_list, help_text="List all tasks", aliases=["ls"])
    registry.register("toggle", cmd_toggle, help_text="Toggle the check state of a task")
    registry.register("delete", cmd_delete, help_text="Delete a task", aliases=["rm"])
    registry.register("help", cmd_help, help_text="Get help")
    return registry
