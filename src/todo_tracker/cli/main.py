# src/todo_tracker/cli/main.py

"""
CLI entrypoint.

Checks the subcommand, initializes logging, builds AppState, then runs
the handler registered for the subcommand and turns errors into "Err: ..."
plus a non-zero exit code.
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys

from ..cli.bootstrap import build_console, create_initial_state
from ..cli.commands import CommandRegistry, build_registry
from ..config import get_settings
from ..core.state import AppState
from ..logging_setup import setup_logging
from ..selection.range_selector import SelectionError

logger = logging.getLogger(__name__)

_HELP_FLAGS = ("-h", "--help")


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todo",
        description=registry.build_help(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    sub = parser.add_subparsers(dest="command")

    for command in registry.commands():
        name = command.name
        p = sub.add_parser(
            name,
            aliases=command.aliases,
            help=command.help_text,
            description=command.help_text,
        )
        if name == "add":
            p.add_argument("words", nargs="*", help="Task description")
        elif name == "list":
            p.add_argument(
                "-u",
                "--unchecked-only",
                action="store_true",
                help="Only display the tasks that are not checked",
            )
    return parser


def _configure_logging(settings) -> None:
    level_name = str(getattr(settings, "log_level", "WARNING")).upper()
    console_level = getattr(logging, level_name, logging.WARNING)
    setup_logging(log_file=getattr(settings, "log_file", None), console_level=console_level)


def main(argv: list[str] | None = None, state: AppState | None = None) -> int:
    """
    Run one subcommand and return the exit code.

    `state` is injectable for tests; when omitted, settings and logging
    are configured from the environment.
    """
    args_list = list(sys.argv[1:] if argv is None else argv)
    registry = build_registry()

    settings = state.settings if state is not None else get_settings()
    console = state.console if state is not None else build_console(settings)

    if args_list and args_list[0] in _HELP_FLAGS:
        console.print(registry.build_help(), markup=False)
        return 0

    command = registry.get(args_list[0]) if args_list else None
    if command is None:
        console.print(registry.expected_message(), markup=False)
        return 1

    # Subcommand names are case-insensitive; argparse only knows the lowercase ones.
    args_list[0] = args_list[0].lower()

    parser = build_parser(registry)
    try:
        args = parser.parse_args(args_list)
    except SystemExit as e:
        # argparse exits on -h (0) and on usage errors (2)
        return int(e.code or 0)

    if state is None:
        _configure_logging(settings)
        logger.debug("Starting %s command=%s", getattr(settings, "app_name", "todo"), command.name)
        try:
            state = create_initial_state(settings=settings, console=console)
        except (OSError, sqlite3.Error):
            logger.exception("Error initializing DB")
            console.print("Error initializing DB", markup=False)
            return 1

    try:
        return command.handler(state, args)
    except (SelectionError, ValueError, sqlite3.Error) as e:
        logger.debug("Command %s failed.", command.name, exc_info=True)
        state.emit(f"Err: {e}")
        return 1
    except EOFError:
        logger.debug("No selection read (EOF).")
        state.emit("Err: no selection given")
        return 1
    except KeyboardInterrupt:
        state.emit("")
        return 130


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
