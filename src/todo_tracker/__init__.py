"""
todo_tracker: personal task tracking from the command line.

Tasks live in a local SQLite database; `todo toggle` and `todo delete` take a
selection such as "1-3,5" against the enumerated task list.
"""

__version__ = "0.1.0"
