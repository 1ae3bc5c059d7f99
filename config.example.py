# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name used in logs (default: todo).",
    "TODO_LOG_LEVEL": "Console logging level (default: WARNING).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory (default: .local/todo).",
    "TODO_DB_PATH": "TodoStore SQLite path (default: <data_dir>/todos.sqlite3).",
    "TODO_LOG_FILE": "Debug log file (default: <data_dir>/todo.log).",
    # Behaviour / output
    "TODO_EMPTY_SELECTION": "What a blank toggle/delete selection means: none | all (default: none).",
    "TODO_DATE_FORMAT": "strftime format of the date column (default: %m/%d).",
    "TODO_COLOR": "Styled terminal output (true/false, default: true).",
}
