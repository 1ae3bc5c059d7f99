"""
Task subsystem.

Components:
- task_models.py: data structures (Todo)
- task_store.py: SQLite-backed storage + query/update helpers
- task_api.py: listing, selection resolution and bulk actions used by the CLI
"""
