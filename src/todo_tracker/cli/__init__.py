"""Command-line front-end (argument parsing, command registry, composition root)."""
