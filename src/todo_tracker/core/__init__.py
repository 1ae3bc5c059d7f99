"""Shared application state and ports."""
