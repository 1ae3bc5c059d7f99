"""
Selection subsystem.

Components:
- range_selector.py: parses "1-3,5"-style strings into zero-based indices
"""

from .range_selector import (
    IndexOutOfRangeError,
    InvalidCharacterError,
    MultipleHyphensError,
    NumberFormatError,
    SelectionError,
    iter_selection,
    parse_selection,
)

__all__ = [
    "IndexOutOfRangeError",
    "InvalidCharacterError",
    "MultipleHyphensError",
    "NumberFormatError",
    "SelectionError",
    "iter_selection",
    "parse_selection",
]
