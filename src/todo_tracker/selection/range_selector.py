# src/todo_tracker/selection/range_selector.py

"""
Selection-range parser.

Turns a user-typed string such as "1-3,5" into the ordered list of zero-based
list indices it denotes. The result is neither sorted nor deduplicated, and it
is never checked against the item count: resolving indices against the listed
items is the caller's job (see tasks/task_api.py).

Grammar (after all whitespace is removed):
- tokens are separated by commas;
- a token is a number ("4") or a range ("1-3", "2-", "-2", "-");
- an omitted range start is 0, an omitted range end is item_count - 1.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterator
from enum import Enum

_DIGITS = frozenset("0123456789")
_ALLOWED = _DIGITS | {",", "-"}


class SelectionError(ValueError):
    """Base class for selection failures (parse or resolution)."""

    kind = "selection"


class InvalidCharacterError(SelectionError):
    kind = "invalid_character"

    def __init__(self, char: str) -> None:
        self.char = char
        super().__init__(
            f"invalid character {char!r}: ranges should only contain indexes (numbers), "
            "range delimiters (commas) or range compositors (hyphens)"
        )


class MultipleHyphensError(SelectionError):
    kind = "multiple_hyphens"

    def __init__(self, position: int) -> None:
        self.position = position
        super().__init__(
            "cannot have several hyphens in a range: only one hyphen permitted per range "
            "(the input is a list of comma separated ranges)"
        )


class NumberFormatError(SelectionError):
    kind = "number_format"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"cannot convert {text!r} to an index")


class IndexOutOfRangeError(SelectionError):
    kind = "index_out_of_range"

    def __init__(self, index: int, item_count: int) -> None:
        self.index = index
        self.item_count = item_count
        if item_count > 0:
            bounds = f"0-{item_count - 1}"
        else:
            bounds = "none available"
        super().__init__(f"index {index} is out of range ({bounds})")


class _State(Enum):
    IDLE = "idle"
    START_DIGITS = "start_digits"
    HYPHEN = "hyphen"
    END_DIGITS = "end_digits"


def _strip_whitespace(raw: str) -> str:
    return "".join(raw.split())


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError as e:
        raise NumberFormatError(text) from e


def _scan(text: str, default_end: int) -> list[range]:
    """Validate `text` in one pass and return one range per token (a bare number is a 1-long range)."""
    tokens: list[range] = []

    state = _State.IDLE
    start = 0
    end = default_end

    def close() -> range:
        if state in (_State.HYPHEN, _State.END_DIGITS):
            return range(start, end + 1)
        # IDLE closes with the default start, START_DIGITS with the parsed one.
        return range(start, start + 1)

    i = 0
    while i < len(text):
        char = text[i]

        if char in _DIGITS:
            j = i
            while j < len(text) and text[j] in _DIGITS:
                j += 1
            value = _to_int(text[i:j])
            if state is _State.HYPHEN:
                end = value
                state = _State.END_DIGITS
            else:
                start = value
                state = _State.START_DIGITS
            i = j
            continue

        if char == "-":
            if state in (_State.HYPHEN, _State.END_DIGITS):
                raise MultipleHyphensError(i)
            state = _State.HYPHEN
        else:
            tokens.append(close())
            state = _State.IDLE
            start = 0
            end = default_end
        i += 1

    if not text.endswith(","):
        tokens.append(close())

    return tokens


def iter_selection(raw: str, item_count: int) -> Iterator[int]:
    """
    Validate `raw` eagerly, then expand it lazily.

    Syntax errors are raised by this call itself, before the first index is
    produced, so a caller can stop at the first out-of-range index without
    materializing a huge range such as "0-9999999999".
    """
    text = _strip_whitespace(raw or "")

    for char in text:
        if char not in _ALLOWED:
            raise InvalidCharacterError(char)

    default_end = item_count - 1
    if not text:
        tokens = [range(0, default_end + 1)]
    else:
        tokens = _scan(text, default_end)
    return itertools.chain.from_iterable(tokens)


def parse_selection(raw: str, item_count: int) -> list[int]:
    """
    Parse `raw` into zero-based indices.

    `item_count` only supplies the default range end (item_count - 1).
    Raises InvalidCharacterError, MultipleHyphensError or NumberFormatError.
    """
    return list(iter_selection(raw, item_count))


__all__ = [
    "IndexOutOfRangeError",
    "InvalidCharacterError",
    "MultipleHyphensError",
    "NumberFormatError",
    "SelectionError",
    "iter_selection",
    "parse_selection",
]
