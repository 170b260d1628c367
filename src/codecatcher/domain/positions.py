"""Offset ↔ line conversion for source text.

``line_of`` is the only place a character offset becomes a line number.
The helpers below it go the other way, for parsers that report
``(line, column)`` pairs instead of offsets.
"""

from __future__ import annotations

from typing import Optional, Union

UNKNOWN_LINE = "Unknown"


def line_of(
    offset: Optional[int],
    text: str,
    default: Union[int, str] = 1,
) -> Union[int, str]:
    """Return the 1-based line containing ``offset``.

    ``None`` or a negative offset (``str.find`` miss) yields ``default``.
    Offsets past the end are clamped to the text length.
    """
    if offset is None or offset < 0:
        return default
    return text.count("\n", 0, offset) + 1


def line_starts(text: str) -> list[int]:
    """Return the offset at which each line of ``text`` starts."""
    starts = [0]
    pos = text.find("\n")
    while pos != -1:
        starts.append(pos + 1)
        pos = text.find("\n", pos + 1)
    return starts


def offset_of(line: int, column: int, starts: list[int]) -> Optional[int]:
    """Convert a 1-based line and 0-based column into an offset.

    ``starts`` is the table returned by :func:`line_starts`. Returns
    ``None`` when the line is outside the table.
    """
    if line < 1 or line > len(starts):
        return None
    return starts[line - 1] + max(column, 0)
