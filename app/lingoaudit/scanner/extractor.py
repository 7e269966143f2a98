"""Quoted-literal extraction primitives used by the usage scanner.

Both helpers work on a single line and never look past it; a literal that
starts on one line and ends on another is simply not found.
"""

from __future__ import annotations

from typing import Optional, Tuple

QUOTE = '"'

Span = Tuple[str, int]


def _skip_padding(line: str, index: int) -> int:
    length = len(line)
    while index < length and line[index].isspace():
        index += 1
    if index < length and line[index] == "{":
        index += 1
        while index < length and line[index].isspace():
            index += 1
    return index


def _quoted_from(line: str, start: int) -> Optional[Span]:
    end = line.find(QUOTE, start + 1)
    if end == -1:
        return None
    return line[start + 1 : end], end + 1


def extract_span(line: str, marker: str) -> Optional[Span]:
    """Return the literal following ``marker`` and the index just past it.

    Whitespace and at most one opening brace may sit between the marker and
    the literal; anything else (an expression, a template string, a line
    break) means there is no literal to report.
    """

    position = line.find(marker)
    if position == -1:
        return None
    index = _skip_padding(line, position + len(marker))
    if index >= len(line) or line[index] != QUOTE:
        return None
    return _quoted_from(line, index)


def extract(line: str, marker: str) -> Optional[str]:
    span = extract_span(line, marker)
    return span[0] if span else None


def extract_quoted_span(line: str) -> Optional[Span]:
    start = line.find(QUOTE)
    if start == -1:
        return None
    return _quoted_from(line, start)


def extract_quoted(line: str) -> Optional[str]:
    """Return the first double-quoted literal on the line, ignoring markers."""

    span = extract_quoted_span(line)
    return span[0] if span else None


__all__ = [
    "extract",
    "extract_quoted",
    "extract_quoted_span",
    "extract_span",
]
