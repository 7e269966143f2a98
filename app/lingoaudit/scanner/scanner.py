"""Line-oriented scanner locating localization key usages in source text.

This is a heuristic, not a parser. Each spanning idiom runs its own small
state machine over the lines of a file:

* ``IDLE`` looks for the opening marker. On the line holding it, only the
  identifier marker is tried.
* ``AWAITING_IDENTIFIER`` waits for the identifier marker followed by a
  literal. A line with a ``?`` yields its first literal as the truthy
  branch. A closing tag gives up on the construct.
* ``AWAITING_FALSY_BRANCH`` is the same wait after a truthy branch was
  reported; a later line with a ``:`` yields its first literal as the
  falsy branch.

Bare identifier markers are checked on every line without any state.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from ..config import BRANCH_SEPARATOR_TOKEN, CLOSING_TOKENS, TERNARY_TOKEN
from ..log_config import debug_verbose, warning_log
from .extractor import extract_quoted, extract_span
from .idioms import IdiomSet, SpanningIdiom


@dataclass(frozen=True)
class KeyUsage:
    key: str
    line: int
    source: Path


class MatchState(str, Enum):
    IDLE = "idle"
    AWAITING_IDENTIFIER = "awaiting_identifier"
    AWAITING_FALSY_BRANCH = "awaiting_falsy_branch"


class IdiomMatcher:
    """Tracks one spanning idiom across consecutive lines of a single file."""

    def __init__(self, idiom: SpanningIdiom) -> None:
        self.idiom = idiom
        self.state = MatchState.IDLE

    def feed(self, line: str) -> List[str]:
        """Advance over ``line`` and return the keys it yields, in line order."""

        keys: List[str] = []
        rest: Optional[str] = line
        if self.state is not MatchState.IDLE:
            rest = self._advance(line, keys)
        marker = self.idiom.opening_marker
        while rest is not None and self.state is MatchState.IDLE:
            position = rest.find(marker)
            if position == -1:
                break
            self.state = MatchState.AWAITING_IDENTIFIER
            rest = self._take_identifier(rest[position + len(marker) :], keys)
        return keys

    def _take_identifier(self, segment: str, keys: List[str]) -> Optional[str]:
        """Emit the identifier literal in ``segment``, returning the text after it."""

        span = extract_span(segment, self.idiom.identifier_marker)
        if span is None:
            return None
        keys.append(span[0])
        self.state = MatchState.IDLE
        return segment[span[1] :]

    def _advance(self, line: str, keys: List[str]) -> Optional[str]:
        rest = self._take_identifier(line, keys)
        if rest is not None:
            return rest

        if TERNARY_TOKEN in line:
            truthy = extract_quoted(line)
            if truthy is not None:
                keys.append(truthy)
                self.state = MatchState.AWAITING_FALSY_BRANCH
                return None

        if (
            self.state is MatchState.AWAITING_FALSY_BRANCH
            and BRANCH_SEPARATOR_TOKEN in line
        ):
            falsy = extract_quoted(line)
            if falsy is not None:
                keys.append(falsy)
                self.state = MatchState.IDLE
                return None

        if any(token in line for token in CLOSING_TOKENS):
            self.state = MatchState.IDLE
        return None


def _bare_keys(line: str, markers: Sequence[str]) -> List[str]:
    keys: List[str] = []
    for marker in markers:
        position = line.find(marker)
        while position != -1:
            span = extract_span(line[position:], marker)
            if span is not None:
                keys.append(span[0])
            position = line.find(marker, position + len(marker))
    return keys


def scan_lines(
    lines: Iterable[str], idioms: IdiomSet, source: Path
) -> List[KeyUsage]:
    """Scan already-loaded lines; repeated calls on the same input agree."""

    matchers = [IdiomMatcher(idiom) for idiom in idioms.spanning]
    usages: List[KeyUsage] = []
    for number, line in enumerate(lines, 1):
        for matcher in matchers:
            for key in matcher.feed(line):
                usages.append(KeyUsage(key=key, line=number, source=source))
        for key in _bare_keys(line, idioms.bare_markers):
            usages.append(KeyUsage(key=key, line=number, source=source))
    return usages


def read_source_lines(path: Path) -> List[str]:
    """Decode ``path`` line by line, blanking lines that are not valid UTF-8."""

    lines: List[str] = []
    for number, chunk in enumerate(path.read_bytes().splitlines(), 1):
        try:
            text = chunk.decode("utf-8")
        except UnicodeDecodeError as exc:
            warning_log(
                "scanner_line_skipped",
                {"path": str(path), "line": number, "error": str(exc)},
            )
            text = ""
        if number == 1:
            text = text.lstrip("\ufeff")
        lines.append(text)
    return lines


def scan_file(path: Path, idioms: IdiomSet) -> List[KeyUsage]:
    usages = scan_lines(read_source_lines(path), idioms, path)
    debug_verbose("scanner_file_scanned", {"path": str(path), "usages": len(usages)})
    return usages


__all__ = [
    "IdiomMatcher",
    "KeyUsage",
    "MatchState",
    "read_source_lines",
    "scan_file",
    "scan_lines",
]
