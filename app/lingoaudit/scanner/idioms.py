from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple

from ..config import (
    BARE_IDENTIFIER_MARKERS,
    CALL_IDENTIFIER_MARKER,
    CALL_OPENING_MARKER,
    TAG_IDENTIFIER_MARKER,
    TAG_OPENING_MARKER,
)


class IdiomKind(str, Enum):
    TAG_ATTRIBUTE = "tag_attribute"
    CALL = "call"


@dataclass(frozen=True)
class SpanningIdiom:
    """An idiom announced by an opening marker whose key may follow on later lines."""

    kind: IdiomKind
    opening_marker: str
    identifier_marker: str


@dataclass(frozen=True)
class IdiomSet:
    spanning: Tuple[SpanningIdiom, ...]
    bare_markers: Tuple[str, ...]

    @classmethod
    def default(cls, extra_markers: Iterable[str] = ()) -> "IdiomSet":
        markers = list(BARE_IDENTIFIER_MARKERS)
        for marker in extra_markers:
            candidate = marker.strip()
            if candidate and candidate not in markers:
                markers.append(candidate)
        return cls(
            spanning=(
                SpanningIdiom(
                    IdiomKind.TAG_ATTRIBUTE, TAG_OPENING_MARKER, TAG_IDENTIFIER_MARKER
                ),
                SpanningIdiom(IdiomKind.CALL, CALL_OPENING_MARKER, CALL_IDENTIFIER_MARKER),
            ),
            bare_markers=tuple(markers),
        )


__all__ = ["IdiomKind", "IdiomSet", "SpanningIdiom"]
