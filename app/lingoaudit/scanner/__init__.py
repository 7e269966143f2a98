"""Heuristic scanner for localization key usages in source files."""

from .extractor import extract, extract_quoted
from .idioms import IdiomKind, IdiomSet, SpanningIdiom
from .scanner import (
    IdiomMatcher,
    KeyUsage,
    MatchState,
    read_source_lines,
    scan_file,
    scan_lines,
)

__all__ = [
    "IdiomKind",
    "IdiomMatcher",
    "IdiomSet",
    "KeyUsage",
    "MatchState",
    "SpanningIdiom",
    "extract",
    "extract_quoted",
    "read_source_lines",
    "scan_file",
    "scan_lines",
]
