"""Locale dictionaries: file-backed store, compatibility checks, editor service."""

from .compat import (
    CompatibilityIssue,
    EmptyValue,
    MissingKey,
    check_compatibility,
    is_compatible,
)
from .service import DictionaryService, DictionarySnapshot
from .store import Dictionary

__all__ = [
    "CompatibilityIssue",
    "Dictionary",
    "DictionaryService",
    "DictionarySnapshot",
    "EmptyValue",
    "MissingKey",
    "check_compatibility",
    "is_compatible",
]
