"""Custom exceptions raised while loading and editing locale dictionaries."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence


class DictionaryError(Exception):
    """Base class for dictionary failures that abort an audit run."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class DuplicateKeysError(DictionaryError):
    """Raised when a dictionary file defines the same key more than once."""

    def __init__(self, path: Path, keys: Sequence[str]) -> None:
        self.keys: tuple[str, ...] = tuple(keys)
        joined = ", ".join(self.keys)
        super().__init__(path, f"duplicate keys in {path}: {joined}")


class DictionaryFormatError(DictionaryError):
    """Raised when a dictionary file is unreadable or not a flat string map."""

    def __init__(self, path: Path, reason: str) -> None:
        self.reason = reason
        super().__init__(path, f"invalid dictionary {path}: {reason}")


class UnknownLocaleError(LookupError):
    """Raised when the editor addresses a locale it does not serve."""

    def __init__(self, locale: str) -> None:
        super().__init__(locale)
        self.locale = locale
