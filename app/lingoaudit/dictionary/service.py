from __future__ import annotations

import threading
from typing import Dict, Mapping, Tuple

from ..exceptions import UnknownLocaleError
from ..log_config import verbose_log
from ..utils import truncate_string
from .store import Dictionary

DictionarySnapshot = Dict[str, Dict[str, str]]


class DictionaryService:
    """Serializes editor access to the primary and secondary dictionaries.

    Each dictionary has its own lock; reads copy the entries under that lock
    and writes upsert then persist before releasing it. If persisting fails
    the previous value is restored, so memory never drifts from disk.
    """

    def __init__(self, primary: Dictionary, secondary: Dictionary) -> None:
        if primary.locale == secondary.locale:
            raise ValueError(
                f"dictionaries must have distinct file names, both are '{primary.locale}'"
            )
        self.primary = primary
        self.secondary = secondary
        self._dictionaries: Dict[str, Dictionary] = {
            primary.locale: primary,
            secondary.locale: secondary,
        }
        self._locks: Dict[str, threading.RLock] = {
            locale: threading.RLock() for locale in self._dictionaries
        }

    @property
    def locales(self) -> Tuple[str, str]:
        return (self.primary.locale, self.secondary.locale)

    def _resolve(self, locale: str) -> Dictionary:
        dictionary = self._dictionaries.get(locale)
        if dictionary is None:
            raise UnknownLocaleError(locale)
        return dictionary

    def snapshot(self) -> DictionarySnapshot:
        result: DictionarySnapshot = {}
        for locale, dictionary in self._dictionaries.items():
            with self._locks[locale]:
                result[locale] = dictionary.sorted_entries()
        return result

    def upsert(self, locale: str, key: str, value: str) -> None:
        """Insert or replace ``key`` in one locale and persist that file."""

        dictionary = self._resolve(locale)
        with self._locks[locale]:
            previous = dictionary.get(key)
            dictionary.upsert(key, value)
            try:
                dictionary.save()
            except OSError:
                if previous is None:
                    dictionary.entries.pop(key, None)
                else:
                    dictionary.upsert(key, previous)
                raise
        verbose_log(
            "dictionary_upserted",
            {"locale": locale, "key": key, "value": truncate_string(value, 120)},
        )

    def upsert_many(self, key: str, values: Mapping[str, str]) -> None:
        """Apply one upsert per locale, in the order the locales are served."""

        for locale in values:
            self._resolve(locale)
        for locale in self.locales:
            if locale in values:
                self.upsert(locale, key, values[locale])


__all__ = ["DictionaryService", "DictionarySnapshot"]
