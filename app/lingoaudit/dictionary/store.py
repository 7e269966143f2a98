"""File-backed locale dictionary: strict JSON loading and sorted saving."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Mapping, Optional, Tuple

from ..exceptions import DictionaryFormatError, DuplicateKeysError
from ..log_config import debug_verbose, verbose_log


class _Pairs(list):  # type: ignore[type-arg]
    """Key/value pairs of one JSON object, in file order."""


def _keep_pairs(pairs: List[Tuple[str, Any]]) -> _Pairs:
    return _Pairs(pairs)


def _duplicated_keys(pairs: _Pairs) -> List[str]:
    """Return every key seen more than once, in the order it was first repeated."""

    seen: set[str] = set()
    duplicates: List[str] = []
    for key, _ in pairs:
        if key in seen:
            if key not in duplicates:
                duplicates.append(key)
            continue
        seen.add(key)
    return duplicates


def _decode(path: Path, raw: str) -> Dict[str, str]:
    try:
        decoded = json.loads(raw, object_pairs_hook=_keep_pairs)
    except json.JSONDecodeError as exc:
        raise DictionaryFormatError(path, f"invalid JSON ({exc})") from exc
    if not isinstance(decoded, _Pairs):
        raise DictionaryFormatError(path, "root must be a JSON object")

    duplicates = _duplicated_keys(decoded)
    if duplicates:
        raise DuplicateKeysError(path, duplicates)

    entries: Dict[str, str] = {}
    for key, value in decoded:
        if not isinstance(value, str):
            raise DictionaryFormatError(
                path, f"value of key '{key}' must be a string"
            )
        entries[key] = value
    return entries


class Dictionary:
    """A locale's flat key/value map backed by one JSON file."""

    def __init__(self, path: Path, entries: Optional[Mapping[str, str]] = None) -> None:
        self.path = Path(path)
        self.entries: Dict[str, str] = dict(entries or {})

    @classmethod
    def load(cls, path: Path) -> "Dictionary":
        """Read ``path``, rejecting duplicate keys before building the map."""

        source = Path(path)
        try:
            raw = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryFormatError(source, f"unable to read file ({exc})") from exc
        entries = _decode(source, raw)
        verbose_log("dictionary_loaded", {"path": str(source), "keys": len(entries)})
        return cls(source, entries)

    @property
    def locale(self) -> str:
        return self.path.stem

    def get(self, key: str) -> Optional[str]:
        return self.entries.get(key)

    def upsert(self, key: str, value: str) -> None:
        self.entries[key] = value

    def keys(self) -> set[str]:
        return set(self.entries)

    def sorted_entries(self) -> Dict[str, str]:
        return {key: self.entries[key] for key in sorted(self.entries)}

    def to_json(self) -> str:
        return json.dumps(self.sorted_entries(), ensure_ascii=False, indent=2) + "\n"

    def save(self) -> None:
        """Overwrite the backing file with the entries in ascending key order."""

        serialized = self.to_json()
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            tmp_path.write_text(serialized, encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as exc:
            verbose_log(
                "dictionary_save_failed",
                {"path": str(self.path), "error": repr(exc)},
            )
            if tmp_path.exists():
                tmp_path.unlink()
            raise
        debug_verbose("dictionary_saved", {"path": str(self.path), "keys": len(self)})

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.entries))

    def __len__(self) -> int:
        return len(self.entries)

    def __repr__(self) -> str:
        return f"Dictionary(path={str(self.path)!r}, keys={len(self.entries)})"


__all__ = ["Dictionary"]
