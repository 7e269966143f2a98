from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, Optional, Set


def load_ignore_set(path: Optional[Path]) -> FrozenSet[str]:
    """Read one key per line; surrounding whitespace and blank lines are dropped."""

    if path is None:
        return frozenset()
    keys: Set[str] = set()
    for raw_line in Path(path).read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line:
            continue
        keys.add(line)
    return frozenset(keys)


__all__ = ["load_ignore_set"]
