from __future__ import annotations

import os
from pathlib import Path
from typing import Collection, Iterator


def _extension(name: str) -> str:
    return Path(name).suffix.lower().lstrip(".")


def iter_source_files(
    root: Path, extensions: Collection[str], excluded_dirs: Collection[str]
) -> Iterator[Path]:
    """Yield candidate files under ``root`` in a stable, sorted order.

    Excluded directory names are pruned wherever they appear in the tree.
    Unreadable directories are skipped silently by :func:`os.walk`.
    """

    wanted = {extension.lower().lstrip(".") for extension in extensions}
    excluded = set(excluded_dirs)
    for current, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(name for name in dirnames if name not in excluded)
        for name in sorted(filenames):
            if _extension(name) in wanted:
                yield Path(current) / name


__all__ = ["iter_source_files"]
