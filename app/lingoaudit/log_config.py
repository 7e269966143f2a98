"""Log file helpers shared by the audit command and the editor.

Every entry goes to ``<cache>/logs.txt``. Verbose and debug entries are
opt-in through ``LINGOAUDIT_VERBOSE`` and ``LINGOAUDIT_DEBUG``; warnings are
always recorded and echoed on stderr so batch runs surface them.
"""

from __future__ import annotations

import os
import sys
import threading
from typing import Any

from .config import CACHE_FOLDER
from .utils import now_iso

_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in _TRUTHY


DEBUG = _flag("LINGOAUDIT_DEBUG")
VERBOSE = _flag("LINGOAUDIT_VERBOSE")

LOG_FILE = os.path.join(CACHE_FOLDER, "logs.txt")

# Editor writes run on the threadpool; entries must not interleave.
_write_lock = threading.Lock()


def _append(prefix: str, label: str, payload: Any) -> None:
    entry = f"[{prefix}][{now_iso()}] {label}: {payload}\n"
    with _write_lock:
        os.makedirs(CACHE_FOLDER, exist_ok=True)
        with open(LOG_FILE, "a", encoding="utf-8", errors="replace") as handle:
            handle.write(entry)


def verbose_log(label: str, payload: Any) -> None:
    """Record a structured entry when verbose mode is enabled."""
    if VERBOSE:
        _append("VERBOSE", label, payload)


def debug_verbose(label: str, payload: Any) -> None:
    if DEBUG or VERBOSE:
        _append("DEBUG", label, payload)


def warning_log(label: str, payload: Any) -> None:
    """Record a warning and echo it on stderr."""
    _append("WARNING", label, payload)
    print(f"[WARNING] {label}: {payload}", file=sys.stderr)


__all__ = ["DEBUG", "LOG_FILE", "VERBOSE", "debug_verbose", "verbose_log", "warning_log"]
