from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def truncate_string(value: Optional[str], limit: int = 800) -> Optional[str]:
    if not value:
        return None
    text = value.strip()
    if len(text) <= limit:
        return text
    return text[: limit - 3].rstrip() + "..."


def contains_casefold(haystack: str, needle: str) -> bool:
    """Case-insensitive substring check used by the editor search routes."""

    return needle.casefold() in haystack.casefold()


__all__ = ["now_iso", "truncate_string", "contains_casefold"]
