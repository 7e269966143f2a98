from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Error identifiers returned by the translation editor API."""

    INVALID_JSON_PAYLOAD = "invalid_json_payload"
    UNKNOWN_LOCALE = "unknown_locale"
    PERSIST_FAILED = "persist_failed"

    def __str__(self) -> str:  # pragma: no cover - trivial
        return str(self.value)


__all__ = ["ErrorCode"]
