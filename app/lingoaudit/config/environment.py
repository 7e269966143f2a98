from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Tuple

_DEFAULTS: Dict[str, str] = {
    "LINGOAUDIT_EDITOR_NAME": "lingoaudit translation editor",
    "LINGOAUDIT_EDITOR_DESCRIPTION": "Local editor for the audited locale dictionaries",
    "LINGOAUDIT_EDITOR_HOST": "0.0.0.0",
    "LINGOAUDIT_EDITOR_PORT": "3333",
    "LINGOAUDIT_LOG_LEVEL": "info",
    "LINGOAUDIT_EXTENSIONS": "ts,tsx",
    "LINGOAUDIT_EXCLUDED_DIRS": "node_modules",
    "LINGOAUDIT_EXTRA_MARKERS": "",
    "LINGOAUDIT_CACHE": os.path.join("~", ".cache", "lingoaudit"),
}


@dataclass(frozen=True)
class AuditEnvironmentConfig:
    name: str
    description: str
    host: str
    port: int
    log_level: str
    extensions: Tuple[str, ...]
    excluded_dirs: Tuple[str, ...]
    extra_markers: Tuple[str, ...]
    cache_folder: str


def _coalesce_env(key: str) -> str:
    default = _DEFAULTS.get(key)
    value = os.getenv(key)
    if value is None:
        if default is None:
            raise RuntimeError(f"Missing environment variable '{key}'")
        return default
    trimmed = value.strip()
    if not trimmed:
        if default is not None:
            return default
        raise RuntimeError(f"Environment variable '{key}' cannot be empty")
    return trimmed


def _parse_int(key: str) -> int:
    raw = _coalesce_env(key)
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"Environment variable '{key}' must be an integer") from exc


def _parse_csv(key: str) -> Tuple[str, ...]:
    raw = _coalesce_env(key)
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return tuple(items)


def _normalize_extensions(raw: Tuple[str, ...]) -> Tuple[str, ...]:
    normalized = []
    for item in raw:
        extension = item.lower().lstrip(".")
        if extension and extension not in normalized:
            normalized.append(extension)
    return tuple(normalized)


@lru_cache(maxsize=1)
def get_audit_environment() -> AuditEnvironmentConfig:
    name = _coalesce_env("LINGOAUDIT_EDITOR_NAME")
    description = _coalesce_env("LINGOAUDIT_EDITOR_DESCRIPTION")
    host = _coalesce_env("LINGOAUDIT_EDITOR_HOST")
    port = _parse_int("LINGOAUDIT_EDITOR_PORT")
    log_level = _coalesce_env("LINGOAUDIT_LOG_LEVEL").lower()
    extensions = _normalize_extensions(_parse_csv("LINGOAUDIT_EXTENSIONS"))
    excluded_dirs = _parse_csv("LINGOAUDIT_EXCLUDED_DIRS")
    extra_markers = _parse_csv("LINGOAUDIT_EXTRA_MARKERS")
    cache_folder = os.path.expanduser(_coalesce_env("LINGOAUDIT_CACHE"))

    return AuditEnvironmentConfig(
        name=name,
        description=description,
        host=host,
        port=port,
        log_level=log_level,
        extensions=extensions,
        excluded_dirs=excluded_dirs,
        extra_markers=extra_markers,
        cache_folder=cache_folder,
    )


__all__ = ["AuditEnvironmentConfig", "get_audit_environment"]
