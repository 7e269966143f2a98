from __future__ import annotations

from enum import Enum
from typing import Final, Tuple

from .environment import get_audit_environment

# ---------------------------------------------------------------------------
# Application bootstrap defaults
# ---------------------------------------------------------------------------
_AUDIT_ENV = get_audit_environment()

DEFAULT_HOST: Final[str] = _AUDIT_ENV.host
DEFAULT_PORT: Final[int] = _AUDIT_ENV.port
DEFAULT_LOG_LEVEL: Final[str] = _AUDIT_ENV.log_level
CACHE_FOLDER: Final[str] = _AUDIT_ENV.cache_folder
SOURCE_EXTENSIONS: Final[Tuple[str, ...]] = _AUDIT_ENV.extensions
EXCLUDED_DIRS: Final[Tuple[str, ...]] = _AUDIT_ENV.excluded_dirs

# ---------------------------------------------------------------------------
# API routing conventions
# ---------------------------------------------------------------------------
API_PREFIX: Final[str] = "/api"
HEALTH_CHECK_PATH: Final[str] = "/"


class ApiRoute(str, Enum):
    TRANSLATIONS = f"{API_PREFIX}/translations"
    SEARCH_KEYS = f"{API_PREFIX}/search-keys"
    SEARCH_VALUES = f"{API_PREFIX}/search-values"


# ---------------------------------------------------------------------------
# Usage idioms
# ---------------------------------------------------------------------------
TAG_OPENING_MARKER: Final[str] = "<FormattedMessage"
TAG_IDENTIFIER_MARKER: Final[str] = "id="
CALL_OPENING_MARKER: Final[str] = "formatMessage("
CALL_IDENTIFIER_MARKER: Final[str] = "id:"
BARE_IDENTIFIER_MARKERS: Final[Tuple[str, ...]] = (
    "translationId:",
    "translationKey:",
    "transId:",
    "pageTitleId=",
    "titleId=",
) + _AUDIT_ENV.extra_markers

# Heuristic tokens consulted while an idiom waits for its identifier.
TERNARY_TOKEN: Final[str] = "?"
BRANCH_SEPARATOR_TOKEN: Final[str] = ":"
CLOSING_TOKENS: Final[Tuple[str, ...]] = ("/>", "</")


__all__ = [
    "API_PREFIX",
    "ApiRoute",
    "BARE_IDENTIFIER_MARKERS",
    "BRANCH_SEPARATOR_TOKEN",
    "CACHE_FOLDER",
    "CALL_IDENTIFIER_MARKER",
    "CALL_OPENING_MARKER",
    "CLOSING_TOKENS",
    "DEFAULT_HOST",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PORT",
    "EXCLUDED_DIRS",
    "HEALTH_CHECK_PATH",
    "SOURCE_EXTENSIONS",
    "TAG_IDENTIFIER_MARKER",
    "TAG_OPENING_MARKER",
    "TERNARY_TOKEN",
]
