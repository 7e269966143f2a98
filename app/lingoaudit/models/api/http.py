from __future__ import annotations

from typing import Dict, List, Optional, TypeAlias, TypedDict

JSONValue: TypeAlias = (
    str | int | float | bool | None | List["JSONValue"] | Dict[str, "JSONValue"]
)


class HealthCheckResponse(TypedDict):
    service: str
    time: str
    description: str
    locales: List[str]
    entries: Dict[str, int]


class TranslationRow(TypedDict):
    key: str
    values: Dict[str, Optional[str]]


class TranslationsResponse(TypedDict):
    locales: List[str]
    rows: List[TranslationRow]
    count: int


class WriteTranslationResponse(TypedDict):
    key: str
    values: Dict[str, Optional[str]]


__all__ = [
    "HealthCheckResponse",
    "JSONValue",
    "TranslationRow",
    "TranslationsResponse",
    "WriteTranslationResponse",
]
