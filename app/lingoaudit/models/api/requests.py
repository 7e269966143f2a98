"""Editor request payloads validated via Marshmallow schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import ValidationError, fields, post_load, validates

from ...schemas.base import EditorSchema


class EditTranslationRequest:
    """Upsert of one key in one locale."""

    def __init__(self, key: str, value: str, locale: str, **_: Any) -> None:
        self.key = key
        self.value = value
        self.locale = locale


class InsertTranslationRequest:
    """Upsert of one key in both locales at once."""

    def __init__(
        self, key: str, primary_value: str, secondary_value: str, **_: Any
    ) -> None:
        self.key = key
        self.primary_value = primary_value
        self.secondary_value = secondary_value


class SearchQuery:
    def __init__(self, query: str | None = None, **_: Any) -> None:
        self.query = query or ""


class _KeyedSchema(EditorSchema):
    trimmed_fields = ("key",)

    key = fields.String(required=True)

    @validates("key")
    def _validate_key(self, value: str, **_: Any) -> None:
        if not value:
            raise ValidationError("key_required")


class EditTranslationRequestSchema(_KeyedSchema):
    trimmed_fields = ("key", "locale")

    value = fields.String(required=True)
    locale = fields.String(required=True)

    @post_load
    def make(self, data: dict[str, Any], **_: Any) -> EditTranslationRequest:
        return EditTranslationRequest(**data)


class InsertTranslationRequestSchema(_KeyedSchema):
    primary_value = fields.String(required=True)
    secondary_value = fields.String(required=True)

    @post_load
    def make(self, data: dict[str, Any], **_: Any) -> InsertTranslationRequest:
        return InsertTranslationRequest(**data)


class SearchQuerySchema(EditorSchema):
    trimmed_fields = ("query",)

    query = fields.String(load_default=None, allow_none=True)

    @post_load
    def make(self, data: dict[str, Any], **_: Any) -> SearchQuery:
        return SearchQuery(**data)


__all__ = [
    "EditTranslationRequest",
    "EditTranslationRequestSchema",
    "InsertTranslationRequest",
    "InsertTranslationRequestSchema",
    "SearchQuery",
    "SearchQuerySchema",
]
