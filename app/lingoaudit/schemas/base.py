"""Shared Marshmallow base for editor request payloads."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping, Tuple

from marshmallow import EXCLUDE, Schema, pre_load  # type: ignore[import-not-found]


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


class EditorSchema(Schema):
    """Unknown fields are dropped and JSON keys are the camelCase field names.

    Fields named in ``trimmed_fields`` have surrounding whitespace removed
    before validation; translation values are left exactly as sent.
    """

    trimmed_fields: ClassVar[Tuple[str, ...]] = ()

    class Meta:
        unknown = EXCLUDE

    def on_bind_field(self, field_name: str, field_obj: Any) -> None:  # type: ignore[override]
        super().on_bind_field(field_name, field_obj)
        if not getattr(field_obj, "data_key", None):
            field_obj.data_key = _camel_case(field_name)

    @pre_load
    def _trim(self, data: Any, **_: Any) -> Any:
        if not isinstance(data, Mapping) or not self.trimmed_fields:
            return data
        cleaned = dict(data)
        for name in self.trimmed_fields:
            data_key = _camel_case(name)
            value = cleaned.get(data_key)
            if isinstance(value, str):
                cleaned[data_key] = value.strip()
        return cleaned


__all__ = ["EditorSchema"]
