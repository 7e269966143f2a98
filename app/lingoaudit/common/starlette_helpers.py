"""Shared Starlette helper utilities used by the translation editor."""

from __future__ import annotations

import json
from typing import Any, Mapping

from marshmallow import Schema, ValidationError  # type: ignore[import-not-found]
from starlette.requests import Request
from starlette.responses import JSONResponse

from ..log_config import verbose_log


class RequestValidationError(RuntimeError):
    """Raised when an incoming request payload fails validation."""

    def __init__(
        self,
        errors: Mapping[str, Any] | None = None,
        *,
        message: str = "Invalid request payload",
    ) -> None:
        super().__init__(message)
        self.errors: dict[str, Any] = dict(errors or {})


async def read_json_body(request: Request) -> Any:
    """Read and return the request JSON payload, raising a friendly error on failure."""

    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise RequestValidationError({"json": "Invalid JSON payload"}) from exc


async def read_json_object(request: Request) -> Mapping[str, Any]:
    raw_body = await read_json_body(request)
    if not isinstance(raw_body, Mapping):
        raise RequestValidationError({"json": "JSON object required"})
    return raw_body


def json_response(payload: Any, *, status_code: int = 200) -> JSONResponse:
    """Wrap Starlette's JSONResponse so every response is logged the same way."""

    verbose_log("http_response", {"status": status_code, "payload": payload})
    return JSONResponse(content=payload, status_code=status_code)


def load_with_schema(
    schema: Schema, payload: Any, *, partial: bool | None = None
) -> Any:
    """Validate and deserialize input data with the provided Marshmallow schema."""

    try:
        return schema.load(payload, partial=partial)
    except ValidationError as exc:
        raise RequestValidationError(exc.normalized_messages()) from exc


__all__ = [
    "RequestValidationError",
    "json_response",
    "load_with_schema",
    "read_json_body",
    "read_json_object",
]
