from __future__ import annotations

from typing import Awaitable, Callable, Dict, List, Mapping, Optional, cast

from marshmallow import Schema
from starlette.applications import Starlette
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response

from ..common.starlette_helpers import (
    RequestValidationError,
    json_response,
    load_with_schema,
    read_json_object,
)
from ..config import HEALTH_CHECK_PATH, ApiRoute, get_audit_environment
from ..dictionary import DictionaryService, DictionarySnapshot
from ..exceptions import UnknownLocaleError
from ..log_config import verbose_log
from ..models.api.errors import ErrorCode
from ..models.api.http import (
    HealthCheckResponse,
    JSONValue,
    TranslationRow,
    TranslationsResponse,
    WriteTranslationResponse,
)
from ..models.api.requests import (
    EditTranslationRequest,
    EditTranslationRequestSchema,
    InsertTranslationRequest,
    InsertTranslationRequestSchema,
    SearchQuery,
    SearchQuerySchema,
)
from ..utils import contains_casefold, now_iso

RowFilter = Callable[[TranslationRow], bool]
Endpoint = Callable[[Request], Awaitable[JSONResponse]]


def build_rows(
    snapshot: DictionarySnapshot, locales: List[str], row_filter: Optional[RowFilter] = None
) -> List[TranslationRow]:
    """Join both locales into one row per key, sorted by key."""

    keys: set[str] = set()
    for entries in snapshot.values():
        keys.update(entries)
    rows: List[TranslationRow] = []
    for key in sorted(keys):
        row: TranslationRow = {
            "key": key,
            "values": {locale: snapshot[locale].get(key) for locale in locales},
        }
        if row_filter is None or row_filter(row):
            rows.append(row)
    return rows


def register_http_routes(app: Starlette, service: DictionaryService) -> None:
    """Attach the editor endpoints and middleware to the Starlette application."""

    config = get_audit_environment()
    locales = list(service.locales)

    async def _parse_payload(request: Request, schema_cls: type[Schema]) -> object:
        raw_body = await read_json_object(request)
        return load_with_schema(schema_cls(), raw_body)

    def error_response(
        code: ErrorCode,
        *,
        status_code: int,
        detail: JSONValue | None = None,
    ) -> JSONResponse:
        payload: Dict[str, JSONValue] = {"error": code.value}
        if detail is not None:
            payload["detail"] = detail
        return json_response(payload, status_code=status_code)

    async def _handle_request_validation(
        _: Request, exc: RequestValidationError
    ) -> JSONResponse:
        detail: JSONValue | None = None
        if exc.errors:
            detail = cast(JSONValue, dict(exc.errors))
        elif exc.args:
            detail = cast(JSONValue, exc.args[0])
        return error_response(
            ErrorCode.INVALID_JSON_PAYLOAD,
            status_code=400,
            detail=detail,
        )

    app.add_exception_handler(RequestValidationError, _handle_request_validation)  # type: ignore[arg-type]

    def route(method: str, path: str) -> Callable[[Endpoint], Endpoint]:
        def decorator(func: Endpoint) -> Endpoint:
            app.router.add_route(path, func, methods=[method])
            return func

        return decorator

    async def log_request(
        request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        verbose_log(
            "http_request",
            {
                "method": request.method,
                "path": request.url.path,
                "query": dict(request.query_params.multi_items()),
            },
        )
        return await call_next(request)

    app.add_middleware(BaseHTTPMiddleware, dispatch=log_request)

    def _translations_response(row_filter: Optional[RowFilter] = None) -> JSONResponse:
        rows = build_rows(service.snapshot(), locales, row_filter)
        payload: TranslationsResponse = {
            "locales": locales,
            "rows": rows,
            "count": len(rows),
        }
        return json_response(payload)

    def _search_query(request: Request) -> str:
        params: SearchQuery = load_with_schema(
            SearchQuerySchema(), dict(request.query_params)
        )
        return params.query

    async def _write(key: str, values: Mapping[str, str]) -> JSONResponse:
        try:
            await run_in_threadpool(service.upsert_many, key, values)
        except UnknownLocaleError as exc:
            return error_response(
                ErrorCode.UNKNOWN_LOCALE, status_code=404, detail=exc.locale
            )
        except OSError as exc:
            return error_response(
                ErrorCode.PERSIST_FAILED, status_code=500, detail=str(exc)
            )
        snapshot = service.snapshot()
        payload: WriteTranslationResponse = {
            "key": key,
            "values": {locale: snapshot[locale].get(key) for locale in locales},
        }
        return json_response(payload)

    @route("GET", HEALTH_CHECK_PATH)
    async def health_check(request: Request) -> JSONResponse:  # noqa: ARG001 - Starlette route signature
        snapshot = service.snapshot()
        payload: HealthCheckResponse = {
            "service": config.name,
            "time": now_iso(),
            "description": config.description,
            "locales": locales,
            "entries": {locale: len(snapshot[locale]) for locale in locales},
        }
        return json_response(payload)

    @route("GET", ApiRoute.TRANSLATIONS.value)
    async def list_translations_endpoint(request: Request) -> JSONResponse:  # noqa: ARG001
        return _translations_response()

    @route("GET", ApiRoute.SEARCH_KEYS.value)
    async def search_keys_endpoint(request: Request) -> JSONResponse:
        query = _search_query(request)
        return _translations_response(lambda row: contains_casefold(row["key"], query))

    @route("GET", ApiRoute.SEARCH_VALUES.value)
    async def search_values_endpoint(request: Request) -> JSONResponse:
        query = _search_query(request)
        return _translations_response(
            lambda row: any(
                value is not None and contains_casefold(value, query)
                for value in row["values"].values()
            )
        )

    @route("PUT", ApiRoute.TRANSLATIONS.value)
    async def edit_translation_endpoint(request: Request) -> JSONResponse:
        """Replace or add the value of one key in a single locale."""

        payload = cast(
            EditTranslationRequest,
            await _parse_payload(request, EditTranslationRequestSchema),
        )
        return await _write(payload.key, {payload.locale: payload.value})

    @route("POST", ApiRoute.TRANSLATIONS.value)
    async def insert_translation_endpoint(request: Request) -> JSONResponse:
        """Add or replace one key in both locales."""

        payload = cast(
            InsertTranslationRequest,
            await _parse_payload(request, InsertTranslationRequestSchema),
        )
        values = {
            service.primary.locale: payload.primary_value,
            service.secondary.locale: payload.secondary_value,
        }
        return await _write(payload.key, values)


__all__ = ["build_rows", "register_http_routes"]
