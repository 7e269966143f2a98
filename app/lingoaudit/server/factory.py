from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Tuple

from starlette.applications import Starlette

from ..api.http import register_http_routes
from ..dictionary import Dictionary, DictionaryService
from ..log_config import verbose_log


def create_app(
    primary_file: Path, secondary_file: Path
) -> Tuple[Starlette, DictionaryService]:
    """Load both dictionaries and build the editor app around them."""

    service = DictionaryService(
        Dictionary.load(primary_file), Dictionary.load(secondary_file)
    )

    @asynccontextmanager
    async def lifespan(_: Starlette) -> AsyncIterator[None]:
        verbose_log("editor_started", {"locales": list(service.locales)})
        try:
            yield
        finally:
            verbose_log("editor_stopped", {"locales": list(service.locales)})

    app = Starlette(lifespan=lifespan)
    register_http_routes(app, service)
    app.state.dictionary_service = service
    return app, service


__all__ = ["create_app"]
