"""Entrypoint for running the translation editor locally."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .config import DEFAULT_HOST, DEFAULT_LOG_LEVEL, DEFAULT_PORT
from .exceptions import DictionaryError
from .log_config import verbose_log
from .server import create_app


def run(
    primary_file: Path,
    secondary_file: Path,
    host: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
    log_level: str = DEFAULT_LOG_LEVEL,
) -> None:
    """Run the editor ASGI application using Uvicorn."""

    import uvicorn

    app, _ = create_app(primary_file, secondary_file)
    print(f"Editor running at http://localhost:{port}", flush=True)
    verbose_log("editor_listening", {"host": host, "port": port})
    uvicorn.run(app, host=host, port=port, log_level=log_level)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit two locale dictionaries side by side")
    parser.add_argument("-p", "--primary-file", type=Path, required=True)
    parser.add_argument("-s", "--secondary-file", type=Path, required=True)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        run(args.primary_file, args.secondary_file, host=args.host, port=args.port)
    except (DictionaryError, ValueError) as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
