"""REST route registration helpers."""

from .http import build_rows, register_http_routes

__all__ = ["build_rows", "register_http_routes"]
