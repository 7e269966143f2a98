from .helpers import contains_casefold, now_iso, truncate_string

__all__ = ["contains_casefold", "now_iso", "truncate_string"]
