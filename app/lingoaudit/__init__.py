"""lingoaudit: audit localization key usage against two locale dictionaries."""

from .audit import AuditOptions, AuditReport, reconcile, run_audit  # noqa: F401
from .dictionary import Dictionary, DictionaryService, check_compatibility  # noqa: F401
from .scanner import IdiomSet, KeyUsage, scan_lines  # noqa: F401

__all__ = [
    "AuditOptions",
    "AuditReport",
    "Dictionary",
    "DictionaryService",
    "IdiomSet",
    "KeyUsage",
    "check_compatibility",
    "reconcile",
    "run_audit",
    "scan_lines",
]
