"""Batch audit: tree walk, scanning, reconciliation and reporting."""

from .ignore import load_ignore_set
from .pipeline import AuditOptions, AuditReport, collect_usages, run_audit
from .reconcile import ReconciliationReport, UnusedKey, reconcile
from .report import render_fatal, render_report
from .walker import iter_source_files

__all__ = [
    "AuditOptions",
    "AuditReport",
    "ReconciliationReport",
    "UnusedKey",
    "collect_usages",
    "iter_source_files",
    "load_ignore_set",
    "reconcile",
    "render_fatal",
    "render_report",
    "run_audit",
]
