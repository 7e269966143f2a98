from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional, Tuple

from ..config import EXCLUDED_DIRS, SOURCE_EXTENSIONS
from ..dictionary import CompatibilityIssue, Dictionary, check_compatibility
from ..log_config import verbose_log, warning_log
from ..scanner import IdiomSet, KeyUsage, scan_file
from .ignore import load_ignore_set
from .reconcile import ReconciliationReport, reconcile
from .walker import iter_source_files


@dataclass
class AuditOptions:
    root_dir: Path
    primary_file: Path
    secondary_file: Path
    ignore_file: Optional[Path] = None
    sort: bool = False
    extensions: Tuple[str, ...] = SOURCE_EXTENSIONS
    excluded_dirs: Tuple[str, ...] = EXCLUDED_DIRS
    idioms: IdiomSet = field(default_factory=IdiomSet.default)


@dataclass
class AuditReport:
    primary: Dictionary
    secondary: Dictionary
    primary_issues: List[CompatibilityIssue] = field(default_factory=list)
    secondary_issues: List[CompatibilityIssue] = field(default_factory=list)
    usages: List[KeyUsage] = field(default_factory=list)
    files_scanned: int = 0
    reconciliation: Optional[ReconciliationReport] = None
    sorted_files: bool = False

    @property
    def compatible(self) -> bool:
        return not self.primary_issues and not self.secondary_issues

    @property
    def ok(self) -> bool:
        if not self.compatible or self.reconciliation is None:
            return False
        return self.reconciliation.ok


def collect_usages(
    root: Path,
    idioms: IdiomSet,
    extensions: Tuple[str, ...],
    excluded_dirs: Tuple[str, ...],
) -> Tuple[List[KeyUsage], int]:
    """Scan every candidate file under ``root``, one after another."""

    usages: List[KeyUsage] = []
    scanned = 0
    for path in iter_source_files(root, extensions, excluded_dirs):
        try:
            usages.extend(scan_file(path, idioms))
        except OSError as exc:
            warning_log("scanner_file_unreadable", {"path": str(path), "error": str(exc)})
            continue
        scanned += 1
    return usages, scanned


def run_audit(options: AuditOptions) -> AuditReport:
    """Load, check, scan and reconcile.

    Dictionary load failures propagate as :class:`DictionaryError`; every
    other problem is collected on the returned report. Scanning only
    happens when both dictionaries agree, and the files are re-saved in
    sorted form only when the whole audit passed.
    """

    primary = Dictionary.load(options.primary_file)
    secondary = Dictionary.load(options.secondary_file)
    primary_issues, secondary_issues = check_compatibility(primary, secondary)
    report = AuditReport(
        primary=primary,
        secondary=secondary,
        primary_issues=primary_issues,
        secondary_issues=secondary_issues,
    )
    if not report.compatible:
        return report

    ignore: FrozenSet[str] = load_ignore_set(options.ignore_file)
    report.usages, report.files_scanned = collect_usages(
        options.root_dir, options.idioms, options.extensions, options.excluded_dirs
    )
    report.reconciliation = reconcile(primary.entries, report.usages, ignore)
    verbose_log(
        "audit_completed",
        {
            "root": str(options.root_dir),
            "files": report.files_scanned,
            "usages": len(report.usages),
            "invalid": len(report.reconciliation.invalid_usages),
            "unused": len(report.reconciliation.unused_keys),
        },
    )

    if options.sort and report.ok:
        primary.save()
        secondary.save()
        report.sorted_files = True
    return report


__all__ = ["AuditOptions", "AuditReport", "collect_usages", "run_audit"]
