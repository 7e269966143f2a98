"""Human-readable rendering of an audit report."""

from __future__ import annotations

from typing import List

from ..dictionary import CompatibilityIssue, MissingKey
from ..exceptions import DictionaryError
from .pipeline import AuditReport


def _issue_line(issue: CompatibilityIssue) -> str:
    if isinstance(issue, MissingKey):
        return f"[MISSING] key {issue.key} not found in {issue.missing_in}"
    return f"[EMPTY] key {issue.key} seems to be empty in {issue.empty_in}"


def render_fatal(error: DictionaryError) -> List[str]:
    return [f"ERROR: {error}"]


def render_report(report: AuditReport) -> List[str]:
    lines: List[str] = []
    if not report.compatible:
        for issue in [*report.primary_issues, *report.secondary_issues]:
            lines.append(_issue_line(issue))
        lines.append("ERROR: translation files are not compatible, see problems above")
        return lines

    reconciliation = report.reconciliation
    if reconciliation is None:
        return lines

    for usage in reconciliation.invalid_usages:
        lines.append(
            f"[INVALID] key {usage.key} does not exist! ({usage.source}:{usage.line})"
        )
    if reconciliation.invalid_usages:
        lines.append(f"ERROR: {len(reconciliation.invalid_usages)} invalid key usages!")

    for unused in reconciliation.unused_keys:
        lines.append(f'[UNUSED] key {unused.key}="{unused.value}"')
    if reconciliation.unused_keys:
        lines.append(
            f"ERROR: {len(reconciliation.unused_keys)} unused keys found! "
            f"({reconciliation.ignored_count} keys ignored)"
        )
        lines.append(
            "Unused keys should be removed from the translation files if they really are unused."
        )
        lines.append(
            "If they are used (false positive), add them to the ignore file (--ignore-file)."
        )

    if report.ok:
        lines.append(
            f"SUCCESS: great translations! "
            f"({len(report.usages)} usages in {report.files_scanned} files)"
        )
    if report.sorted_files:
        lines.append("SUCCESS: translation files sorted!")
    return lines


__all__ = ["render_fatal", "render_report"]
