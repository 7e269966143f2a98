"""Cross-check scanned usages against the keys a dictionary defines."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import AbstractSet, Iterable, List, Mapping, Set

from ..scanner import KeyUsage


@dataclass(frozen=True)
class UnusedKey:
    key: str
    value: str


@dataclass
class ReconciliationReport:
    invalid_usages: List[KeyUsage] = field(default_factory=list)
    unused_keys: List[UnusedKey] = field(default_factory=list)
    ignored_count: int = 0

    @property
    def ok(self) -> bool:
        return not self.invalid_usages and not self.unused_keys


def reconcile(
    defined: Mapping[str, str],
    usages: Iterable[KeyUsage],
    ignore: AbstractSet[str],
) -> ReconciliationReport:
    """Compute invalid usages (every site) and unused keys (once each).

    Invalid usages keep the order they were scanned in; unused keys are
    reported in ascending key order together with their value.
    """

    used: Set[str] = set()
    invalid: List[KeyUsage] = []
    for usage in usages:
        used.add(usage.key)
        if usage.key not in defined:
            invalid.append(usage)

    unused = [
        UnusedKey(key=key, value=defined[key])
        for key in sorted(defined)
        if key not in used and key not in ignore
    ]
    return ReconciliationReport(
        invalid_usages=invalid, unused_keys=unused, ignored_count=len(ignore)
    )


__all__ = ["ReconciliationReport", "UnusedKey", "reconcile"]
