"""Directional key-set and value checks between two locale dictionaries."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

from ..log_config import verbose_log
from .store import Dictionary


@dataclass(frozen=True)
class MissingKey:
    key: str
    missing_in: Path


@dataclass(frozen=True)
class EmptyValue:
    key: str
    empty_in: Path


CompatibilityIssue = Union[MissingKey, EmptyValue]


def _compare(source: Dictionary, other: Dictionary) -> List[CompatibilityIssue]:
    issues: List[CompatibilityIssue] = []
    for key in source:
        value = source.entries[key]
        other_value = other.get(key)
        if other_value is None:
            issues.append(MissingKey(key=key, missing_in=other.path))
        elif other_value == "":
            issues.append(EmptyValue(key=key, empty_in=other.path))
        elif value == "":
            issues.append(EmptyValue(key=key, empty_in=source.path))
    return issues


def check_compatibility(
    first: Dictionary, second: Dictionary
) -> Tuple[List[CompatibilityIssue], List[CompatibilityIssue]]:
    """Return the issues found walking ``first`` against ``second`` and back.

    Neither dictionary is modified. A key that is empty in both files is
    reported once from each side.
    """

    first_issues = _compare(first, second)
    second_issues = _compare(second, first)
    verbose_log(
        "compatibility_checked",
        {
            "first": str(first.path),
            "second": str(second.path),
            "first_issues": len(first_issues),
            "second_issues": len(second_issues),
        },
    )
    return first_issues, second_issues


def is_compatible(first: Dictionary, second: Dictionary) -> bool:
    first_issues, second_issues = check_compatibility(first, second)
    return not first_issues and not second_issues


__all__ = [
    "CompatibilityIssue",
    "EmptyValue",
    "MissingKey",
    "check_compatibility",
    "is_compatible",
]
