from __future__ import annotations

from pathlib import Path

from lingoaudit.dictionary import (
    Dictionary,
    EmptyValue,
    MissingKey,
    check_compatibility,
    is_compatible,
)

EN = Path("en.json")
DE = Path("de.json")


def test_identical_key_sets_are_compatible() -> None:
    first = Dictionary(EN, {"a": "A", "b": "B"})
    second = Dictionary(DE, {"b": "Be", "a": "Ah"})

    assert check_compatibility(first, second) == ([], [])
    assert is_compatible(first, second)


def test_key_missing_from_second_is_reported_once() -> None:
    first = Dictionary(EN, {"a": "A", "b": "B"})
    second = Dictionary(DE, {"a": "Ah"})

    first_issues, second_issues = check_compatibility(first, second)

    assert first_issues == [MissingKey(key="b", missing_in=DE)]
    assert second_issues == []
    assert not is_compatible(first, second)


def test_empty_values_are_attributed_to_their_file() -> None:
    first = Dictionary(EN, {"a": "", "b": "B"})
    second = Dictionary(DE, {"a": "Ah", "b": ""})

    first_issues, second_issues = check_compatibility(first, second)

    assert first_issues == [
        EmptyValue(key="a", empty_in=EN),
        EmptyValue(key="b", empty_in=DE),
    ]
    assert second_issues == [
        EmptyValue(key="a", empty_in=EN),
        EmptyValue(key="b", empty_in=DE),
    ]


def test_whitespace_is_not_empty() -> None:
    first = Dictionary(EN, {"a": " "})
    second = Dictionary(DE, {"a": "Ah"})

    assert is_compatible(first, second)


def test_missing_wins_over_empty_and_issues_follow_key_order() -> None:
    first = Dictionary(EN, {"z": "", "m": "M", "a": "A"})
    second = Dictionary(DE, {"a": "Ah", "x": "X"})

    first_issues, second_issues = check_compatibility(first, second)

    assert first_issues == [
        MissingKey(key="m", missing_in=DE),
        MissingKey(key="z", missing_in=DE),
    ]
    assert second_issues == [MissingKey(key="x", missing_in=EN)]


def test_check_leaves_dictionaries_untouched() -> None:
    first = Dictionary(EN, {"a": "A"})
    second = Dictionary(DE, {})

    check_compatibility(first, second)

    assert first.entries == {"a": "A"}
    assert second.entries == {}
