from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

import pytest

from lingoaudit.scanner import (
    IdiomKind,
    IdiomMatcher,
    IdiomSet,
    KeyUsage,
    MatchState,
    SpanningIdiom,
    read_source_lines,
    scan_file,
    scan_lines,
)

FIXTURES = Path(__file__).parent / "fixtures"
SOURCE = Path("component.tsx")


def _scan(*lines: str) -> List[Tuple[str, int]]:
    usages = scan_lines(lines, IdiomSet.default(), SOURCE)
    return [(usage.key, usage.line) for usage in usages]


def test_single_line_tag_usage() -> None:
    assert _scan('<FormattedMessage id="greeting" />') == [("greeting", 1)]


def test_multi_line_tag_reports_identifier_line() -> None:
    assert _scan("<FormattedMessage", '  id="greeting"', "/>") == [("greeting", 2)]


def test_usage_records_carry_source() -> None:
    usages = scan_lines(['<FormattedMessage id="greeting" />'], IdiomSet.default(), SOURCE)
    assert usages == [KeyUsage(key="greeting", line=1, source=SOURCE)]


def test_ternary_spanning_two_lines_yields_both_branches() -> None:
    result = _scan(
        "<FormattedMessage id={",
        '  cond ? "yes_key"',
        '  : "no_key"}',
        "/>",
    )
    assert result == [("yes_key", 2), ("no_key", 3)]


def test_ternary_on_the_opening_line_is_not_read() -> None:
    assert _scan('<FormattedMessage id={isNew ? "add" : "edit"} />') == []


def test_opening_line_only_tries_the_identifier() -> None:
    result = _scan(
        '<FormattedMessage values={{ n: many ? "s" : "" }}',
        '  id="real"',
        "/>",
    )
    assert result == [("real", 2)]


def test_truthy_branch_waits_for_a_later_separator_line() -> None:
    result = _scan(
        "<FormattedMessage",
        '  values={{ n: many ? "s" : "" }}',
        '  id="real"',
        "/>",
    )
    assert result == [("s", 2), ("real", 3)]


def test_truthy_branch_is_the_first_literal_on_the_line() -> None:
    result = _scan("<FormattedMessage id={", '  mode === "add" ? "x"', '  : "y"}', "/>")
    assert result == [("add", 2), ("y", 3)]


def test_ternary_with_condition_on_its_own_line() -> None:
    result = _scan(
        "<FormattedMessage",
        "  id={",
        '    mode === "add"',
        '      ? "admin.add_product"',
        '      : "admin.edit_product"',
        "  }",
        "/>",
    )
    assert result == [("admin.add_product", 4), ("admin.edit_product", 5)]


def test_closing_tag_abandons_the_match() -> None:
    result = _scan("<FormattedMessage", "  {...props}", "/>", 'id="later"')
    assert result == []


def test_optional_chaining_counts_as_a_ternary() -> None:
    result = _scan(
        "intl.formatMessage({",
        '  fallback: row?.label ?? "unused",',
        '  id: "real.key",',
        "})",
    )
    assert result == [("unused", 2), ("real.key", 3)]


def test_blank_lines_do_not_reset_state() -> None:
    assert _scan("<FormattedMessage", "", "", 'id="late"') == [("late", 4)]


def test_call_idiom_on_one_line() -> None:
    assert _scan('{intl.formatMessage({ id: "name" })}') == [("name", 1)]


def test_two_calls_on_one_line() -> None:
    line = 'intl.formatMessage({ id: "a" }) + intl.formatMessage({ id: "b" })'
    assert _scan(line) == [("a", 1), ("b", 1)]


def test_bare_markers_need_no_opening() -> None:
    result = _scan(
        'const nav = { translationId: "nav.home", transId: "nav.back" };',
        '<Page pageTitleId="page.title" />',
    )
    assert result == [("nav.home", 1), ("nav.back", 1), ("page.title", 2)]


def test_every_bare_marker_occurrence_counts() -> None:
    result = _scan('[{ translationKey: "one" }, { translationKey: "two" }]')
    assert result == [("one", 1), ("two", 1)]


def test_one_line_can_feed_several_idioms_in_order() -> None:
    line = '<FormattedMessage id="tag" /> {intl.formatMessage({ id: "call" })} titleId="bare"'
    assert _scan(line) == [("tag", 1), ("call", 1), ("bare", 1)]


def test_extra_markers_extend_the_default_set() -> None:
    idioms = IdiomSet.default(["labelId=", " translationId: "])
    assert idioms.bare_markers.count("translationId:") == 1
    assert idioms.bare_markers[-1] == "labelId="
    usages = scan_lines(['<Input labelId="form.name" />'], idioms, SOURCE)
    assert [usage.key for usage in usages] == ["form.name"]


def test_scanning_is_repeatable() -> None:
    lines = (FIXTURES / "select-component.tsx").read_text(encoding="utf-8").splitlines()
    first = scan_lines(lines, IdiomSet.default(), SOURCE)
    second = scan_lines(lines, IdiomSet.default(), SOURCE)
    assert first == second


def test_matcher_states_are_explicit() -> None:
    matcher = IdiomMatcher(
        SpanningIdiom(IdiomKind.TAG_ATTRIBUTE, "<FormattedMessage", "id=")
    )
    assert matcher.feed("<FormattedMessage") == []
    assert matcher.state is MatchState.AWAITING_IDENTIFIER
    assert matcher.feed('cond ? "yes"') == ["yes"]
    assert matcher.state is MatchState.AWAITING_FALSY_BRANCH
    assert matcher.feed(': "no"') == ["no"]
    assert matcher.state is MatchState.IDLE


def test_component_fixture() -> None:
    usages = scan_file(FIXTURES / "component.tsx", IdiomSet.default())
    assert [(usage.key, usage.line) for usage in usages] == [
        ("name", 20),
        ("name", 22),
        ("name", 23),
    ]


def test_select_component_fixture() -> None:
    usages = scan_file(FIXTURES / "select-component.tsx", IdiomSet.default())
    assert [(usage.key, usage.line) for usage in usages] == [
        ("sustainability_admin.mutate_product_success_toast_title", 61),
        ("sustainability_admin.mutate_product_success_toast_body", 64),
        ("sustainability_admin.edit_factors_error_toast_title", 78),
        ("sustainability_admin.edit_factors_error_toast_body", 84),
        ("sustainability_admin.add_product", 122),
        ("sustainability_admin.edit_product", 123),
        ("common.article_number", 150),
        ("common.product_description", 155),
        ("sustainability_admin.pim_id", 159),
        ("sustainability_admin.daily_usage", 165),
        ("sustainability_admin.hourly_consumption", 175),
        ("sustainability_admin.fuel_id", 188),
        ("common.cancel", 208),
        ("common.save", 212),
    ]


def test_template_literal_keys_are_skipped_and_lookahead_over_matches() -> None:
    usages = scan_file(FIXTURES / "simon-case.tsx", IdiomSet.default())
    # The template literal on line 7 carries no literal key, so the call
    # idiom keeps waiting and picks up the column id on line 10.
    assert [(usage.key, usage.line) for usage in usages] == [
        ("common.product_category", 5),
        ("project_description", 10),
        ("common.project_description", 11),
    ]


def test_undecodable_lines_are_blanked(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    source = tmp_path / "broken.tsx"
    source.write_bytes(
        b"<FormattedMessage\n"
        b"  title=\"\xff\xfe\"\n"
        b'  id="after_garbage"\n'
        b"/>\n"
    )
    lines = read_source_lines(source)
    assert lines == ["<FormattedMessage", "", '  id="after_garbage"', "/>"]
    assert "scanner_line_skipped" in capsys.readouterr().err

    usages = scan_file(source, IdiomSet.default())
    assert [(usage.key, usage.line) for usage in usages] == [("after_garbage", 3)]


def test_byte_order_mark_is_dropped(tmp_path: Path) -> None:
    source = tmp_path / "bom.tsx"
    source.write_bytes('\ufefftitleId="with.bom"\n'.encode("utf-8"))
    usages = scan_file(source, IdiomSet.default())
    assert [usage.key for usage in usages] == ["with.bom"]
