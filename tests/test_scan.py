from savedvars.lua.scan import (
    _match_assignment,
    _match_identifier,
    _match_keyword,
    _match_number,
    _skip_line_comment,
)


def test_match_number_forms() -> None:
    assert _match_number("42,", 0) == 2
    assert _match_number("-3.5}", 0) == 4
    assert _match_number("1e10 ", 0) == 4
    assert _match_number("2.5E-3", 0) == 6


def test_match_number_rejects_glued_identifier() -> None:
    assert _match_number("12abc", 0) is None
    assert _match_number("0x1F", 0) is None
    assert _match_number("abc", 0) is None


def test_match_keyword_needs_word_boundary() -> None:
    assert _match_keyword("true,", 0) == "true"
    assert _match_keyword("nil", 0) == "nil"
    assert _match_keyword("nilly", 0) is None
    assert _match_keyword("falsehood", 0) is None


def test_match_identifier() -> None:
    assert _match_identifier("foo_1 = 2", 0) == 5
    assert _match_identifier("1foo", 0) is None


def test_match_assignment_counts_newlines_and_skips_equality() -> None:
    assert _match_assignment("X\n\n= 1", 0) == ("X", 4, 2)
    assert _match_assignment("a == b", 0) is None
    assert _match_assignment("local x = 1", 0) is None


def test_skip_line_comment_stops_at_newline() -> None:
    text = "-- hi\nX"
    assert _skip_line_comment(text, 0) == 5
    assert _skip_line_comment("--[[ no block", 0) == len("--[[ no block")
