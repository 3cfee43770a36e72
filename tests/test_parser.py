from textwrap import dedent

import pytest

from savedvars import (
    ConfigError,
    MalformedBracketKey,
    NestingTooDeep,
    UnexpectedCharacter,
    UnterminatedString,
    UnterminatedTable,
    parse_string,
)
from savedvars.lua import NIL, LuaBool, LuaNumber, LuaString, LuaTable, SavedVariablesParser


def test_positional_entries_start_at_one() -> None:
    doc = parse_string("VarName = {1,2,3}")

    table = doc["VarName"]
    assert isinstance(table, LuaTable)
    assert list(table.keys()) == [1, 2, 3]
    assert [v.to_python() for v in table.values()] == [1, 2, 3]


def test_explicit_keys_do_not_advance_auto_index() -> None:
    doc = parse_string('T = {a=1, [2]="x", 5}')

    table = doc["T"]
    assert table["a"] == LuaNumber(1.0, "1")
    assert table[2] == LuaString("x")
    assert table[1] == LuaNumber(5.0, "5")
    assert list(table.keys()) == ["a", 2, 1]


def test_bracket_key_one_is_overwritten_by_first_positional() -> None:
    doc = parse_string('T = {[1]="x", "y"}')

    assert doc["T"].to_python() == ["y"]


def test_nested_tables_and_path() -> None:
    doc = parse_string("T = {a={b=1}}")

    assert doc.get("T.a.b").to_python() == 1


def test_string_escapes() -> None:
    doc = parse_string("S = \"line1\\nline2\"\nS2='it\\'s'\nS3 = \"tab\\there \\\\ \\q\"")

    assert doc["S"].to_python() == "line1\nline2"
    assert doc["S2"].to_python() == "it's"
    assert doc["S3"].to_python() == "tab\there \\ q"


def test_single_and_double_quotes_must_match() -> None:
    doc = parse_string("A = \"it's\"\nB = 'say \"hi\"'")

    assert doc["A"].to_python() == "it's"
    assert doc["B"].to_python() == 'say "hi"'


def test_comment_is_ignored() -> None:
    doc = parse_string("-- comment\nX = 1")

    assert doc["X"].to_python() == 1


def test_comments_inside_tables() -> None:
    doc = parse_string(
        dedent(
            """
            T = {
                "a", -- [1]
                -- a full-line comment
                "b", -- [2]
            }
            """
        )
    )

    assert doc["T"].to_python() == ["a", "b"]


def test_booleans_and_nil() -> None:
    doc = parse_string("B = true\nF = false\nN = nil")

    assert doc["B"] == LuaBool(True)
    assert doc["F"] == LuaBool(False)
    assert doc["N"] is NIL
    assert doc.has("N") is False


def test_numbers_keep_integral_or_float_form() -> None:
    doc = parse_string("T = {10, -3, 1.5, 2e3, 1.0, 12345678901234567890}")

    values = [v.to_python() for v in doc["T"].values()]
    assert values == [10, -3, 1.5, 2000.0, 1.0, 12345678901234567890]
    assert isinstance(values[3], float)
    assert isinstance(values[4], float)
    assert doc["T"][5].text == "1.0"


def test_bare_identifier_is_a_string() -> None:
    doc = parse_string("T = {kind = HORDE, nilly, truex}")

    assert doc["T"].to_python() == {"kind": "HORDE", 1: "nilly", 2: "truex"}


def test_trailing_comma_optional() -> None:
    a = parse_string("T = {1, 2,}")
    b = parse_string("T = {1 2}")

    assert a["T"].to_python() == [1, 2]
    assert b["T"].to_python() == [1, 2]


def test_empty_table() -> None:
    doc = parse_string("T = {}")

    assert len(doc["T"]) == 0
    assert doc["T"].to_python() == []


def test_multiple_top_level_identifiers() -> None:
    doc = parse_string("A = 1\nB = 2")

    assert doc["A"].to_python() == 1
    assert doc["B"].to_python() == 2


def test_duplicate_top_level_identifier_last_write_wins() -> None:
    doc = parse_string("A = 1\nA = 2")

    assert doc["A"].to_python() == 2
    assert len(doc) == 1


def test_duplicate_table_key_overwrites_in_place() -> None:
    doc = parse_string('T = {a=1, b=2, ["a"]=3}')

    assert list(doc["T"].keys()) == ["a", "b"]
    assert doc["T"].to_python() == {"a": 3, "b": 2}


def test_unrecognized_top_level_statements_are_skipped() -> None:
    doc = parse_string(
        dedent(
            """
            if not WhoDatDB then print("x") end
            WhoDatDB = {1}
            @@@ ;;;
            Other = "ok"
            """
        )
    )

    assert doc["WhoDatDB"].to_python() == [1]
    assert doc["Other"].to_python() == "ok"


def test_local_statement_binds_its_name() -> None:
    doc = parse_string("local x = 1")

    assert doc["x"].to_python() == 1


def test_degenerate_bracket_keys_are_stringified() -> None:
    doc = parse_string("T = {[true]=1, [{1,2}]=2, [1.5]=3, [2.0]=4}")

    assert doc["T"].to_python() == {"true": 1, "{1,2}": 2, 1.5: 3, 2: 4}


def test_unterminated_table_reports_opening_line() -> None:
    with pytest.raises(UnterminatedTable) as exc:
        parse_string("\nX = {\n 1,\n 2,\n")

    assert exc.value.line == 2


def test_unexpected_character() -> None:
    with pytest.raises(UnexpectedCharacter) as exc:
        parse_string("A = 1\nX = @")

    assert exc.value.line == 2
    assert exc.value.char == "@"
    assert "line 2" in str(exc.value)


def test_value_missing_at_end_of_input() -> None:
    with pytest.raises(UnexpectedCharacter) as exc:
        parse_string("X =")

    assert exc.value.char is None


def test_unterminated_string_reports_start_line() -> None:
    with pytest.raises(UnterminatedString) as exc:
        parse_string('A = 1\nS = "abc\ndef\n')

    assert exc.value.line == 2


def test_newlines_in_strings_advance_line_counter() -> None:
    with pytest.raises(UnexpectedCharacter) as exc:
        parse_string('S = "a\nb"\nX = @')

    assert exc.value.line == 3


def test_malformed_bracket_key() -> None:
    with pytest.raises(MalformedBracketKey) as missing_bracket:
        parse_string('T = {["a" = 1}')
    with pytest.raises(MalformedBracketKey) as missing_equals:
        parse_string('T = {["a"] 1}')

    assert missing_bracket.value.expected == "]"
    assert missing_equals.value.expected == "="


def test_nesting_limit() -> None:
    deep = "X = " + "{" * 6 + "}" * 6

    assert parse_string(deep, max_depth=6)["X"] is not None
    with pytest.raises(NestingTooDeep):
        parse_string(deep, max_depth=5)


def test_default_limit_guards_pathological_nesting() -> None:
    with pytest.raises(NestingTooDeep):
        parse_string("X = " + "{" * 5000)


def test_parser_rejects_bad_depth() -> None:
    with pytest.raises(ConfigError):
        SavedVariablesParser("", max_depth=0)
    with pytest.raises(ConfigError):
        parse_string("X = 1", max_depth=251)


def test_error_line_after_multiline_assignment() -> None:
    with pytest.raises(UnexpectedCharacter) as exc:
        parse_string("T = {\n  a\n  =\n  1,\n  b = ?\n}")

    assert exc.value.line == 5


def test_top_level_equality_is_skipped_not_bound() -> None:
    doc = parse_string("if a == 1 then\nX = 2\nend")

    assert list(doc) == ["X"]
    assert doc["X"].to_python() == 2
    assert "a" not in doc
