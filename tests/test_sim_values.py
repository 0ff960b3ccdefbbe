"""Tests for simulator value system."""

import pytest

from regnote.simulate._values import (
    format_value,
    is_register,
    parse_value_token,
    register_sort_key,
    sorted_registers,
    split_register_mentions,
)


# ---------------------------------------------------------------------------
# parse_value_token
# ---------------------------------------------------------------------------

class TestParseValueToken:
    def test_none(self):
        assert parse_value_token(None) is None

    def test_empty(self):
        assert parse_value_token("") is None

    def test_whitespace_only(self):
        assert parse_value_token("   ") is None

    def test_null(self):
        assert parse_value_token("null") is None

    def test_true(self):
        assert parse_value_token("true") is True

    def test_false(self):
        assert parse_value_token("false") is False

    def test_uppercase_true_is_string(self):
        assert parse_value_token("TRUE") == "TRUE"

    def test_integer(self):
        assert parse_value_token("42") == 42
        assert isinstance(parse_value_token("42"), int)

    def test_leading_zeros(self):
        assert parse_value_token("007") == 7

    def test_negative_is_string(self):
        assert parse_value_token("-7") == "-7"

    def test_decimal_is_string(self):
        assert parse_value_token("3.14") == "3.14"

    def test_hex_is_string(self):
        assert parse_value_token("0x1f") == "0x1f"

    def test_double_quoted(self):
        assert parse_value_token('"hello"') == "hello"

    def test_single_quoted(self):
        assert parse_value_token("'hello'") == "hello"

    def test_quoted_number_stays_string(self):
        assert parse_value_token('"5"') == "5"

    def test_quoted_null_stays_string(self):
        assert parse_value_token("'null'") == "null"

    def test_no_escape_processing(self):
        assert parse_value_token(r'"a\"b"') == r'a\"b'

    def test_mismatched_quotes_verbatim(self):
        assert parse_value_token("\"abc'") == "\"abc'"

    def test_lone_quote(self):
        assert parse_value_token('"') == ""

    def test_trimmed(self):
        assert parse_value_token("  12  ") == 12
        assert parse_value_token("  foo bar ") == "foo bar"

    def test_bare_identifier(self):
        assert parse_value_token("Lcom/app/Foo;") == "Lcom/app/Foo;"

    def test_expression_kept_as_text(self):
        assert parse_value_token("v1 + 2") == "v1 + 2"

    def test_non_string_input(self):
        assert parse_value_token(5) is None

    @pytest.mark.parametrize("token", [
        "", " ", "null", "nil", "'", "\"'", "''", "v0", "=", "==", "12a",
        "٣", "\x00", "été", "1e5", "\t\n",
    ])
    def test_total(self, token):
        parse_value_token(token)


# ---------------------------------------------------------------------------
# Register names
# ---------------------------------------------------------------------------

class TestIsRegister:
    @pytest.mark.parametrize("name", ["v0", "p0", "v12", "p3", " v1 ", "v007"])
    def test_registers(self, name):
        assert is_register(name)

    @pytest.mark.parametrize("name", [
        "", "v", "p", "x0", "V0", "P1", "v-1", "v1a", "vv1", "v 1", "r0", "v1.5",
    ])
    def test_not_registers(self, name):
        assert not is_register(name)

    def test_none(self):
        assert not is_register(None)

    def test_non_ascii_digits(self):
        assert not is_register("v٣")


class TestSplitRegisterMentions:
    def test_plain_text(self):
        assert split_register_mentions("no registers here") == [
            ("no registers here", False),
        ]

    def test_mentions(self):
        assert split_register_mentions("move v0 into p1") == [
            ("move ", False),
            ("v0", True),
            (" into ", False),
            ("p1", True),
        ]

    def test_word_boundary(self):
        assert split_register_mentions("xv1 v2x") == [("xv1 v2x", False)]

    def test_punctuation_is_boundary(self):
        assert split_register_mentions("(v3,p0)") == [
            ("(", False), ("v3", True), (",", False), ("p0", True), (")", False),
        ]

    def test_rejoins_to_text(self):
        text = "v0 = p0; notes about v12"
        assert "".join(s for s, _ in split_register_mentions(text)) == text

    def test_empty(self):
        assert split_register_mentions("") == []


class TestRegisterOrdering:
    def test_params_before_locals(self):
        assert sorted_registers(["v0", "p0", "v1", "p1"]) == ["p0", "p1", "v0", "v1"]

    def test_numeric_not_lexical(self):
        assert sorted_registers(["v10", "v2", "v1"]) == ["v1", "v2", "v10"]

    def test_non_registers_last(self):
        assert sorted_registers(["zeta", "v0", "alpha", "p0"]) == [
            "p0", "v0", "alpha", "zeta",
        ]

    def test_sort_key_shape(self):
        assert register_sort_key("p3") < register_sort_key("v0")


class TestFormatValue:
    def test_null(self):
        assert format_value(None) == "null"

    def test_bool(self):
        assert format_value(True) == "true"

    def test_int(self):
        assert format_value(5) == "5"

    def test_string(self):
        assert format_value("x") == '"x"'

    def test_non_ascii_unescaped(self):
        assert format_value("é") == '"é"'
