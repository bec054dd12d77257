import string

import pytest

from minishell.charclass import (
    format_int,
    is_alnum,
    is_alpha,
    is_digit,
    is_signed_digits,
    parse_long,
    to_upper,
)


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_is_alpha_accepts_ascii_letters(char):
    assert is_alpha(char) is True
    assert is_alnum(char) is True
    assert is_digit(char) is False


@pytest.mark.parametrize("char", list(string.digits))
def test_is_digit_accepts_ascii_digits(char):
    assert is_digit(char) is True
    assert is_alnum(char) is True
    assert is_alpha(char) is False


@pytest.mark.parametrize("char", [" ", "_", "$", "=", "é", "\n", ""])
def test_other_characters_are_rejected(char):
    assert is_alpha(char) is False
    assert is_digit(char) is False
    assert is_alnum(char) is False


@pytest.mark.parametrize("char", list(string.ascii_lowercase))
def test_to_upper_maps_lowercase_into_uppercase(char):
    result = to_upper(char)
    assert result in string.ascii_uppercase
    assert result.lower() == char


def test_to_upper_worked_example():
    assert to_upper("c") == "C"


@pytest.mark.parametrize("char", ["+", "Q", "7", "é", " "])
def test_to_upper_leaves_other_characters(char):
    assert to_upper(char) == char


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000, -90])
def test_format_then_parse_round_trip(n):
    assert parse_long(format_int(n)) == n


@pytest.mark.parametrize("n", [0, 5, -5, 123456, -2147483648])
def test_format_int_matches_builtin_text(n):
    assert format_int(n) == str(n)


def test_parse_long_stops_at_non_digit():
    assert parse_long("-392a") == parse_long("-392")
    assert parse_long("-392") == -392


def test_parse_long_does_not_skip_whitespace():
    assert parse_long("\n\v-392a") == 0
    assert parse_long(" 12") == 0


@pytest.mark.parametrize("text", ["", "+", "-", "abc", "+-1"])
def test_parse_long_without_digits_is_zero(text):
    assert parse_long(text) == 0


def test_parse_long_plus_sign():
    assert parse_long("+15") == parse_long("15")


@pytest.mark.parametrize("text", ["0", "123", "+123", "-123", "", "+", "-"])
def test_is_signed_digits_true(text):
    assert is_signed_digits(text) is True


@pytest.mark.parametrize("text", [" -u0", "12a", "--1", "1-", "+ 1", "1.0"])
def test_is_signed_digits_false(text):
    assert is_signed_digits(text) is False