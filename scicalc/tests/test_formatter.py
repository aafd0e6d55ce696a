"""Tests for display text parsing and formatting."""

import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from scicalc.formatter import ERROR_TEXT, fit_display, format_number, parse_number


# --- parse_number ---

@pytest.mark.parametrize("text, expected", [
    ("0", 0.0),
    ("42", 42.0),
    ("-3.5", -3.5),
    ("5.", 5.0),
    ("0.", 0.0),
    (".25", 0.25),
    ("1.234568e+10", 1.234568e10),
    ("12(", 12.0),
])
def test_parse_number(text, expected):
    assert parse_number(text) == expected


@pytest.mark.parametrize("text", ["", "(", "((3))", "Math Error", "Calculator Off", "Error", "."])
def test_parse_malformed_is_zero(text):
    assert parse_number(text) == 0.0


def test_parse_exponent_overflow_is_zero():
    assert parse_number("1e999") == 0.0


# --- format_number: integers and decimals ---

def test_format_integer_has_no_fraction():
    assert format_number(20.0) == "20"
    assert format_number(-7.0) == "-7"


def test_format_negative_zero():
    assert format_number(-0.0) == "0"


def test_format_strips_trailing_zeros():
    assert format_number(0.1 + 0.2) == "0.3"
    assert format_number(2.5) == "2.5"


def test_format_rounds_to_ten_places():
    assert format_number(1 / 3) == "0.3333333333"
    assert format_number(2 / 3) == "0.6666666667"


@pytest.mark.parametrize("value, expected", [
    (1234567.1, "1234567.1"),
    (5000000.3, "5000000.3"),
    (1234567 + 0.1, "1234567.1"),
    (-9876543.21, "-9876543.21"),
])
def test_format_shows_shortest_rounded_text(value, expected):
    assert format_number(value) == expected


def test_format_small_decimal_stays_positional():
    assert format_number(0.00001234) == "0.00001234"
    assert format_number(1e-10) == "0.0000000001"
    assert format_number(-0.00005) == "-0.00005"


def test_format_rounding_to_integer():
    assert format_number(2.99999999999) == "3"


def test_format_upper_boundary_not_scientific():
    assert format_number(1e10) == "10000000000"


# --- format_number: scientific and non-finite ---

def test_format_large_is_scientific():
    assert format_number(12345678901.0) == "1.234568e+10"


def test_format_tiny_is_scientific():
    assert format_number(1.5e-11) == "1.500000e-11"
    assert format_number(-1.5e-11) == "-1.500000e-11"


@pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
def test_format_non_finite(value):
    assert format_number(value) == ERROR_TEXT


# --- round trip ---

_plain_range = st.floats(
    min_value=-1e10, max_value=1e10, allow_nan=False, allow_infinity=False,
).filter(lambda x: x == 0 or abs(x) >= 1e-10)


@given(_plain_range)
def test_format_parse_format_is_stable(x):
    once = format_number(x)
    assert format_number(parse_number(once)) == once


# --- fit_display ---

def test_fit_display_short_text_unchanged():
    assert fit_display("123456") == "123456"


def test_fit_display_long_number_goes_scientific():
    assert fit_display("1234567890123") == "1.234568e+12"


def test_fit_display_leaves_messages_alone():
    assert fit_display("Division by zero") == "Division by zero"
    assert fit_display("Calculator Off", width=8) == "Calculator Off"
    assert fit_display("((((((((((((((") == "(((((((((((((("
