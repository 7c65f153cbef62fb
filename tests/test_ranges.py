"""
Tests for the range grammar and lenient numeric literals.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import sys

import pytest

from entity_selector.selector.ast import IntRange
from entity_selector.selector.ranges import parse_float, parse_int, parse_range


@pytest.mark.parametrize(
    "text,expected",
    [
        ("5..10", IntRange(5, 10)),
        ("5..", IntRange(5, None)),
        ("..10", IntRange(None, 10)),
        ("7", IntRange(7, 7)),
        ("-5..-1", IntRange(-5, -1)),
        ("..", IntRange(None, None)),
        (" 3 ", IntRange(3, 3)),
    ],
)
def test_parse_range(text, expected):
    """Range grammar forms."""
    assert parse_range(text) == expected


@pytest.mark.parametrize("text", ["abc", "1.5", "1...3", "", "1..x"])
def test_parse_range_rejects(text):
    """Non-range text leaves the field unset."""
    assert parse_range(text) is None


def test_parse_range_non_string_inputs():
    """Integers are exact; booleans and None are rejected."""
    assert parse_range(4) == IntRange(4, 4)
    assert parse_range(True) is None
    assert parse_range(None) is None


def test_parse_int():
    """Leading integer is parsed, the rest ignored."""
    assert parse_int("10") == 10
    assert parse_int("-3") == -3
    assert parse_int("7.9") == 7
    assert parse_int("x") is None


def test_parse_float():
    """Leading decimal is parsed."""
    assert parse_float("1.5") == 1.5
    assert parse_float("-.5") == -0.5
    assert parse_float("2e1") == 20.0
    assert parse_float("~") is None


@pytest.mark.skipif(
    not hasattr(sys, "get_int_max_str_digits") or sys.get_int_max_str_digits() == 0,
    reason="int() has no digit limit on this interpreter",
)
def test_oversized_literals_are_rejected():
    """Literals past the interpreter's int digit limit leave the field unset."""
    huge = "1" * (sys.get_int_max_str_digits() + 1)
    assert parse_range(huge) is None
    assert parse_range(f"{huge}..") is None
    assert parse_range(f"..{huge}") is None
    assert parse_int(huge) is None
