"""
Tests for the hasitem sub-parser.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

import pytest

from entity_selector.core.exceptions import ArgumentError
from entity_selector.selector.ast import IntRange, ItemCondition
from entity_selector.selector.item_conditions import (
    classify_bareword,
    condition_from_record,
    parse_item_conditions,
)


class TestParseItemConditions:
    """Tests for parse_item_conditions."""

    def test_single_object(self):
        """A single object gives one condition."""
        conditions = parse_item_conditions("{item=minecraft:torch,quantity=1..3}")
        assert conditions == (
            ItemCondition(item="minecraft:torch", quantity=IntRange(1, 3)),
        )

    def test_array_with_quoted_location(self):
        """Arrays give one condition per object; quoted strings are unquoted."""
        conditions = parse_item_conditions(
            '[{item=minecraft:torch,quantity=1,location="slot.hotbar",slot=1},{item=stick}]'
        )
        assert len(conditions) == 2
        first, second = conditions
        assert first.item == "minecraft:torch"
        assert first.quantity == IntRange(1, 1)
        assert first.location == "slot.hotbar"
        assert first.slot == IntRange(1, 1)
        assert second.item == "stick"
        assert second.slot is None

    def test_quantity_defaults_to_at_least_one(self):
        (condition,) = parse_item_conditions("{item=apple}")
        assert condition.quantity == IntRange(min=1)
        assert condition.data is None
        assert condition.location is None

    def test_data_field(self):
        (condition,) = parse_item_conditions("{item=minecraft:iron_sword,data=5}")
        assert condition.data == 5

    def test_whitespace_between_tokens(self):
        """Whitespace around separators is ignored."""
        (condition,) = parse_item_conditions("{ item = apple , quantity = ..2 }")
        assert condition.item == "apple"
        assert condition.quantity == IntRange(None, 2)

    def test_escaped_quote_in_string(self):
        (condition,) = parse_item_conditions('{item="a\\"b"}')
        assert condition.item == 'a"b'

    def test_bareword_with_embedded_quote(self):
        """A quote inside a bareword is kept as part of the value."""
        (condition,) = parse_item_conditions('{item=foo"bar,location=slot.hotbar}')
        assert condition.item == 'foo"bar'
        assert condition.location == "slot.hotbar"

    def test_bareword_cannot_start_with_quote(self):
        with pytest.raises(ArgumentError):
            parse_item_conditions('{item="foo}')

    def test_oversized_numeric_literal(self):
        """Literals too long for int() degrade instead of raising."""
        (condition,) = parse_item_conditions("{item=apple,slot=" + "0" * 5000 + "1}")
        assert condition.slot == IntRange(1, 1)

    def test_empty_object_and_array(self):
        """An empty object is an unconstrained condition; an empty array is none."""
        assert parse_item_conditions("{}") == (ItemCondition(),)
        assert parse_item_conditions("[]") == ()

    def test_unparsable_quantity_is_unbounded(self):
        (condition,) = parse_item_conditions("{item=apple,quantity=lots}")
        assert condition.quantity == IntRange()

    @pytest.mark.parametrize(
        "value",
        [
            "[{item=apple}",
            "item=apple",
            "[{item=apple},]",
            "{item=apple",
            "{item={a=1}}",
            "{=apple}",
        ],
    )
    def test_malformed_values_raise(self, value):
        """Malformed values raise ArgumentError."""
        with pytest.raises(ArgumentError) as exc_info:
            parse_item_conditions(value)
        assert exc_info.value.code == "ARGUMENT_ERROR"


@pytest.mark.parametrize(
    "word,expected",
    [
        ("10", 10),
        ("-2", -2),
        ("1.5", 1.5),
        ("true", True),
        ("False", False),
        ("1..2", "1..2"),
        ("minecraft:apple", "minecraft:apple"),
        ("inf", "inf"),
    ],
)
def test_classify_bareword(word, expected):
    """Barewords become numbers, booleans or strings."""
    result = classify_bareword(word)
    assert result == expected
    assert type(result) is type(expected)


def test_condition_from_record_ignores_unknown_fields(caplog):
    """Unknown fields are logged and ignored."""
    with caplog.at_level("DEBUG", logger="entity_selector"):
        condition = condition_from_record({"item": "apple", "colour": "red"})
    assert condition == ItemCondition(item="apple")
    assert "colour" in caplog.text


def test_condition_from_record_numeric_fields():
    """Numeric quantity and slot are exact ranges; text data is parsed leniently."""
    condition = condition_from_record({"quantity": 3, "slot": 0, "data": "7"})
    assert condition.quantity == IntRange(3, 3)
    assert condition.slot == IntRange(0, 0)
    assert condition.data == 7
