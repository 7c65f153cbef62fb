"""
Item-condition sub-parser for the ``hasitem`` argument (Lark).

Accepted syntax is a single object or an array of objects written in the
relaxed command style::

    {item=minecraft:torch,quantity=1..3}
    [{item=apple,location=slot.hotbar,slot=0..2},{item="minecraft:stick"}]

Notes:
- Keys are barewords or quoted strings.
- Values are quoted strings or barewords; barewords are classified as
  numbers, booleans, or plain strings (``1..3`` stays a string). A
  bareword may contain ``"`` anywhere but at its start.
- ``quantity`` and ``slot`` use the shared range grammar; ``quantity``
  defaults to ``1..`` when omitted.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Union

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from ..core.exceptions import ArgumentError
from .ast import IntRange, ItemCondition
from .ranges import parse_int, parse_range

logger = logging.getLogger(__name__)

_GRAMMAR = r"""
?start: array | object

array: "[" [object ("," object)*] "]"
object: "{" [pair ("," pair)*] "}"
pair: key "=" value

key: WORD | STRING
value: WORD -> bareword
     | STRING -> quoted
     | object
     | array

WORD: /[^,{}\[\]="\s][^,{}\[\]=\s]*(?:[ \t]+[^,{}\[\]="\s][^,{}\[\]=\s]*)*/

%import common.ESCAPED_STRING -> STRING
%import common.WS
%ignore WS
"""

_parser = Lark(_GRAMMAR, parser="lalr", start="start")

Scalar = Union[str, int, float, bool]


def _unquote(raw: str) -> str:
    try:
        return json.loads(raw)
    except ValueError:
        return raw[1:-1]


def classify_bareword(word: str) -> Scalar:
    """Classify an unquoted value as a number, boolean, or string."""
    lowered = word.lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    if ".." not in word:
        try:
            number = float(word)
        except ValueError:
            return word
        if not math.isfinite(number):
            return word
        if number.is_integer() and "." not in word and "e" not in lowered:
            try:
                return int(word)
            except ValueError:
                return number
        return number
    return word


class _ToRecords(Transformer):
    def WORD(self, t: Token) -> str:  # noqa: N802
        return str(t)

    def STRING(self, t: Token) -> str:  # noqa: N802
        return _unquote(str(t))

    def key(self, items: list[Any]) -> str:
        return str(items[0])

    def bareword(self, items: list[Any]) -> Scalar:
        return classify_bareword(items[0])

    def quoted(self, items: list[Any]) -> str:
        return items[0]

    def value(self, items: list[Any]) -> Any:
        return items[0]

    def pair(self, items: list[Any]) -> tuple[str, Any]:
        return items[0], items[1]

    def object(self, items: list[Any]) -> dict[str, Any]:
        return dict(it for it in items if it is not None)

    def array(self, items: list[Any]) -> list[dict[str, Any]]:
        return [it for it in items if it is not None]


def _scalar_field(record: dict[str, Any], name: str) -> Scalar:
    value = record[name]
    if isinstance(value, (dict, list)):
        raise ArgumentError(
            f"hasitem field '{name}' must be a scalar", argument=str(value)
        )
    return value


def _as_text(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _range_field(value: Scalar) -> IntRange:
    """
    Range for quantity/slot values.

    Numbers are exact; unparsable text gives an unbounded range.
    """
    if isinstance(value, bool):
        return IntRange()
    if isinstance(value, (int, float)):
        return IntRange(int(value), int(value))
    return parse_range(value) or IntRange()


def condition_from_record(record: dict[str, Any]) -> ItemCondition:
    """Decode one parsed hasitem object into an ItemCondition."""
    item = None
    quantity = IntRange(min=1)
    data = None
    location = None
    slot = None

    if "item" in record:
        item = _as_text(_scalar_field(record, "item"))
    if "quantity" in record:
        quantity = _range_field(_scalar_field(record, "quantity"))
    if "data" in record:
        raw = _scalar_field(record, "data")
        if isinstance(raw, bool):
            data = None
        elif isinstance(raw, (int, float)):
            data = int(raw)
        else:
            data = parse_int(raw)
    if "location" in record:
        location = _as_text(_scalar_field(record, "location"))
    if "slot" in record:
        slot = _range_field(_scalar_field(record, "slot"))

    unknown = set(record) - {"item", "quantity", "data", "location", "slot"}
    if unknown:
        logger.debug("Ignoring unknown hasitem fields: %s", ", ".join(sorted(unknown)))

    return ItemCondition(
        item=item, quantity=quantity, data=data, location=location, slot=slot
    )


def parse_item_conditions(value: str) -> tuple[ItemCondition, ...]:
    """
    Parse a hasitem value into item conditions.

    Raises:
        ArgumentError: when the value is not a well-formed object or array
    """
    text = value.strip()
    if not (text.startswith("{") or text.startswith("[")):
        raise ArgumentError(
            'hasitem value must be "{...}" or "[{...}]"', argument=value
        )
    try:
        tree = _parser.parse(text)
        parsed = _ToRecords().transform(tree)
        records = parsed if isinstance(parsed, list) else [parsed]
        return tuple(condition_from_record(record) for record in records)
    except (LarkError, ValueError) as e:
        raise ArgumentError(f"Invalid hasitem value: {e}", argument=value) from e
