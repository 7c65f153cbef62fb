"""
Range grammar and lenient numeric literals shared by selector arguments.

``N..M``, ``N..`` and ``..M`` give bounded or half-open ranges; a bare
integer ``N`` gives ``N..N``. Anything else leaves the field unset.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

import re
from typing import Optional, Union

from .ast import IntRange

_RANGE_RE = re.compile(r"^(-?\d+)?\.\.(-?\d+)?$")
_EXACT_RE = re.compile(r"^-?\d+$")
_INT_PREFIX_RE = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PREFIX_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_range(value: Union[str, int, None]) -> Optional[IntRange]:
    """
    Parse the range grammar.

    Returns None when `value` is neither a range nor an integer.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return IntRange(value, value)
    text = str(value).strip()
    match = _RANGE_RE.match(text)
    if match:
        low, high = match.groups()
        return _checked_range(low, high)
    if _EXACT_RE.match(text):
        return _checked_range(text, text)
    return None


def _to_int(digits: str) -> Optional[int]:
    # int() rejects literals above sys.get_int_max_str_digits()
    try:
        return int(digits)
    except ValueError:
        return None


def _checked_range(low: Optional[str], high: Optional[str]) -> Optional[IntRange]:
    low_value = _to_int(low) if low is not None else None
    high_value = _to_int(high) if high is not None else None
    if (low is not None and low_value is None) or (high is not None and high_value is None):
        return None
    return IntRange(low_value, high_value)


def parse_int(value: str) -> Optional[int]:
    """Parse a leading integer (``"10"``, ``"-3"``, ``"7.9"`` -> 7); None if absent."""
    match = _INT_PREFIX_RE.match(value)
    return _to_int(match.group(1)) if match else None


def parse_float(value: str) -> Optional[float]:
    """Parse a leading decimal number (``"1.5"``, ``"-.5"``, ``"2e1"``); None if absent."""
    match = _FLOAT_PREFIX_RE.match(value)
    return float(match.group(1)) if match else None
