"""
Argument tokenizer for selector argument lists.

Splits the text between a selector's outer brackets on top-level commas.
Braces and brackets keep independent depth counters, so commas inside
``scores={...}`` or ``hasitem=[{...},{...}]`` stay in their token.

The tokenizer never fails: unbalanced input simply keeps commas at
non-zero depth inside the current token and leaves rejection to the
argument interpreter.

Author: Vasiliy Zdanovskiy
email: vasilyvz@gmail.com
"""

from __future__ import annotations

_OPENERS = {"{": "brace", "[": "bracket"}
_CLOSERS = {"}": "brace", "]": "bracket"}


def split_arguments(text: str) -> list[str]:
    """
    Split `text` on commas at brace-depth and bracket-depth zero.

    Tokens are stripped of surrounding whitespace; empty tokens are dropped.
    """
    depth = {"brace": 0, "bracket": 0}
    tokens: list[str] = []
    current: list[str] = []

    for ch in text:
        if ch in _OPENERS:
            depth[_OPENERS[ch]] += 1
        elif ch in _CLOSERS:
            depth[_CLOSERS[ch]] -= 1
        elif ch == "," and depth["brace"] == 0 and depth["bracket"] == 0:
            tokens.append("".join(current).strip())
            current = []
            continue
        current.append(ch)

    tokens.append("".join(current).strip())
    return [t for t in tokens if t]


def split_assignment(token: str) -> tuple[str, str]:
    """
    Split ``key=value`` on the first ``=``.

    Returns ("", "") parts when there is no ``=``; callers treat an empty
    key as malformed.
    """
    key, sep, value = token.partition("=")
    if not sep:
        return "", ""
    return key.strip(), value.strip()
