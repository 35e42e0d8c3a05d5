"""Building new strings from old ones: slicing, joining, trimming, splitting
and conversion between integers and their decimal text.
"""

from __future__ import annotations

import itertools
import operator
from typing import Callable, List, MutableSequence, Optional

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = "\t\n\v\f\r "
_DIGITS = "0123456789"


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def substr(text: Optional[str], start: int, length: int) -> Optional[str]:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end gives an empty string; None gives None.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if text is None:
        return None
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Return the two strings joined, or None if either is None."""
    if first is None or second is None:
        return None
    return first + second


def strtrim(text: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Strip every character of ``charset`` from both ends of ``text``."""
    if text is None or charset is None:
        return None
    if not charset:
        return text
    return text.strip(charset)


def split(text: Optional[str], separator: str) -> Optional[List[str]]:
    """Split ``text`` on a single-character separator, dropping empty words."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    if text is None:
        return None
    return [word for word in text.split(separator) if word]


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    value = operator.index(n)
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit in a 32-bit signed integer")
    return str(value)


def atoi(text: str) -> int:
    """Read a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted. Parsing stops at the first non-digit; no
    digits give 0. The result wraps around like a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = "".join(itertools.takewhile(lambda ch: ch in _DIGITS, rest))
    value = int(digits) if digits else 0
    return _wrap_int32(-value if negative else value)


def strmapi(
    text: Optional[str], func: Optional[Callable[[int, str], str]]
) -> Optional[str]:
    """Return a new string of ``func(index, char)`` for every character."""
    if text is None or func is None:
        return None
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``func(index, char)`` on every character, in place.

    A non-None return value replaces the character at that index.
    """
    if chars is None or func is None:
        return
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement