"""Validation and conversion of the numbers given on the command line.

Leading arguments that are options are skipped. Every other argument holds
one or more integers separated by spaces.
"""

from __future__ import annotations

import itertools
from typing import Iterable, List, Sequence

from pushswap.chars import is_digit
from pushswap.transform import INT_MAX, INT_MIN, split

OPTIONS = frozenset(
    {"--simple", "--medium", "--complex", "--adaptive", "--bench"}
)

_SEPARATOR = " "


class InputError(ValueError):
    """Raised when the arguments do not describe a valid set of integers."""


def _wrap_int32(value: int) -> int:
    return (value - INT_MIN) % 2**32 + INT_MIN


def _leading_digits(text: str) -> str:
    return "".join(itertools.takewhile(is_digit, text))


def _numeric_args(args: Iterable[str]) -> List[str]:
    return list(itertools.dropwhile(is_option, args))


def _tokens(args: Iterable[str]) -> List[str]:
    return [
        token
        for arg in _numeric_args(args)
        for token in split(arg, _SEPARATOR)
    ]


def _valid_arg(arg: str) -> bool:
    for index, char in enumerate(arg):
        if char == "-":
            following = arg[index + 1:index + 2]
            if not following or not is_digit(following):
                return False
            if index and arg[index - 1] != _SEPARATOR:
                return False
        elif char != _SEPARATOR and not is_digit(char):
            return False
    return True


def is_option(arg: str) -> bool:
    """Return True for one of the recognised command-line options."""
    return arg in OPTIONS


def has_valid_characters(args: Sequence[str]) -> bool:
    """Check that the numeric arguments hold only digits, spaces and signs.

    A minus sign must start a word and be followed by a digit.
    """
    return all(_valid_arg(arg) for arg in _numeric_args(args))


def in_int_range(token: str) -> bool:
    """Return False when the leading digits of ``token`` exceed INT_MAX.

    A token that starts with a minus sign is accepted without reading its
    digits.
    """
    if token.startswith("-"):
        return True
    digits = _leading_digits(token)
    return not digits or int(digits) <= INT_MAX


def parse_int(token: str) -> int:
    """Read an optional minus sign and the digits that follow it.

    Reading stops at the first non-digit. The value wraps around like a
    32-bit signed integer.
    """
    negative = token.startswith("-")
    digits = _leading_digits(token[1:] if negative else token)
    value = int(digits) if digits else 0
    return _wrap_int32(-value if negative else value)


def count_numbers(args: Sequence[str]) -> int:
    """Return how many space-separated words the numeric arguments hold."""
    return len(_tokens(args))


def parse_arguments(args: Sequence[str]) -> List[int]:
    """Validate the arguments and return the integers they hold, in order.

    Raise InputError for a bad character, a value above INT_MAX or a value
    given twice.
    """
    if not has_valid_characters(args):
        raise InputError("arguments hold characters other than integers")
    tokens = _tokens(args)
    for token in tokens:
        if not in_int_range(token):
            raise InputError(f"{token!r} does not fit in an int")
    values = [parse_int(token) for token in tokens]
    if len(set(values)) != len(values):
        raise InputError("the same value is given more than once")
    return values