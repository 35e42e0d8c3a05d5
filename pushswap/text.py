"""String inspection, comparison and bounded copying.

Positions are returned as indices into the string, or None where nothing
was found. The NUL character ends a string for the comparison helpers, as
does the end of the Python string itself.
"""

from __future__ import annotations

import operator
from typing import Optional, Tuple, Union

CharLike = Union[str, int]

NUL = "\0"


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``text``.

    Searching for NUL gives the index just past the end. An integer is
    truncated to a byte before the search.
    """
    target = _char(c)
    if target == NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(text: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``text``, like :func:`strchr`."""
    target = _char(c)
    if target == NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(first: str, second: str, length: int) -> int:
    """Compare at most ``length`` characters.

    Return the code difference at the first mismatch or at the end of
    either string, and 0 when the compared prefixes are equal.
    """
    _check_size(length)
    for index in range(length):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0 or b == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` lying wholly within ``big[:length]``."""
    _check_size(length)
    if not little:
        return 0
    index = big.find(little, 0, length)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Return the copied text and the full length of ``src``.
    """
    _check_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Return the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is left unchanged and the returned
    length is ``size + len(src)``.
    """
    _check_size(size)
    dst_len = len(dst)
    src_len = len(src)
    if dst_len >= size:
        return dst, size + src_len
    return dst + src[: size - dst_len - 1], dst_len + src_len