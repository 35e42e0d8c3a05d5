"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO


def put_char(c: str, stream: TextIO) -> None:
    """Write a single character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write ``text``; nothing is written for None."""
    if text is None:
        return
    stream.write(text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` followed by a newline; nothing is written for None."""
    if text is None:
        return
    stream.write(text + "\n")


def put_number(n: int, stream: TextIO) -> None:
    """Write the decimal form of an integer."""
    stream.write(str(int(n)))