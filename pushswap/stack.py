"""The two stacks of the puzzle and the moves that act on them.

The top of a stack is its first element. Of the named moves only the swaps
announce themselves on standard output.
"""

from __future__ import annotations

from collections import deque
from typing import Iterable, Iterator


class Stack:
    """A stack of integers whose top is its first element."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def swap(self) -> bool:
        """Exchange the two top elements; return whether anything moved."""
        if len(self._items) < 2:
            return False
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)
        return True

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        if len(self._items) >= 2:
            self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        if len(self._items) >= 2:
            self._items.rotate(1)

    def push_onto(self, other: "Stack") -> None:
        """Move the top element onto ``other``; nothing happens when empty."""
        if not self._items:
            return
        other._items.appendleft(self._items.popleft())


def sa(a: Stack) -> None:
    """Swap the top of ``a`` and announce it."""
    if a.swap():
        print("sa")


def sb(b: Stack) -> None:
    """Swap the top of ``b`` and announce it."""
    if b.swap():
        print("sb")


def ss(a: Stack, b: Stack) -> None:
    """Swap the tops of both stacks and announce it."""
    a.swap()
    b.swap()
    print("ss")


def pa(a: Stack, b: Stack) -> None:
    """Push the top of ``b`` onto ``a``."""
    b.push_onto(a)


def pb(a: Stack, b: Stack) -> None:
    """Push the top of ``a`` onto ``b``."""
    a.push_onto(b)


def ra(a: Stack) -> None:
    """Rotate ``a`` upwards."""
    a.rotate()


def rb(b: Stack) -> None:
    """Rotate ``b`` upwards."""
    b.rotate()


def rr(a: Stack, b: Stack) -> None:
    """Rotate both stacks upwards."""
    a.rotate()
    b.rotate()


def rra(a: Stack) -> None:
    """Rotate ``a`` downwards."""
    a.reverse_rotate()


def rrb(b: Stack) -> None:
    """Rotate ``b`` downwards."""
    b.reverse_rotate()


def rrr(a: Stack, b: Stack) -> None:
    """Rotate both stacks downwards."""
    a.reverse_rotate()
    b.reverse_rotate()