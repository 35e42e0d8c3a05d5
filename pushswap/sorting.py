"""Sorting stack ``a`` with the help of stack ``b``."""

from __future__ import annotations

from pushswap.stack import Stack, pa, pb, ra, rra


def _bring_to_top(index: int, a: Stack) -> None:
    size = len(a)
    if index <= size // 2:
        for _ in range(index):
            ra(a)
    else:
        for _ in range(size - index):
            rra(a)


def simple_sort(a: Stack, b: Stack) -> None:
    """Sort ``a`` in ascending order from the top.

    The smallest element is rotated to the top along the shorter way and
    pushed onto ``b``; once ``a`` is empty everything is pushed back.
    """
    while len(a):
        values = list(a)
        _bring_to_top(values.index(min(values)), a)
        pb(a, b)
    while len(b):
        pa(a, b)