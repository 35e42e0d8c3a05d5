"""Command-line entry point: read integers, sort them, print the result."""

from __future__ import annotations

import math
import sys
from typing import List, Optional, Sequence

from pushswap.options import select_strategy
from pushswap.parsing import InputError, parse_arguments
from pushswap.sorting import simple_sort
from pushswap.stack import Stack


def compute_disorder(values: Sequence[int]) -> float:
    """Return the share of ordered pairs that are out of order.

    With fewer than two values there are no pairs and the result is NaN.
    """
    pairs = 0
    mistakes = 0
    for index, first in enumerate(values):
        for second in values[index + 1:]:
            pairs += 1
            if first > second:
                mistakes += 1
    if pairs == 0:
        return math.nan
    return mistakes / pairs


def main(argv: Optional[List[str]] = None) -> int:
    """Run the program on ``argv`` (the arguments after the program name)."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        select_strategy(args)
        values = parse_arguments(args)
    except InputError:
        print("Error", file=sys.stderr)
        return 1
    if compute_disorder(values) == 0:
        return 0
    a, b = Stack(values), Stack()
    simple_sort(a, b)
    for value in a:
        print(value)
    return 0


if __name__ == "__main__":
    sys.exit(main())