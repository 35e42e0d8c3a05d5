"""Choice of sorting strategy from the command-line options."""

from __future__ import annotations

import enum
from typing import Sequence

from pushswap.parsing import InputError

_INSPECTED_ARGS = 3


class Strategy(enum.Enum):
    """The sorting strategies that can be asked for."""

    SIMPLE = 1
    MEDIUM = 2
    COMPLEX = 3
    ADAPTIVE = 4


_STRATEGY_OPTIONS = {
    "--simple": Strategy.SIMPLE,
    "--medium": Strategy.MEDIUM,
    "--complex": Strategy.COMPLEX,
}


def select_strategy(args: Sequence[str]) -> Strategy:
    """Return the strategy named among the first three arguments.

    Without one the strategy is adaptive. Naming more than one strategy, or
    giving ``--bench`` twice, raises InputError.
    """
    strategy = Strategy.ADAPTIVE
    strategies_named = 0
    bench = 0
    for arg in args[:_INSPECTED_ARGS]:
        if arg in _STRATEGY_OPTIONS:
            strategy = _STRATEGY_OPTIONS[arg]
            strategies_named += 1
        elif arg == "--adaptive":
            strategies_named += 1
        elif arg == "--bench":
            bench += 1
        if strategies_named > 1 or bench > 1:
            raise InputError("conflicting options")
    return strategy