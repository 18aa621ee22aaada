"""
Module for traceback direction flags stored in alignment trace matrices.
"""
from enum import IntFlag
from functools import reduce
from operator import or_
from typing import Iterator


# Classes --------------------------------------------------------------------------------------------------------------
class TraceDirection(IntFlag):
    """
    Predecessor flags of a DP cell.

    A cell records every neighbour an optimal path could have come from, so flags combine with ``|``.
    ``NONE`` marks the origin cell or a local-alignment restart. The integer value of the first eight
    combinations is also the index into a symbol table (see ``SymbolSet.trace_dir``).

    Examples:
        >>> d = TraceDirection.DIAGONAL | TraceDirection.LEFT
        >>> TraceDirection.LEFT in d
        True
    """
    NONE = 0
    DIAGONAL = 1
    UP = 2
    LEFT = 4

    @property
    def is_restart(self) -> bool: return self.value == 0

    @classmethod
    def combinations(cls) -> Iterator['TraceDirection']:
        """Yields the eight meaningful combinations in symbol-table order (NONE, D, U, DU, L, DL, UL, DUL)."""
        for i in range(N_COMBINATIONS): yield cls(i)


# Functions ------------------------------------------------------------------------------------------------------------
def union(*directions: TraceDirection) -> TraceDirection:
    """
    Combines any number of directions; the union of nothing is ``NONE``.

    Examples:
        >>> union(TraceDirection.UP, TraceDirection.LEFT) == TraceDirection.LEFT | TraceDirection.UP
        True
    """
    return reduce(or_, directions, TraceDirection.NONE)


# Constants ------------------------------------------------------------------------------------------------------------
N_COMBINATIONS = 8
MAX_RAW = 0b1111
