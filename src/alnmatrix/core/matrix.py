"""
Module for the dense score and trace matrices filled by a pairwise alignment recurrence.
"""
from typing import Any, ClassVar, Final, Iterable, Union

import numpy as np

from alnmatrix.core.trace import TraceDirection, MAX_RAW
from alnmatrix.utils.resources import jit


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class MatrixError(ValueError):
    """Raised when matrix values do not fit the declared shape, or a matrix does not fit its sequences."""


# Constants ------------------------------------------------------------------------------------------------------------
SCORE_INF: Final = int(np.iinfo(np.int32).min)


# Classes --------------------------------------------------------------------------------------------------------------
class DenseMatrix:
    """
    Immutable row-major grid of ``rows x cols`` cells.

    The grid of a DP alignment has one more row than the query and one more column than the database
    sequence. Subclasses only choose the storage dtype and how a stored value is handed back.

    Args:
        values: Flat row-major values (or anything numpy can reshape to ``rows x cols``).
        rows: Number of rows.
        cols: Number of columns.

    Raises:
        MatrixError: If the number of values is not ``rows * cols``.
    """
    _DTYPE: ClassVar[np.dtype] = None
    __slots__ = ('_data',)

    def __init__(self, values: Union[Iterable, np.ndarray], rows: int, cols: int):
        if rows < 0 or cols < 0: raise MatrixError(f'Matrix dimensions must be non-negative, got {rows} x {cols}')
        data = values if isinstance(values, np.ndarray) else np.asarray(list(values))
        if data.size and not np.issubdtype(data.dtype, np.integer):
            raise MatrixError(f'Matrix values must be integers, got dtype {data.dtype}')
        data = data.astype(np.int64)
        if data.size != rows * cols:
            raise MatrixError(f'Expected {rows} x {cols} = {rows * cols} values, got {data.size}')
        self._check(data)
        self._data = np.ascontiguousarray(data.reshape(rows, cols), dtype=self._DTYPE)
        self._data.flags.writeable = False

    @classmethod
    def from_array(cls, array: Union[np.ndarray, Iterable[Iterable]]):
        """Builds a matrix from a 2D array-like, taking the shape from the data."""
        array = np.asarray(array)
        if array.ndim != 2: raise MatrixError(f'Expected a 2D array, got {array.ndim} dimension(s)')
        return cls(array.ravel(), *array.shape)

    def _check(self, data: np.ndarray): pass
    def _cell(self, value) -> Any: return int(value)

    @property
    def rows(self) -> int: return self._data.shape[0]
    @property
    def cols(self) -> int: return self._data.shape[1]
    @property
    def shape(self) -> tuple[int, int]: return self._data.shape

    def __getitem__(self, item: tuple[int, int]):
        row, col = item
        return self._cell(self._data[row, col])

    def __array__(self, dtype=None, copy=None): return self._data.astype(dtype, copy=False) if dtype else self._data
    def __repr__(self): return f"{self.__class__.__name__}{self.shape}"

    def __eq__(self, other):
        if isinstance(other, self.__class__): return np.array_equal(self._data, other._data)
        return False

    def __hash__(self): return hash((self.__class__.__name__, self.shape, self._data.tobytes()))

    def __str__(self):
        from alnmatrix.render.formatter import debug_string
        return debug_string(self)


class ScoreMatrix(DenseMatrix):
    """
    Alignment scores per DP cell; ``SCORE_INF`` marks unreachable cells.

    Examples:
        >>> m = ScoreMatrix([0, 1, 2, 1, 0, SCORE_INF], 2, 3)
        >>> m[1, 1], m.is_inf(1, 2)
        (0, True)
    """
    _DTYPE = np.int32
    __slots__ = ()

    def _check(self, data: np.ndarray):
        if data.size and (data.min() < SCORE_INF or data.max() > np.iinfo(self._DTYPE).max):
            raise MatrixError(f'Scores must fit in {np.dtype(self._DTYPE).name}')

    def is_inf(self, row: int, col: int) -> bool: return bool(self._data[row, col] == SCORE_INF)
    def has_inf(self) -> bool: return bool((self._data == SCORE_INF).any())

    def max_width(self) -> int:
        """Number of characters in the widest decimal score, ignoring ``SCORE_INF`` cells."""
        return int(_max_decimal_width_kernel(self._data.ravel().astype(np.int64), SCORE_INF))


class TraceMatrix(DenseMatrix):
    """
    Traceback directions per DP cell.

    Examples:
        >>> D, L = TraceDirection.DIAGONAL, TraceDirection.LEFT
        >>> TraceMatrix([TraceDirection.NONE, L, TraceDirection.UP, D | L], 2, 2)[1, 1] == D | L
        True
    """
    _DTYPE = np.uint8
    __slots__ = ()

    def _check(self, data: np.ndarray):
        if data.size and (data.min() < 0 or data.max() > MAX_RAW):
            raise MatrixError(f'Trace values must be 4-bit direction flags (0-{MAX_RAW})')

    def _cell(self, value) -> TraceDirection: return TraceDirection(int(value))


# Functions ------------------------------------------------------------------------------------------------------------
@jit(nopython=True, cache=True)
def _max_decimal_width_kernel(data, inf):
    best = 0
    for i in range(data.shape[0]):
        v = data[i]
        if v == inf: continue
        n = 1
        if v < 0:
            n += 1
            v = -v
        while v >= 10:
            v //= 10
            n += 1
        if n > best: best = n
    return best
