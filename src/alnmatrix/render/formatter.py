"""
Module for drawing score and trace matrices as text grids.
"""
from typing import Iterable, Optional, TextIO, Union
from warnings import warn

from alnmatrix import AlnmatrixWarning
from alnmatrix.core.matrix import DenseMatrix, MatrixError, ScoreMatrix, TraceMatrix
from alnmatrix.core.text import display_width, pad
from alnmatrix.render.symbols import MatrixFormat, SymbolSet


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class FormatError(ValueError):
    """Raised when a matrix cannot be laid out at the requested column width."""


class FormatWarning(AlnmatrixWarning):
    """Issued when the drawn grid will be misaligned but still complete."""


# Classes --------------------------------------------------------------------------------------------------------------
class MatrixFormatter:
    """
    Lays out one alignment matrix with its two sequences as a text grid.

    The database sequence runs along the header row and the query sequence down the label column. Both
    are preceded by the empty prefix, drawn with the ``epsilon`` glyph.

    Args:
        matrix: The ``ScoreMatrix`` or ``TraceMatrix`` to draw.
        symbols: A ``MatrixFormat`` (or its name), a ``SymbolSet``, or the six symbol-set fields. Defaults to
            unicode for score matrices and unicode arrows for trace matrices.

    Raises:
        TypeError: If ``matrix`` is neither a score nor a trace matrix.
        SymbolError: If ``symbols`` does not describe a valid symbol set.

    Examples:
        >>> m = ScoreMatrix([0, 1, 2, 1, 0, 1], 2, 3)
        >>> print(MatrixFormatter(m, 'ascii').format('A', 'AC', column_width=3), end='')
         |   |A  |C  |
         /---/---/---/
         |0  |1  |2  |
         /---/---/---/
        A|1  |0  |1  |
    """
    __slots__ = ('_matrix', '_symbols')

    def __init__(self, matrix: Union[ScoreMatrix, TraceMatrix],
                 symbols: Union[SymbolSet, MatrixFormat, str, Iterable[str]] = None):
        if not isinstance(matrix, (ScoreMatrix, TraceMatrix)):
            raise TypeError(f'Expected a ScoreMatrix or TraceMatrix, got {type(matrix).__name__}')
        self._matrix = matrix
        if symbols is None: symbols = default_format(matrix)
        self._symbols = SymbolSet.coerce(symbols)

    def __repr__(self): return f"MatrixFormatter({self._matrix!r}, {self._symbols!r})"

    @property
    def matrix(self) -> Union[ScoreMatrix, TraceMatrix]: return self._matrix
    @property
    def symbols(self) -> SymbolSet: return self._symbols
    @property
    def is_traceback_matrix(self) -> bool: return isinstance(self._matrix, TraceMatrix)

    def symbol(self, row: int, col: int) -> str:
        """The glyph drawn for one cell."""
        if self.is_traceback_matrix: return self._symbols.trace(self._matrix[row, col])
        if self._matrix.is_inf(row, col): return self._symbols.inf
        return str(self._matrix[row, col])

    def auto_width(self) -> int:
        """
        The narrowest column width that fits every cell glyph.

        Raises:
            SymbolError: If a trace cell has no glyph in the symbol set.
        """
        if self.is_traceback_matrix:
            return max((display_width(self.symbol(r, c))
                        for r in range(self._matrix.rows) for c in range(self._matrix.cols)), default=0)
        # Decimal scores are ASCII so their width is their length
        width = self._matrix.max_width()
        if self._matrix.has_inf(): width = max(width, display_width(self._symbols.inf))
        return width

    def format(self, query: Union[str, bytes, Iterable], database: Union[str, bytes, Iterable],
               stream: Optional[TextIO] = None, column_width: Optional[int] = None) -> str:
        """
        Draws the matrix.

        Args:
            query: Sequence labelling rows 1..n; the matrix needs ``len(query) + 1`` rows.
            database: Sequence heading columns 1..m; the matrix needs ``len(database) + 1`` columns.
            stream: Optional text sink the grid is also written to.
            column_width: Display columns per cell. Defaults to ``auto_width()`` widened to fit the header glyphs.

        Returns:
            The grid, one ``"\\n"``-terminated line per row and separator.

        Raises:
            MatrixError: If the matrix shape does not match the sequence lengths.
            FormatError: If ``column_width`` is narrower than a cell glyph, ``epsilon`` or a database label, or if
                a sequence is bytes that are not valid UTF-8.
            SymbolError: If a trace cell has no glyph in the symbol set.

        Warns:
            FormatWarning: If a query or database label is not one column wide. Query labels sit in the
                unpadded label column, so a wide one only shifts its row; a database label must also fit
                ``column_width``.
        """
        query, database = _labels(query), _labels(database)
        rows, cols = self._matrix.shape
        if (rows, cols) != (len(query) + 1, len(database) + 1):
            raise MatrixError(
                f'{self._matrix!r} does not fit a query of length {len(query)} and a database of length '
                f'{len(database)}; expected {len(query) + 1} x {len(database) + 1}'
            )
        for label in query + database:
            if display_width(label) != 1:
                warn(f'Sequence label {label!r} is not one column wide, the grid will be misaligned', FormatWarning)

        s = self._symbols
        if column_width is None:
            column_width = max(self.auto_width(), *(display_width(x) for x in [s.epsilon] + database))
        cells = [[self.symbol(r, c) for c in range(cols)] for r in range(rows)]
        _check_width(column_width, [s.epsilon] + database, *cells)

        lines = [' ' + s.col_sep + ''.join(pad(x, column_width) + s.col_sep for x in [s.epsilon] + database)]
        separator = ' ' + (s.row_col_sep + s.row_sep * column_width) * cols + s.row_col_sep
        for r, row in enumerate(cells):
            if s.has_row_separator: lines.append(separator)
            label = s.epsilon if r == 0 else query[r - 1]
            lines.append(label + s.col_sep + ''.join(pad(x, column_width) + s.col_sep for x in row))

        text = ''.join(line + '\n' for line in lines)
        if stream is not None: stream.write(text)
        return text


# Functions ------------------------------------------------------------------------------------------------------------
def default_format(matrix: DenseMatrix) -> MatrixFormat:
    """Unicode for scores, unicode arrows for traces."""
    return MatrixFormat.UNICODE_ARROWS if isinstance(matrix, TraceMatrix) else MatrixFormat.UNICODE


def debug_string(matrix: Union[ScoreMatrix, TraceMatrix]) -> str:
    """
    Draws a matrix without its sequences, using the default symbols at the automatic width.

    Only the origin keeps its ``epsilon`` labels; every other header and label is blank.
    """
    if not (matrix.rows and matrix.cols): return ''
    formatter = MatrixFormatter(matrix)
    return formatter.format(' ' * (matrix.rows - 1), ' ' * (matrix.cols - 1))


def _labels(sequence: Union[str, bytes, Iterable]) -> list[str]:
    if isinstance(sequence, (bytes, bytearray)):
        try: return list(sequence.decode('utf-8'))
        except UnicodeDecodeError as e: raise FormatError(f'Sequence is not valid UTF-8: {e}') from None
    return [str(i) for i in sequence]


def _check_width(width: int, *groups: list[str]):
    if width < 1: raise FormatError(f'Column width must be at least 1, got {width}')
    for group in groups:
        for symbol in group:
            if (needed := display_width(symbol)) > width:
                raise FormatError(f'Symbol {symbol!r} needs {needed} columns but the column width is {width}')
