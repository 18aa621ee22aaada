"""
Module for the glyph tables used to draw alignment matrices.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union, Sequence

from alnmatrix.core.trace import TraceDirection, N_COMBINATIONS


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class SymbolError(ValueError):
    """Raised when a symbol set is malformed or has no glyph for a direction that needs drawing."""


# Classes --------------------------------------------------------------------------------------------------------------
class MatrixFormat(str, Enum):
    """Names of the built-in symbol sets."""
    ASCII = 'ascii'
    CSV = 'csv'
    UNICODE = 'unicode'
    UNICODE_ARROWS = 'unicode_arrows'


@dataclass(frozen=True, slots=True)
class SymbolSet:
    """
    Every glyph needed to draw one matrix encoding.

    Attributes:
        epsilon: Header glyph of the empty prefix row and column.
        col_sep: Vertical separator written after every cell.
        row_sep: Horizontal dash repeated across a cell in separator lines. Empty disables separator lines.
        row_col_sep: Corner glyph where separator lines cross columns.
        inf: Glyph for unreachable score cells.
        trace_dir: Eight glyphs indexed by ``TraceDirection`` value (NONE, D, U, DU, L, DL, UL, DUL).

    Examples:
        >>> braille = SymbolSet('ε', '|', '═', '/', '-', ('█', '▘', '↑', '⠉', '▖', '⠅', '▞', '▛'))
        >>> braille.trace(TraceDirection.DIAGONAL | TraceDirection.LEFT)
        '⠅'
    """
    epsilon: str
    col_sep: str
    row_sep: str
    row_col_sep: str
    inf: str
    trace_dir: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, 'trace_dir', tuple(self.trace_dir))
        if len(self.trace_dir) != N_COMBINATIONS:
            raise SymbolError(f'A symbol set needs {N_COMBINATIONS} trace glyphs, got {len(self.trace_dir)}')

    @property
    def has_row_separator(self) -> bool: return bool(self.row_sep)

    def trace(self, direction: Union[TraceDirection, int]) -> str:
        """
        Looks up the glyph of a trace direction.

        Raises:
            SymbolError: If the direction is outside the table or maps to an empty glyph.
        """
        value = int(direction)
        if not 0 <= value < N_COMBINATIONS or not self.trace_dir[value]:
            raise SymbolError(f'No symbol for trace direction {TraceDirection(value)!r}')
        return self.trace_dir[value]

    @classmethod
    def preset(cls, name: Union['MatrixFormat', str]) -> 'SymbolSet':
        """Returns a built-in symbol set by ``MatrixFormat`` or its name."""
        try: return _PRESETS[MatrixFormat(name)]
        except ValueError: raise SymbolError(
            f'Unknown matrix format "{name}", expected one of {", ".join(f.value for f in MatrixFormat)}'
        ) from None

    @classmethod
    def coerce(cls, symbols: Union['SymbolSet', 'MatrixFormat', str, Sequence]) -> 'SymbolSet':
        """Accepts a symbol set, a preset (enum or name), or the six fields as a sequence."""
        if isinstance(symbols, cls): return symbols
        if isinstance(symbols, str): return cls.preset(symbols)
        try: return cls(*symbols)
        except TypeError as e: raise SymbolError(f'Cannot build a symbol set from {symbols!r}') from e


# Constants ------------------------------------------------------------------------------------------------------------
_LETTERS = ('N', 'D', 'U', 'DU', 'L', 'DL', 'UL', 'DUL')
_PRESETS = {
    MatrixFormat.ASCII: SymbolSet(' ', '|', '-', '/', 'INF', _LETTERS),
    MatrixFormat.CSV: SymbolSet(' ', ';', '', '', 'INF', _LETTERS),
    MatrixFormat.UNICODE: SymbolSet('ε', '║', '═', '╬', '∞', _LETTERS),
    MatrixFormat.UNICODE_ARROWS: SymbolSet('ε', '║', '═', '╬', '∞', ('↺', '↖', '↑', '↖↑', '←', '↖←', '↑←', '↖↑←')),
}
