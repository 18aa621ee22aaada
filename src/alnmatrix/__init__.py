"""
Text rendering of pairwise alignment DP matrices (scores and traceback directions).
"""
from importlib.metadata import version, PackageNotFoundError


# Exceptions and Warnings ----------------------------------------------------------------------------------------------
class AlnmatrixWarning(Warning): pass


from alnmatrix.core.trace import TraceDirection, union
from alnmatrix.core.text import display_width
from alnmatrix.core.matrix import DenseMatrix, ScoreMatrix, TraceMatrix, MatrixError, SCORE_INF
from alnmatrix.render.symbols import SymbolSet, MatrixFormat, SymbolError
from alnmatrix.render.formatter import MatrixFormatter, FormatError, FormatWarning, debug_string

try: __version__ = version(__name__)
except PackageNotFoundError: __version__ = '0.0.0'

__all__ = [
    'AlnmatrixWarning', 'TraceDirection', 'union', 'display_width', 'DenseMatrix', 'ScoreMatrix', 'TraceMatrix',
    'MatrixError', 'SCORE_INF', 'SymbolSet', 'MatrixFormat', 'SymbolError', 'MatrixFormatter', 'FormatError',
    'FormatWarning', 'debug_string'
]
