"""
Module for measuring the terminal width of output symbols.
"""
from codecs import getincrementaldecoder
from typing import Union


# Functions ------------------------------------------------------------------------------------------------------------
def display_width(symbol: Union[str, bytes, bytearray, memoryview]) -> int:
    """
    Counts the display columns taken by a symbol, one column per Unicode scalar value.

    Box-drawing characters, arrows and Braille patterns are one column each no matter how many bytes they
    need in UTF-8, so the width of ``'↖↑←'`` is 3. Encoded input is decoded as UTF-8: an incomplete
    sequence at the end is not counted, and malformed bytes elsewhere count as one column each.

    Args:
        symbol: The symbol as text or as UTF-8 encoded bytes.

    Returns:
        The number of display columns.

    Examples:
        >>> display_width('║')
        1
        >>> display_width('↖↑←'.encode()[:-1])
        2
    """
    if isinstance(symbol, str): return len(symbol)
    decoder = getincrementaldecoder('utf-8')(errors='replace')
    # final=False keeps a truncated trailing sequence buffered instead of emitting a replacement
    return len(decoder.decode(bytes(symbol), final=False))


def pad(symbol: str, width: int, fill: str = ' ') -> str:
    """Right-pads a symbol with ``fill`` up to ``width`` display columns."""
    return symbol + fill * max(width - display_width(symbol), 0)
