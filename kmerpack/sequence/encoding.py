"""
2-bit encoding functions for nucleotide sequences.

Each nucleotide is stored as a 2-bit code and four codes share one
8-bit cell, the first symbol of a cell in the least-significant pair.
The code assignment pairs every base with its Watson-Crick partner
under bitwise NOT, which is what lets the packed type complement
whole cells at once.
"""

import numpy as np
from typing import Dict, Union

from kmerpack.sequence.errors import InvalidSymbolError

# Code assignment: complementary bases are one's complements of each other
DNA_CODES = {"A": 0b00, "G": 0b01, "C": 0b10, "T": 0b11}
CODE_TO_SYMBOL = {code: symbol for symbol, code in DNA_CODES.items()}

BITS_PER_SYMBOL = 2
SYMBOLS_PER_CELL = 4
CODE_MASK = 0b11

SymbolInput = Union[str, bytes, bytearray, memoryview]

# Bit offset of each symbol slot inside a cell
_SHIFTS = np.arange(0, SYMBOLS_PER_CELL * BITS_PER_SYMBOL, BITS_PER_SYMBOL, dtype=np.uint8)

# 256-entry lookup, anything outside the alphabet maps to _INVALID
_INVALID = 0xFF
_SYMBOL_TO_CODE = np.full(256, _INVALID, dtype=np.uint8)
for _symbol, _code in DNA_CODES.items():
    _SYMBOL_TO_CODE[ord(_symbol)] = _code

_CODE_TO_ASCII = np.frombuffer(
    "".join(CODE_TO_SYMBOL[c] for c in range(len(CODE_TO_SYMBOL))).encode("ascii"),
    dtype=np.uint8,
)


def cells_for(length: int) -> int:
    """Number of packed cells needed to hold `length` symbols."""
    return (length + SYMBOLS_PER_CELL - 1) // SYMBOLS_PER_CELL


def char_to_code(symbol: str) -> int:
    """
    Map a single nucleotide character to its 2-bit code.

    Example:
        >>> char_to_code("C")
        2
    """
    if symbol not in DNA_CODES:
        raise InvalidSymbolError(0, symbol)
    return DNA_CODES[symbol]


def code_to_char(code: int) -> str:
    """
    Map a 2-bit code back to its nucleotide character.

    Example:
        >>> code_to_char(3)
        'T'
    """
    try:
        return CODE_TO_SYMBOL[int(code)]
    except KeyError:
        raise ValueError(f"Invalid nucleotide code: {code}") from None


def symbols_to_codes(symbols: SymbolInput) -> np.ndarray:
    """
    Convert nucleotide text to an array of 2-bit codes.

    Only the uppercase letters A, G, C and T are accepted.

    Args:
        symbols: Nucleotide characters as str or any bytes-like object

    Returns:
        uint8 array with one code per input character

    Raises:
        InvalidSymbolError: On the first character outside the alphabet
    """
    if isinstance(symbols, str):
        # Non-ASCII characters become '?', which keeps positions aligned
        raw = symbols.encode("ascii", errors="replace")
    elif isinstance(symbols, (bytes, bytearray, memoryview)):
        raw = bytes(symbols)
    else:
        raise TypeError(
            f"Expected str or bytes-like nucleotides, got {type(symbols).__name__}"
        )

    if not raw:
        return np.zeros(0, dtype=np.uint8)

    ascii_codes = np.frombuffer(raw, dtype=np.uint8)
    codes = _SYMBOL_TO_CODE[ascii_codes]

    bad = np.flatnonzero(codes == _INVALID)
    if bad.size:
        position = int(bad[0])
        if isinstance(symbols, str):
            found = symbols[position]
        else:
            found = chr(ascii_codes[position])
        raise InvalidSymbolError(position, found)

    return codes


def codes_to_symbols(codes: np.ndarray) -> str:
    """Convert an array of 2-bit codes to nucleotide text."""
    codes = np.asarray(codes, dtype=np.uint8)
    return _CODE_TO_ASCII[codes & CODE_MASK].tobytes().decode("ascii")


def pack_codes(codes: np.ndarray) -> np.ndarray:
    """
    Pack 2-bit codes four to a cell.

    The codes are grouped into chunks of four; the i-th code of a chunk
    lands at bit offset 2*i of that chunk's cell. A short final chunk
    leaves its high bits at zero.

    Args:
        codes: Array of codes in 0..3, one per symbol

    Returns:
        uint8 array of shape (ceil(len(codes) / 4),)

    Example:
        >>> pack_codes(np.array([0, 1, 2, 3], dtype=np.uint8))
        array([228], dtype=uint8)
    """
    codes = np.asarray(codes, dtype=np.uint8)
    n_cells = cells_for(codes.size)

    padded = np.zeros(n_cells * SYMBOLS_PER_CELL, dtype=np.uint8)
    padded[:codes.size] = codes & CODE_MASK

    shifted = padded.reshape(n_cells, SYMBOLS_PER_CELL) << _SHIFTS
    return np.bitwise_or.reduce(shifted, axis=1).astype(np.uint8)


def unpack_codes(cells: np.ndarray, length: int) -> np.ndarray:
    """
    Extract the first `length` 2-bit codes from packed cells.

    Bits of the final cell past `length` are never returned.

    Args:
        cells: Packed uint8 cells
        length: Number of symbols the cells hold

    Returns:
        uint8 array of shape (length,)
    """
    cells = np.asarray(cells, dtype=np.uint8).reshape(-1)
    codes = (cells[:, np.newaxis] >> _SHIFTS) & CODE_MASK
    return codes.reshape(-1)[:length]


def clear_padding(cells: np.ndarray, length: int) -> np.ndarray:
    """Return a copy of `cells` with the unused bits of the last cell zeroed."""
    cells = np.array(cells, dtype=np.uint8).reshape(-1)
    used = length % SYMBOLS_PER_CELL
    if used and cells.size:
        cells[-1] &= (1 << (used * BITS_PER_SYMBOL)) - 1
    return cells


def symbol_counts(codes: np.ndarray) -> Dict[str, int]:
    """Count occurrences of each nucleotide in an array of codes."""
    counts = np.bincount(np.asarray(codes, dtype=np.uint8), minlength=len(CODE_TO_SYMBOL))
    return {CODE_TO_SYMBOL[code]: int(counts[code]) for code in range(len(CODE_TO_SYMBOL))}
