"""
Packed k-mer value type.

A PackedSequence holds `length` nucleotides in ceil(length / 4) uint8
cells. Only the first `length` codes are meaningful: the high bits of a
partially used final cell are padding, and every read path (decoding,
indexing, iteration, comparison, hashing) stops at `length`.

Complement is a cell-wise bitwise NOT because the code assignment
pairs each base with its partner's one's complement. NOT also flips the
padding bits, which is harmless since they are never read.
"""

import logging
import operator
from dataclasses import dataclass
from functools import total_ordering
from typing import Iterator, Tuple

import numpy as np

from kmerpack.sequence.encoding import (
    CODE_MASK,
    BITS_PER_SYMBOL,
    SYMBOLS_PER_CELL,
    SymbolInput,
    cells_for,
    clear_padding,
    codes_to_symbols,
    pack_codes,
    symbols_to_codes,
    unpack_codes,
)
from kmerpack.sequence.errors import IndexOutOfRangeError, LengthMismatchError

logger = logging.getLogger(__name__)


def _check_length(length) -> int:
    length = operator.index(length)
    if length < 0:
        raise ValueError(f"Sequence length must be non-negative, got {length}")
    return length


@total_ordering
@dataclass(eq=False, repr=False)
class PackedSequence:
    """
    A nucleotide sequence packed at 2 bits per symbol.

    Attributes:
        length: Declared number of symbols
        cells: uint8 array of ceil(length / 4) packed cells

    Instances behave as values: equality, ordering and hashing look only
    at `length` and the meaningful codes. The in-place mutators are the
    only operations that change an instance after construction.
    """
    length: int
    cells: np.ndarray

    def __post_init__(self):
        self.length = _check_length(self.length)
        if isinstance(self.cells, (bytes, bytearray, memoryview)):
            self.cells = np.frombuffer(bytes(self.cells), dtype=np.uint8)
        self.cells = np.array(self.cells, dtype=np.uint8).reshape(-1)

        expected = cells_for(self.length)
        if self.cells.size != expected:
            raise LengthMismatchError(expected, self.cells.size)

    # Construction

    @classmethod
    def encode(cls, k: int, symbols: SymbolInput) -> 'PackedSequence':
        """
        Pack `k` nucleotide characters.

        Args:
            k: Declared k-mer length; must equal len(symbols)
            symbols: Uppercase A/G/C/T characters, str or bytes-like

        Raises:
            LengthMismatchError: If len(symbols) != k
            InvalidSymbolError: On the first character outside the alphabet

        Example:
            >>> PackedSequence.encode(4, "AGCT").cells
            array([228], dtype=uint8)
        """
        k = _check_length(k)
        if len(symbols) != k:
            raise LengthMismatchError(k, len(symbols))
        return cls(k, pack_codes(symbols_to_codes(symbols)))

    @classmethod
    def from_literal(cls, text: SymbolInput) -> 'PackedSequence':
        """Pack a literal, taking k from its length."""
        return cls.encode(len(text), text)

    @classmethod
    def from_cells(cls, k: int, cells) -> 'PackedSequence':
        """Wrap already packed cells; the cell count must be ceil(k / 4)."""
        return cls(k, cells)

    # Decoding and formatting

    @property
    def k(self) -> int:
        return self.length

    def decode(self) -> str:
        """Return the nucleotide string, stopping after `length` symbols."""
        return codes_to_symbols(self.codes())

    def codes(self) -> np.ndarray:
        """Return the meaningful 2-bit codes as a uint8 array."""
        return unpack_codes(self.cells, self.length)

    def to_bytes(self) -> bytes:
        """Return the packed cells with padding bits cleared."""
        return clear_padding(self.cells, self.length).tobytes()

    def copy(self) -> 'PackedSequence':
        return PackedSequence(self.length, self.cells.copy())

    def __str__(self) -> str:
        return f"{self.length}-mer: {self.decode()}"

    def __repr__(self) -> str:
        return f"PackedSequence(k={self.length}, {self.decode()!r})"

    # Symbolic algebra

    def complement(self) -> 'PackedSequence':
        """Return the base-wise Watson-Crick complement."""
        return PackedSequence(self.length, np.invert(self.cells))

    def complement_in_place(self) -> None:
        """Complement this sequence by replacing its cells."""
        self.cells = np.invert(self.cells)
        logger.debug("Complemented %d-mer in place", self.length)

    def reverse_complement(self) -> 'PackedSequence':
        """
        Return the reverse complement.

        Symbol order is reversed on the unpacked codes, not on the cells,
        since reversing cells would keep each cell's four symbols in their
        original order. XOR with 0b11 is NOT restricted to one code.

        Example:
            >>> PackedSequence.from_literal("AAGGTTCC").reverse_complement().decode()
            'GGAACCTT'
        """
        reversed_codes = self.codes()[::-1] ^ CODE_MASK
        return PackedSequence(self.length, pack_codes(reversed_codes))

    def reverse_complement_in_place(self) -> None:
        """Reverse-complement this sequence by replacing its cells."""
        self.cells = self.reverse_complement().cells
        logger.debug("Reverse-complemented %d-mer in place", self.length)

    def canonical(self) -> 'PackedSequence':
        """Return the smaller of this sequence and its reverse complement."""
        return min(self, self.reverse_complement())

    def index(self, position: int) -> int:
        """
        Return the 2-bit code at a 0-based symbol position.

        Raises:
            IndexOutOfRangeError: Unless 0 <= position < length
        """
        position = operator.index(position)
        if not 0 <= position < self.length:
            raise IndexOutOfRangeError(position, self.length)

        cell = int(self.cells[position // SYMBOLS_PER_CELL])
        shift = BITS_PER_SYMBOL * (position % SYMBOLS_PER_CELL)
        return (cell >> shift) & CODE_MASK

    # Bitwise combinators

    def xor(self, other: 'PackedSequence') -> 'PackedSequence':
        """
        Cell-wise exclusive-or with a sequence of the same length.

        The result is a bit pattern, not necessarily meaningful as
        nucleotides.

        Raises:
            LengthMismatchError: If the declared lengths differ
        """
        if self.length != other.length:
            raise LengthMismatchError(self.length, other.length)
        return PackedSequence(self.length, np.bitwise_xor(self.cells, other.cells))

    def __xor__(self, other):
        if not isinstance(other, PackedSequence):
            return NotImplemented
        return self.xor(other)

    def __invert__(self) -> 'PackedSequence':
        return self.complement()

    # Sequential access

    def iter_codes(self) -> Iterator[int]:
        """Yield codes one position at a time without decoding."""
        for position in range(self.length):
            yield self.index(position)

    def __iter__(self) -> Iterator[int]:
        return self.iter_codes()

    def __len__(self) -> int:
        return self.length

    def __getitem__(self, position: int) -> int:
        position = operator.index(position)
        if position < 0:
            position += self.length
        return self.index(position)

    # Value semantics

    def _key(self) -> Tuple[int, bytes]:
        return self.length, self.codes().tobytes()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PackedSequence):
            return NotImplemented
        return self._key() == other._key()

    def __lt__(self, other: 'PackedSequence') -> bool:
        if not isinstance(other, PackedSequence):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())


def encode(k: int, symbols: SymbolInput) -> PackedSequence:
    """
    Encode `k` nucleotide characters into a packed sequence.

    Example:
        >>> decode(encode(5, "ACGTA"))
        'ACGTA'
    """
    return PackedSequence.encode(k, symbols)


def decode(seq: PackedSequence) -> str:
    """Decode a packed sequence back to nucleotide text."""
    return seq.decode()


def complement(seq: PackedSequence) -> PackedSequence:
    """
    Return the complement of a packed sequence.

    Example:
        >>> decode(complement(encode(4, "AGCT")))
        'TCGA'
    """
    return seq.complement()


def complement_in_place(seq: PackedSequence) -> None:
    seq.complement_in_place()


def reverse_complement(seq: PackedSequence) -> PackedSequence:
    """Return the reverse complement of a packed sequence."""
    return seq.reverse_complement()


def reverse_complement_in_place(seq: PackedSequence) -> None:
    seq.reverse_complement_in_place()


def canonical(seq: PackedSequence) -> PackedSequence:
    return seq.canonical()


def index(seq: PackedSequence, position: int) -> int:
    """Return the 2-bit code at `position`."""
    return seq.index(position)


def xor(a: PackedSequence, b: PackedSequence) -> PackedSequence:
    """Exclusive-or of two packed sequences of equal length."""
    return a.xor(b)
