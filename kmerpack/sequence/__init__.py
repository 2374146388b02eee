"""
Packed nucleotide sequences.

This module provides:
- 2-bit encoding and decoding of A/G/C/T text
- The PackedSequence value type and its algebra
  (complement, reverse complement, indexing, xor)
- Sliding-window k-mer extraction
"""

from kmerpack.sequence.errors import (
    CodecError,
    InvalidSymbolError,
    IndexOutOfRangeError,
    LengthMismatchError,
)

from kmerpack.sequence.encoding import (
    char_to_code,
    code_to_char,
    pack_codes,
    unpack_codes,
    DNA_CODES,
    CODE_TO_SYMBOL,
    SYMBOLS_PER_CELL,
    BITS_PER_SYMBOL,
    CODE_MASK,
)

from kmerpack.sequence.packed import (
    PackedSequence,
    encode,
    decode,
    complement,
    complement_in_place,
    reverse_complement,
    reverse_complement_in_place,
    canonical,
    index,
    xor,
)

from kmerpack.sequence.kmerizer import Kmerizer, kmerize

__all__ = [
    "CodecError",
    "InvalidSymbolError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    "char_to_code",
    "code_to_char",
    "pack_codes",
    "unpack_codes",
    "DNA_CODES",
    "CODE_TO_SYMBOL",
    "SYMBOLS_PER_CELL",
    "BITS_PER_SYMBOL",
    "CODE_MASK",
    "PackedSequence",
    "encode",
    "decode",
    "complement",
    "complement_in_place",
    "reverse_complement",
    "reverse_complement_in_place",
    "canonical",
    "index",
    "xor",
    "Kmerizer",
    "kmerize",
]
