"""
kmerpack: Packed k-mers for sequence analysis

This package provides tools for:
- 2-bit packing of DNA sequences, four nucleotides per byte
- Complement, reverse complement and per-position access on packed data
- Bitwise combination (xor, not) of packed k-mers
- Sliding-window k-mer extraction
- Packed sequence comparison and composition

Built on top of NumPy for the cell-level bit arithmetic.
"""

__version__ = "0.1.0"
__author__ = "kmerpack Contributors"

from kmerpack.sequence import (
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
    char_to_code,
    code_to_char,
    Kmerizer,
    kmerize,
    CodecError,
    InvalidSymbolError,
    IndexOutOfRangeError,
    LengthMismatchError,
)

from kmerpack.utils import (
    hamming_distance,
    base_counts,
    gc_content,
)

__all__ = [
    # Packed sequences
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
    "char_to_code",
    "code_to_char",
    # K-mer extraction
    "Kmerizer",
    "kmerize",
    # Errors
    "CodecError",
    "InvalidSymbolError",
    "IndexOutOfRangeError",
    "LengthMismatchError",
    # Utilities
    "hamming_distance",
    "base_counts",
    "gc_content",
]
