"""
Sequence comparison and composition on packed sequences.

These work from the 2-bit codes directly, so nothing here decodes a
sequence to text.
"""

from typing import Dict

import numpy as np

from kmerpack.sequence.encoding import DNA_CODES, symbol_counts
from kmerpack.sequence.packed import PackedSequence

_GC_CODES = np.array([DNA_CODES["G"], DNA_CODES["C"]], dtype=np.uint8)


def hamming_distance(seq1: PackedSequence, seq2: PackedSequence) -> int:
    """
    Calculate Hamming distance between two packed sequences.

    Positions where the sequences agree xor to a zero code, so the
    distance is the number of non-zero codes in the xor.

    Args:
        seq1: First sequence
        seq2: Second sequence

    Returns:
        Number of positions where sequences differ

    Raises:
        LengthMismatchError: If the sequences have different lengths

    Example:
        >>> a = PackedSequence.from_literal("ACGT")
        >>> hamming_distance(a, PackedSequence.from_literal("ACGA"))
        1
    """
    return int(np.count_nonzero(seq1.xor(seq2).codes()))


def base_counts(sequence: PackedSequence) -> Dict[str, int]:
    """
    Count occurrences of each base.

    Returns:
        Mapping of 'A', 'G', 'C', 'T' to their counts
    """
    return symbol_counts(sequence.codes())


def gc_content(sequence: PackedSequence) -> float:
    """
    Calculate the GC content (fraction) of a packed sequence.

    Example:
        >>> gc_content(PackedSequence.from_literal("ACGT"))
        0.5
        >>> gc_content(PackedSequence.from_literal("AAAA"))
        0.0
    """
    if len(sequence) == 0:
        return 0.0

    gc_count = np.isin(sequence.codes(), _GC_CODES).sum()
    return float(gc_count) / len(sequence)
