"""
Sliding-window extraction of packed k-mers from a longer sequence.
"""

import logging
from dataclasses import dataclass
from typing import Iterator

from kmerpack.sequence.encoding import SymbolInput
from kmerpack.sequence.errors import InvalidSymbolError
from kmerpack.sequence.packed import PackedSequence

logger = logging.getLogger(__name__)


@dataclass
class Kmerizer:
    """
    Iterable over the packed k-mers of a nucleotide sequence.

    Attributes:
        sequence: Nucleotide text, str or bytes-like
        k: Window length
        stride: Step between window starts
        skip_invalid: Skip windows containing characters outside A/G/C/T
            instead of raising InvalidSymbolError

    Each iteration starts again from the first window.
    """
    sequence: SymbolInput
    k: int
    stride: int = 1
    skip_invalid: bool = False

    def __post_init__(self):
        if self.k <= 0:
            raise ValueError("K must be positive")
        if self.stride <= 0:
            raise ValueError("Stride must be positive")

    def __len__(self) -> int:
        if len(self.sequence) < self.k:
            return 0
        return (len(self.sequence) - self.k) // self.stride + 1

    def __iter__(self) -> Iterator[PackedSequence]:
        for i in range(len(self)):
            start = i * self.stride
            window = self.sequence[start:start + self.k]
            try:
                yield PackedSequence.encode(self.k, window)
            except InvalidSymbolError as exc:
                position = start + exc.position
                if not self.skip_invalid:
                    raise InvalidSymbolError(position, exc.found) from exc
                logger.debug(
                    "Skipping window at %d: invalid nucleotide %r at %d",
                    start, exc.found, position,
                )


def kmerize(
    sequence: SymbolInput,
    k: int,
    stride: int = 1,
    skip_invalid: bool = False
) -> Iterator[PackedSequence]:
    """
    Yield the packed k-mer of every window of a sequence.

    Args:
        sequence: Nucleotide text, str or bytes-like
        k: Length of k-mers
        stride: Step size between windows (default: 1)
        skip_invalid: If True, drop windows with invalid characters

    Returns:
        Iterator of PackedSequence, (len(sequence) - k) // stride + 1 of
        them when nothing is skipped

    Example:
        >>> [str(kmer) for kmer in kmerize("ACGTA", k=4)]
        ['4-mer: ACGT', '4-mer: CGTA']
    """
    return iter(Kmerizer(sequence, k, stride=stride, skip_invalid=skip_invalid))
