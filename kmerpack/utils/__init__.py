"""
Utilities built on packed sequences.

This module provides common operations for packed k-mers:
- Hamming distance
- Base counts
- GC content
"""

from kmerpack.utils.sequences import (
    hamming_distance,
    base_counts,
    gc_content,
)

__all__ = [
    "hamming_distance",
    "base_counts",
    "gc_content",
]
