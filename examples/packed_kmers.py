#!/usr/bin/env python3
"""
Example: Packed k-mers with kmerpack

This example demonstrates:
- Packing nucleotide text at 2 bits per base
- Complement and reverse complement on packed data
- Per-position access and iteration over codes
- XOR-based comparison of k-mers
- Sliding-window k-mer extraction
"""

import sys
sys.path.insert(0, '..')

from kmerpack import (
    PackedSequence,
    InvalidSymbolError,
    IndexOutOfRangeError,
    LengthMismatchError,
    code_to_char,
    kmerize,
    hamming_distance,
    gc_content,
)


def demo_packing():
    """Demonstrate encoding and decoding."""
    print("\n" + "=" * 60)
    print("PACKING")
    print("=" * 60)

    for text in ["AGCT", "ACGTA", "ATGCATGCATGCATGCATGCATGC"]:
        kmer = PackedSequence.from_literal(text)
        print(f"\n   {kmer}")
        print(f"   Cells: {kmer.cells.tolist()} ({kmer.cells.size} bytes for {len(kmer)} bases)")


def demo_algebra():
    """Demonstrate complement, reverse complement and indexing."""
    print("\n" + "=" * 60)
    print("SYMBOLIC ALGEBRA")
    print("=" * 60)

    kmer = PackedSequence.from_literal("AAGGTTCC")
    print(f"\n   Forward:            {kmer}")
    print(f"   Complement:         {kmer.complement()}")
    print(f"   Reverse complement: {kmer.reverse_complement()}")
    print(f"   Canonical:          {kmer.canonical()}")

    print("\n   Codes by position:")
    for position, code in enumerate(kmer):
        print(f"   {position}: {code:02b} ({code_to_char(code)})")


def demo_comparison():
    """Demonstrate xor and hamming distance."""
    print("\n" + "=" * 60)
    print("COMPARISON")
    print("=" * 60)

    a = PackedSequence.from_literal("ACGTACGT")
    b = PackedSequence.from_literal("ACGAACGA")
    print(f"\n   a = {a}")
    print(f"   b = {b}")
    print(f"   a ^ b codes: {(a ^ b).codes().tolist()}")
    print(f"   Hamming distance: {hamming_distance(a, b)}")
    print(f"   GC content of a: {gc_content(a):.2f}")


def demo_kmerize():
    """Demonstrate sliding-window extraction."""
    print("\n" + "=" * 60)
    print("K-MER EXTRACTION")
    print("=" * 60)

    sequence = "AAAAATTTTTGGGGGCCCCC"
    print(f"\n   Sequence: {sequence}")
    for kmer in kmerize(sequence, k=5, stride=5):
        rc = kmer.reverse_complement()
        print(f"   {kmer}  ->  {rc}")


def demo_errors():
    """Demonstrate the recoverable errors."""
    print("\n" + "=" * 60)
    print("ERRORS")
    print("=" * 60)

    try:
        PackedSequence.from_literal("AXGT")
    except InvalidSymbolError as e:
        print(f"\n   InvalidSymbolError: {e}")

    kmer = PackedSequence.from_literal("ACGT")
    try:
        kmer.index(4)
    except IndexOutOfRangeError as e:
        print(f"   IndexOutOfRangeError: {e}")

    try:
        kmer ^ PackedSequence.from_literal("ACG")
    except LengthMismatchError as e:
        print(f"   LengthMismatchError: {e}")


def main():
    """Run all demos."""
    print("\n" + "=" * 60)
    print("kmerpack Example")
    print("=" * 60)

    demo_packing()
    demo_algebra()
    demo_comparison()
    demo_kmerize()
    demo_errors()

    print("\n" + "=" * 60)
    print("Done")
    print("=" * 60)


if __name__ == "__main__":
    main()
