"""
Shared fixtures for kmerpack tests.
"""

import pytest

from kmerpack.sequence import PackedSequence


@pytest.fixture
def agct():
    """The 4-mer that fills exactly one cell with every code."""
    return PackedSequence.from_literal("AGCT")


@pytest.fixture
def partial():
    """A 5-mer whose final cell holds a single symbol."""
    return PackedSequence.from_literal("ACGTA")
