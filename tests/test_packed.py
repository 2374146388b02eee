"""
Tests for the PackedSequence value type.
"""

import logging

import numpy as np
import pytest
from hypothesis import given, strategies as st

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
    code_to_char,
    CodecError,
    InvalidSymbolError,
    IndexOutOfRangeError,
    LengthMismatchError,
)

from tests._helpers import nucleotides


class TestEncodeDecode:
    """Tests for construction and decoding."""

    def test_encode_agct(self, agct):
        assert agct.length == 4
        assert agct.k == 4
        assert agct.cells.tolist() == [228]
        assert agct.cells.dtype == np.uint8

    def test_decode_partial_cell(self, partial):
        """Test decoding stops at length inside the final cell."""
        assert partial.cells.tolist() == [216, 0]
        assert decode(partial) == "ACGTA"

    def test_empty_sequence(self):
        seq = encode(0, "")
        assert seq.cells.size == 0
        assert decode(seq) == ""
        assert len(seq) == 0
        assert list(seq) == []

    def test_encode_bytes(self):
        assert encode(3, b"GAT").decode() == "GAT"

    def test_encode_invalid_symbol(self):
        """Test that AXGT fails with InvalidSymbolError."""
        with pytest.raises(InvalidSymbolError) as exc_info:
            encode(4, "AXGT")
        assert exc_info.value.position == 1
        assert exc_info.value.found == "X"

    def test_errors_are_value_errors(self):
        """Test the error taxonomy shares a recoverable base class."""
        with pytest.raises(CodecError):
            encode(4, "AXGT")
        with pytest.raises(ValueError):
            encode(4, "AXGT")

    def test_encode_length_mismatch(self):
        """Test that k must match the number of characters."""
        with pytest.raises(LengthMismatchError) as exc_info:
            encode(5, "ACGT")
        assert exc_info.value.expected == 5
        assert exc_info.value.actual == 4

    def test_encode_negative_length(self):
        with pytest.raises(ValueError):
            encode(-1, "")

    def test_encode_unsupported_type(self):
        with pytest.raises(TypeError):
            encode(3, [0, 1, 2])

    def test_from_cells(self):
        seq = PackedSequence.from_cells(4, b"\xe4")
        assert seq.decode() == "AGCT"

    def test_from_cells_wrong_count(self):
        """Test that the cell count must be ceil(k / 4)."""
        with pytest.raises(LengthMismatchError) as exc_info:
            PackedSequence.from_cells(5, [1])
        assert exc_info.value.expected == 2
        assert exc_info.value.actual == 1

    def test_from_cells_copies(self):
        """Test that the instance does not alias the caller's array."""
        cells = np.array([228], dtype=np.uint8)
        seq = PackedSequence.from_cells(4, cells)
        cells[0] = 0
        assert seq.decode() == "AGCT"

    @given(nucleotides)
    def test_round_trip(self, text):
        assert decode(encode(len(text), text)) == text

    @given(nucleotides)
    def test_packing_density(self, text):
        """Test ceil(k / 4) cells for every k."""
        seq = encode(len(text), text)
        assert seq.cells.size == -(-len(text) // 4)


class TestFormatting:
    """Tests for string rendering."""

    def test_str(self, agct):
        assert str(agct) == "4-mer: AGCT"

    def test_str_partial(self, partial):
        """Test complemented padding never shows up."""
        assert str(partial.complement()) == "5-mer: TGCAT"

    def test_repr(self, agct):
        assert repr(agct) == "PackedSequence(k=4, 'AGCT')"

    def test_str_empty(self):
        assert str(PackedSequence.from_literal("")) == "0-mer: "

    def test_to_bytes_clears_padding(self, partial):
        assert partial.complement().to_bytes() == b"\x27\x03"


class TestComplement:
    """Tests for complement and reverse complement."""

    def test_complement_agct(self):
        assert decode(complement(encode(4, "AGCT"))) == "TCGA"

    def test_invert_operator(self, agct):
        assert (~agct).decode() == "TCGA"

    def test_complement_is_pure(self, agct):
        comp = complement(agct)
        comp.complement_in_place()
        assert agct.decode() == "AGCT"
        assert comp == agct

    def test_complement_in_place(self, partial):
        complement_in_place(partial)
        assert partial.length == 5
        assert partial.decode() == "TGCAT"

    def test_reverse_complement_example(self):
        seq = encode(8, "AAGGTTCC")
        assert decode(reverse_complement(seq)) == "GGAACCTT"

    def test_reverse_complement_partial(self):
        assert PackedSequence.from_literal("AACGT").reverse_complement().decode() == "ACGTT"

    def test_reverse_complement_in_place(self):
        seq = PackedSequence.from_literal("AAGGTTCC")
        reverse_complement_in_place(seq)
        assert seq.decode() == "GGAACCTT"

    def test_in_place_logs(self, agct, caplog):
        caplog.set_level(logging.DEBUG, logger="kmerpack.sequence.packed")
        agct.reverse_complement_in_place()
        assert "Reverse-complemented 4-mer in place" in caplog.text

    def test_canonical(self):
        """Test canonical picks the smaller of forward and reverse complement."""
        assert canonical(PackedSequence.from_literal("TACG")).decode() == "CGTA"
        assert canonical(PackedSequence.from_literal("ATCG")).decode() == "ATCG"

    @given(nucleotides)
    def test_complement_involution(self, text):
        seq = encode(len(text), text)
        assert complement(complement(seq)) == seq
        assert decode(complement(complement(seq))) == text

    @given(nucleotides)
    def test_reverse_complement_involution(self, text):
        seq = encode(len(text), text)
        assert decode(reverse_complement(reverse_complement(seq))) == text

    @given(nucleotides)
    def test_reverse_complement_strategies_agree(self, text):
        """Test code-level reversal matches decode, reverse, encode, complement."""
        seq = encode(len(text), text)
        via_text = encode(len(text), decode(seq)[::-1]).complement()
        via_codes = seq.reverse_complement()
        assert via_codes == via_text
        assert via_codes.decode() == via_text.decode()
        assert via_codes.to_bytes() == via_text.to_bytes()

    @given(nucleotides)
    def test_complement_matches_base_pairing(self, text):
        pairs = str.maketrans("AGCT", "TCGA")
        assert complement(encode(len(text), text)).decode() == text.translate(pairs)


class TestIndex:
    """Tests for per-position access."""

    def test_index(self, agct):
        assert [index(agct, p) for p in range(4)] == [0, 1, 2, 3]

    def test_index_at_length(self, agct):
        """Test that position == length is out of range."""
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            index(agct, 4)
        assert exc_info.value.position == 4
        assert exc_info.value.length == 4

    def test_index_negative(self, agct):
        with pytest.raises(IndexOutOfRangeError):
            agct.index(-1)

    def test_index_error_is_index_error(self, agct):
        with pytest.raises(IndexError):
            agct.index(10)

    def test_index_empty(self):
        with pytest.raises(IndexOutOfRangeError):
            PackedSequence.from_literal("").index(0)

    def test_getitem(self, partial):
        assert partial[4] == 0
        assert partial[-2] == 3

    def test_index_ignores_padding(self, partial):
        """Test the last real symbol reads correctly after complement."""
        assert partial.complement().index(4) == 3

    @given(nucleotides)
    def test_index_agrees_with_decode(self, text):
        seq = encode(len(text), text)
        decoded = decode(seq)
        for position in range(len(seq)):
            assert decoded[position] == code_to_char(index(seq, position))


class TestXor:
    """Tests for the bitwise combinator."""

    def test_xor_self_is_zero(self, agct):
        """Test a ^ a is all zero bits."""
        result = xor(agct, agct)
        assert result.length == 4
        assert result.cells.tolist() == [0]

    def test_xor_operator(self):
        a = PackedSequence.from_literal("AAAA")
        b = PackedSequence.from_literal("TTTT")
        assert (a ^ b).codes().tolist() == [3, 3, 3, 3]

    def test_xor_length_mismatch(self):
        with pytest.raises(LengthMismatchError):
            xor(PackedSequence.from_literal("ACG"), PackedSequence.from_literal("ACGT"))

    def test_xor_with_complement(self):
        a = PackedSequence.from_literal("ACG")
        assert (a ^ a.complement()).codes().tolist() == [3, 3, 3]

    def test_xor_other_type(self, agct):
        with pytest.raises(TypeError):
            agct ^ 3

    @given(nucleotides)
    def test_xor_self_zero_bits(self, text):
        seq = encode(len(text), text)
        result = xor(seq, seq)
        assert not result.cells.any()
        assert result.length == seq.length


class TestIteration:
    """Tests for the sequential accessor."""

    def test_iter_codes(self, partial):
        assert list(partial) == [0, 2, 1, 3, 0]

    def test_iteration_is_lazy(self, agct):
        codes = agct.iter_codes()
        assert next(codes) == 0
        assert next(codes) == 1

    def test_iteration_restarts(self, partial):
        assert list(partial) == list(partial)

    def test_codes_array(self, partial):
        assert partial.codes().tolist() == list(partial)


class TestValueSemantics:
    """Tests for equality, hashing and ordering."""

    def test_equality_ignores_padding(self):
        """Test complemented A equals freshly encoded T despite padding bits."""
        comp = PackedSequence.from_literal("A").complement()
        fresh = PackedSequence.from_literal("T")
        assert comp.cells.tolist() != fresh.cells.tolist()
        assert comp == fresh
        assert hash(comp) == hash(fresh)

    def test_different_lengths_not_equal(self):
        assert PackedSequence.from_literal("A") != PackedSequence.from_literal("AA")

    def test_not_equal_other_type(self, agct):
        assert agct != "AGCT"

    def test_ordering(self):
        """Test length first, then A < G < C < T."""
        a, g, c, t = (PackedSequence.from_literal(s) for s in "AGCT")
        assert a < g < c < t
        assert PackedSequence.from_literal("TT") < PackedSequence.from_literal("AAA")
        assert sorted([t, a, c, g]) == [a, g, c, t]

    def test_usable_in_sets(self):
        kmers = {PackedSequence.from_literal("ACGT"), PackedSequence.from_literal("ACGT")}
        assert len(kmers) == 1

    def test_copy_is_independent(self, agct):
        dup = agct.copy()
        dup.complement_in_place()
        assert agct.decode() == "AGCT"
        assert dup.decode() == "TCGA"
