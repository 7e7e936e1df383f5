"""
Tests for bit-level access to BITS transmissions.
"""

import numpy as np
import pytest

from bitsproto.bitstream import BitStream, BitstreamReader
from bitsproto.parser import decode_bits
from bitsproto.errors import (
    InvalidBitCharError,
    InvalidHexCharError,
    ParseError,
    UnexpectedEndOfInputError,
)


class TestFromHex:
    """Test hex text expansion."""

    def test_expands_four_bits_per_digit_msb_first(self):
        stream = BitStream.from_hex("1F3\n")
        assert str(stream) == "000111110011"
        assert len(stream) == 12

    def test_case_insensitive(self):
        assert str(BitStream.from_hex("aB")) == str(BitStream.from_hex("Ab")) == "10101011"

    def test_surrounding_whitespace_ignored(self):
        assert str(BitStream.from_hex("  \tD2FE28\r\n")) == "110100101111111000101000"

    def test_empty_input(self):
        assert len(BitStream.from_hex("")) == 0
        assert len(BitStream.from_hex("\n")) == 0

    def test_invalid_character(self):
        with pytest.raises(InvalidHexCharError) as exc:
            BitStream.from_hex("8A0G")
        assert exc.value.char == "G"
        assert exc.value.index == 3

    def test_interior_whitespace_rejected(self):
        with pytest.raises(InvalidHexCharError) as exc:
            BitStream.from_hex("8A 00")
        assert exc.value.index == 2

    def test_non_ascii_digit_rejected(self):
        # int() would accept this Arabic-Indic digit
        with pytest.raises(InvalidHexCharError):
            BitStream.from_hex("١")

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            BitStream.from_hex("xyz")
        with pytest.raises(ParseError):
            BitStream.from_hex("xyz")


class TestFromBinary:
    """Test '0'/'1' text input."""

    def test_round_trips_text(self):
        assert str(BitStream.from_binary("0110\n")) == "0110"

    def test_invalid_character(self):
        with pytest.raises(InvalidBitCharError) as exc:
            BitStream.from_binary("0120")
        assert exc.value.char == "2"
        assert exc.value.index == 2


class TestBitStream:
    """Test the immutable bit sequence."""

    def test_indexing(self):
        stream = BitStream.from_hex("A")
        assert [stream[i] for i in range(4)] == [1, 0, 1, 0]

    def test_slicing(self):
        stream = BitStream.from_hex("F0")
        assert str(stream[2:6]) == "1100"

    def test_bits_are_read_only(self):
        stream = BitStream.from_hex("FF")
        with pytest.raises(ValueError):
            stream.bits[0] = 0

    def test_source_array_changes_do_not_leak(self):
        base = BitStream.from_hex("D2FE28").bits.copy()
        stream = BitStream(base[:])
        assert decode_bits(stream).body.value == 2021

        base[10] = 0
        assert decode_bits(stream).body.value == 2021
        assert str(stream) == "110100101111111000101000"

    def test_source_array_stays_writable(self):
        base = np.array([1, 0, 1, 1], dtype=np.uint8)
        BitStream(base)
        base[0] = 0
        assert base.tolist() == [0, 0, 1, 1]

    def test_rejects_non_bit_values(self):
        with pytest.raises(ValueError):
            BitStream(np.array([0, 2, 1]))

    def test_rejects_multidimensional_input(self):
        with pytest.raises(ValueError):
            BitStream(np.zeros((2, 4), dtype=np.uint8))


class TestBitstreamReader:
    """Test cursor-based reads."""

    @pytest.fixture
    def reader(self):
        return BitstreamReader(BitStream.from_hex("D2FE28"))

    def test_read_bits_msb_first(self, reader):
        assert reader.read_bits(3) == 6
        assert reader.read_bits(3) == 4
        assert reader.position == 6
        assert reader.bits_left == 18

    def test_read_bit(self, reader):
        assert [reader.read_bit() for _ in range(4)] == [1, 1, 0, 1]
        assert reader.position == 4

    def test_read_zero_bits(self, reader):
        assert reader.read_bits(0) == 0
        assert reader.position == 0

    def test_bits_since_marker(self, reader):
        reader.read_bits(5)
        marker = reader.position
        reader.read_bits(7)
        assert reader.bits_since(marker) == 7
        assert reader.bits_since(0) == 12

    def test_read_past_end(self, reader):
        reader.read_bits(20)
        with pytest.raises(UnexpectedEndOfInputError) as exc:
            reader.read_bits(5)
        assert exc.value.requested == 5
        assert exc.value.available == 4
        assert exc.value.position == 20
        # Failed read leaves the cursor in place
        assert reader.position == 20
        assert reader.read_bits(4) == 8

    def test_read_bit_at_end(self):
        reader = BitstreamReader(BitStream.from_hex(""))
        with pytest.raises(UnexpectedEndOfInputError):
            reader.read_bit()

    def test_wide_reads_do_not_overflow(self):
        reader = BitstreamReader(BitStream.from_hex("F" * 20))
        assert reader.read_bits(80) == 2 ** 80 - 1

    def test_negative_read_rejected(self, reader):
        with pytest.raises(ValueError):
            reader.read_bits(-1)
