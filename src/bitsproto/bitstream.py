"""
Bit-level access to a BITS transmission.

BitStream holds the expanded bits of the input as a read-only NumPy
array; BitstreamReader walks it with a cursor. The stream never changes
after construction, only the reader advances.
"""

from typing import Union

import numpy as np

from .errors import InvalidBitCharError, InvalidHexCharError, UnexpectedEndOfInputError

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class BitStream:
    """Immutable sequence of bits, most significant bit of each hex digit first."""

    def __init__(self, bits: np.ndarray):
        bits = np.array(bits, dtype=np.uint8, copy=True)
        if bits.ndim != 1:
            raise ValueError(f"Bits must be one-dimensional, got shape {bits.shape}")
        if bits.size and bits.max() > 1:
            raise ValueError("Bits must be 0 or 1")
        bits.setflags(write=False)
        self.bits = bits

    @classmethod
    def from_hex(cls, text: str) -> "BitStream":
        """Expand hexadecimal text into 4 bits per digit."""
        text = text.strip()
        for index, char in enumerate(text):
            if char not in HEX_DIGITS:
                raise InvalidHexCharError(char, index)

        nibbles = np.array([int(char, 16) for char in text], dtype=np.uint8)
        # unpackbits yields 8 bits per byte; a nibble lives in the low 4
        bits = np.unpackbits(nibbles[:, np.newaxis], axis=1)[:, 4:]
        return cls(bits.reshape(-1))

    @classmethod
    def from_binary(cls, text: str) -> "BitStream":
        """Build a stream from a string of '0' and '1' characters."""
        text = text.strip()
        for index, char in enumerate(text):
            if char not in "01":
                raise InvalidBitCharError(char, index)
        return cls(np.array([1 if char == "1" else 0 for char in text], dtype=np.uint8))

    def __len__(self) -> int:
        return len(self.bits)

    def __getitem__(self, index: Union[int, slice]) -> Union[int, "BitStream"]:
        if isinstance(index, slice):
            return BitStream(self.bits[index])
        return int(self.bits[index])

    def __str__(self) -> str:
        return "".join("1" if bit else "0" for bit in self.bits.tolist())

    def __repr__(self):
        return f"<BitStream {len(self)} bits>"


class BitstreamReader:
    """
    Utility to read a BitStream bit-by-bit.
    Tracks how many bits have been consumed so nested parsers can account
    for exactly the bits they used.
    """
    def __init__(self, stream: BitStream):
        self.stream = stream
        self._position = 0

    def read_bit(self) -> int:
        """Read a single bit."""
        return self.read_bits(1)

    def read_bits(self, n: int) -> int:
        """Read n bits and return them as an unsigned integer, MSB first."""
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bits: {n}")
        if n > self.bits_left:
            raise UnexpectedEndOfInputError(n, self.bits_left, self._position)

        val = 0
        for bit in self.stream.bits[self._position:self._position + n].tolist():
            val = (val << 1) | bit
        self._position += n
        return val

    def bits_since(self, marker: int) -> int:
        """Bits consumed since a previously recorded position."""
        return self._position - marker

    @property
    def position(self) -> int:
        return self._position

    @property
    def bits_left(self) -> int:
        return len(self.stream) - self._position
