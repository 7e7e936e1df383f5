"""
Recursive-descent parser for BITS packets.

Each call to PacketParser.parse_packet() consumes exactly one packet
(and, recursively, all of its sub-packets) and reports how many bits it
used. Operators framed by total bit length rely on those counts to stop
precisely at their declared boundary.

Packet layout:
    version         3 bits
    type id         3 bits   (4 = literal, anything else = operator)
    literal body    groups of 1 continuation bit + 4 value bits
    operator body   1 length type bit, then either
                      0: 15-bit total length of sub-packets in bits
                      1: 11-bit number of sub-packets
"""

import logging
from typing import List, Optional, Tuple

from .bitstream import BitStream, BitstreamReader
from .config import DEFAULT_CONFIG, DecoderConfig
from .errors import (
    BinaryOperatorArityError,
    EmptyOperatorError,
    FramingOverrunError,
    NestingTooDeepError,
    TrailingDataError,
    UnknownOperatorError,
)
from .packet import LITERAL_TYPE_ID, Literal, Operator, OperatorKind, Packet

logger = logging.getLogger(__name__)

VERSION_BITS = 3
TYPE_ID_BITS = 3
LITERAL_GROUP_BITS = 4
TOTAL_LENGTH_BITS = 15
SUBPACKET_COUNT_BITS = 11

LENGTH_TYPE_TOTAL_BITS = 0


class PacketParser:
    """Parses BITS packets from a BitstreamReader."""

    def __init__(self, reader: BitstreamReader, config: Optional[DecoderConfig] = None):
        self.br = reader
        self.config = config or DEFAULT_CONFIG
        self._depth = 0

    def parse_packet(self) -> Tuple[int, Packet]:
        """
        Parse one packet at the reader's current position.

        Returns:
            (bits consumed by this packet including its sub-packets, packet)
        """
        start = self.br.position
        if self._depth >= self.config.max_depth:
            raise NestingTooDeepError(self.config.max_depth, start)

        self._depth += 1
        try:
            packet = self._parse_packet_at(start)
        finally:
            self._depth -= 1

        consumed = self.br.bits_since(start)
        logger.debug(
            f"Packet at bit {start}: version={packet.version} "
            f"type_id={packet.type_id} bits={consumed}"
        )
        return consumed, packet

    def _parse_packet_at(self, start: int) -> Packet:
        version = self.br.read_bits(VERSION_BITS)
        type_id = self.br.read_bits(TYPE_ID_BITS)

        if type_id == LITERAL_TYPE_ID:
            return Packet(version, Literal(self._read_literal()))

        kind = self._operator_kind(type_id, start)
        if self.br.read_bit() == LENGTH_TYPE_TOTAL_BITS:
            children = self._read_by_total_length()
        else:
            children = self._read_by_count()

        if kind.is_binary and len(children) != 2:
            raise BinaryOperatorArityError(kind, len(children), start)
        if not children:
            raise EmptyOperatorError(kind, start)

        return Packet(version, Operator(kind, tuple(children)))

    def _read_literal(self) -> int:
        """Accumulate 4-bit groups until one has a clear continuation bit."""
        value = 0
        while True:
            more = self.br.read_bit()
            value = (value << LITERAL_GROUP_BITS) | self.br.read_bits(LITERAL_GROUP_BITS)
            if not more:
                return value

    def _read_by_total_length(self) -> List[Packet]:
        total_length = self.br.read_bits(TOTAL_LENGTH_BITS)
        children = []
        consumed = 0
        while consumed < total_length:
            parsed, child = self.parse_packet()
            consumed += parsed
            if consumed > total_length:
                raise FramingOverrunError(total_length, consumed, self.br.position)
            children.append(child)
        return children

    def _read_by_count(self) -> List[Packet]:
        count = self.br.read_bits(SUBPACKET_COUNT_BITS)
        return [self.parse_packet()[1] for _ in range(count)]

    @staticmethod
    def _operator_kind(type_id: int, position: int) -> OperatorKind:
        try:
            return OperatorKind(type_id)
        except ValueError:
            raise UnknownOperatorError(type_id, position) from None


def decode_bits(bits: BitStream, config: Optional[DecoderConfig] = None) -> Packet:
    """Decode the single top-level packet in a BitStream, ignoring trailing padding."""
    config = config or DEFAULT_CONFIG
    reader = BitstreamReader(bits)
    _, packet = PacketParser(reader, config).parse_packet()

    padding = reader.bits_left
    if padding:
        if config.strict_padding and bits.bits[reader.position:].any():
            raise TrailingDataError(padding, reader.position)
        logger.debug(f"Ignoring {padding} padding bits after top-level packet")
    return packet


def decode(text: str, config: Optional[DecoderConfig] = None) -> Packet:
    """Decode a hexadecimal BITS transmission into a packet tree."""
    return decode_bits(BitStream.from_hex(text), config)


def decode_binary(text: str, config: Optional[DecoderConfig] = None) -> Packet:
    """Decode a transmission given as a string of '0' and '1' characters."""
    return decode_bits(BitStream.from_binary(text), config)
