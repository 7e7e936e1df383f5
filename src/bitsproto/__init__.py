"""
bitsproto - BITS packet protocol decoder.

Decodes hexadecimal BITS transmissions into an immutable packet tree and
evaluates the expression the tree encodes.

Example:
    >>> from bitsproto import decode, evaluate, version_sum
    >>> packet = decode("C200B40A82")
    >>> evaluate(packet)
    3
"""

from importlib.metadata import version as _get_version, PackageNotFoundError

try:
    __version__ = _get_version("bitsproto")
except PackageNotFoundError:
    # Package not installed (running from source)
    __version__ = "0.0.0-dev"

from .bitstream import BitStream, BitstreamReader
from .config import DecoderConfig, DEFAULT_CONFIG
from .errors import (
    ParseError,
    InvalidHexCharError,
    InvalidBitCharError,
    UnexpectedEndOfInputError,
    FramingOverrunError,
    BinaryOperatorArityError,
    EmptyOperatorError,
    UnknownOperatorError,
    NestingTooDeepError,
    TrailingDataError,
)
from .packet import Packet, Literal, Operator, OperatorKind, LITERAL_TYPE_ID
from .parser import PacketParser, decode, decode_binary, decode_bits
from .evaluator import version_sum, evaluate, iter_packets

__all__ = [
    "__version__",
    # Main interface
    "decode",
    "decode_binary",
    "decode_bits",
    "version_sum",
    "evaluate",
    "iter_packets",
    "PacketParser",
    "DecoderConfig",
    "DEFAULT_CONFIG",
    # Bit access
    "BitStream",
    "BitstreamReader",
    # Packet model
    "Packet",
    "Literal",
    "Operator",
    "OperatorKind",
    "LITERAL_TYPE_ID",
    # Errors
    "ParseError",
    "InvalidHexCharError",
    "InvalidBitCharError",
    "UnexpectedEndOfInputError",
    "FramingOverrunError",
    "BinaryOperatorArityError",
    "EmptyOperatorError",
    "UnknownOperatorError",
    "NestingTooDeepError",
    "TrailingDataError",
]
