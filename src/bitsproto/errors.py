"""
Exceptions raised while decoding a BITS transmission.

Every failure is fatal: the decoder never returns a partially built tree.
All errors derive from ParseError, itself a ValueError.
"""

from typing import Optional


class ParseError(ValueError):
    """Base class for all BITS decoding failures."""

    def __init__(self, message: str, position: Optional[int] = None):
        if position is not None:
            message = f"{message} (at bit {position})"
        super().__init__(message)
        self.position = position


class InvalidHexCharError(ParseError):
    """Input text contains a character that is not a hexadecimal digit."""

    def __init__(self, char: str, index: int):
        super().__init__(f"Invalid hex character {char!r} at index {index}")
        self.char = char
        self.index = index


class InvalidBitCharError(ParseError):
    """Binary input text contains a character other than '0' or '1'."""

    def __init__(self, char: str, index: int):
        super().__init__(f"Invalid bit character {char!r} at index {index}")
        self.char = char
        self.index = index


class UnexpectedEndOfInputError(ParseError):
    """A fixed-width read needed more bits than remain in the stream."""

    def __init__(self, requested: int, available: int, position: int):
        super().__init__(
            f"Unexpected end of input: needed {requested} bits, {available} left",
            position,
        )
        self.requested = requested
        self.available = available


class FramingOverrunError(ParseError):
    """Sub-packets of a total-length framed operator overran the declared length."""

    def __init__(self, declared: int, consumed: int, position: int):
        super().__init__(
            f"Sub-packets consumed {consumed} bits but operator declared {declared}",
            position,
        )
        self.declared = declared
        self.consumed = consumed


class BinaryOperatorArityError(ParseError):
    """A comparison operator does not have exactly two sub-packets."""

    def __init__(self, kind, count: int, position: int):
        super().__init__(
            f"{kind.name} operator requires exactly 2 sub-packets, got {count}",
            position,
        )
        self.kind = kind
        self.count = count


class EmptyOperatorError(ParseError):
    """An operator packet has no sub-packets."""

    def __init__(self, kind, position: int):
        super().__init__(f"{kind.name} operator has no sub-packets", position)
        self.kind = kind


class UnknownOperatorError(ParseError):
    """Type id does not map to any known operator."""

    def __init__(self, type_id: int, position: int):
        super().__init__(f"Unknown operator type id {type_id}", position)
        self.type_id = type_id


class NestingTooDeepError(ParseError):
    """Packets are nested deeper than the configured limit."""

    def __init__(self, max_depth: int, position: int):
        super().__init__(f"Packet nesting exceeds maximum depth of {max_depth}", position)
        self.max_depth = max_depth


class TrailingDataError(ParseError):
    """Non-zero bits follow the top-level packet (strict padding mode only)."""

    def __init__(self, count: int, position: int):
        super().__init__(f"{count} trailing bits after packet are not zero padding", position)
        self.count = count
