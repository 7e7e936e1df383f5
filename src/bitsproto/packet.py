"""
Decoded BITS packet tree.

A Packet carries a 3-bit version and a body that is either a Literal
value or an Operator applied to child packets. Trees are immutable once
built and do not refer back to the bit stream they came from.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple, Union

LITERAL_TYPE_ID = 4


class OperatorKind(IntEnum):
    """Operator packet kinds, valued by their wire type id."""
    SUM = 0
    PRODUCT = 1
    MINIMUM = 2
    MAXIMUM = 3
    GREATER_THAN = 5
    LESS_THAN = 6
    EQUAL_TO = 7

    @property
    def is_binary(self) -> bool:
        return self in BINARY_OPERATORS


BINARY_OPERATORS = frozenset({
    OperatorKind.GREATER_THAN,
    OperatorKind.LESS_THAN,
    OperatorKind.EQUAL_TO,
})


@dataclass(frozen=True)
class Literal:
    """A single unsigned integer assembled from 4-bit groups."""
    value: int


@dataclass(frozen=True)
class Operator:
    """An operator applied to one or more child packets, in wire order."""
    kind: OperatorKind
    children: Tuple["Packet", ...]


@dataclass(frozen=True)
class Packet:
    version: int
    body: Union[Literal, Operator]

    @property
    def is_literal(self) -> bool:
        return isinstance(self.body, Literal)

    @property
    def type_id(self) -> int:
        if isinstance(self.body, Literal):
            return LITERAL_TYPE_ID
        return int(self.body.kind)

    @property
    def children(self) -> Tuple["Packet", ...]:
        if isinstance(self.body, Operator):
            return self.body.children
        return ()
