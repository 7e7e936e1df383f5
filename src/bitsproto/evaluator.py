"""
Read-only traversals over a decoded packet tree.

The parser guarantees every operator has at least one child and that
comparisons have exactly two, so these folds need no empty-sequence
handling.
"""

import math
from typing import Iterator

from .packet import Literal, OperatorKind, Packet


def version_sum(packet: Packet) -> int:
    """Sum of the version fields of a packet and all of its descendants."""
    return packet.version + sum(version_sum(child) for child in packet.children)


def evaluate(packet: Packet) -> int:
    """Compute the value of the expression encoded by a packet tree."""
    body = packet.body
    if isinstance(body, Literal):
        return body.value

    values = [evaluate(child) for child in body.children]
    kind = body.kind

    if kind == OperatorKind.SUM:
        return sum(values)
    elif kind == OperatorKind.PRODUCT:
        return math.prod(values)
    elif kind == OperatorKind.MINIMUM:
        return min(values)
    elif kind == OperatorKind.MAXIMUM:
        return max(values)
    elif kind == OperatorKind.GREATER_THAN:
        return int(values[0] > values[1])
    elif kind == OperatorKind.LESS_THAN:
        return int(values[0] < values[1])
    elif kind == OperatorKind.EQUAL_TO:
        return int(values[0] == values[1])
    raise ValueError(f"Unsupported operator kind: {kind!r}")


def iter_packets(packet: Packet) -> Iterator[Packet]:
    """Yield a packet and all of its descendants in pre-order."""
    stack = [packet]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children))
