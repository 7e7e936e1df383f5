"""
Helpers for hand-crafting BITS transmissions as '0'/'1' strings.

Lets tests describe malformed packets (wrong arity, overruns, truncation)
that never appear in the reference vectors.
"""

from typing import List, Optional


def literal(version: int, value: int) -> str:
    nibbles = []
    while True:
        nibbles.append(value & 0xF)
        value >>= 4
        if not value:
            break
    nibbles.reverse()

    groups = [
        ("1" if i < len(nibbles) - 1 else "0") + f"{nibble:04b}"
        for i, nibble in enumerate(nibbles)
    ]
    return f"{version:03b}100" + "".join(groups)


def operator_by_count(version: int, type_id: int, children: List[str], count: Optional[int] = None) -> str:
    if count is None:
        count = len(children)
    return f"{version:03b}{type_id:03b}1{count:011b}" + "".join(children)


def operator_by_length(version: int, type_id: int, children: List[str], length: Optional[int] = None) -> str:
    body = "".join(children)
    if length is None:
        length = len(body)
    return f"{version:03b}{type_id:03b}0{length:015b}" + body
