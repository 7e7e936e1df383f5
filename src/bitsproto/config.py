"""
Decoder configuration.

Provides immutable settings that bound how much untrusted input the
parser will accept.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DecoderConfig:
    """
    Configuration for BITS decoding.

    Attributes:
        max_depth: Deepest packet nesting accepted, top-level packet is depth 1.
            Deeper input raises NestingTooDeepError.
        strict_padding: Reject transmissions whose bits after the top-level
            packet are not all zero. Off by default; padding is ignored.
    """
    max_depth: int = 128
    strict_padding: bool = False

    def __post_init__(self):
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")


DEFAULT_CONFIG = DecoderConfig()
