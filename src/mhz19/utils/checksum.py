"""Additive checksum used by every MH-Z19 packet.

The checksum covers bytes 1-7 of a packet (everything between the start
byte and the checksum byte itself)::

    checksum = 1 + (0xFF - (byte1 + byte2 + ... + byte7))

All arithmetic wraps modulo 256.
"""

from __future__ import annotations

from collections.abc import Iterable


def checksum(span: Iterable[int]) -> int:
    """Compute the checksum byte for a 7-byte packet span.

    Args:
        span: Bytes 1-7 of a packet. Any iterable of ints is accepted.

    Returns:
        The checksum as an int in 0-255.
    """
    total = sum(span) & 0xFF
    return (1 + (0xFF - total)) & 0xFF
