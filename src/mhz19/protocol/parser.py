"""Response parsing for sensor packets."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .commands import Command
from .errors import WrongPacketType
from .framing import parse_payload

logger = logging.getLogger(__name__)


def parse_gas_concentration_ppm(
    packet: bytes | bytearray | memoryview | Iterable[int],
) -> int:
    """Get the CO2 concentration in ppm from a response packet.

    The response payload echoes the 0x86 command in its first byte,
    followed by the concentration as a big-endian 16-bit value.

    Raises:
        WrongPacketLength, WrongStartByte, WrongChecksum: From
            :func:`~mhz19.protocol.framing.parse_payload`.
        WrongPacketType: If the packet is not a gas concentration response.
    """
    payload = parse_payload(packet)
    expected = Command.READ_GAS_CONCENTRATION.value
    if payload[0] != expected:
        logger.debug(
            "Rejected response of type 0x%02X, expected 0x%02X", payload[0], expected
        )
        raise WrongPacketType(expected, payload[0])
    return 256 * payload[1] + payload[2]
