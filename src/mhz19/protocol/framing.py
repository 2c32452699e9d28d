"""Packet builder and validator for the 9-byte MH-Z19 serial protocol.

Packet layout::

    +-------+--------+---------+--------+--------+--------+--------+----------+----------+
    | Start | Device | Command | Param  | Param  | Param  | Param  | Reserved | Checksum |
    | 0xFF  | 1 byte | 1 byte  | byte 3 | byte 4 | byte 5 | byte 6 |   0x00   |  1 byte  |
    +-------+--------+---------+--------+--------+--------+--------+----------+----------+

- Start: fixed 0xFF marker
- Device: sensor address on the bus, 0x01 by default
- Command: see :class:`~mhz19.protocol.commands.Command`
- Params: big-endian 16-bit value in bytes 3-4 for parameterized commands
- Checksum: :func:`~mhz19.utils.checksum.checksum` over bytes 1-7

Responses use the same framing, with the echoed command in byte 1.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from ..utils.checksum import checksum
from .errors import PACKET_SIZE, WrongChecksum, WrongPacketLength, WrongStartByte

logger = logging.getLogger(__name__)

START_BYTE = 0xFF
PAYLOAD_SLICE = slice(1, 8)  # bytes 1-7, covered by the checksum
CHECKSUM_INDEX = 8
DEFAULT_DEVICE_NUMBER = 0x01


def split_u16(value: int) -> tuple[int, int]:
    """Split a 16-bit value into its (high, low) bytes."""
    return (value >> 8) & 0xFF, value & 0xFF


def build_packet(
    command: int, device_number: int, byte3: int = 0x00, byte4: int = 0x00
) -> bytes:
    """Build a 9-byte packet with start byte and checksum.

    Bytes 5-7 are always zero. No range checks are made beyond what
    ``bytes`` itself enforces.

    Args:
        command: Single-byte command code.
        device_number: Sensor address (0-255).
        byte3: First parameter byte.
        byte4: Second parameter byte.

    Returns:
        A 9-byte ``bytes`` object ready to write to the serial port.
    """
    packet = bytearray(
        [START_BYTE, device_number, command, byte3, byte4, 0x00, 0x00, 0x00, 0x00]
    )
    packet[CHECKSUM_INDEX] = checksum(packet[PAYLOAD_SLICE])
    _debug_packet("Built packet", packet)
    return bytes(packet)


def _debug_packet(message: str, data, *args) -> None:
    # Hex formatting only happens when DEBUG is on.
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(message + ": %s", *args, bytes(data).hex(" "))


def parse_payload(packet: bytes | bytearray | memoryview | Iterable[int]) -> memoryview:
    """Validate a raw packet and return its payload (bytes 1-7).

    Length is checked first, then the start byte, then the checksum.
    The caller's buffer is only viewed once it has passed all three
    checks, so a rejected ``bytearray`` can be resized straight away.

    Args:
        packet: A buffer read from the sensor, of any length.

    Returns:
        A 7-byte ``memoryview`` over the caller's buffer.

    Raises:
        WrongPacketLength: If the buffer is not 9 bytes long.
        WrongStartByte: If byte 0 is not 0xFF.
        WrongChecksum: If byte 8 does not match the computed checksum.
    """
    if not isinstance(packet, (bytes, bytearray, memoryview)):
        packet = bytes(packet)

    if len(packet) != PACKET_SIZE:
        _debug_packet("Rejected packet of length %d", packet, len(packet))
        raise WrongPacketLength(len(packet))

    header = packet[0]
    if header != START_BYTE:
        _debug_packet("Rejected packet with start byte 0x%02X", packet, header)
        raise WrongStartByte(header)

    found_checksum = packet[CHECKSUM_INDEX]
    payload_checksum = checksum(packet[PAYLOAD_SLICE])
    if found_checksum != payload_checksum:
        _debug_packet(
            "Rejected packet with checksum 0x%02X (expected 0x%02X)",
            packet,
            found_checksum,
            payload_checksum,
        )
        raise WrongChecksum(payload_checksum, found_checksum)

    return memoryview(packet)[PAYLOAD_SLICE]
