"""Packet codec for the Winsen MH-Z19 / MH-Z19B / MH-Z14 CO2 sensors.

Builds the 9-byte request packets sent over the sensor's UART and
validates and decodes the packets it sends back. Serial I/O is left to
the caller.
"""

from .protocol.commands import (
    Command,
    build_command,
    calibrate_span_point,
    calibrate_zero_point,
    read_gas_concentration,
    set_automatic_baseline_correction,
    set_detection_range,
)
from .protocol.errors import (
    MHZ19Error,
    WrongChecksum,
    WrongPacketLength,
    WrongPacketType,
    WrongStartByte,
)
from .protocol.framing import PACKET_SIZE, build_packet, parse_payload
from .protocol.parser import parse_gas_concentration_ppm
from .utils.checksum import checksum

__version__ = "0.1.0"
