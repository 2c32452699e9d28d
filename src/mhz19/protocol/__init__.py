"""Protocol layer: packet framing, command builders, and response parsing."""

from .framing import build_packet, parse_payload
from .commands import Command, build_command
from .parser import parse_gas_concentration_ppm
