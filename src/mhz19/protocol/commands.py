"""Command codes and packet builders.

Each command is identified by a single byte, sent in byte 2 of a request
and echoed in byte 1 of the sensor's response.
"""

from __future__ import annotations

from enum import IntEnum

from .framing import DEFAULT_DEVICE_NUMBER, build_packet, split_u16

ABC_ENABLED = 0xA0
ABC_DISABLED = 0x00


class Command(IntEnum):
    """Sensor command codes."""

    READ_GAS_CONCENTRATION = 0x86
    CALIBRATE_ZERO = 0x87
    CALIBRATE_SPAN = 0x88
    SET_AUTOMATIC_BASELINE_CORRECTION = 0x79  # MH-Z19B only
    SET_SENSOR_DETECTION_RANGE = 0x99  # MH-Z19B only


def build_command(
    command: Command | int,
    device_number: int = DEFAULT_DEVICE_NUMBER,
    byte3: int = 0x00,
    byte4: int = 0x00,
) -> bytes:
    """Build a 9-byte request packet for a command."""
    return build_packet(int(command), device_number, byte3, byte4)


def read_gas_concentration(device_number: int = DEFAULT_DEVICE_NUMBER) -> bytes:
    """Build a command to read the CO2 concentration."""
    return build_command(Command.READ_GAS_CONCENTRATION, device_number)


def calibrate_zero_point(device_number: int = DEFAULT_DEVICE_NUMBER) -> bytes:
    """Build a zero point calibration command.

    The zero point is 400 ppm. The sensor should have been running in a
    400 ppm atmosphere for over 20 minutes before this is sent.
    """
    return build_command(Command.CALIBRATE_ZERO, device_number)


def calibrate_span_point(device_number: int, value: int) -> bytes:
    """Build a span point calibration command.

    Do a zero calibration first, and keep the sensor at the span
    concentration for over 20 minutes. 2000 ppm is the suggested span,
    1000 ppm the minimum.

    Args:
        device_number: Sensor address (0-255).
        value: Span concentration in ppm (0-65535).
    """
    high, low = split_u16(value)
    return build_command(Command.CALIBRATE_SPAN, device_number, high, low)


def set_automatic_baseline_correction(device_number: int, enabled: bool) -> bytes:
    """Build a command to turn Automatic Baseline Correction on or off."""
    return build_command(
        Command.SET_AUTOMATIC_BASELINE_CORRECTION,
        device_number,
        ABC_ENABLED if enabled else ABC_DISABLED,
    )


def set_detection_range(device_number: int, value: int) -> bytes:
    """Build a command to set the detection range (2000 or 5000 ppm).

    Args:
        device_number: Sensor address (0-255).
        value: Upper end of the range in ppm (0-65535).
    """
    high, low = split_u16(value)
    return build_command(Command.SET_SENSOR_DETECTION_RANGE, device_number, high, low)
