"""Tests for response parsing."""

import logging

import pytest

from mhz19.protocol.commands import read_gas_concentration
from mhz19.protocol.errors import (
    WrongChecksum,
    WrongPacketLength,
    WrongPacketType,
    WrongStartByte,
)
from mhz19.protocol.parser import parse_gas_concentration_ppm
from mhz19.utils.checksum import checksum

RESPONSE_608_PPM = bytes([0xFF, 0x86, 0x02, 0x60, 0x47, 0x00, 0x00, 0x00, 0xD1])


def test_parse_gas_concentration():
    """0x02 0x60 decodes to 2 * 256 + 96 ppm."""
    assert parse_gas_concentration_ppm(RESPONSE_608_PPM) == 608


def test_parse_gas_concentration_from_bytearray():
    assert parse_gas_concentration_ppm(bytearray(RESPONSE_608_PPM)) == 608


def test_parse_gas_concentration_full_range():
    """Both concentration bytes are used, big-endian."""
    response = bytearray([0xFF, 0x86, 0xFF, 0xFF, 0x00, 0x00, 0x00, 0x00, 0x00])
    response[8] = checksum(response[1:8])
    assert parse_gas_concentration_ppm(response) == 0xFFFF


def test_parse_gas_concentration_wrong_type():
    """A request packet echoes the device number, not 0x86."""
    with pytest.raises(WrongPacketType) as excinfo:
        parse_gas_concentration_ppm(read_gas_concentration(1))
    assert excinfo.value.expected == 0x86
    assert excinfo.value.found == 0x01


@pytest.mark.parametrize(
    "packet, error",
    [
        (b"", WrongPacketLength(0)),
        (bytes([10, 2, 3, 4, 5, 6, 7, 8, 9]), WrongStartByte(10)),
        (bytes([0xFF, 2, 3, 4, 5, 6, 7, 8, 9]), WrongChecksum(221, 9)),
    ],
)
def test_parse_gas_concentration_propagates_framing_errors(packet, error):
    """Framing errors pass through unchanged."""
    with pytest.raises(type(error)) as excinfo:
        parse_gas_concentration_ppm(packet)
    assert excinfo.value == error


def test_rejections_logged_at_debug(caplog):
    """Rejected packets are logged at DEBUG, never above."""
    with caplog.at_level(logging.DEBUG, logger="mhz19"):
        with pytest.raises(WrongChecksum):
            parse_gas_concentration_ppm(bytes([0xFF, 2, 3, 4, 5, 6, 7, 8, 9]))
    assert any("ff 02 03" in r.getMessage() for r in caplog.records)
    assert all(r.levelno == logging.DEBUG for r in caplog.records)
