"""Errors raised while decoding sensor packets.

Every error carries the offending value(s) so callers can log or discard
the packet and retry. All of them derive from :class:`MHZ19Error`.
"""

from __future__ import annotations

PACKET_SIZE = 9


class MHZ19Error(ValueError):
    """Base class for packet decoding errors."""

    def _values(self) -> tuple[int, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._values() == other._values()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._values()))

    def __repr__(self) -> str:
        args = ", ".join(str(v) for v in self._values())
        return f"{type(self).__name__}({args})"


class WrongPacketLength(MHZ19Error):
    """The buffer is not exactly one packet long."""

    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(
            f"Wrong packet length, expected {PACKET_SIZE}, found {found}"
        )

    def _values(self) -> tuple[int, ...]:
        return (self.found,)


class WrongStartByte(MHZ19Error):
    """Byte 0 is not the 0xFF start marker."""

    def __init__(self, found: int) -> None:
        self.found = found
        super().__init__(f"Wrong start byte, expected 0xFF, found 0x{found:02X}")

    def _values(self) -> tuple[int, ...]:
        return (self.found,)


class WrongChecksum(MHZ19Error):
    """The checksum byte does not match the one computed over bytes 1-7."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Invalid checksum, expected 0x{expected:02X}, found 0x{found:02X}"
        )

    def _values(self) -> tuple[int, ...]:
        return (self.expected, self.found)


class WrongPacketType(MHZ19Error):
    """The echoed command byte is not the one the caller asked to decode."""

    def __init__(self, expected: int, found: int) -> None:
        self.expected = expected
        self.found = found
        super().__init__(
            f"Wrong packet type, expected 0x{expected:02X}, found 0x{found:02X}"
        )

    def _values(self) -> tuple[int, ...]:
        return (self.expected, self.found)
