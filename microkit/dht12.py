"""DHT12 humidity and temperature sensor on an I2C bus."""

from __future__ import annotations

from typing import Protocol

ADDRESS = 0x5C
_LENGTH = 5


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class DHT12Error(Exception):
    """A failed or corrupted reading."""


class DHT12:
    """Reads humidity and temperature from a DHT12."""

    def __init__(self, bus: I2CBus):
        self._bus = bus
        self.humidity = 0.0
        self.temperature = 0.0

    def read(self) -> tuple[float, float]:
        """Read humidity (%) and temperature (Celsius).

        The values are stored even when the checksum fails, after which
        DHT12Error is raised.
        """
        self._bus.write(ADDRESS, bytes([0]))
        bits = bytes(self._bus.read(ADDRESS, _LENGTH))
        if not bits:
            raise DHT12Error("no response from sensor")
        if len(bits) < _LENGTH:
            raise DHT12Error("missing bytes in response")

        self.humidity = bits[0] + bits[1] * 0.1
        temperature = bits[2] + (bits[3] & 0x7F) * 0.1
        if bits[3] & 0x80:
            temperature = -temperature
        self.temperature = temperature

        if sum(bits[:4]) & 0xFF != bits[4]:
            raise DHT12Error("checksum mismatch")
        return self.humidity, self.temperature