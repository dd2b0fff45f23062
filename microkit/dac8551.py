"""DAC8550/DAC8551 16-bit single-channel SPI DAC."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

MAX_VALUE = 0xFFFF


class SPIDevice(Protocol):
    def write(self, data: bytes) -> object: ...


class PowerDown8551(IntEnum):
    NORMAL = 0
    R1K = 1
    R100K = 2
    HIGH_IMPEDANCE = 3


class DAC8551:
    """Sends a control byte and a 16-bit value, most significant byte first."""

    def __init__(self, spi: SPIDevice):
        self._spi = spi
        self._register = 0
        self._value = 0

    def begin(self) -> None:
        """Reset the local state; nothing is sent."""
        self._register = 0
        self._value = 0

    def _update(self) -> None:
        self._spi.write(bytes([self._register & 0xFF, self._value >> 8, self._value & 0xFF]))

    def set_value(self, value: int) -> None:
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"value must be 0..{MAX_VALUE}")
        self._value = value
        self._update()

    @property
    def value(self) -> int:
        return self._value

    def set_power_down(self, mode: PowerDown8551) -> None:
        self._register = int(PowerDown8551(mode))
        self._update()

    @property
    def power_down_mode(self) -> PowerDown8551:
        return PowerDown8551(self._register & 0x03)