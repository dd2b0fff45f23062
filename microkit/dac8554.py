"""DAC8554 16-bit quad-channel SPI DAC."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

MAX_VALUE = 0xFFFF
CHANNELS = 4

_BUFFER_WRITE = 0x00
_SINGLE_WRITE = 0x10
_ALL_WRITE = 0x20
_BROADCAST = 0x30
_BROADCAST_VALUE = 0x04
_BROADCAST_POWER_DOWN = 0x05


class SPIDevice(Protocol):
    def write(self, data: bytes) -> object: ...


class PowerDown8554(IntEnum):
    NORMAL = 0x00
    R1K = 0x40
    R100K = 0x80
    HIGH_IMPEDANCE = 0xC0


class DAC8554:
    """One of up to four DAC8554 chips on a shared bus, chosen by address 0..3."""

    def __init__(self, spi: SPIDevice, address: int = 0):
        self._spi = spi
        self._address = (address & 0x03) << 6

    def _write(self, config: int, value: int) -> None:
        self._spi.write(bytes([config & 0xFF, (value >> 8) & 0xFF, value & 0xFF]))

    def _config(self, mode: int, channel: int) -> int:
        if channel not in range(CHANNELS):
            raise ValueError(f"channel must be 0..3, not {channel}")
        return self._address | mode | (channel << 1)

    @staticmethod
    def _checked(value: int) -> int:
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"value must be 0..{MAX_VALUE}")
        return value

    @staticmethod
    def _power_down_word(mode: PowerDown8554) -> int:
        return (int(PowerDown8554(mode)) & 0xC0) << 8

    def buffer_value(self, channel: int, value: int) -> None:
        """Hold a value in the channel's buffer."""
        self._write(self._config(_BUFFER_WRITE, channel), self._checked(value))

    def set_value(self, channel: int, value: int) -> None:
        """Write a value and load all buffered channels."""
        self._write(self._config(_ALL_WRITE, channel), self._checked(value))

    def set_single_value(self, channel: int, value: int) -> None:
        """Write a value to one channel, leaving the buffered ones alone."""
        self._write(self._config(_SINGLE_WRITE, channel), self._checked(value))

    def buffer_power_down(self, channel: int, mode: PowerDown8554) -> None:
        self._write(self._config(_BUFFER_WRITE, channel), self._power_down_word(mode))

    def set_power_down(self, channel: int, mode: PowerDown8554) -> None:
        self._write(self._config(_ALL_WRITE, channel), self._power_down_word(mode))

    def set_single_power_down(self, channel: int, mode: PowerDown8554) -> None:
        self._write(self._config(_SINGLE_WRITE, channel), self._power_down_word(mode))

    def broadcast_buffer(self) -> None:
        """Load the buffers of every chip on the bus."""
        self._write(_BROADCAST, 0)

    def broadcast_value(self, value: int) -> None:
        """Write one value to every channel of every chip on the bus."""
        self._write(_BROADCAST | _BROADCAST_VALUE, self._checked(value))

    def broadcast_power_down(self, mode: PowerDown8554) -> None:
        self._write(_BROADCAST | _BROADCAST_POWER_DOWN, self._power_down_word(mode))