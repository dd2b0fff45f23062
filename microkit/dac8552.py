"""DAC8552 16-bit dual-channel SPI DAC."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol

MAX_VALUE = 0xFFFF
CHANNELS = 2
_LOAD_BOTH = 0x30


class SPIDevice(Protocol):
    def write(self, data: bytes) -> object: ...


class PowerDown8552(IntEnum):
    NORMAL = 0
    R1K = 1
    R100K = 2
    HIGH_IMPEDANCE = 3


class DAC8552:
    """Two channels; buffered writes wait, set writes load both DAC outputs."""

    def __init__(self, spi: SPIDevice):
        self._spi = spi
        self._register = [0] * CHANNELS
        self._value = [0] * CHANNELS

    def begin(self) -> None:
        """Reset the local state; nothing is sent."""
        self._register = [0] * CHANNELS
        self._value = [0] * CHANNELS

    @staticmethod
    def _check_channel(channel: int) -> None:
        if channel not in range(CHANNELS):
            raise ValueError(f"channel must be 0 or 1, not {channel}")

    def _update(self, channel: int, direct: bool) -> None:
        config = self._register[channel]
        if direct:
            config |= _LOAD_BOTH
        value = self._value[channel]
        self._spi.write(bytes([config & 0xFF, value >> 8, value & 0xFF]))

    def _store_value(self, channel: int, value: int) -> None:
        self._check_channel(channel)
        if not 0 <= value <= MAX_VALUE:
            raise ValueError(f"value must be 0..{MAX_VALUE}")
        self._value[channel] = value

    def buffer_value(self, channel: int, value: int) -> None:
        self._store_value(channel, value)
        self._update(channel, False)

    def set_value(self, channel: int, value: int) -> None:
        self._store_value(channel, value)
        self._update(channel, True)

    def value(self, channel: int) -> int:
        self._check_channel(channel)
        return self._value[channel]

    def _store_power_down(self, channel: int, mode: PowerDown8552) -> None:
        self._check_channel(channel)
        self._register[channel] = (self._register[channel] & 0xFC) | int(PowerDown8552(mode))

    def buffer_power_down(self, channel: int, mode: PowerDown8552) -> None:
        self._store_power_down(channel, mode)
        self._update(channel, False)

    def set_power_down(self, channel: int, mode: PowerDown8552) -> None:
        self._store_power_down(channel, mode)
        self._update(channel, True)

    def power_down_mode(self, channel: int) -> PowerDown8552:
        self._check_channel(channel)
        return PowerDown8552(self._register[channel] & 0x03)