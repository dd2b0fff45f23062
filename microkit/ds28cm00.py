"""DS28CM00 unique identification chip on an I2C bus."""

from __future__ import annotations

from typing import Protocol

ADDRESS = 0x50
UID_REGISTER = 0x00
CONTROL_REGISTER = 0x08
I2C_MODE = 0x00
SMBUS_MODE = 0x01


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class DS28CM00Error(Exception):
    """The chip returned fewer bytes than requested."""


class DS28CM00:
    """Reads the 64-bit unique id and sets the bus mode of a DS28CM00."""

    def __init__(self, bus: I2CBus):
        self._bus = bus

    def begin(self) -> None:
        self.set_i2c_mode()

    def _read(self, register: int, count: int) -> bytes:
        self._bus.write(ADDRESS, bytes([register]))
        data = bytes(self._bus.read(ADDRESS, count))
        if len(data) < count:
            raise DS28CM00Error(f"expected {count} bytes, got {len(data)}")
        return data[:count]

    def uid(self) -> bytes:
        """The 8 bytes of the unique id: family code, serial number, CRC."""
        return self._read(UID_REGISTER, 8)

    def _set_mode(self, mode: int) -> None:
        self._bus.write(ADDRESS, bytes([CONTROL_REGISTER, mode]))

    def set_i2c_mode(self) -> None:
        self._set_mode(I2C_MODE)

    def set_smbus_mode(self) -> None:
        self._set_mode(SMBUS_MODE)

    def mode(self) -> int:
        return self._read(CONTROL_REGISTER, 1)[0]