"""AM2320-family humidity and temperature sensor on an I2C bus."""

from __future__ import annotations

import time
from typing import Optional, Protocol

ADDRESS = 0x5C
_WAKE_DELAY = 0.001

_READ_FUNCTION = 0x03
_WRITE_FUNCTION = 0x10

_DEVICE_ERRORS = {
    0x80: "function code not supported",
    0x81: "illegal address",
    0x82: "write beyond the register scope",
    0x83: "CRC error in previous write",
    0x84: "write disabled",
}


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class AM232XError(Exception):
    """A failed exchange with the sensor; code holds the device's error byte if any."""

    def __init__(self, message: str, code: Optional[int] = None):
        super().__init__(message)
        self.code = code


def crc16(data: bytes) -> int:
    """CRC-16 (Modbus polynomial 0xA001, initial 0xFFFF) as used by the sensor."""
    crc = 0xFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 0x01:
                crc = (crc >> 1) ^ 0xA001
            else:
                crc >>= 1
    return crc


class AM232X:
    """Reads measurements and registers from an AM232X sensor."""

    def __init__(self, bus: I2CBus):
        self._bus = bus
        self.humidity = 0.0
        self.temperature = 0.0

    def _wake(self) -> None:
        try:
            self._bus.write(ADDRESS, b"")
        except OSError:
            pass  # a sleeping sensor does not acknowledge its wake-up call
        time.sleep(_WAKE_DELAY)

    @staticmethod
    def _check(data: bytes, expected: int) -> bytes:
        if len(data) != expected:
            code = data[3] if len(data) > 3 else None
            raise AM232XError(_DEVICE_ERRORS.get(code, "unknown error"), code)
        crc = data[-1] * 256 + data[-2]
        if crc16(data[:-2]) != crc:
            raise AM232XError("CRC mismatch in response")
        return data

    def _read_register(self, reg: int, count: int) -> bytes:
        self._wake()
        self._bus.write(ADDRESS, bytes([_READ_FUNCTION, reg, count]))
        length = count + 4
        return self._check(bytes(self._bus.read(ADDRESS, length)), length)

    def _write_register(self, reg: int, count: int, value: int) -> None:
        self._wake()
        if count == 2:
            payload = [(value >> 8) & 0xFF, value & 0xFF]
        else:
            payload = [value & 0xFF]
        frame = bytes([_WRITE_FUNCTION, reg, count, *payload])
        crc = crc16(frame)
        self._bus.write(ADDRESS, frame + bytes([crc & 0xFF, crc >> 8]))
        length = count + 3
        self._check(bytes(self._bus.read(ADDRESS, length)), length)

    def read(self) -> tuple[float, float]:
        """Read humidity (%) and temperature (Celsius); also stored as attributes."""
        bits = self._read_register(0x00, 4)
        self.humidity = (bits[2] * 256 + bits[3]) * 0.1
        temperature = ((bits[4] & 0x7F) * 256 + bits[5]) * 0.1
        if bits[4] & 0x80:
            temperature = -temperature
        self.temperature = temperature
        return self.humidity, self.temperature

    def model(self) -> int:
        bits = self._read_register(0x08, 2)
        return bits[2] * 256 + bits[3]

    def version(self) -> int:
        return self._read_register(0x0A, 1)[2]

    def device_id(self) -> int:
        bits = self._read_register(0x0B, 4)
        return int.from_bytes(bits[2:6], "big")

    def status(self) -> int:
        return self._read_register(0x0F, 1)[2]

    def user_register_a(self) -> int:
        bits = self._read_register(0x10, 2)
        return bits[2] * 256 + bits[3]

    def user_register_b(self) -> int:
        bits = self._read_register(0x12, 2)
        return bits[2] * 256 + bits[3]

    def set_status(self, value: int) -> None:
        self._write_register(0x0F, 1, value)

    def set_user_register_a(self, value: int) -> None:
        self._write_register(0x10, 2, value)

    def set_user_register_b(self, value: int) -> None:
        self._write_register(0x12, 2, value)