"""24LC-series I2C EEPROM with page-aligned block writes."""

from __future__ import annotations

import time
from typing import Callable, Optional, Protocol

DEFAULT_DEVICE_SIZE = 64
TWI_BUFFER_SIZE = 30
WRITE_DELAY = 0.005


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class EepromError(Exception):
    """The EEPROM did not acknowledge or did not answer."""


class I2CEeprom:
    """Reads and writes an I2C EEPROM.

    Page size and address width are guessed from the device size in bytes:
    up to 256 bytes uses 8-byte pages, up to 2048 bytes 16-byte pages, both with
    one address byte; larger devices use 32-byte pages and two address bytes.
    """

    def __init__(
        self,
        bus: I2CBus,
        device_address: int,
        device_size: int = DEFAULT_DEVICE_SIZE,
        clock: Optional[Callable[[], float]] = None,
    ):
        self._bus = bus
        self._device = device_address
        self._clock = clock if clock is not None else time.monotonic
        self._last_write: Optional[float] = None
        if device_size <= 256:
            self._two_byte_address = False
            self._page_size = 8
        elif device_size <= 256 * 8:
            self._two_byte_address = False
            self._page_size = 16
        else:
            self._two_byte_address = True
            self._page_size = 32

    @property
    def page_size(self) -> int:
        return self._page_size

    def _address_bytes(self, address: int) -> bytes:
        if self._two_byte_address:
            return bytes([(address >> 8) & 0xFF, address & 0xFF])
        return bytes([address & 0xFF])

    def _wait_ready(self) -> None:
        """Poll the device until it acknowledges or the write cycle time has passed."""
        if self._last_write is None:
            return
        while self._clock() - self._last_write <= WRITE_DELAY:
            try:
                self._bus.write(self._device, b"")
            except OSError:
                continue
            break

    def _write_chunk(self, address: int, data: bytes) -> None:
        self._wait_ready()
        try:
            self._bus.write(self._device, self._address_bytes(address) + data)
        except OSError as exc:
            raise EepromError(f"write at 0x{address:04X} failed") from exc
        finally:
            self._last_write = self._clock()

    def _read_chunk(self, address: int, count: int) -> bytes:
        self._wait_ready()
        try:
            self._bus.write(self._device, self._address_bytes(address))
            data = bytes(self._bus.read(self._device, count))
        except OSError as exc:
            raise EepromError(f"read at 0x{address:04X} failed") from exc
        return data[:count]

    def write_byte(self, address: int, value: int) -> None:
        self._write_chunk(address & 0xFFFF, bytes([value]))

    def write_block(self, address: int, data: bytes) -> None:
        """Write data, split so that no write crosses a page or exceeds the bus buffer."""
        data = bytes(data)
        addr = address & 0xFFFF
        pos = 0
        while pos < len(data):
            until_boundary = self._page_size - addr % self._page_size
            cnt = min(len(data) - pos, until_boundary, TWI_BUFFER_SIZE)
            self._write_chunk(addr, data[pos:pos + cnt])
            addr = (addr + cnt) & 0xFFFF
            pos += cnt

    def set_block(self, address: int, value: int, length: int) -> None:
        """Fill length bytes starting at address with value."""
        self.write_block(address, bytes([value]) * length)

    def read_byte(self, address: int) -> int:
        data = self._read_chunk(address & 0xFFFF, 1)
        if not data:
            raise EepromError(f"no data at 0x{address:04X}")
        return data[0]

    def read_block(self, address: int, length: int) -> bytes:
        """Read length bytes in bus-buffer sized pieces."""
        addr = address & 0xFFFF
        parts = []
        remaining = length
        while remaining > 0:
            cnt = min(remaining, TWI_BUFFER_SIZE)
            parts.append(self._read_chunk(addr, cnt))
            addr = (addr + cnt) & 0xFFFF
            remaining -= cnt
        return b"".join(parts)

    def determine_size(self) -> int:
        """Probe address folding to find the size in KB (64, 32, ..., 1; 0 below 1 KB).

        The probed bytes are restored afterwards.
        """
        if not self._read_chunk(0, 1):
            raise EepromError("device not connected")
        addresses = [((512 << i) + 1) & 0xFFFF for i in range(9)]
        originals = [self.read_byte(addr) for addr in addresses[:8]]
        rv = 0
        for i in range(8):
            rv = i
            addr1, addr2 = addresses[i], addresses[i + 1]
            self.write_byte(addr1, 0xAA)
            self.write_byte(addr2, 0x55)
            if self.read_byte(addr1) == 0x55:
                break
        for addr, value in zip(addresses[:8], originals):
            self.write_byte(addr, value)
        return 1 << (rv - 1) if rv > 0 else 0