"""Fujitsu MB85RC-series I2C FRAM memory."""

from __future__ import annotations

from typing import Protocol

DEFAULT_ADDRESS = 0x50
SLAVE_ID = 0x7C
BLOCK_SIZE = 24
FUJITSU = 0x000A

# Product id to size in KB.
_SIZES = {0x0510: 32, 0x0658: 64, 0x0758: 128}


class I2CBus(Protocol):
    def write(self, address: int, data: bytes) -> None: ...

    def read(self, address: int, count: int) -> bytes: ...


class FRAM:
    """Reads and writes FRAM memory; multi-byte values are little-endian."""

    def __init__(self, bus: I2CBus, address: int = DEFAULT_ADDRESS):
        if not 0x50 <= address <= 0x57:
            raise ValueError(f"address must be 0x50..0x57, not 0x{address:02X}")
        self._bus = bus
        self._address = address
        self._size = self._detect_size()

    def _detect_size(self) -> int:
        try:
            mid = self.manufacturer_id()
            pid = self.product_id()
        except OSError:
            return 0
        if mid == FUJITSU:
            return _SIZES.get(pid, 0)
        return 0

    @property
    def size(self) -> int:
        """Size in KB, 0 if unknown."""
        return self._size

    def _id_bytes(self, count: int) -> bytes:
        self._bus.write(SLAVE_ID, bytes([(self._address << 1) & 0xFF]))
        data = bytes(self._bus.read(SLAVE_ID, count))
        if len(data) != count:
            raise OSError("device id not available")
        return data

    def manufacturer_id(self) -> int:
        """The 12-bit manufacturer id; raises OSError when the device gives none."""
        data = self._id_bytes(2)
        return (data[0] << 4) | (data[1] >> 4)

    def product_id(self) -> int:
        """The 12-bit product id; raises OSError when the device gives none."""
        data = self._id_bytes(3)
        return ((data[1] & 0x0F) << 8) | data[2]

    def _write_block(self, address: int, data: bytes) -> None:
        self._bus.write(self._address, bytes([(address >> 8) & 0xFF, address & 0xFF]) + data)

    def _read_block(self, address: int, count: int) -> bytes:
        self._bus.write(self._address, bytes([(address >> 8) & 0xFF, address & 0xFF]))
        return bytes(self._bus.read(self._address, count))[:count]

    def write8(self, address: int, value: int) -> None:
        self._write_block(address, value.to_bytes(1, "little"))

    def write16(self, address: int, value: int) -> None:
        self._write_block(address, value.to_bytes(2, "little"))

    def write32(self, address: int, value: int) -> None:
        self._write_block(address, value.to_bytes(4, "little"))

    def write(self, address: int, data: bytes) -> None:
        """Write data in blocks of BLOCK_SIZE bytes."""
        data = bytes(data)
        addr = address & 0xFFFF
        for pos in range(0, len(data), BLOCK_SIZE):
            chunk = data[pos:pos + BLOCK_SIZE]
            self._write_block(addr, chunk)
            addr = (addr + len(chunk)) & 0xFFFF

    def read8(self, address: int) -> int:
        return int.from_bytes(self._read_block(address, 1), "little")

    def read16(self, address: int) -> int:
        return int.from_bytes(self._read_block(address, 2), "little")

    def read32(self, address: int) -> int:
        return int.from_bytes(self._read_block(address, 4), "little")

    def read(self, address: int, size: int) -> bytes:
        """Read size bytes in blocks of BLOCK_SIZE bytes."""
        addr = address & 0xFFFF
        parts = []
        remaining = size
        while remaining > 0:
            cnt = min(remaining, BLOCK_SIZE)
            parts.append(self._read_block(addr, cnt))
            addr = (addr + cnt) & 0xFFFF
            remaining -= cnt
        return b"".join(parts)