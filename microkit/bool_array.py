"""Compact array of booleans packed eight to a byte."""

from __future__ import annotations

import operator

MAX_SIZE = 250 * 8


class BoolArray:
    """A fixed-size array of booleans, at most MAX_SIZE long."""

    def __init__(self, size: int):
        size = operator.index(size)
        if not 0 <= size <= MAX_SIZE:
            raise ValueError(f"size must be between 0 and {MAX_SIZE}")
        self._size = size
        self._data = bytearray((size + 7) // 8)

    def __len__(self) -> int:
        return self._size

    def _locate(self, idx: int) -> tuple[int, int]:
        idx = operator.index(idx)
        if not 0 <= idx < self._size:
            raise IndexError(f"index {idx} out of range")
        return idx >> 3, 1 << (idx & 7)

    def get(self, idx: int) -> bool:
        byte, mask = self._locate(idx)
        return bool(self._data[byte] & mask)

    def set(self, idx: int, value) -> None:
        byte, mask = self._locate(idx)
        if value:
            self._data[byte] |= mask
        else:
            self._data[byte] &= ~mask & 0xFF

    def toggle(self, idx: int) -> None:
        byte, mask = self._locate(idx)
        self._data[byte] ^= mask

    def clear(self) -> None:
        self.set_all(False)

    def set_all(self, value) -> None:
        fill = 0xFF if value else 0x00
        self._data = bytearray([fill]) * len(self._data)