"""Compact array of fixed-width unsigned integers packed into bytes."""

from __future__ import annotations

import operator

SEGMENT_SIZE = 200
DEFAULT_MAX_SEGMENTS = 5


class BitArray:
    """An array of `size` elements of `bits` bits each, packed least significant bit first.

    Storage is counted in segments of SEGMENT_SIZE bytes; at most `max_segments`
    segments may be used.
    """

    def __init__(self, bits: int, size: int, max_segments: int = DEFAULT_MAX_SEGMENTS):
        bits = operator.index(bits)
        size = operator.index(size)
        if bits == 0 or not 0 < bits <= 32:
            raise ValueError("element size must be between 1 and 32 bits")
        if size < 0:
            raise ValueError("size must not be negative")
        if (bits * size) // 8 > max_segments * SEGMENT_SIZE:
            raise ValueError("array does not fit in the available segments")
        self._bits = bits
        self._bytes = (bits * size + 7) // 8
        self._data = bytearray(self._bytes)

    @property
    def capacity(self) -> int:
        """Number of elements that fit in the allocated bytes."""
        return self._bytes * 8 // self._bits

    @property
    def memory(self) -> int:
        """Number of bytes used for storage."""
        return self._bytes

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def segments(self) -> int:
        return -(-self._bytes // SEGMENT_SIZE)

    def clear(self) -> None:
        """Set every element to zero."""
        self._data = bytearray(self._bytes)

    def _positions(self, idx: int) -> range:
        idx = operator.index(idx)
        if not 0 <= idx < self.capacity:
            raise IndexError(f"index {idx} out of range")
        start = idx * self._bits
        return range(start, start + self._bits)

    def get(self, idx: int) -> int:
        value = 0
        for shift, pos in enumerate(self._positions(idx)):
            if self._data[pos >> 3] >> (pos & 7) & 1:
                value |= 1 << shift
        return value

    def set(self, idx: int, value: int) -> int:
        """Store the low `bits` bits of value; returns value as given."""
        for shift, pos in enumerate(self._positions(idx)):
            mask = 1 << (pos & 7)
            if value >> shift & 1:
                self._data[pos >> 3] |= mask
            else:
                self._data[pos >> 3] &= ~mask & 0xFF
        return value

    def toggle(self, idx: int) -> int:
        """Invert every bit of an element; returns the new value."""
        for pos in self._positions(idx):
            self._data[pos >> 3] ^= 1 << (pos & 7)
        return self.get(idx)