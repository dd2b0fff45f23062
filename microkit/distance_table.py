"""Symmetric distance table storing only the lower triangle."""

from __future__ import annotations


class DistanceTable:
    """A square symmetric table with zero diagonal, stored as its lower triangle."""

    def __init__(self, size: int):
        if size < 0:
            raise ValueError("size must not be negative")
        self._size = size
        self._table = [0.0] * (size * (size - 1) // 2 if size > 1 else 0)

    def clear(self) -> None:
        self._table = [0.0] * len(self._table)

    def _index(self, x: int, y: int) -> int:
        if x < y:
            x, y = y, x
        return x * (x - 1) // 2 + y

    def _in_range(self, x: int, y: int) -> bool:
        return 0 <= x < self._size and 0 <= y < self._size

    def set(self, x: int, y: int, value: float) -> None:
        """Store a distance; diagonal and out-of-range cells are ignored."""
        if x == y or not self._in_range(x, y):
            return
        self._table[self._index(x, y)] = float(value)

    def get(self, x: int, y: int) -> float:
        """Return a distance: 0.0 on the diagonal, -1.0 out of range."""
        if x == y:
            return 0.0
        if not self._in_range(x, y):
            return -1.0
        return self._table[self._index(x, y)]

    def dump(self) -> str:
        """Return the lower triangle as tab-separated rows."""
        values = iter(self._table)
        lines = []
        for row in range(1, self._size):
            lines.append("".join(f"{next(values):.2f}\t" for _ in range(row)) + "\n")
        return "".join(lines) + "\n"