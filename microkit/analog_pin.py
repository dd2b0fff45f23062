"""Analog input with noise suppression and exponential smoothing."""

from __future__ import annotations

from typing import Callable


def _trunc_div(n: int, d: int) -> int:
    q = abs(n) // d
    return -q if n < 0 else q


class AnalogPin:
    """Wraps a callable returning raw analog readings."""

    def __init__(self, reader: Callable[[], int]):
        self._reader = reader
        self._prev = reader()

    def read(self, noise: int = 0) -> int:
        """Return a new reading unless it differs from the previous by at most noise.

        The difference is taken modulo 2**15, so any fall in value counts as a change.
        """
        value = self._reader()
        if noise == 0 or ((value - self._prev) & 0x7FFF) > noise:
            self._prev = value
        return self._prev

    def read_smoothed(self, alpha: int = 0) -> int:
        """Blend a new reading with the previous one; alpha 0..31 weighs the past."""
        if alpha < 0:
            raise ValueError("alpha must not be negative")
        alpha = min(alpha, 31)
        value = self._reader()
        if alpha > 0:
            value += _trunc_div(alpha * (self._prev - value), 32)
        self._prev = value
        return value

    def read_previous(self) -> int:
        return self._prev