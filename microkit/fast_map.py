"""Precomputed linear mapping between two ranges."""

from __future__ import annotations


class FastMap:
    """Maps values linearly from an input range to an output range and back."""

    def __init__(self):
        self.init(0, 1, 0, 1)

    def init(self, in_min, in_max, out_min, out_max) -> None:
        """Set the ranges and precompute the mapping factors."""
        if in_max == in_min:
            raise ValueError("input range must not be empty")
        self._in_min = in_min
        self._in_max = in_max
        self._out_min = out_min
        self._out_max = out_max
        self._factor = (out_max - out_min) / (in_max - in_min)
        self._base = out_min - in_min * self._factor
        if self._factor == 0:
            self._backfactor = None
            self._backbase = None
        else:
            self._backfactor = 1 / self._factor
            self._backbase = in_min - out_min * self._backfactor

    def map(self, value) -> float:
        return self._base + value * self._factor

    def back(self, value) -> float:
        """Map an output value back to the input range."""
        if self._backfactor is None:
            raise ValueError("output range is empty; mapping cannot be inverted")
        return self._backbase + value * self._backfactor

    def constrained_map(self, value) -> float:
        if value <= self._in_min:
            return self._out_min
        if value >= self._in_max:
            return self._out_max
        return self.map(value)

    def lower_constrained_map(self, value) -> float:
        if value <= self._in_min:
            return self._out_min
        return self.map(value)

    def upper_constrained_map(self, value) -> float:
        if value >= self._in_max:
            return self._out_max
        return self.map(value)