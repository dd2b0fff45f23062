"""Histogram over buckets delimited by sorted upper bounds."""

from __future__ import annotations

import math
from typing import Iterable


class Histogram:
    """Counts values into len(bounds) + 1 buckets.

    Bucket i holds values <= bounds[i] (and above bounds[i-1]); the last bucket
    holds everything above the last bound.
    """

    def __init__(self, bounds: Iterable[float]):
        self._bounds = tuple(bounds)
        self._data = [0] * (len(self._bounds) + 1)
        self._count = 0

    def clear(self) -> None:
        self._data = [0] * len(self._data)
        self._count = 0

    def add(self, value: float) -> None:
        self._data[self.find(value)] += 1
        self._count += 1

    def sub(self, value: float) -> None:
        """Decrement the bucket of value; the total count still goes up."""
        self._data[self.find(value)] -= 1
        self._count += 1

    @property
    def size(self) -> int:
        """Number of buckets."""
        return len(self._data)

    @property
    def count(self) -> int:
        """Number of values added or subtracted."""
        return self._count

    def bucket(self, idx: int) -> int:
        if not 0 <= idx < len(self._data):
            return 0
        return self._data[idx]

    def frequency(self, idx: int) -> float:
        """Relative frequency of a bucket; NaN when empty, 0.0 for unknown buckets."""
        if self._count == 0:
            return math.nan
        if not 0 <= idx < len(self._data):
            return 0.0
        return self._data[idx] / self._count

    def pmf(self, value: float) -> float:
        """Probability of the bucket holding value."""
        if self._count == 0:
            return math.nan
        return self._data[self.find(value)] / self._count

    def cdf(self, value: float) -> float:
        """Cumulative probability of the buckets up to the one holding value."""
        if self._count == 0:
            return math.nan
        return sum(self._data[: self.find(value) + 1]) / self._count

    def val(self, prob: float) -> float:
        """The first bound at which the cumulative count reaches prob."""
        if self._count == 0:
            return math.nan
        p = min(max(prob, 0.0), 1.0)
        target = p * self._count
        total = 0
        for bound, hits in zip(self._bounds, self._data):
            total += hits
            if total >= target:
                return bound
        return math.inf

    def find(self, value: float) -> int:
        """Index of the bucket value belongs to."""
        for i, bound in enumerate(self._bounds):
            if bound >= value:
                return i
        return len(self._bounds)