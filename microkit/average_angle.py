"""Averaging of angles as vectors."""

from __future__ import annotations

import math
from enum import Enum


class AngleType(Enum):
    """Unit in which angles are added and averages are returned."""

    DEGREES = "degrees"
    RADIANS = "radians"


class AverageAngle:
    """Accumulates angles (with optional lengths) and reports their vector average."""

    def __init__(self, angle_type: AngleType = AngleType.DEGREES):
        self._type = AngleType(angle_type)
        self.reset()

    def add(self, alpha: float, length: float = 1.0) -> None:
        """Add an angle, weighted by length."""
        if self._type is AngleType.DEGREES:
            alpha = math.radians(alpha)
        self._sumx += math.cos(alpha) * length
        self._sumy += math.sin(alpha) * length
        self._count += 1

    def reset(self) -> None:
        self._sumx = 0.0
        self._sumy = 0.0
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    @property
    def angle_type(self) -> AngleType:
        return self._type

    def average(self) -> float:
        """Return the average angle in [0, 360) degrees or [0, 2*pi) radians."""
        angle = math.atan2(self._sumy, self._sumx)
        if angle < 0:
            angle += 2 * math.pi
        if self._type is AngleType.DEGREES:
            angle = math.degrees(angle)
        return angle

    def total_length(self) -> float:
        if self._count == 0:
            return 0.0
        return math.hypot(self._sumy, self._sumx)

    def average_length(self) -> float:
        if self._count == 0:
            return 0.0
        return math.hypot(self._sumy, self._sumx) / self._count