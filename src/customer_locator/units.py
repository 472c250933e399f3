"""Unit-tagged distance values."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class Kilometers:
    """A non-negative distance in kilometers.

    Ordering and addition are only defined against another ``Kilometers``,
    so a radius can never be compared with a bare float or another unit.
    Use ``.value`` to get the plain number for display.
    """

    value: float

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise TypeError(f"Kilometers requires a number, got {type(self.value).__name__}")
        if math.isnan(self.value) or math.isinf(self.value):
            raise ValueError(f"Kilometers must be finite, got {self.value}")
        if self.value < 0:
            raise ValueError(f"Kilometers cannot be negative, got {self.value}")
        object.__setattr__(self, "value", float(self.value))

    def __add__(self, other: Kilometers) -> Kilometers:
        if not isinstance(other, Kilometers):
            return NotImplemented
        return Kilometers(self.value + other.value)

    def __str__(self) -> str:
        return f"{self.value:.3f} km"
