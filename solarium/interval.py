"""Floating point intervals and axis-aligned boxes of space."""

from __future__ import annotations

from dataclasses import dataclass, replace

from solarium.vector3 import Vector3


@dataclass(frozen=True)
class Interval:
    """A closed interval of two floats."""

    min: float
    max: float

    def midpoint(self) -> float:
        """Return the centre of the interval."""
        return (self.max + self.min) / 2.0

    def width(self) -> float:
        """Return the length of the interval."""
        return self.max - self.min


@dataclass(frozen=True)
class Box:
    """A rectangular region of space."""

    x_interval: Interval
    y_interval: Interval
    z_interval: Interval

    def center(self) -> Vector3:
        """Return the centre point of the box."""
        return Vector3(
            self.x_interval.midpoint(),
            self.y_interval.midpoint(),
            self.z_interval.midpoint(),
        )

    def largest_side(self) -> float:
        """Return the length of the longest side."""
        return max(self.x_interval.width(), self.y_interval.width(), self.z_interval.width())

    def subregion(self, octant_index: int) -> Box:
        """Return one of the eight octants of this box.

        Bit 2 of the index selects the lower x half, bit 1 the lower y half and
        bit 0 the lower z half; a clear bit selects the upper half.
        """
        if not 0 <= octant_index <= 7:
            raise ValueError(f"octant index must be in 0..7, not {octant_index}")
        center = self.center()

        def half(interval: Interval, mid: float, lower: bool) -> Interval:
            return replace(interval, max=mid) if lower else replace(interval, min=mid)

        return Box(
            half(self.x_interval, center.x, bool(octant_index & 4)),
            half(self.y_interval, center.y, bool(octant_index & 2)),
            half(self.z_interval, center.z, bool(octant_index & 1)),
        )