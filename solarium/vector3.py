"""Three-dimensional vectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector3:
    """An immutable vector with x, y and z components."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scale_factor: float) -> Vector3:
        if isinstance(scale_factor, Vector3):
            return NotImplemented
        return Vector3(self.x * scale_factor, self.y * scale_factor, self.z * scale_factor)

    def __rmul__(self, scale_factor: float) -> Vector3:
        return self.__mul__(scale_factor)

    def __truediv__(self, scale_factor: float) -> Vector3:
        if isinstance(scale_factor, Vector3):
            return NotImplemented
        return Vector3(self.x / scale_factor, self.y / scale_factor, self.z / scale_factor)

    def magnitude_squared(self) -> float:
        """Return the squared length of the vector."""
        return self.x * self.x + self.y * self.y + self.z * self.z