"""Barnes-Hut octree for approximating gravitational forces."""

from __future__ import annotations

import math
from typing import List, Optional

from solarium.interval import Box
from solarium.vector3 import Vector3

G = 6.673e-11
"""Gravitational constant in MKS units."""

THETA = 0.5
"""Opening criterion: a region is treated as one body when size / distance < THETA."""


class _Node:
    """One node of the octree: a single body (leaf) or an aggregate of its octants."""

    __slots__ = ("octants", "is_leaf", "region", "center_of_mass", "total_mass")

    def __init__(self, center_of_mass: Vector3, total_mass: float, region: Box) -> None:
        self.octants: List[Optional[_Node]] = [None] * 8
        self.is_leaf = True
        self.region = region
        self.center_of_mass = center_of_mass
        self.total_mass = total_mass

    def octant_of(self, point: Vector3) -> int:
        """Return the index of the octant of this node's region that holds point."""
        offset = point - self.region.center()
        index = 0
        if offset.x < 0.0:
            index |= 4
        if offset.y < 0.0:
            index |= 2
        if offset.z < 0.0:
            index |= 1
        return index

    def place(self, child: _Node) -> Optional[_Node]:
        """Attach child to an empty octant, or return the occupant blocking it."""
        index = self.octant_of(child.center_of_mass)
        occupant = self.octants[index]
        if occupant is None:
            child.region = self.region.subregion(index)
            self.octants[index] = child
        return occupant

    def refresh(self) -> None:
        if self.is_leaf:
            return
        total = 0.0
        x = y = z = 0.0
        for child in self.octants:
            if child is None:
                continue
            child.refresh()
            total += child.total_mass
            x += child.center_of_mass.x * child.total_mass
            y += child.center_of_mass.y * child.total_mass
            z += child.center_of_mass.z * child.total_mass
        self.total_mass = total
        self.center_of_mass = Vector3(x / total, y / total, z / total)

    def force(self, position: Vector3, mass: float) -> Vector3:
        if self.is_leaf and self.center_of_mass == position:
            return Vector3()

        displacement = self.center_of_mass - position
        distance_squared = displacement.magnitude_squared()
        distance = math.sqrt(distance_squared)
        far_enough = distance > 0.0 and self.region.largest_side() / distance < THETA

        if self.is_leaf or far_enough:
            force_magnitude = (G * mass * self.total_mass) / distance_squared
            return (force_magnitude / distance) * displacement

        total = Vector3()
        for child in self.octants:
            if child is not None:
                total = total + child.force(position, mass)
        return total


class Octree:
    """Spatial tree of point masses inside an overall region."""

    def __init__(self, overall_region: Box) -> None:
        self.overall_region = overall_region
        self._root: Optional[_Node] = None

    def insert(self, position: Vector3, mass: float) -> None:
        """Add a point mass to the tree.

        Raises ValueError if a body already sits at exactly the same position.
        """
        new_node = _Node(position, mass, self.overall_region)
        if self._root is None:
            self._root = new_node
            return

        current = self._root
        while True:
            if current.is_leaf:
                if current.center_of_mass == position:
                    raise ValueError(f"a body is already at {position}")
                # Push the existing body down one level and retry here.
                moved = _Node(current.center_of_mass, current.total_mass, current.region)
                current.is_leaf = False
                current.place(moved)
            occupant = current.place(new_node)
            if occupant is None:
                return
            current = occupant

    def refresh_interior(self) -> None:
        """Recompute total masses and centres of mass of all interior nodes."""
        if self._root is not None:
            self._root.refresh()

    def force(self, position: Vector3, mass: float) -> Vector3:
        """Return the approximate gravitational force on a body at position."""
        if self._root is None:
            return Vector3()
        return self._root.force(position, mass)

    def clear(self) -> None:
        """Remove every body from the tree."""
        self._root = None