"""Gravitational N-body simulation driven by a Barnes-Hut octree."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from solarium.interval import Box, Interval
from solarium.octree import Octree
from solarium.vector3 import Vector3

OBJECT_COUNT = 10000
AU = 1.49597870700e11
"""Meters per astronomical unit."""
AVERAGE_VELOCITY = 2.9785e3
"""Meters per second; a tenth of the Earth's orbital speed. Used for random initialization."""
G = 6.673e-11
"""Gravitational constant."""
TIME_STEP = 3.6e3
"""Seconds in a time step (one hour)."""

SUN_MASS = 1.98892e30
EARTH_MASS = 5.9722e24

OVERALL_REGION = Box(
    Interval(-100.0 * AU, 100.0 * AU),
    Interval(-100.0 * AU, 100.0 * AU),
    Interval(-100.0 * AU, 100.0 * AU),
)


@dataclass(frozen=True)
class ObjectDynamics:
    """Position and velocity of one object."""

    position: Vector3
    velocity: Vector3


class Simulation:
    """A set of point masses advanced through time in fixed steps.

    Object 0 is conventionally the sun.
    """

    def __init__(
        self,
        masses: Iterable[float],
        dynamics: Iterable[ObjectDynamics],
        time_step: float = TIME_STEP,
        region: Optional[Box] = None,
    ) -> None:
        self.masses: Tuple[float, ...] = tuple(masses)
        self.dynamics: List[ObjectDynamics] = list(dynamics)
        if len(self.masses) != len(self.dynamics):
            raise ValueError(
                f"{len(self.masses)} masses given for {len(self.dynamics)} objects"
            )
        self.time_step = time_step
        self.region = region if region is not None else OVERALL_REGION

    def __len__(self) -> int:
        return len(self.masses)

    def build_octree(self) -> Octree:
        """Return an octree holding every object at its current position."""
        tree = Octree(self.region)
        for mass, state in zip(self.masses, self.dynamics):
            tree.insert(state.position, mass)
        tree.refresh_interior()
        return tree

    def step(self) -> None:
        """Advance every object by one time step."""
        tree = self.build_octree()
        dt = self.time_step
        next_dynamics = []
        for mass, state in zip(self.masses, self.dynamics):
            acceleration = tree.force(state.position, mass) / mass
            next_dynamics.append(
                ObjectDynamics(
                    position=state.position + dt * state.velocity,
                    velocity=state.velocity + dt * acceleration,
                )
            )
        self.dynamics = next_dynamics

    def dump_dynamics(self) -> List[str]:
        """Return one line per object giving its position in AU."""
        return [
            f"{index:4d}: x = {state.position.x / AU:11.3E}, "
            f"y = {state.position.y / AU:11.3E}, z = {state.position.z / AU:11.3E}"
            for index, state in enumerate(self.dynamics)
        ]


def _random_position_coordinate(rng: random.Random) -> float:
    """Return a random coordinate inside a 100 AU cube about the origin."""
    return (rng.random() * 100.0 - 50.0) * AU


def _random_velocity_component(rng: random.Random) -> float:
    """Return a random velocity component up to AVERAGE_VELOCITY in magnitude."""
    fraction = rng.random()
    if rng.randrange(2) == 0:
        return fraction * AVERAGE_VELOCITY
    return -fraction * AVERAGE_VELOCITY


def initialize_objects(count: int = OBJECT_COUNT, seed: int = 0) -> Simulation:
    """Create a sun at rest at the origin and count - 1 Earth-sized objects.

    The other objects are placed at random in a cube of side 100 AU and given
    random velocities.
    """
    if count < 1:
        raise ValueError(f"object count must be positive, not {count}")
    rng = random.Random(seed)
    masses = [SUN_MASS] + [EARTH_MASS] * (count - 1)
    dynamics = [ObjectDynamics(Vector3(), Vector3())]
    for _ in range(count - 1):
        position = Vector3(
            _random_position_coordinate(rng),
            _random_position_coordinate(rng),
            _random_position_coordinate(rng),
        )
        velocity = Vector3(
            _random_velocity_component(rng),
            _random_velocity_component(rng),
            _random_velocity_component(rng),
        )
        dynamics.append(ObjectDynamics(position, velocity))
    return Simulation(masses, dynamics)