"""Immutable, render-friendly views of the simulation at one instant."""

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from nbody_sim.physics.body import BodyType


def _single(value: float) -> float:
    """Round a float64 to the nearest float32 value."""
    return float(np.float32(value))


@dataclass(frozen=True)
class BodySnapshot:
    """Position, type and mass of one body, stored at single precision."""
    id: int
    px: float
    py: float
    body_type: BodyType
    mass: float

    @classmethod
    def capture(cls, id: int, px: float, py: float, body_type, mass: float) -> "BodySnapshot":
        return cls(int(id), _single(px), _single(py), body_type, _single(mass))

    @property
    def size(self) -> float:
        """Display radius suggested to renderers."""
        if self.body_type is BodyType.BLACK_HOLE:
            return _single(math.log(math.log(self.mass) + 1) + 1)
        return 0.05


@dataclass(frozen=True)
class SystemSnapshot:
    """All bodies at ``timestamp`` (simulated time elapsed at capture)."""
    timestamp: float
    bodies: Tuple[BodySnapshot, ...]

    def __len__(self) -> int:
        return len(self.bodies)

    def __iter__(self):
        return iter(self.bodies)

    def __getitem__(self, index: int) -> BodySnapshot:
        return self.bodies[index]

    def positions(self) -> np.ndarray:
        """Return an (n, 2) float32 array of body positions."""
        return np.array([(b.px, b.py) for b in self.bodies], dtype=np.float32).reshape(-1, 2)
