"""Point-mass bodies and their phase state."""

import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import numpy as np

BOUNDARY = 50.0  # Bodies beyond +/-BOUNDARY in either axis count as crashed


class BodyType(Enum):
    """Kind of body, used by consumers to pick a visual size."""
    SOLAR = "solar"
    PLANET = "planet"
    MOON = "moon"
    BLACK_HOLE = "black_hole"


class BodyState(NamedTuple):
    """Phase vector (px, py, vx, vy) of a single body.

    Closed under addition, subtraction and scalar multiplication so stage
    derivatives can be combined like plain vectors.
    """
    px: float = 0.0
    py: float = 0.0
    vx: float = 0.0
    vy: float = 0.0

    # Keep numpy scalars from broadcasting over the tuple
    __array_ufunc__ = None

    @classmethod
    def from_array(cls, row) -> "BodyState":
        return cls(float(row[0]), float(row[1]), float(row[2]), float(row[3]))

    def as_array(self) -> np.ndarray:
        return np.array(self, dtype=np.float64)

    @property
    def crashed(self) -> bool:
        return self.px > BOUNDARY or self.px < -BOUNDARY or self.py > BOUNDARY or self.py < -BOUNDARY

    def __add__(self, other):
        if not isinstance(other, BodyState):
            return NotImplemented
        return BodyState(self.px + other.px, self.py + other.py, self.vx + other.vx, self.vy + other.vy)

    def __sub__(self, other):
        if not isinstance(other, BodyState):
            return NotImplemented
        return BodyState(self.px - other.px, self.py - other.py, self.vx - other.vx, self.vy - other.vy)

    def __mul__(self, scalar):
        # Tuple repetition must not leak through for ints
        if isinstance(scalar, tuple):
            return NotImplemented
        k = float(scalar)
        return BodyState(self.px * k, self.py * k, self.vx * k, self.vy * k)

    __rmul__ = __mul__

    def __neg__(self):
        return BodyState(-self.px, -self.py, -self.vx, -self.vy)


class Body:
    """A point mass taking part in a simulation.

    Only ``state`` changes during a run; id, type and mass are fixed at
    creation.
    """

    __slots__ = ("_id", "_body_type", "_mass", "state")

    def __init__(self, id: int, body_type: BodyType, mass: float, state: BodyState = BodyState()):
        if mass <= 0:
            raise ValueError(f"Body mass must be positive, got {mass}")
        self._id = int(id)
        self._body_type = BodyType(body_type)
        self._mass = float(mass)
        self.state = state

    @property
    def id(self) -> int:
        return self._id

    @property
    def body_type(self) -> BodyType:
        return self._body_type

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def size(self) -> float:
        if self._body_type is BodyType.BLACK_HOLE:
            return math.log(math.log(self._mass))
        return math.log(self._mass)

    def get_snapshot(self) -> "BodySnapshot":
        from nbody_sim.physics.snapshot import BodySnapshot

        return BodySnapshot.capture(self._id, self.state.px, self.state.py, self._body_type, self._mass)

    def dispose(self):
        """Release resources held by the body (none at the moment)."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()

    def __repr__(self) -> str:
        return (f"Body(id={self._id}, body_type={self._body_type.name}, "
                f"mass={self._mass}, state={tuple(self.state)})")


@dataclass(frozen=True)
class BodyDef:
    """Initial conditions for one body."""
    state: BodyState
    body_type: BodyType = BodyType.SOLAR
    mass: float = 1.0

    def __post_init__(self):
        if self.mass <= 0:
            raise ValueError(f"BodyDef mass must be positive, got {self.mass}")

    @classmethod
    def from_components(
        cls,
        px: float,
        py: float,
        vx: float,
        vy: float,
        body_type: BodyType = BodyType.SOLAR,
        mass: float = 1.0,
    ) -> "BodyDef":
        return cls(BodyState(float(px), float(py), float(vx), float(vy)), body_type, float(mass))

    def create(self, id: int) -> Body:
        return Body(id, self.body_type, self.mass, self.state)


def states_to_array(bodies, out=None) -> np.ndarray:
    """Copy the states of ``bodies`` into an (n, 4) array."""
    if out is None:
        out = np.empty((len(bodies), 4), dtype=np.float64)
    for i, body in enumerate(bodies):
        out[i] = body.state
    return out


def write_states(bodies, states: np.ndarray):
    """Store each row of ``states`` back onto the matching body."""
    for body, row in zip(bodies, states):
        body.state = BodyState.from_array(row)
