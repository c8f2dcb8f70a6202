"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body, BodyDef, BodyState, BodyType
from nbody_sim.physics.errors import StepSizeUnderflowError
from nbody_sim.physics.force_law import ForceLaw
from nbody_sim.physics.nbody import NBodySystem
from nbody_sim.physics.snapshot import BodySnapshot, SystemSnapshot
from nbody_sim.physics.streaming import SnapshotStream

__all__ = [
    "Body",
    "BodyDef",
    "BodyState",
    "BodyType",
    "StepSizeUnderflowError",
    "ForceLaw",
    "NBodySystem",
    "BodySnapshot",
    "SystemSnapshot",
    "SnapshotStream",
]
