"""
N-body Simulator - planar gravitational dynamics with streamed snapshots.

Features:
- Direct O(N²) Newtonian force law
- Fixed-step integrators (Euler, Heun, RK4, RK5, Leapfrog)
- Adaptive integrators (Cash-Karp 4(5), Dormand-Prince 5(4))
- Background stepping with a bounded, backpressured snapshot stream
- Preset scenarios (stable ring, figure-eight, periodic three-body orbits)
"""

__version__ = "0.1.0"

from nbody_sim.physics.nbody import NBodySystem
from nbody_sim.physics.errors import StepSizeUnderflowError
from nbody_sim.presets import SystemDef, get_preset, list_presets
from nbody_sim.physics.integrators import list_integrators

__all__ = [
    "NBodySystem",
    "StepSizeUnderflowError",
    "SystemDef",
    "get_preset",
    "list_presets",
    "list_integrators",
]
