"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import List, Sequence

import numpy as np

from nbody_sim.physics.body import Body, write_states
from nbody_sim.physics.force_law import ForceLaw


class Integrator(ABC):
    """Advances every body by one step.

    The integrator is bound to the body list it was built with and writes the
    new state of each body on :meth:`step`. Stage buffers are allocated once
    here and reused by every step.
    """

    adaptive = False

    def __init__(self, bodies: Sequence[Body], dt: float):
        if dt <= 0:
            raise ValueError(f"Time step must be positive, got {dt}")
        self.bodies = bodies
        self.n_bodies = len(bodies)
        self.dt = float(dt)
        self.force_law = ForceLaw.for_bodies(bodies)

    def _allocate(self, count: int) -> List[np.ndarray]:
        return [np.zeros((self.n_bodies, 4), dtype=np.float64) for _ in range(count)]

    def _commit(self, new_states: np.ndarray):
        write_states(self.bodies, new_states)

    @abstractmethod
    def step(self, current: np.ndarray) -> float:
        """Perform one integration step.

        Args:
            current: (n, 4) array holding a copy of every body's state

        Returns:
            Simulated time consumed by the step
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (e.g., 1 for Euler, 4 for RK4)."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_bodies={self.n_bodies}, dt={self.dt})"
