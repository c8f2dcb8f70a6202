"""Euler method integrators (first order, and Heun's two-stage variant)."""

import numpy as np

from nbody_sim.physics.integrators.base import Integrator


class EulerIntegrator(Integrator):
    """Euler method - simple first-order integrator.

    Fast but inaccurate; energy drifts visibly on closed orbits. Good for
    baseline comparisons.
    """

    def __init__(self, bodies, dt: float):
        super().__init__(bodies, dt)
        (self._delta,) = self._allocate(1)

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, current: np.ndarray) -> float:
        """Euler step: y_new = y + f(y)*dt."""
        self.force_law.evaluate(current, self._delta)
        self._commit(current + self._delta * self.dt)
        return self.dt


class Euler2Integrator(Integrator):
    """Heun's method (improved Euler), second order.

    k1 = f(y)
    k2 = f(y + k1*dt)
    y_new = y + (k1 + k2)/2 * dt
    """

    def __init__(self, bodies, dt: float):
        super().__init__(bodies, dt)
        self._k1, self._k2, self._w = self._allocate(3)

    @property
    def name(self) -> str:
        return "euler2"

    @property
    def order(self) -> int:
        return 2

    def step(self, current: np.ndarray) -> float:
        dt = self.dt
        k1, k2, w = self._k1, self._k2, self._w

        self.force_law.evaluate(current, k1)
        # Predictor
        np.multiply(k1, dt, out=w)
        w += current
        # Corrector
        self.force_law.evaluate(w, k2)

        self._commit(current + (k1 + k2) / 2 * dt)
        return dt
