"""Runge-Kutta 4th order integrator (high accuracy, O(h⁴))."""

import numpy as np

from nbody_sim.physics.integrators.base import Integrator


class RK4Integrator(Integrator):
    """Classic four-stage Runge-Kutta method with a fixed step.

    For y' = f(y):
    k1 = f(y)
    k2 = f(y + k1*dt/2)
    k3 = f(y + k2*dt/2)
    k4 = f(y + k3*dt)
    y_new = y + (k1 + 2*k2 + 2*k3 + k4)/6 * dt
    """

    def __init__(self, bodies, dt: float):
        super().__init__(bodies, dt)
        self._k1, self._k2, self._k3, self._k4, self._w = self._allocate(5)

    @property
    def name(self) -> str:
        return "rk4"

    @property
    def order(self) -> int:
        return 4

    def step(self, current: np.ndarray) -> float:
        dt = self.dt
        f = self.force_law.evaluate
        k1, k2, k3, k4, w = self._k1, self._k2, self._k3, self._k4, self._w

        f(current, k1)

        np.multiply(k1, dt / 2, out=w)
        w += current
        f(w, k2)

        np.multiply(k2, dt / 2, out=w)
        w += current
        f(w, k3)

        np.multiply(k3, dt, out=w)
        w += current
        f(w, k4)

        self._commit(current + (k1 + 2 * k2 + 2 * k3 + k4) / 6 * dt)
        return dt
