"""Six-stage, fifth order Runge-Kutta integrator with a fixed step."""

import numpy as np

from nbody_sim.physics.integrators.base import Integrator

# Butcher tableau
A21 = 1.0 / 4.0
A31, A32 = 1.0 / 8.0, 1.0 / 8.0
A42, A43 = -1.0 / 2.0, 1.0
A51, A54 = 3.0 / 16.0, 9.0 / 16.0
A61, A62, A63, A64, A65 = -3.0 / 7.0, 2.0 / 7.0, 12.0 / 7.0, -12.0 / 7.0, 8.0 / 7.0

# Weights; stage 2 does not contribute to the solution
B1 = 7.0 / 90.0
B3 = 32.0 / 90.0
B4 = 12.0 / 90.0
B5 = 32.0 / 90.0
B6 = 7.0 / 90.0


class RK5Integrator(Integrator):
    """Fixed-step fifth order Runge-Kutta method."""

    def __init__(self, bodies, dt: float):
        super().__init__(bodies, dt)
        self._k1, self._k2, self._k3, self._k4, self._k5, self._k6, self._w = self._allocate(7)

    @property
    def name(self) -> str:
        return "rk5"

    @property
    def order(self) -> int:
        return 5

    def step(self, current: np.ndarray) -> float:
        dt = self.dt
        f = self.force_law.evaluate
        k1, k2, k3, k4, k5, k6, w = self._k1, self._k2, self._k3, self._k4, self._k5, self._k6, self._w

        f(current, k1)

        w[:] = current + dt * (A21 * k1)
        f(w, k2)

        w[:] = current + dt * (A31 * k1 + A32 * k2)
        f(w, k3)

        w[:] = current + dt * (A42 * k2 + A43 * k3)
        f(w, k4)

        w[:] = current + dt * (A51 * k1 + A54 * k4)
        f(w, k5)

        w[:] = current + dt * (A61 * k1 + A62 * k2 + A63 * k3 + A64 * k4 + A65 * k5)
        f(w, k6)

        self._commit(current + dt * (B1 * k1 + B3 * k3 + B4 * k4 + B5 * k5 + B6 * k6))
        return dt
