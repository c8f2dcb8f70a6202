"""Adaptive-step integrators built on embedded Runge-Kutta pairs.

Both pairs share one step-size controller:

1. Evaluate every stage at the trial dt and form the embedded error
   ``err = sum(E_i * k_i)``; the error norm is
   ``dt * sqrt(mean((err / tolerance)**2))`` over all bodies and components.
2. norm <= 1: accept. Body states receive ``dt * sum(B_i * k_i)`` and the
   next trial dt grows by ``min(0.9 * norm**(-1/5), 5)``, clamped to
   [min_dt, max_dt]. The dt that was used is returned.
3. norm > 1: reject. Nothing is written; dt shrinks by
   ``max(0.9 * norm**(-1/4), 0.2)`` and the stages are evaluated again.
   A shrunk dt below min_dt raises :class:`StepSizeUnderflowError`.
"""

import math
from typing import Tuple

import numpy as np

from nbody_sim.physics.errors import StepSizeUnderflowError
from nbody_sim.physics.integrators.base import Integrator


class AdaptiveIntegrator(Integrator):
    """Embedded Runge-Kutta pair with error-controlled step size.

    Subclasses provide the tableau: ``A`` holds, for stages 2..s, the
    coefficients applied to the preceding stages; ``B`` the weights of the
    propagated solution; ``E`` the weights of the error estimate.
    """

    adaptive = True

    SAFETY_FACTOR = 0.9
    MIN_SHRINK_FACTOR = 0.2
    MAX_GROW_FACTOR = 5.0

    A: Tuple[Tuple[float, ...], ...] = ()
    B: Tuple[float, ...] = ()
    E: Tuple[float, ...] = ()

    def __init__(
        self,
        bodies,
        dt: float,
        tolerance: float = 1e-6,
        min_dt: float = 1e-9,
        max_dt: float = 0.1,
    ):
        super().__init__(bodies, dt)
        if tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        if min_dt <= 0 or max_dt <= 0:
            raise ValueError(f"min_dt and max_dt must be positive, got {min_dt}, {max_dt}")
        if min_dt > max_dt:
            raise ValueError(f"min_dt ({min_dt}) must not exceed max_dt ({max_dt})")
        self.tolerance = tolerance
        self.min_dt = min_dt
        self.max_dt = max_dt

        self._k = self._allocate(self.stages)
        self._w, self._err = self._allocate(2)

        self.last_error_norm = 0.0
        self.rejections = 0

    @property
    def stages(self) -> int:
        return len(self.A) + 1

    def _evaluate_stages(self, current: np.ndarray, dt: float):
        f = self.force_law.evaluate
        k, w = self._k, self._w
        f(current, k[0])
        for s, row in enumerate(self.A, start=1):
            w[:] = current
            for coeff, k_prev in zip(row, k):
                if coeff:
                    w += (dt * coeff) * k_prev
            f(w, k[s])

    def _combine(self, weights, out: np.ndarray) -> np.ndarray:
        out.fill(0.0)
        for coeff, k in zip(weights, self._k):
            if coeff:
                out += coeff * k
        return out

    def error_norm(self, dt: float) -> float:
        """Scaled RMS of the embedded error for the stages last evaluated."""
        err = self._combine(self.E, self._err)
        return dt * math.sqrt(np.mean((err / self.tolerance) ** 2))

    def step(self, current: np.ndarray) -> float:
        while True:
            dt = self.dt
            self._evaluate_stages(current, dt)
            norm = self.error_norm(dt)
            self.last_error_norm = norm

            if norm <= 1.0:
                increment = self._combine(self.B, self._w)
                self._commit(current + dt * increment)
                if norm == 0.0:
                    grow = self.MAX_GROW_FACTOR
                else:
                    grow = min(self.SAFETY_FACTOR * norm ** -0.2, self.MAX_GROW_FACTOR)
                self.dt = min(max(dt * grow, self.min_dt), self.max_dt)
                return dt

            if math.isfinite(norm):
                new_dt = max(dt * self.SAFETY_FACTOR * norm ** -0.25, dt * self.MIN_SHRINK_FACTOR)
            else:
                new_dt = dt * self.MIN_SHRINK_FACTOR
            if new_dt < self.min_dt:
                raise StepSizeUnderflowError(self.name, new_dt, self.min_dt, self.tolerance)
            self.rejections += 1
            self.dt = new_dt


class CashKarpIntegrator(AdaptiveIntegrator):
    """Cash-Karp 4(5) pair: six stages, fifth order solution."""

    A = (
        (1.0 / 5.0,),
        (3.0 / 40.0, 9.0 / 40.0),
        (3.0 / 10.0, -9.0 / 10.0, 6.0 / 5.0),
        (-11.0 / 54.0, 5.0 / 2.0, -70.0 / 27.0, 35.0 / 27.0),
        (1631.0 / 55296.0, 175.0 / 512.0, 575.0 / 13824.0, 44275.0 / 110592.0, 253.0 / 4096.0),
    )
    B = (37.0 / 378.0, 0.0, 250.0 / 621.0, 125.0 / 594.0, 0.0, 512.0 / 1771.0)
    E = (
        2825.0 / 27648.0 - 37.0 / 378.0,
        0.0,
        18575.0 / 48384.0 - 250.0 / 621.0,
        13525.0 / 55296.0 - 125.0 / 594.0,
        277.0 / 14336.0,
        1.0 / 4.0 - 512.0 / 1771.0,
    )

    @property
    def name(self) -> str:
        return "cash_karp"

    @property
    def order(self) -> int:
        return 5


class DormandPrinceIntegrator(AdaptiveIntegrator):
    """Dormand-Prince 5(4) pair ("ode45"): seven stages, fifth order solution."""

    A = (
        (1.0 / 5.0,),
        (3.0 / 40.0, 9.0 / 40.0),
        (44.0 / 45.0, -56.0 / 15.0, 32.0 / 9.0),
        (19372.0 / 6561.0, -25360.0 / 2187.0, 64448.0 / 6561.0, -212.0 / 729.0),
        (9017.0 / 3168.0, -355.0 / 33.0, 46732.0 / 5247.0, 49.0 / 176.0, -5103.0 / 18656.0),
        (35.0 / 384.0, 0.0, 500.0 / 1113.0, 125.0 / 192.0, -2187.0 / 6784.0, 11.0 / 84.0),
    )
    B = (35.0 / 384.0, 0.0, 500.0 / 1113.0, 125.0 / 192.0, -2187.0 / 6784.0, 11.0 / 84.0, 0.0)
    E = (
        71.0 / 57600.0,
        0.0,
        -71.0 / 16695.0,
        71.0 / 1920.0,
        -17253.0 / 339200.0,
        22.0 / 525.0,
        -1.0 / 40.0,
    )

    @property
    def name(self) -> str:
        return "ode45"

    @property
    def order(self) -> int:
        return 5
