"""Direct pairwise Newtonian gravity.

Each unordered pair is visited once and the result applied to both bodies
with opposite signs, so the sum of mass-weighted accelerations is zero.
"""

from typing import Optional, Sequence

import numpy as np

G = 1.0  # Gravitational constant (normalized units)
MIN_SEPARATION_SQ = 1e-12  # Pairs closer than this exert no force on each other


class ForceLaw:
    """Evaluate the phase-space derivative of every body.

    For a state row ``(px, py, vx, vy)`` the derivative row is
    ``(vx, vy, ax, ay)``. Masses are fixed at construction; the state passed to
    :meth:`evaluate` can be any candidate state (e.g. a Runge-Kutta stage).
    """

    def __init__(self, masses: Sequence[float], G: float = G):
        self.masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        self.G = G
        self.n_bodies = self.masses.shape[0]
        # Upper triangle only: pairs (i, j) with i < j
        self._i, self._j = np.triu_indices(self.n_bodies, k=1)
        self.evaluations = 0

    @classmethod
    def for_bodies(cls, bodies, G: float = G) -> "ForceLaw":
        return cls([body.mass for body in bodies], G=G)

    def evaluate(self, state: np.ndarray, out: Optional[np.ndarray] = None) -> np.ndarray:
        """Compute derivatives for ``state`` (n, 4), writing into ``out`` if given."""
        if out is None:
            out = np.empty_like(state)
        self.evaluations += 1

        out[:, 0:2] = state[:, 2:4]
        acc = out[:, 2:4]
        acc.fill(0.0)

        if self._i.size == 0:
            return out

        d = state[self._j, 0:2] - state[self._i, 0:2]
        r2 = d[:, 0] * d[:, 0] + d[:, 1] * d[:, 1]
        keep = r2 >= MIN_SEPARATION_SQ
        if not np.all(keep):
            i, j, d, r2 = self._i[keep], self._j[keep], d[keep], r2[keep]
        else:
            i, j = self._i, self._j

        r3 = r2 * np.sqrt(r2)
        force = self.G * d / r3[:, None]

        # Newton's third law: +m_j f on i, -m_i f on j
        np.add.at(acc, i, self.masses[j, None] * force)
        np.subtract.at(acc, j, self.masses[i, None] * force)
        return out

    __call__ = evaluate


def accelerations(positions: np.ndarray, masses: Sequence[float], G: float = G) -> np.ndarray:
    """Return the (n, 2) gravitational acceleration for bare positions."""
    positions = np.asarray(positions, dtype=np.float64)
    state = np.zeros((positions.shape[0], 4))
    state[:, 0:2] = positions
    return ForceLaw(masses, G=G).evaluate(state)[:, 2:4].copy()
