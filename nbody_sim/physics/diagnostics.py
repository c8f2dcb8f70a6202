"""Diagnostics for N-body simulations."""

from typing import Dict

import numpy as np

from nbody_sim.physics.body import states_to_array
from nbody_sim.physics.force_law import G as DEFAULT_G, MIN_SEPARATION_SQ


def kinetic_energy(states: np.ndarray, masses) -> float:
    """K = 0.5 * Σ m_i * v_i^2"""
    masses = np.asarray(masses, dtype=np.float64)
    v_sq = np.sum(states[:, 2:4] ** 2, axis=1)
    return float(0.5 * np.sum(masses * v_sq))


def potential_energy(states: np.ndarray, masses, G: float = DEFAULT_G) -> float:
    """U = -G * Σ_{i<j} m_i * m_j / r_ij

    Pairs skipped by the force law's singularity guard are skipped here too,
    so the potential stays consistent with the forces actually applied.
    """
    masses = np.asarray(masses, dtype=np.float64)
    i, j = np.triu_indices(len(masses), k=1)
    d = states[j, 0:2] - states[i, 0:2]
    r_sq = np.sum(d ** 2, axis=1)
    keep = r_sq >= MIN_SEPARATION_SQ
    return float(-G * np.sum(masses[i][keep] * masses[j][keep] / np.sqrt(r_sq[keep])))


def total_energy(states: np.ndarray, masses, G: float = DEFAULT_G) -> float:
    return kinetic_energy(states, masses) + potential_energy(states, masses, G)


def linear_momentum(states: np.ndarray, masses) -> np.ndarray:
    """Total momentum vector (px, py)."""
    masses = np.asarray(masses, dtype=np.float64)
    return np.sum(masses[:, None] * states[:, 2:4], axis=0)


def angular_momentum(states: np.ndarray, masses) -> float:
    """Lz = Σ m_i (x_i * vy_i - y_i * vx_i)"""
    masses = np.asarray(masses, dtype=np.float64)
    lz = states[:, 0] * states[:, 3] - states[:, 1] * states[:, 2]
    return float(np.sum(masses * lz))


def center_of_mass(states: np.ndarray, masses) -> np.ndarray:
    masses = np.asarray(masses, dtype=np.float64)
    return np.sum(masses[:, None] * states[:, 0:2], axis=0) / np.sum(masses)


class Diagnostics:
    """Conserved-quantity diagnostics for a live :class:`NBodySystem`."""

    def __init__(self, system, G: float = DEFAULT_G):
        self.system = system
        self.G = G
        self.masses = np.array([body.mass for body in system.bodies], dtype=np.float64)

    def _states(self) -> np.ndarray:
        return states_to_array(self.system.bodies)

    def compute_energies(self):
        """Return (kinetic, potential, total) energy of the current state."""
        states = self._states()
        K = kinetic_energy(states, self.masses)
        U = potential_energy(states, self.masses, self.G)
        return K, U, K + U

    def summary(self) -> Dict[str, float]:
        states = self._states()
        K, U, E = self.compute_energies()
        px, py = linear_momentum(states, self.masses)
        cx, cy = center_of_mass(states, self.masses)
        return {
            "time": self.system.elapsed,
            "steps": self.system.step_count,
            "kinetic": K,
            "potential": U,
            "energy": E,
            "momentum_x": float(px),
            "momentum_y": float(py),
            "angular_momentum": angular_momentum(states, self.masses),
            "com_x": float(cx),
            "com_y": float(cy),
        }
