"""Stable N-gon ring: equal masses on a circle in uniform rotation."""

import math

from nbody_sim.physics.body import BodyDef, BodyState, BodyType
from nbody_sim.presets.base import SystemDef


def ring_force_factor(n: int) -> float:
    """Σ_{k=1}^{n-1} 1 / sin(πk/n)

    The net inward pull on one ring member is ``G*M^2/(4*R^2)`` times this
    factor.
    """
    factor = 0.0
    for k in range(1, n):
        factor += 1.0 / math.sin(math.pi * k / n)
    return factor


def ring_speed(n: int, G: float = 1.0, M: float = 1.0, R: float = 1.0) -> float:
    """Orbital speed for which the ring rotates rigidly: v² = (G*M/(4R)) * factor."""
    v_squared = (G * M / (4.0 * R)) * ring_force_factor(n)
    return math.sqrt(v_squared)


def stable_ring(n: int, scale: float = 1.0, G: float = 1.0, M: float = 1.0, R: float = 1.0) -> SystemDef:
    """Place ``n`` bodies of mass ``M`` evenly on a circle of radius ``R``.

    Body i sits at angle θ = 2πi/n, at (R*sinθ, -R*cosθ), moving tangentially
    with speed ``scale`` times the rigid-rotation speed. ``scale`` < 1 makes
    the ring contract, > 1 expand.

    Raises:
        ValueError: if fewer than two bodies are requested
    """
    if n < 2:
        raise ValueError(f"Ring needs at least 2 bodies, got n={n}")

    v = ring_speed(n, G=G, M=M, R=R) * scale

    bodies = []
    for i in range(n):
        angle = 2.0 * math.pi * i / n
        px = R * math.sin(angle)
        py = R * -math.cos(angle)
        vx = v * math.cos(angle)
        vy = v * math.sin(angle)
        bodies.append(BodyDef(BodyState(px, py, vx, vy), BodyType.SOLAR, M))

    return SystemDef(tuple(bodies), G=G)
