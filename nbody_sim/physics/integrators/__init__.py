"""Numerical integrators for N-body simulations."""

from typing import Dict, List, Type

from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import EulerIntegrator, Euler2Integrator
from nbody_sim.physics.integrators.rk4 import RK4Integrator
from nbody_sim.physics.integrators.rk5 import RK5Integrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator
from nbody_sim.physics.integrators.adaptive import (
    AdaptiveIntegrator,
    CashKarpIntegrator,
    DormandPrinceIntegrator,
)

INTEGRATORS: Dict[str, Type[Integrator]] = {
    'euler': EulerIntegrator,
    'euler2': Euler2Integrator,
    'heun': Euler2Integrator,
    'rk4': RK4Integrator,
    'rk5': RK5Integrator,
    'leapfrog': LeapfrogIntegrator,
    'cash_karp': CashKarpIntegrator,
    'ode45': DormandPrinceIntegrator,
    'dormand_prince': DormandPrinceIntegrator,
}


def list_integrators() -> List[str]:
    """Return the names accepted by :func:`get_integrator`."""
    return sorted(INTEGRATORS)


def get_integrator(name: str) -> Type[Integrator]:
    """Get integrator class by name."""
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ValueError(f"Unknown integrator: {name}. Available: {list_integrators()}")
    return integrator_class


def create_integrator(name: str, bodies, dt: float, **kwargs) -> Integrator:
    """Build the named integrator bound to ``bodies``.

    Extra keyword arguments (tolerance, min_dt, max_dt) are only accepted by
    the adaptive integrators.
    """
    integrator_class = get_integrator(name)
    if kwargs and not issubclass(integrator_class, AdaptiveIntegrator):
        raise ValueError(f"Integrator '{name}' takes no options, got {sorted(kwargs)}")
    return integrator_class(bodies, dt, **kwargs)


__all__ = [
    "Integrator",
    "AdaptiveIntegrator",
    "EulerIntegrator",
    "Euler2Integrator",
    "RK4Integrator",
    "RK5Integrator",
    "LeapfrogIntegrator",
    "CashKarpIntegrator",
    "DormandPrinceIntegrator",
    "INTEGRATORS",
    "list_integrators",
    "get_integrator",
    "create_integrator",
]
