"""Preset system definitions for N-body simulations."""

from typing import List

from nbody_sim.presets.base import SystemDef
from nbody_sim.presets.ring import stable_ring, ring_speed, ring_force_factor
from nbody_sim.presets.three_body import (
    solar_earth_moon_1,
    solar_earth_moon_2,
    broucke_a15,
    henon_2,
    henon_3,
    henon_4,
    henon_5,
    henon_42,
    figure8,
    free_fall_f1,
)

PRESETS = {
    'stable_ring': stable_ring,
    'solar_earth_moon_1': solar_earth_moon_1,
    'solar_earth_moon_2': solar_earth_moon_2,
    'broucke_a15': broucke_a15,
    'henon_2': henon_2,
    'henon_3': henon_3,
    'henon_4': henon_4,
    'henon_5': henon_5,
    'henon_42': henon_42,
    'figure8': figure8,
    'free_fall_f1': free_fall_f1,
}


def list_presets() -> List[str]:
    return sorted(PRESETS)


def get_preset(name: str, **kwargs) -> SystemDef:
    """Get preset system definition by name."""
    factory = PRESETS.get(name.lower())
    if factory is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list_presets()}")
    return factory(**kwargs)


__all__ = [
    "SystemDef",
    "PRESETS",
    "list_presets",
    "get_preset",
    "stable_ring",
    "ring_speed",
    "ring_force_factor",
    "solar_earth_moon_1",
    "solar_earth_moon_2",
    "broucke_a15",
    "henon_2",
    "henon_3",
    "henon_4",
    "henon_5",
    "henon_42",
    "figure8",
    "free_fall_f1",
]
