"""Shared fixtures for the test suite."""

import math

import pytest

from nbody_sim.presets import SystemDef

# Two unit masses one unit apart on a circular orbit about their centre of mass
CIRCULAR_SPEED = math.sqrt(0.5)
CIRCULAR_PERIOD = 2 * math.pi * 0.5 / CIRCULAR_SPEED


def circular_two_body(dt: float = 0.01) -> SystemDef:
    return SystemDef.from_rows([
        (0.5, 0.0, 0.0, CIRCULAR_SPEED),
        (-0.5, 0.0, 0.0, -CIRCULAR_SPEED),
    ], dt=dt)


@pytest.fixture
def two_body_def():
    return circular_two_body()


@pytest.fixture
def ring_def():
    return SystemDef.create_stable_ring(3)
