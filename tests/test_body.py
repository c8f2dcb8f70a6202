"""Tests for bodies, phase states and snapshots."""

import math

import numpy as np
import pytest

from nbody_sim.physics.body import Body, BodyDef, BodyState, BodyType, states_to_array, write_states
from nbody_sim.physics.snapshot import BodySnapshot


def test_body_state_arithmetic():
    """Test vector-space operations on BodyState."""
    a = BodyState(1.0, 2.0, 3.0, 4.0)
    b = BodyState(0.5, -1.0, 2.0, 0.0)

    assert a + b == BodyState(1.5, 1.0, 5.0, 4.0)
    assert a - b == BodyState(0.5, 3.0, 1.0, 4.0)
    assert a * 2 == BodyState(2.0, 4.0, 6.0, 8.0)
    assert 2 * a == a * 2
    assert -a == BodyState(-1.0, -2.0, -3.0, -4.0)
    assert isinstance(a + b, BodyState)
    assert isinstance(0.5 * a, BodyState)


def test_body_state_array_round_trip():
    """Test conversion between BodyState and numpy rows."""
    state = BodyState(1.0, -2.0, 0.25, 8.0)
    row = state.as_array()
    assert row.dtype == np.float64
    assert BodyState.from_array(row) == state


def test_body_state_crashed_boundary():
    """Test the +/-50 escape box."""
    assert not BodyState(50.0, -50.0, 0.0, 0.0).crashed
    assert BodyState(50.1, 0.0, 0.0, 0.0).crashed
    assert BodyState(0.0, -50.1, 0.0, 0.0).crashed


def test_body_rejects_non_positive_mass():
    """Test mass validation."""
    with pytest.raises(ValueError):
        Body(0, BodyType.SOLAR, 0.0)
    with pytest.raises(ValueError):
        BodyDef(BodyState(), BodyType.PLANET, -1.0)


def test_body_def_create():
    """Test BodyDef instantiation."""
    body_def = BodyDef.from_components(1, 2, 3, 4, BodyType.MOON, 0.01)
    body = body_def.create(7)

    assert body.id == 7
    assert body.body_type is BodyType.MOON
    assert body.mass == 0.01
    assert body.state == BodyState(1.0, 2.0, 3.0, 4.0)


def test_body_size():
    """Test the visual size helper."""
    assert Body(0, BodyType.SOLAR, math.e).size == pytest.approx(1.0)
    assert Body(0, BodyType.BLACK_HOLE, math.e ** math.e).size == pytest.approx(1.0)


def test_body_snapshot_single_precision():
    """Test that snapshots hold float32-rounded values."""
    body = Body(3, BodyType.PLANET, 0.3, BodyState(0.1, -0.2, 1.0, 1.0))
    snap = body.get_snapshot()

    assert isinstance(snap, BodySnapshot)
    assert snap.id == 3
    assert snap.px == float(np.float32(0.1))
    assert snap.px != 0.1
    assert snap.mass == float(np.float32(0.3))
    assert snap.body_type is BodyType.PLANET
    assert snap.size == 0.05


def test_states_array_helpers():
    """Test copying states to and from arrays."""
    bodies = [BodyDef.from_components(i, 0, 0, 0).create(i) for i in range(3)]
    states = states_to_array(bodies)
    assert states.shape == (3, 4)

    states[:, 2] = 1.5
    write_states(bodies, states)
    assert all(body.state.vx == 1.5 for body in bodies)
