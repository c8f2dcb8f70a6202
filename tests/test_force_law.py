"""Tests for the pairwise gravitational force law."""

import numpy as np

from nbody_sim.physics.force_law import ForceLaw, accelerations


def test_two_body_acceleration():
    """Test the acceleration between two bodies one unit apart."""
    law = ForceLaw([1.0, 2.0])
    state = np.array([[0.0, 0.0, 0.3, 0.4],
                      [1.0, 0.0, -0.1, 0.2]])

    deriv = law.evaluate(state)

    # Position derivative is velocity
    assert np.array_equal(deriv[:, 0:2], state[:, 2:4])
    # Body 0 pulled towards body 1 by m1 = 2, body 1 towards body 0 by m0 = 1
    assert np.allclose(deriv[0, 2:4], [2.0, 0.0])
    assert np.allclose(deriv[1, 2:4], [-1.0, 0.0])


def test_force_symmetry():
    """Test that Σ m_i a_i = 0 (Newton's third law)."""
    rng = np.random.default_rng(42)
    masses = rng.uniform(0.1, 5.0, size=8)
    state = rng.normal(size=(8, 4))

    deriv = ForceLaw(masses).evaluate(state)
    net = np.sum(masses[:, None] * deriv[:, 2:4], axis=0)

    assert np.allclose(net, 0.0, atol=1e-10)


def test_singularity_guard_skips_coincident_pair():
    """Test that near-coincident bodies exert no force on each other."""
    state = np.array([[0.0, 0.0, 0.0, 0.0],
                      [0.0, 1e-7, 0.0, 0.0],
                      [2.0, 0.0, 0.0, 0.0]])
    deriv = ForceLaw([1.0, 1.0, 1.0]).evaluate(state)

    assert np.all(np.isfinite(deriv))
    # Body 0 only feels body 2
    expected = accelerations(state[[0, 2], 0:2], [1.0, 1.0])[0]
    assert np.allclose(deriv[0, 2:4], expected)


def test_evaluate_is_pure():
    """Test that the input state is left untouched and out is reused."""
    state = np.array([[0.0, 0.0, 1.0, 0.0],
                      [1.0, 1.0, 0.0, 1.0]])
    original = state.copy()
    out = np.full_like(state, 99.0)
    law = ForceLaw([1.0, 1.0])

    result = law.evaluate(state, out)

    assert result is out
    assert np.array_equal(state, original)
    assert law.evaluations == 1


def test_single_body_has_no_acceleration():
    """Test a lone body."""
    deriv = ForceLaw([3.0]).evaluate(np.array([[1.0, 2.0, 3.0, 4.0]]))
    assert np.array_equal(deriv, [[3.0, 4.0, 0.0, 0.0]])
