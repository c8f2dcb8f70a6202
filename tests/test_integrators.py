"""Tests for numerical integrators."""

import numpy as np
import pytest

from nbody_sim.physics.body import states_to_array
from nbody_sim.physics.diagnostics import linear_momentum, total_energy
from nbody_sim.physics.errors import StepSizeUnderflowError
from nbody_sim.physics.integrators import (
    CashKarpIntegrator,
    DormandPrinceIntegrator,
    EulerIntegrator,
    LeapfrogIntegrator,
    RK4Integrator,
    create_integrator,
    get_integrator,
    list_integrators,
)
from tests.conftest import CIRCULAR_PERIOD, circular_two_body

FIXED_STEP = [
    ("euler", 1),
    ("euler2", 2),
    ("rk4", 4),
    ("rk5", 5),
    ("leapfrog", 2),
]


def _run(integrator, bodies, n_steps):
    masses = [b.mass for b in bodies]
    energies = []
    for _ in range(n_steps):
        integrator.step(states_to_array(bodies))
        energies.append(total_energy(states_to_array(bodies), masses))
    return np.array(energies)


@pytest.mark.parametrize("name, order", FIXED_STEP)
def test_fixed_step_integrators(name, order):
    """Test that fixed-step integrators move bodies and return their dt."""
    bodies = circular_two_body().to_bodies()
    before = states_to_array(bodies)
    integrator = create_integrator(name, bodies, 0.01)

    dt = integrator.step(before.copy())

    assert dt == 0.01
    assert integrator.dt == 0.01
    assert not np.allclose(states_to_array(bodies), before)
    assert integrator.name == name
    assert integrator.order == order
    assert not integrator.adaptive


def test_euler_step_matches_formula():
    """Test y_new = y + f(y)*dt."""
    bodies = circular_two_body().to_bodies()
    integrator = EulerIntegrator(bodies, 0.05)
    current = states_to_array(bodies)
    expected = current + integrator.force_law.evaluate(current) * 0.05

    integrator.step(current)

    assert np.allclose(states_to_array(bodies), expected)


def test_leapfrog_evaluates_forces_twice():
    """Test kick-drift-kick uses exactly two force evaluations per step."""
    bodies = circular_two_body().to_bodies()
    integrator = LeapfrogIntegrator(bodies, 0.01)

    integrator.step(states_to_array(bodies))
    assert integrator.force_law.evaluations == 2
    integrator.step(states_to_array(bodies))
    assert integrator.force_law.evaluations == 4


def test_leapfrog_conserves_energy_better_than_euler():
    """Test bounded leapfrog energy error against Euler's drift on a circular orbit."""
    n_steps = 2000

    leap_bodies = circular_two_body().to_bodies()
    masses = [b.mass for b in leap_bodies]
    e0 = total_energy(states_to_array(leap_bodies), masses)
    leap_energies = _run(LeapfrogIntegrator(leap_bodies, 0.01), leap_bodies, n_steps)

    euler_bodies = circular_two_body().to_bodies()
    euler_energies = _run(EulerIntegrator(euler_bodies, 0.01), euler_bodies, n_steps)

    leap_drift = np.max(np.abs(leap_energies - e0)) / abs(e0)
    euler_drift = abs(euler_energies[-1] - e0) / abs(e0)

    assert leap_drift < 1e-3
    assert euler_drift > 1e-2
    assert euler_drift > 10 * leap_drift

    # No secular growth: late error no worse than a small multiple of early error
    early = np.max(np.abs(leap_energies[: n_steps // 2] - e0))
    late = np.max(np.abs(leap_energies[n_steps // 2:] - e0))
    assert late < 2 * early + 1e-12

    momentum = linear_momentum(states_to_array(leap_bodies), masses)
    assert np.allclose(momentum, 0.0, atol=1e-12)


@pytest.mark.parametrize("name", ["rk4", "rk5", "ode45", "cash_karp"])
def test_high_order_integrators_close_orbit(name):
    """Test that one period of a circular orbit returns to the start."""
    n_steps = 500
    dt = CIRCULAR_PERIOD / n_steps
    bodies = circular_two_body().to_bodies()
    start = states_to_array(bodies)
    kwargs = {"min_dt": dt, "max_dt": dt, "tolerance": 1.0} if name in ("ode45", "cash_karp") else {}
    integrator = create_integrator(name, bodies, dt, **kwargs)

    for _ in range(n_steps):
        integrator.step(states_to_array(bodies))

    assert np.allclose(states_to_array(bodies), start, atol=1e-5)


@pytest.mark.parametrize("integrator_class, stages", [
    (CashKarpIntegrator, 6),
    (DormandPrinceIntegrator, 7),
])
def test_adaptive_accepts_and_grows(integrator_class, stages):
    """Test an accepted step returns the dt used and grows the next one."""
    bodies = circular_two_body().to_bodies()
    integrator = integrator_class(bodies, 1e-4, tolerance=1e-3, max_dt=0.05)
    before = states_to_array(bodies)

    dt = integrator.step(before.copy())

    assert dt == 1e-4
    assert integrator.rejections == 0
    assert integrator.force_law.evaluations == stages
    assert 1e-4 < integrator.dt <= 0.05
    assert not np.array_equal(states_to_array(bodies), before)
    assert integrator.adaptive


@pytest.mark.parametrize("integrator_class", [CashKarpIntegrator, DormandPrinceIntegrator])
def test_adaptive_rejections_do_not_mutate(integrator_class):
    """Test that rejected trials leave no trace in the accepted result."""
    bodies = circular_two_body().to_bodies()
    integrator = integrator_class(bodies, 0.1, tolerance=1e-12)

    commits = []
    original_commit = integrator._commit

    def spy(new_states):
        commits.append(new_states.copy())
        original_commit(new_states)

    integrator._commit = spy
    used = integrator.step(states_to_array(bodies))

    assert integrator.rejections > 0
    assert used < 0.1
    assert len(commits) == 1

    # A fresh integrator started at the accepted dt lands on the same state
    fresh_bodies = circular_two_body().to_bodies()
    fresh = integrator_class(fresh_bodies, used, tolerance=1e-12)
    assert fresh.step(states_to_array(fresh_bodies)) == used
    assert fresh.rejections == 0
    assert np.array_equal(states_to_array(fresh_bodies), states_to_array(bodies))


@pytest.mark.parametrize("integrator_class", [CashKarpIntegrator, DormandPrinceIntegrator])
def test_adaptive_step_size_floor(integrator_class):
    """Test that an unreachable tolerance fails instead of looping forever."""
    bodies = circular_two_body().to_bodies()
    before = states_to_array(bodies)
    integrator = integrator_class(bodies, 0.1, tolerance=1e-14, min_dt=0.05, max_dt=0.1)

    with pytest.raises(StepSizeUnderflowError) as excinfo:
        integrator.step(before.copy())

    err = excinfo.value
    assert err.min_dt == 0.05
    assert err.tolerance == 1e-14
    assert err.attempted_dt < 0.05
    assert err.integrator == integrator.name
    assert "near-collision" in str(err)
    assert np.array_equal(states_to_array(bodies), before)


def test_adaptive_parameter_validation():
    """Test rejected adaptive configurations."""
    bodies = circular_two_body().to_bodies()
    with pytest.raises(ValueError):
        DormandPrinceIntegrator(bodies, 0.01, tolerance=0.0)
    with pytest.raises(ValueError):
        DormandPrinceIntegrator(bodies, 0.01, min_dt=0.5, max_dt=0.1)
    with pytest.raises(ValueError):
        RK4Integrator(bodies, 0.0)


def test_integrator_registry():
    """Test lookup by name."""
    assert get_integrator("ODE45") is DormandPrinceIntegrator
    assert get_integrator("heun") is get_integrator("euler2")
    assert "leapfrog" in list_integrators()

    with pytest.raises(ValueError):
        get_integrator("verlet")

    bodies = circular_two_body().to_bodies()
    with pytest.raises(ValueError):
        create_integrator("rk4", bodies, 0.01, tolerance=1e-6)
