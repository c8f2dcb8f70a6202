"""N-body system driver."""

import threading
from typing import Optional, Tuple

import numpy as np

from nbody_sim.physics.body import Body, states_to_array
from nbody_sim.physics.integrators import AdaptiveIntegrator, Integrator, create_integrator, get_integrator
from nbody_sim.physics.snapshot import SystemSnapshot
from nbody_sim.physics.streaming import SnapshotStream


class NBodySystem:
    """Gravitational system of point masses advanced by one integrator.

    The system owns its bodies and lends them to the integrator for the
    duration of each :meth:`step`. ``elapsed`` only ever grows by the step size
    the integrator reports, which for adaptive integrators is chosen by the
    integrator itself.
    """

    DEFAULT_INTEGRATOR = "ode45"

    def __init__(
        self,
        system_def,
        integrator: str = DEFAULT_INTEGRATOR,
        verbose: bool = False,
        debug_interval: int = 100,
        **integrator_kwargs,
    ):
        """Initialize N-body system.

        Args:
            system_def: SystemDef describing the initial conditions
            integrator: Integrator name (see ``list_integrators()``)
            verbose: Print a diagnostics line every ``debug_interval`` steps
            debug_interval: Steps between diagnostics lines
            **integrator_kwargs: tolerance / min_dt / max_dt for adaptive integrators
        """
        self.system_def = system_def
        self.dt = system_def.dt
        self._bodies = system_def.to_bodies()

        # Adaptive steps never exceed the nominal dt unless asked to
        if issubclass(get_integrator(integrator), AdaptiveIntegrator):
            integrator_kwargs.setdefault("max_dt", system_def.dt)
        self._integrator = create_integrator(integrator, self._bodies, system_def.dt, **integrator_kwargs)

        self._scratch = np.zeros((len(self._bodies), 4), dtype=np.float64)
        self._elapsed = 0.0
        self.step_count = 0

        self.verbose = verbose
        self.debug_interval = max(1, int(debug_interval))

        self._stream: Optional[SnapshotStream] = None

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return tuple(self._bodies)

    @property
    def n_bodies(self) -> int:
        return len(self._bodies)

    @property
    def integrator(self) -> Integrator:
        return self._integrator

    @property
    def elapsed(self) -> float:
        """Simulated time accumulated over all accepted steps."""
        return self._elapsed

    @property
    def crashed(self) -> bool:
        """True if any body has left the +/-50 box."""
        return any(body.state.crashed for body in self._bodies)

    def get_state(self) -> np.ndarray:
        """Return an (n, 4) copy of the current body states."""
        return states_to_array(self._bodies)

    def step(self) -> float:
        """Advance the simulation by one integrator step.

        Returns:
            The step size actually taken

        Raises:
            StepSizeUnderflowError: an adaptive integrator could not meet its tolerance
        """
        stream = self._stream
        if stream is not None and stream.thread.is_alive() and threading.current_thread() is not stream.thread:
            raise RuntimeError("System is being advanced by a running snapshot stream; cancel it first")

        states_to_array(self._bodies, out=self._scratch)
        dt = self._integrator.step(self._scratch)
        self._elapsed += dt
        self.step_count += 1

        if self.verbose and self.step_count % self.debug_interval == 0:
            self._print_diagnostics(dt)
        return dt

    def run_steps(self, n_steps: int) -> float:
        """Take ``n_steps`` steps; returns the simulated time they covered."""
        start = self._elapsed
        for _ in range(n_steps):
            self.step()
        return self._elapsed - start

    def get_snapshot(self) -> SystemSnapshot:
        return SystemSnapshot(self._elapsed, tuple(body.get_snapshot() for body in self._bodies))

    def auto_step(self, buffer_capacity: int = 512, cancel_event: Optional[threading.Event] = None) -> SnapshotStream:
        """Start stepping on a background thread and stream the snapshots.

        Args:
            buffer_capacity: Maximum number of produced but unconsumed snapshots
            cancel_event: Optional event; setting it stops the producer

        Returns:
            A started :class:`SnapshotStream`
        """
        if self._stream is not None and not self._stream.done:
            raise RuntimeError("A snapshot stream is already running for this system")
        stream = SnapshotStream(self, buffer_capacity=buffer_capacity, cancel_event=cancel_event)
        self._stream = stream
        return stream.start()

    def _print_diagnostics(self, dt: float):
        from nbody_sim.physics.diagnostics import Diagnostics

        K, U, E = Diagnostics(self).compute_energies()
        print(f"[Diag] step={self.step_count} t={self._elapsed:.4f} dt={dt:.3e} "
              f"K={K:.6f} U={U:.6f} E={E:.6f} crashed={self.crashed}")

    def dispose(self):
        """Stop any running stream and dispose the bodies."""
        if self._stream is not None:
            self._stream.cancel()
            self._stream.join()
        for body in self._bodies:
            body.dispose()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.dispose()

    def __repr__(self) -> str:
        return (f"NBodySystem(n_bodies={self.n_bodies}, integrator={self._integrator.name}, "
                f"elapsed={self._elapsed:.6f})")
