"""Errors raised by the simulation core."""


class StepSizeUnderflowError(RuntimeError):
    """An adaptive integrator needed a step smaller than its configured floor.

    The run cannot continue: the tolerance cannot be met, usually because two
    bodies are in a near-collision.
    """

    def __init__(self, integrator: str, attempted_dt: float, min_dt: float, tolerance: float):
        self.integrator = integrator
        self.attempted_dt = attempted_dt
        self.min_dt = min_dt
        self.tolerance = tolerance
        super().__init__(
            f"{integrator}: adaptive step size ({attempted_dt:.2E}) has fallen below the minimum "
            f"allowed value ({min_dt:.2E}); the required error tolerance ({tolerance:.2E}) cannot be met. "
            "Consider increasing tolerance, decreasing min_dt, or checking for simulation "
            "instability (e.g. a near-collision)."
        )
