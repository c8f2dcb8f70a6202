"""System definitions: the initial conditions of a simulation run."""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from nbody_sim.physics.body import Body, BodyDef, BodyState, BodyType

DEFAULT_DT = 1.0 / 80


@dataclass(frozen=True)
class SystemDef:
    """Ordered body definitions plus the gravitational constant and nominal dt."""
    bodies: Tuple[BodyDef, ...]
    G: float = 1.0
    dt: float = DEFAULT_DT

    def __post_init__(self):
        object.__setattr__(self, "bodies", tuple(self.bodies))
        if self.dt <= 0:
            raise ValueError(f"SystemDef dt must be positive, got {self.dt}")

    def __len__(self) -> int:
        return len(self.bodies)

    def to_bodies(self) -> List[Body]:
        """Instantiate one Body per definition, ids following definition order."""
        return [body_def.create(i) for i, body_def in enumerate(self.bodies)]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence], G: float = 1.0, dt: float = DEFAULT_DT) -> "SystemDef":
        """Build from ``(px, py, vx, vy[, body_type[, mass]])`` rows."""
        return cls(tuple(BodyDef.from_components(*row) for row in rows), G=G, dt=dt)

    # Named configurations

    @classmethod
    def create_stable_ring(cls, n: int, scale: float = 1.0, G: float = 1.0, M: float = 1.0, R: float = 1.0) -> "SystemDef":
        from nbody_sim.presets.ring import stable_ring
        return stable_ring(n, scale=scale, G=G, M=M, R=R)

    @classmethod
    def create_solar_earth_moon_1(cls, dt: float = DEFAULT_DT) -> "SystemDef":
        from nbody_sim.presets.three_body import solar_earth_moon_1
        return solar_earth_moon_1(dt)

    @classmethod
    def create_solar_earth_moon_2(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import solar_earth_moon_2
        return solar_earth_moon_2(dt)

    @classmethod
    def create_broucke_a15(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import broucke_a15
        return broucke_a15(dt)

    @classmethod
    def create_henon_2(cls, dt: float = 0.0001) -> "SystemDef":
        from nbody_sim.presets.three_body import henon_2
        return henon_2(dt)

    @classmethod
    def create_henon_3(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import henon_3
        return henon_3(dt)

    @classmethod
    def create_henon_4(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import henon_4
        return henon_4(dt)

    @classmethod
    def create_henon_5(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import henon_5
        return henon_5(dt)

    @classmethod
    def create_henon_42(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import henon_42
        return henon_42(dt)

    @classmethod
    def create_figure8(cls, dt: float = 0.001953125) -> "SystemDef":
        from nbody_sim.presets.three_body import figure8
        return figure8(dt)

    @classmethod
    def create_free_fall_f1(cls, dt: float = 0.001953125 / 128) -> "SystemDef":
        from nbody_sim.presets.three_body import free_fall_f1
        return free_fall_f1(dt)


__all__ = ["SystemDef", "BodyDef", "BodyState", "BodyType", "DEFAULT_DT"]
