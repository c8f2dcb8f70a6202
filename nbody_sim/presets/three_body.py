"""Tabulated three-body initial conditions.

Collinear starts (all bodies on the x axis) for the Broucke and Hénon
periodic families, a star-planet-moon hierarchy, the Chenciner-Montgomery
figure-eight and a free-fall orbit. Masses are 1 unless stated otherwise.
"""

from nbody_sim.physics.body import BodyType
from nbody_sim.presets.base import DEFAULT_DT, SystemDef


def solar_earth_moon_1(dt: float = DEFAULT_DT) -> SystemDef:
    return SystemDef.from_rows([
        (0.3534, 0, 0, -0.2658, BodyType.SOLAR, 1.0),
        (-1.1466, 0, 0, 0.8183, BodyType.PLANET, 0.3),
        (-0.9466, 0, 0, 2.0430, BodyType.MOON, 0.01),
    ], dt=dt)


def solar_earth_moon_2(dt: float = 0.001953125) -> SystemDef:
    return SystemDef.from_rows([
        (-0.2013, 0, 0, 0.16041, BodyType.SOLAR, 2.0),
        (1.2987, 0, 0, -1.0744, BodyType.PLANET, 0.3),
        (1.4987, 0, 0, 0.1503, BodyType.MOON, 0.01),
    ], dt=dt)


def broucke_a15(dt: float = 0.001953125) -> SystemDef:
    return SystemDef.from_rows([
        (-1.1889693067, 0, 0, 0.8042120498),
        (3.8201881837, 0, 0, 0.0212794833),
        (-2.631218877, 0, 0, -0.8254915331),
    ], dt=dt)


def henon_2(dt: float = 0.0001) -> SystemDef:
    return SystemDef.from_rows([
        (-1.0207041786, 0, 0, 9.1265693140),
        (2.0532718983, 0, 0, 0.0660238922),
        (-1.0325677197, 0, 0, -9.1925932061),
    ], dt=dt)


def henon_3(dt: float = 0.001953125) -> SystemDef:
    return SystemDef.from_rows([
        (-0.9738300580, 0, 0, 4.3072892019),
        (1.9988948637, 0, 0, 0.1333821680),
        (-1.0250648057, 0, 0, -4.4406713699),
    ], dt=dt)


def henon_4(dt: float = 0.001953125) -> SystemDef:
    # Same initial conditions as Broucke A15
    return SystemDef.from_rows([
        (-1.1889693067, 0, 0, 0.8042120498),
        (3.8201881837, 0, 0, 0.0212794833),
        (-2.631218877, 0, 0, -0.8254915331),
    ], dt=dt)


def henon_5(dt: float = 0.001953125) -> SystemDef:
    return SystemDef.from_rows([
        (-0.9353825545, 0, 0, 3.3166932522),
        (1.9545571553, 0, 0, 0.1654488998),
        (-1.0191746008, 0, 0, -3.4821421520),
    ], dt=dt)


def henon_42(dt: float = 0.001953125) -> SystemDef:
    return SystemDef.from_rows([
        (1.1593879407, 0, 0, 1.1787714143),
        (1.7740754142, 0, 0, -0.6271771385),
        (-2.9334633549, 0, 0, -0.5515942758),
    ], dt=dt)


def figure8(dt: float = 0.001953125) -> SystemDef:
    vx, vy = 0.347111, 0.532728
    return SystemDef.from_rows([
        (-1, 0, vx, vy),
        (1, 0, vx, vy),
        (0, 0, -2 * vx, -2 * vy),
    ], dt=dt)


def free_fall_f1(dt: float = 0.001953125 / 128) -> SystemDef:
    return SystemDef.from_rows([
        (-0.5, 0, 0.3471168881, 0.5327249454),
        (0.5, 0, 0.3471168881, 0.5327249454),
        (-0.0009114239, 0.3019805958, -0.6942337762, -1.0654498908),
    ], dt=dt)
