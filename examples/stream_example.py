"""Consume snapshots produced on a background thread."""

from nbody_sim import NBodySystem, SystemDef
from nbody_sim.utils import CircularBuffer

def main():
    """Stream the figure-eight orbit and keep a short trail per body."""
    sim = NBodySystem(SystemDef.create_figure8(), integrator="ode45")
    trails = [CircularBuffer(64) for _ in range(sim.n_bodies)]

    with sim.auto_step(buffer_capacity=512) as stream:
        for i, snapshot in enumerate(stream):
            for trail, body in zip(trails, snapshot):
                trail.add((body.px, body.py))
            if i % 500 == 0:
                print(f"t={snapshot.timestamp:.3f} " +
                      " ".join(f"({b.px:+.3f}, {b.py:+.3f})" for b in snapshot))
            if i >= 3000:
                break

    print(f"Streamed {stream.consumed} snapshots, producer took {sim.step_count} steps")

if __name__ == "__main__":
    main()
