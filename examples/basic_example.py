"""Basic example of driving the N-body simulator by hand."""

from nbody_sim import NBodySystem, SystemDef
from nbody_sim.physics.diagnostics import Diagnostics

def main():
    """Run a three-body stable ring with the leapfrog integrator."""
    # Slightly slow ring so the bodies fall inwards and interact
    system_def = SystemDef.create_stable_ring(3, scale=0.9)

    sim = NBodySystem(system_def, integrator="leapfrog")
    diagnostics = Diagnostics(sim)

    print("Running simulation...")
    print(f"Initial energy: {diagnostics.compute_energies()[2]:.6f}")

    for step in range(2000):
        sim.step()
        if step % 400 == 0:
            energy = diagnostics.compute_energies()[2]
            print(f"Step {step}: Time={sim.elapsed:.2f}, Energy={energy:.6f}")
        if sim.crashed:
            print("A body escaped the simulation box, stopping.")
            break

    print(f"Final energy: {diagnostics.compute_energies()[2]:.6f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
