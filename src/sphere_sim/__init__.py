# MIT License (see LICENSE)
"""
sphere_sim - Gravitating spheres bouncing in a walled 3D arena.

Spheres attract each other with scaled Newtonian gravity, are pushed apart
when they overlap and bounce off the walls of the [-1, 1]³ arena with
damping. Rendering is left to the caller, which reads each sphere's
position and radius after every step.

Main entry points:
    - Simulator: Owns the spheres and advances them with step(dt).
    - Sphere: Position, velocity, radius and mass of one body.
    - Arena: Wall bounds, restitution and per-axis clamping.

Submodules:
    - core: Gravity, integrators and conserved quantities.
    - collision: Contact separation and wall response.
    - io: JSON loading of the initial configuration.
    - renderer: Renderer adapters.

Example:
    from sphere_sim import Simulator, Sphere

    sim = Simulator()
    sim.add_body(Sphere(radius=0.3, mass=7.35e17))
    sim.step(1 / 60)
"""
from .simulator import Simulator, sample_bodies
from .types import Sphere
from .collision.walls import Arena
from .profiler import Profiler

__all__ = [
    # Core simulation
    "Simulator",
    "Sphere",
    "Arena",
    "sample_bodies",
    # Tooling
    "Profiler",
]
