# MIT License (see LICENSE)
"""
Core physics components.

This subpackage provides:
    - Forces: scaled pairwise Newtonian gravity.
    - Integrators: semi-implicit Euler (default) and explicit Euler.
    - Invariants: momentum and energy diagnostics.

Typical usage:
    from sphere_sim.core import apply_gravity_pair, semi_implicit_euler_step

    apply_gravity_pair(a, b, dr, dist)
    semi_implicit_euler_step(a, dt=1/60)
"""
from .forces import gravitational_force, apply_gravity_pair
from .integrators import INTEGRATORS, semi_implicit_euler_step, explicit_euler_step
from .invariants import kinetic_energy, potential_energy, linear_momentum

__all__ = [
    # Forces
    "gravitational_force",
    "apply_gravity_pair",
    # Integrators
    "INTEGRATORS",
    "semi_implicit_euler_step",
    "explicit_euler_step",
    # Invariants
    "kinetic_energy",
    "potential_energy",
    "linear_momentum",
]
