# MIT License (see LICENSE)
"""
Conserved quantities used for verifying simulation correctness.

Between two spheres that never touch and never reach a wall, pairwise
gravity is the only interaction. Total linear momentum is then conserved
exactly in theory and to round-off in practice; total energy drifts only
with integration error. Wall bounces (restitution < 1) and contact
correction break both.
"""
from __future__ import annotations
import numpy as np

from ..constants import G, DEFAULT_FORCE_SCALE
from ..types import Sphere
from ..util import norm


def kinetic_energy(bodies: list[Sphere]) -> float:
    """
    Total kinetic energy of a set of spheres.

    T = Σ 0.5 * m * v²
    """
    ke = 0.0
    for b in bodies:
        ke += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
    return ke


def potential_energy(
    bodies: list[Sphere],
    g_const: float = G,
    force_scale: float = DEFAULT_FORCE_SCALE,
) -> float:
    """
    Total gravitational potential energy under the scaled force law.

    U = -Σ_{i<j} G * m_i * m_j / (k * |r_ij|)
    """
    u = 0.0
    n = len(bodies)
    for i in range(n):
        for j in range(i + 1, n):
            dist = norm(bodies[j].position - bodies[i].position)
            u -= g_const * bodies[i].mass * bodies[j].mass / (force_scale * dist)
    return u


def linear_momentum(bodies: list[Sphere]) -> np.ndarray:
    """
    Total linear momentum P = Σ m * v as a 3-vector.
    """
    p = np.zeros(3, dtype=np.float64)
    for b in bodies:
        p += b.mass * b.velocity
    return p
