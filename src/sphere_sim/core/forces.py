# MIT License (see LICENSE)
"""
Gravitational force between spheres.

The pull of sphere b on sphere a is Newton's law divided by a fixed
scaling divisor k:

    F = (r / |r|) * G * m_a * m_b / (k * |r|²),   r = p_b - p_a

k keeps the force tractable at the arena's unit scale (masses ~1e17 in a
2-unit box). The mirrored force on b is -F (Newton's third law).

Forces are converted to acceleration on the spot; nothing here touches
position or velocity.
"""
from __future__ import annotations

import numpy as np

from ..constants import G, DEFAULT_FORCE_SCALE
from ..types import Sphere


def gravitational_force(
    a: Sphere,
    b: Sphere,
    dr: np.ndarray,
    dist: float,
    g_const: float = G,
    force_scale: float = DEFAULT_FORCE_SCALE,
) -> np.ndarray:
    """
    Force exerted on a by b.

    Args:
        a: Sphere receiving the force.
        b: Sphere exerting the force.
        dr: Separation vector p_b - p_a.
        dist: Length of dr. Zero yields a non-finite result; callers that
              want finite output must clamp it first.
        g_const: Gravitational constant.
        force_scale: Divisor applied to the Newtonian magnitude.
    """
    direction = dr / dist
    return direction * (g_const * a.mass * b.mass) / (force_scale * dist * dist)


def apply_gravity_pair(
    a: Sphere,
    b: Sphere,
    dr: np.ndarray,
    dist: float,
    g_const: float = G,
    force_scale: float = DEFAULT_FORCE_SCALE,
) -> None:
    """
    Accumulate mutual gravity for one unordered pair.

    a receives F and b receives -F, each divided by its own mass.
    """
    f = gravitational_force(a, b, dr, dist, g_const, force_scale)
    a.apply_force(f)
    b.apply_force(-f)
