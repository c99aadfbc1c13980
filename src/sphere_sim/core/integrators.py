# MIT License (see LICENSE)
"""
Time integrators for sphere motion.

Both integrators advance one sphere by dt using the acceleration
accumulated in the current step:

- semi_implicit_euler_step: v += a·dt, then x += v·dt with the new v.
  Symplectic; this is what the simulator uses.
- explicit_euler_step: x += v·dt with the old v, then v += a·dt.
  Kept for comparison only. It gains energy on closed orbits.

Reference:
    https://en.wikipedia.org/wiki/Semi-implicit_Euler_method
"""
from __future__ import annotations

from ..types import Sphere


def semi_implicit_euler_step(body: Sphere, dt: float) -> None:
    """
    Advance body by dt with semi-implicit (symplectic) Euler.

    The order matters: velocity first, then position from the updated
    velocity.

    Args:
        body: Sphere to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    body.velocity = body.velocity + body.acceleration * dt
    body.position = body.position + body.velocity * dt


def explicit_euler_step(body: Sphere, dt: float) -> None:
    """Advance body by dt with forward (explicit) Euler."""
    body.position = body.position + body.velocity * dt
    body.velocity = body.velocity + body.acceleration * dt


INTEGRATORS = {
    "semi_implicit": semi_implicit_euler_step,
    "explicit": explicit_euler_step,
}
