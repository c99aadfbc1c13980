# MIT License (see LICENSE)
"""
Arena boundaries and wall response.

The arena is an axis-aligned cube [lower, upper]³. A sphere touches a wall
when its bounding extent crosses it on some axis:

    p + r > upper   or   p - r < lower

On that axis the velocity component is reversed and damped by the
restitution coefficient (v → -e·v). The check runs every step and does not
look at the direction of travel: a sphere still outside the wall on the
next step is reflected again.

Positions are only clamped on the axes listed in Arena.clamp_axes. The
default clamps Y alone, which keeps spheres from sinking through the floor
and ceiling; X and Z are left unclamped, so a fast sphere can tunnel past
those walls.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..constants import ARENA_LOWER, ARENA_UPPER, DEFAULT_WALL_RESTITUTION
from ..types import Sphere


@dataclass(frozen=True)
class Arena:
    """
    Bounding box and wall response settings.

    Attributes:
        lower: Minimum coordinate on every axis.
        upper: Maximum coordinate on every axis.
        restitution: Fraction of the normal velocity kept after a bounce.
        clamp_axes: Per-axis (x, y, z) flag. When set, a crossing also
                    clamps the center into [lower + r, upper - r].
    """
    lower: float = ARENA_LOWER
    upper: float = ARENA_UPPER
    restitution: float = DEFAULT_WALL_RESTITUTION
    clamp_axes: tuple[bool, bool, bool] = (False, True, False)

    def __post_init__(self) -> None:
        if self.lower >= self.upper:
            raise ValueError(f"Arena lower bound must be below upper, got ({self.lower}, {self.upper})")
        if len(self.clamp_axes) != 3:
            raise ValueError(f"clamp_axes needs one flag per axis, got {self.clamp_axes}")
        object.__setattr__(self, "clamp_axes", tuple(bool(c) for c in self.clamp_axes))

    def crossing(self, body: Sphere) -> np.ndarray:
        """Boolean mask of the axes on which body touches or passes a wall."""
        p, r = body.position, body.radius
        return (p + r > self.upper) | (p - r < self.lower)

    def contains(self, body: Sphere) -> bool:
        """True if the whole sphere lies inside the arena."""
        return not bool(np.any(self.crossing(body)))


def reflect(body: Sphere, arena: Arena) -> np.ndarray:
    """
    Apply wall response to a single sphere.

    Reflects and damps the velocity on every crossing axis, then clamps the
    position on the crossing axes the arena marks for clamping.

    Returns:
        The crossing mask (which axes were hit this step).
    """
    hit = arena.crossing(body)
    if not hit.any():
        return hit

    r = body.radius
    for axis in range(3):
        if not hit[axis]:
            continue
        body.velocity[axis] = -body.velocity[axis] * arena.restitution
        if arena.clamp_axes[axis]:
            body.position[axis] = np.clip(body.position[axis], arena.lower + r, arena.upper - r)
    return hit
