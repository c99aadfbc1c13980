# MIT License (see LICENSE)
"""
Core type definitions for the sphere simulation.

Sphere is the only simulated entity: a point mass with a collision radius.
Its motion follows plain Newtonian mechanics:
  dx/dt = v
  dv/dt = a = F/m
where F is the gravitational pull summed over every other sphere.
"""
from __future__ import annotations
from dataclasses import dataclass, field
import math

import numpy as np

from .util import vec3


@dataclass
class Sphere:
    """
    A sphere with kinematic state, radius and mass.

    Attributes:
        radius: Collision and visual extent. Must be positive.
        mass: Mass used for gravity. Must be positive.
        position: Center of the sphere [x, y, z] in arena units.
        velocity: Linear velocity [vx, vy, vz].
        acceleration: Acceleration accumulated during the current step.
                      Cleared at the start of every step.
        id: Identifier assigned by Simulator.add_body().

    Note:
        Position, velocity and acceleration are converted to float64 numpy
        arrays on init. Radius and mass are fixed for the lifetime of the
        sphere; assigning either after construction raises AttributeError.
    """
    radius: float
    mass: float
    position: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)
    velocity: np.ndarray | tuple[float, float, float] = (0.0, 0.0, 0.0)

    # Runtime state (not user-specified)
    acceleration: np.ndarray = field(default_factory=lambda: np.zeros(3, dtype=np.float64))
    id: int = -1

    def __post_init__(self) -> None:
        """Validate scalars and convert vectors to float64 arrays."""
        object.__setattr__(self, "radius", float(self.radius))
        object.__setattr__(self, "mass", float(self.mass))
        if not math.isfinite(self.radius) or self.radius <= 0:
            raise ValueError(f"Sphere radius must be positive, got {self.radius}")
        if not math.isfinite(self.mass) or self.mass <= 0:
            raise ValueError(f"Sphere mass must be positive, got {self.mass}")
        self.position = vec3(self.position)
        self.velocity = vec3(self.velocity)
        self.acceleration = vec3(self.acceleration)

    def __setattr__(self, name: str, value) -> None:
        """Reject reassigning radius or mass once they are set."""
        if name in ("radius", "mass") and name in self.__dict__:
            raise AttributeError(f"Sphere.{name} is fixed after creation")
        super().__setattr__(name, value)

    @property
    def inv_mass(self) -> float:
        """Inverse mass (1/m)."""
        return 1.0 / self.mass

    def clear_acceleration(self) -> None:
        """Reset accumulated acceleration to zero for the next step."""
        self.acceleration[:] = 0.0

    def apply_force(self, force: np.ndarray) -> None:
        """Accumulate a force as acceleration (a += F/m)."""
        self.acceleration += force * self.inv_mass
