# MIT License (see LICENSE)
"""
The simulator and its step loop.

The Simulator owns a fixed list of spheres and advances them once per
rendered frame. Each step runs four phases in order:
    1. Clear every sphere's acceleration.
    2. Visit every unordered pair: overlapping pairs are pushed apart,
       separated pairs accumulate mutual gravity.
    3. Integrate with semi-implicit Euler.
    4. Reflect off the arena walls (and clamp Y).

Contact correction in phase 2 moves positions that phase 3 moves again,
so the two behaviors are resolved together inside one step.

Structure:
    - Build a Simulator (optionally from descriptors or a JSON file).
    - Call sim.step(dt) once per frame with the wall-clock delta.
    - Read sim.render_state() to draw.
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging
import math
from typing import Any, Iterable

import numpy as np

from .constants import G, DEFAULT_FORCE_SCALE, SAMPLE_RADIUS, SAMPLE_MASS
from .types import Sphere
from .util import norm, is_finite
from .profiler import Profiler
from .core.forces import apply_gravity_pair
from .core.integrators import INTEGRATORS
from .collision.contact import sphere_sphere_contact, separate
from .collision.walls import Arena, reflect

logger = logging.getLogger(__name__)

_COINCIDENT_AXIS = np.array([1.0, 0.0, 0.0])


@dataclass
class Simulator:
    """
    Gravitating spheres in a walled arena.

    Attributes:
        gravitational_constant: G used for pairwise attraction.
        force_scale: Divisor applied to every pairwise force.
        arena: Wall bounds, restitution and per-axis clamping.
        integrator: "semi_implicit" (default) or "explicit".
        separate_coincident: How to treat two spheres at exactly the same
                             point. False keeps the unguarded division, so
                             both turn non-finite. True pushes them apart
                             along +x until they touch. Pairs at any
                             positive distance are unaffected.
        profiler: Optional Profiler for per-phase timing.
    """
    gravitational_constant: float = G
    force_scale: float = DEFAULT_FORCE_SCALE
    arena: Arena = field(default_factory=Arena)
    integrator: str = "semi_implicit"
    separate_coincident: bool = False
    profiler: Profiler | None = None

    # Internal state
    bodies: list[Sphere] = field(default_factory=list)
    time: float = 0.0
    steps: int = 0

    def __post_init__(self) -> None:
        """Validate tuning values and register any bodies passed in."""
        if self.force_scale <= 0:
            raise ValueError(f"force_scale must be positive, got {self.force_scale}")

        self._next_id = 1
        self._non_finite: set[int] = set()

        initial, self.bodies = self.bodies, []
        for body in initial:
            self.add_body(body)

    @classmethod
    def from_descriptors(
        cls,
        descriptors: Iterable[Sphere | dict[str, Any]],
        **config: Any,
    ) -> "Simulator":
        """
        Build a simulator from an ordered list of initial descriptors.

        Args:
            descriptors: Spheres, or dicts with keys position, velocity,
                         radius and mass.
            **config: Simulator settings (arena, force_scale, ...).
        """
        sim = cls(**config)
        for d in descriptors:
            sim.add_body(d if isinstance(d, Sphere) else Sphere(**d))
        return sim

    def add_body(self, body: Sphere) -> int:
        """
        Add a sphere to the simulation.

        The body set is fixed once stepping starts.

        Returns:
            The assigned body ID.
        """
        if not isinstance(body, Sphere):
            raise TypeError(f"Expected a Sphere, got {type(body).__name__}")
        if self.steps > 0:
            raise RuntimeError("Cannot add bodies after the simulation has started")

        body.id = self._next_id
        self._next_id += 1
        self.bodies.append(body)
        logger.debug("Added sphere %d r=%g m=%g at %s", body.id, body.radius, body.mass, body.position)
        return body.id

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _accumulate(self) -> None:
        """
        Clear accelerations, then resolve contacts and gravity pair by pair.

        Corrections are applied immediately, so later pairs see the
        corrected positions.
        """
        for b in self.bodies:
            b.clear_acceleration()

        fallback = _COINCIDENT_AXIS if self.separate_coincident else None
        n = len(self.bodies)
        for i in range(n):
            a = self.bodies[i]
            for j in range(i + 1, n):
                b = self.bodies[j]
                dr = b.position - a.position
                dist = norm(dr)

                contact = sphere_sphere_contact(a, b, dr, dist, coincident_normal=fallback)
                if contact is not None:
                    separate(contact)
                else:
                    apply_gravity_pair(
                        a, b, dr, dist,
                        g_const=self.gravitational_constant,
                        force_scale=self.force_scale,
                    )

    def _integrate(self, dt: float) -> None:
        """Advance every sphere by dt with the configured integrator."""
        try:
            step_fn = INTEGRATORS[self.integrator]
        except KeyError:
            raise ValueError(f"Unknown integrator: {self.integrator}") from None
        for b in self.bodies:
            step_fn(b, dt)

    def _boundaries(self) -> None:
        for b in self.bodies:
            reflect(b, self.arena)

    def _check_finite(self) -> None:
        """Log once per sphere when its state stops being finite."""
        for b in self.bodies:
            if b.id in self._non_finite:
                continue
            if not (is_finite(b.position) and is_finite(b.velocity)):
                self._non_finite.add(b.id)
                logger.warning(
                    "Sphere %d has non-finite state after step %d (position=%s, velocity=%s)",
                    b.id, self.steps, b.position, b.velocity,
                )

    def step(self, dt: float) -> None:
        """
        Advance the simulation by dt seconds.

        Args:
            dt: Elapsed wall-clock time since the previous frame. Must be
                finite and non-negative. Zero is accepted; only contact
                correction moves spheres then.

        Raises:
            ValueError: If dt is negative or not finite.
        """
        dt = float(dt)
        if not math.isfinite(dt):
            raise ValueError(f"dt must be finite, got {dt}")
        if dt < 0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        with self._section("forces"):
            # Coincident spheres divide by zero here unless separate_coincident is set
            with np.errstate(divide="ignore", invalid="ignore"):
                self._accumulate()

        with self._section("integrate"):
            self._integrate(dt)

        with self._section("boundary"):
            self._boundaries()

        self.time += dt
        self.steps += 1
        self._check_finite()

    def render_state(self) -> list[tuple[np.ndarray, float]]:
        """
        Per-sphere (position, radius) for drawing, in insertion order.

        Positions are copies; writing to them does not affect the simulation.
        """
        return [(b.position.copy(), b.radius) for b in self.bodies]


def sample_bodies() -> list[Sphere]:
    """The default scene: a single resting sphere at the origin."""
    return [Sphere(radius=SAMPLE_RADIUS, mass=SAMPLE_MASS)]
