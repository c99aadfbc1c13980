# MIT License (see LICENSE)
"""
Physical constants and tuning defaults used by the simulator.

G is the real gravitational constant. The force scale and the sample mass
are tuning values with no physical derivation: together they make gravity
visible inside a 2-unit arena, so the simulator exposes them as settings.
"""
from __future__ import annotations

# Newtonian gravitational constant in N·m²/kg².
# Reference: https://physics.nist.gov/cgi-bin/cuu/Value?bg
G: float = 6.6743e-11

# Divisor applied to every pairwise gravitational force.
DEFAULT_FORCE_SCALE: float = 1e9

# Velocity fraction kept (with sign reversal) after a wall bounce.
DEFAULT_WALL_RESTITUTION: float = 0.75

# Arena extent on every axis.
ARENA_LOWER: float = -1.0
ARENA_UPPER: float = 1.0

# Sample sphere: radius 0.3 at the origin.
SAMPLE_RADIUS: float = 0.3
SAMPLE_MASS: float = 7.35e17
