# MIT License (see LICENSE)
"""
JSON loading of initial simulator configuration.

Only the starting setup is read here; a running simulation is never saved.

JSON Schema Overview:
---------------------
{
  "gravitational_constant": float,    # Default: 6.6743e-11
  "force_scale": float,               # Default: 1e9
  "integrator": string,               # "semi_implicit" or "explicit"
  "separate_coincident": bool,        # Default: false (unguarded)
  "arena": {                          # Optional
    "lower": float,                   # Default: -1.0
    "upper": float,                   # Default: 1.0
    "restitution": float,             # Default: 0.75
    "clamp_axes": [bool, bool, bool]  # Default: [false, true, false]
  },
  "bodies": [
    {
      "radius": float,                # Required, > 0
      "mass": float,                  # Required, > 0
      "position": [x, y, z],          # Default: [0, 0, 0]
      "velocity": [vx, vy, vz]        # Default: [0, 0, 0]
    }
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..collision.walls import Arena
from ..constants import (
    G,
    DEFAULT_FORCE_SCALE,
    DEFAULT_WALL_RESTITUTION,
    ARENA_LOWER,
    ARENA_UPPER,
)
from ..simulator import Simulator
from ..types import Sphere

logger = logging.getLogger(__name__)


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a configuration file.

    Args:
        path: Absolute or relative path to the JSON file.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_simulator(path: str) -> Simulator:
    """
    Build a ready-to-step Simulator from a JSON file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If a body is missing radius/mass or has invalid values.
    """
    data = load_config_raw(path)
    sim = simulator_from_json(data)
    logger.debug("Loaded %d spheres from %s", len(sim.bodies), path)
    return sim


def simulator_from_json(data: dict[str, Any]) -> Simulator:
    """Construct a Simulator from an already-parsed configuration dict."""
    sim = Simulator(
        gravitational_constant=float(data.get("gravitational_constant", G)),
        force_scale=float(data.get("force_scale", DEFAULT_FORCE_SCALE)),
        arena=arena_from_json(data.get("arena") or {}),
        integrator=data.get("integrator", "semi_implicit"),
        separate_coincident=bool(data.get("separate_coincident", False)),
    )
    for index, body_data in enumerate(data.get("bodies", [])):
        try:
            sim.add_body(body_from_json(body_data))
        except ValueError as e:
            raise ValueError(f"Invalid body at index {index}: {e}") from e
    return sim


def arena_from_json(d: dict[str, Any]) -> Arena:
    """Parse arena settings, filling in defaults for missing keys."""
    return Arena(
        lower=float(d.get("lower", ARENA_LOWER)),
        upper=float(d.get("upper", ARENA_UPPER)),
        restitution=float(d.get("restitution", DEFAULT_WALL_RESTITUTION)),
        clamp_axes=tuple(d.get("clamp_axes", (False, True, False))),
    )


def body_from_json(d: dict[str, Any]) -> Sphere:
    """
    Parse a single sphere descriptor.

    Args:
        d: Dictionary with radius, mass and optional position/velocity.

    Returns:
        A new Sphere (not yet registered with any simulator).
    """
    for key in ("radius", "mass"):
        if key not in d:
            raise ValueError(f"Body definition missing required '{key}' field.")

    return Sphere(
        radius=float(d["radius"]),
        mass=float(d["mass"]),
        position=tuple(d.get("position", [0.0, 0.0, 0.0])),
        velocity=tuple(d.get("velocity", [0.0, 0.0, 0.0])),
    )
