# MIT License (see LICENSE)
"""
Configuration input for the simulator.

Typical usage:
    from sphere_sim.io import load_simulator

    sim = load_simulator("scene.json")
    sim.step(1 / 60)
"""
from .json_io import (
    load_config_raw,
    load_simulator,
    simulator_from_json,
    arena_from_json,
    body_from_json,
)

__all__ = [
    "load_config_raw",
    "load_simulator",
    "simulator_from_json",
    "arena_from_json",
    "body_from_json",
]
