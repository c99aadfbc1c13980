# MIT License (see LICENSE)
"""
Utility functions for 3D vector math and numeric checks.

All vectors in the simulator are numpy float64 arrays of shape (3,).
The helpers here keep tuple/list inputs and array inputs interchangeable.
"""
from __future__ import annotations

import numpy as np


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Positions and velocities may be given as tuples or lists; everything is
    stored as float64 internally.
    """
    return np.array(x, dtype=np.float64)


def vec3(x) -> np.ndarray:
    """
    Convert to a float64 3-vector, raising ValueError on the wrong shape.
    """
    v = f64(x)
    if v.shape != (3,):
        raise ValueError(f"Expected a 3-component vector, got shape {v.shape}")
    return v


def norm2(v: np.ndarray) -> float:
    """Squared magnitude of a 3D vector."""
    return float(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def norm(v: np.ndarray) -> float:
    """Magnitude (length) of a 3D vector."""
    return float(np.sqrt(norm2(v)))


def is_finite(v) -> bool:
    """True if every component of v is finite (no NaN or inf)."""
    return bool(np.all(np.isfinite(v)))
