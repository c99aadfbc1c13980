# MIT License (see LICENSE)
"""
Sphere-sphere contact detection and positional resolution.

Contacts are resolved by projection only: overlapping spheres are pushed
apart along the line between their centers until they just touch, each
moving by half the overlap. No impulse is applied, so velocities and
accelerations are untouched by body-body contact.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..types import Sphere


@dataclass
class Contact:
    """
    An overlap between two spheres.

    Attributes:
        a: First sphere.
        b: Second sphere.
        normal: Unit vector from a toward b (dr / dist).
        penetration: Overlap depth r_a + r_b - dist (positive when touching).
    """
    a: Sphere
    b: Sphere
    normal: np.ndarray
    penetration: float


def sphere_sphere_contact(
    a: Sphere,
    b: Sphere,
    dr: np.ndarray,
    dist: float,
    coincident_normal: np.ndarray | None = None,
) -> Contact | None:
    """
    Detect overlap between two spheres.

    Args:
        a: First sphere.
        b: Second sphere.
        dr: Separation vector p_b - p_a.
        dist: Length of dr.
        coincident_normal: Unit vector used when dist == 0. Without it the
                           normal of coincident spheres is non-finite.

    Returns:
        Contact if dist < r_a + r_b, None otherwise.
    """
    R = a.radius + b.radius
    if dist >= R:
        return None
    if dist == 0.0 and coincident_normal is not None:
        normal = coincident_normal
    else:
        normal = dr / dist
    return Contact(a=a, b=b, normal=normal, penetration=R - dist)


def separate(contact: Contact) -> None:
    """
    Push both spheres apart by half the penetration each.

    After this call the centers are exactly r_a + r_b apart along the
    original normal (up to round-off).
    """
    correction = contact.normal * (0.5 * contact.penetration)
    contact.a.position = contact.a.position - correction
    contact.b.position = contact.b.position + correction
