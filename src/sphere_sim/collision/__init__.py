# MIT License (see LICENSE)
"""
Contact and boundary handling.

This subpackage provides:
    - Contact: Sphere-sphere overlap record and positional separation.
    - Arena: Arena bounds with damped wall reflection.

Typical usage:
    from sphere_sim.collision import sphere_sphere_contact, separate, Arena, reflect

    c = sphere_sphere_contact(a, b, dr, dist)
    if c is not None:
        separate(c)
    reflect(a, Arena())
"""
from .contact import Contact, sphere_sphere_contact, separate
from .walls import Arena, reflect

__all__ = [
    # Contact
    "Contact",
    "sphere_sphere_contact",
    "separate",
    # Walls
    "Arena",
    "reflect",
]
