import math

import numpy as np
import pytest
from sphere_sim.simulator import Simulator
from sphere_sim.types import Sphere
from sphere_sim.core.integrators import semi_implicit_euler_step, explicit_euler_step


def _accelerated():
    s = Sphere(radius=0.1, mass=1.0)
    s.acceleration[:] = (1.0, 0.0, -2.0)
    return s


def test_semi_implicit_uses_updated_velocity():
    """
    v(t+dt) = v + a dt
    x(t+dt) = x + v(t+dt) dt
    """
    s = _accelerated()
    semi_implicit_euler_step(s, 0.5)

    assert np.allclose(s.velocity, [0.5, 0.0, -1.0])
    assert np.allclose(s.position, [0.25, 0.0, -0.5])


def test_explicit_uses_old_velocity():
    s = _accelerated()
    explicit_euler_step(s, 0.5)

    assert np.allclose(s.velocity, [0.5, 0.0, -1.0])
    assert np.allclose(s.position, [0.0, 0.0, 0.0])


def test_simulator_defaults_to_semi_implicit():
    """From rest, one step already moves the sphere by a·dt²."""
    sim = Simulator()
    a = Sphere(radius=0.1, mass=7.35e17, position=(-0.5, 0.0, 0.0))
    sim.add_body(a)
    sim.add_body(Sphere(radius=0.1, mass=7.35e17, position=(0.5, 0.0, 0.0)))

    dt = 0.1
    sim.step(dt)

    assert a.position[0] == pytest.approx(-0.5 + a.acceleration[0] * dt * dt, rel=1e-12)


def test_explicit_integrator_can_be_selected():
    sim = Simulator(integrator="explicit")
    a = Sphere(radius=0.1, mass=7.35e17, position=(-0.5, 0.0, 0.0))
    sim.add_body(a)
    sim.add_body(Sphere(radius=0.1, mass=7.35e17, position=(0.5, 0.0, 0.0)))

    sim.step(0.1)

    assert a.position[0] == -0.5
    assert a.velocity[0] > 0.0


def test_semi_implicit_orbit_is_bounded():
    """
    A light sphere orbiting a heavy one keeps its radius within a few
    percent with semi-implicit Euler, while explicit Euler spirals outward.
    """
    def run(integrator):
        sim = Simulator(integrator=integrator)
        sun = Sphere(radius=0.05, mass=1e20, position=(0.0, 0.0, 0.0))
        # Circular speed v = sqrt(G M / (k r))
        r0 = 0.5
        v0 = math.sqrt(6.6743e-11 * 1e20 / (1e9 * r0))
        planet = Sphere(radius=0.02, mass=1e10, position=(r0, 0.0, 0.0), velocity=(0.0, 0.0, v0))
        sim.add_body(sun); sim.add_body(planet)
        radii = []
        for _ in range(2000):
            sim.step(0.001)
            radii.append(np.linalg.norm(planet.position - sun.position))
        return np.array(radii)

    semi = run("semi_implicit")
    expl = run("explicit")
    print("semi r range", semi.min(), semi.max(), "explicit r max", expl.max())

    assert semi.max() < 0.5 * 1.05 and semi.min() > 0.5 * 0.95
    assert expl.max() > semi.max()


def test_unknown_integrator():
    sim = Simulator(integrator="rk4")
    sim.add_body(Sphere(radius=0.1, mass=1.0))
    with pytest.raises(ValueError, match="Unknown integrator"):
        sim.step(0.01)


@pytest.mark.parametrize("dt", [-0.01, float("nan"), float("inf")])
def test_invalid_dt_rejected(dt):
    sim = Simulator()
    s = Sphere(radius=0.1, mass=1.0, velocity=(0.1, 0.0, 0.0))
    sim.add_body(s)

    with pytest.raises(ValueError):
        sim.step(dt)
    assert sim.steps == 0
    assert np.array_equal(s.position, np.zeros(3))


def test_zero_dt_freezes_motion():
    sim = Simulator()
    s = Sphere(radius=0.1, mass=1.0, position=(0.2, 0.3, 0.4), velocity=(1.0, 1.0, 1.0))
    sim.add_body(s)

    sim.step(0.0)

    assert np.array_equal(s.position, [0.2, 0.3, 0.4])
    assert sim.time == 0.0
    assert sim.steps == 1
