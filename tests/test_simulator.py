import numpy as np
import pytest
from sphere_sim import Simulator, Sphere, Profiler, sample_bodies
from sphere_sim.constants import SAMPLE_MASS, SAMPLE_RADIUS


def test_ids_assigned_in_order():
    sim = Simulator()
    ids = [sim.add_body(Sphere(radius=0.1, mass=1.0, position=(x, 0.0, 0.0))) for x in (-0.5, 0.0, 0.5)]
    assert ids == [1, 2, 3]
    assert [b.id for b in sim.bodies] == [1, 2, 3]


def test_bodies_passed_to_constructor_are_registered():
    sim = Simulator(bodies=sample_bodies())
    assert len(sim.bodies) == 1
    assert sim.bodies[0].id == 1


def test_from_descriptors():
    sim = Simulator.from_descriptors(
        [
            {"position": (-0.5, 0.0, 0.0), "velocity": (0.0, 0.1, 0.0), "radius": 0.1, "mass": 1e17},
            Sphere(radius=0.2, mass=2e17, position=(0.5, 0.0, 0.0)),
        ],
        force_scale=2e9,
    )
    assert sim.force_scale == 2e9
    assert [b.radius for b in sim.bodies] == [0.1, 0.2]
    assert np.array_equal(sim.bodies[0].velocity, [0.0, 0.1, 0.0])


def test_body_set_fixed_after_first_step():
    sim = Simulator(bodies=sample_bodies())
    sim.step(1 / 60)
    with pytest.raises(RuntimeError):
        sim.add_body(Sphere(radius=0.1, mass=1.0))


def test_add_body_rejects_non_spheres():
    sim = Simulator()
    with pytest.raises(TypeError):
        sim.add_body({"radius": 0.1, "mass": 1.0})


@pytest.mark.parametrize("radius,mass", [(0.0, 1.0), (-0.1, 1.0), (0.1, 0.0), (0.1, -5.0), (float("nan"), 1.0)])
def test_sphere_requires_positive_radius_and_mass(radius, mass):
    with pytest.raises(ValueError):
        Sphere(radius=radius, mass=mass)


def test_sphere_requires_3d_vectors():
    with pytest.raises(ValueError):
        Sphere(radius=0.1, mass=1.0, position=(0.0, 0.0))


@pytest.mark.parametrize("name", ["radius", "mass"])
def test_radius_and_mass_are_read_only(name):
    s = Sphere(radius=0.1, mass=1.0)
    with pytest.raises(AttributeError):
        setattr(s, name, -1.0)
    assert (s.radius, s.mass) == (0.1, 1.0)

    s.position = (0.5, 0.0, 0.0)
    s.velocity[1] = 2.0
    assert s.velocity[1] == 2.0


def test_sample_scene():
    (s,) = sample_bodies()
    assert s.radius == SAMPLE_RADIUS == 0.3
    assert s.mass == SAMPLE_MASS == 7.35e17
    assert np.array_equal(s.position, np.zeros(3))


def test_time_and_step_count():
    sim = Simulator(bodies=sample_bodies())
    for _ in range(4):
        sim.step(0.25)
    assert sim.steps == 4
    assert sim.time == pytest.approx(1.0)


def test_render_state_is_a_copy():
    sim = Simulator(bodies=sample_bodies())
    sim.step(1 / 60)

    (pos, radius), = sim.render_state()
    assert radius == 0.3
    pos[:] = 5.0
    assert np.array_equal(sim.bodies[0].position, np.zeros(3))


def test_radius_and_mass_unchanged_by_stepping():
    sim = Simulator()
    sim.add_body(Sphere(radius=0.1, mass=3e17, position=(-0.05, 0.0, 0.0), velocity=(4.0, 0.0, 0.0)))
    sim.add_body(Sphere(radius=0.2, mass=5e17, position=(0.05, 0.0, 0.0)))
    for _ in range(50):
        sim.step(1 / 30)
    assert [(b.radius, b.mass) for b in sim.bodies] == [(0.1, 3e17), (0.2, 5e17)]


def test_profiler_sections():
    prof = Profiler()
    sim = Simulator(bodies=sample_bodies(), profiler=prof)
    for _ in range(3):
        sim.step(1 / 60)

    summary = prof.stats.summary()
    assert set(summary) == {"forces", "integrate", "boundary"}
    assert all(row["n"] == 3 for row in summary.values())
    assert all(row["max_ms"] >= row["mean_ms"] >= 0.0 for row in summary.values())
