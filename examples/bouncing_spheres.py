import logging

import numpy as np
from sphere_sim import Simulator, Sphere, Profiler
from sphere_sim.renderer import BufferedRenderer

logging.basicConfig(level=logging.INFO)

rng = np.random.default_rng(2024)
prof = Profiler()
sim = Simulator(profiler=prof)
for _ in range(6):
    sim.add_body(Sphere(
        radius=float(rng.uniform(0.05, 0.15)),
        mass=float(rng.uniform(1e17, 8e17)),
        position=rng.uniform(-0.6, 0.6, size=3),
        velocity=rng.uniform(-1.0, 1.0, size=3),
    ))

renderer = BufferedRenderer()
for _ in range(600):
    sim.step(1 / 60)
    renderer.render(sim)

for i in range(len(sim.bodies)):
    traj = renderer.trajectory(i)
    print(f"sphere {i}: y range [{traj[:, 1].min():.3f}, {traj[:, 1].max():.3f}]")
prof.report()
