import math

import numpy as np
from sphere_sim import Simulator, Sphere
from sphere_sim.constants import G, DEFAULT_FORCE_SCALE
from sphere_sim.core.invariants import kinetic_energy, potential_energy, linear_momentum

M, m, r0 = 1e20, 1e12, 0.5
v0 = math.sqrt(G * M / (DEFAULT_FORCE_SCALE * r0))

sim = Simulator()
sun = Sphere(radius=0.08, mass=M)
planet = Sphere(radius=0.03, mass=m, position=(r0, 0.0, 0.0), velocity=(0.0, 0.0, v0))
sim.add_body(sun); sim.add_body(planet)

e0 = kinetic_energy(sim.bodies) + potential_energy(sim.bodies)
p0 = linear_momentum(sim.bodies)

for _ in range(5000):
    sim.step(1 / 1000)

e1 = kinetic_energy(sim.bodies) + potential_energy(sim.bodies)
p1 = linear_momentum(sim.bodies)

print("orbit radius", np.linalg.norm(planet.position - sun.position), "start", r0)
print("E0", e0, "E1", e1, "dE rel", abs(e1 - e0) / abs(e0))
print("p0", p0, "p1", p1)
