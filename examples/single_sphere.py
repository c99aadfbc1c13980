# examples/single_sphere.py
from sphere_sim import Simulator, sample_bodies
from sphere_sim.renderer import DebugRenderer

sim = Simulator(bodies=sample_bodies())
renderer = DebugRenderer()

for _ in range(3):
    sim.step(1 / 60)
    renderer.render(sim)

print("t:", sim.time)
print("pos:", sim.bodies[0].position)
print("vel:", sim.bodies[0].velocity)
