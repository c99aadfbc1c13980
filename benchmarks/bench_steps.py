"""
Microbenchmark: time per step vs number of spheres (all-pairs, O(n²)).
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from sphere_sim import Simulator, Sphere, Profiler
from sphere_sim.renderer import NullRenderer


def run(n: int, steps: int = 300):
    prof = Profiler()
    sim = Simulator(profiler=prof)
    renderer = NullRenderer()

    rng = np.random.default_rng(12345)
    for _ in range(n):
        sim.add_body(Sphere(
            radius=0.02,
            mass=1e17,
            position=rng.uniform(-0.9, 0.9, size=3),
            velocity=rng.normal(scale=0.1, size=3),
        ))

    # warmup
    for _ in range(30):
        sim.step(1 / 60)

    prof.stats.clear()
    t0 = time.perf_counter()
    for _ in range(steps):
        sim.step(1 / 60)
        renderer.render(sim)
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    return per_step, prof.stats.summary()


if __name__ == "__main__":
    for n in [2, 8, 32, 64, 128]:
        per_step, summary = run(n)
        print(f"N={n:4d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["forces", "integrate", "boundary"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
