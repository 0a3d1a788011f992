import time
import numpy as np

from gravitydrop.body import CelestialBody
from gravitydrop.simulation import Simulation
from gravitydrop.constants import EARTH_MASS, EARTH_RADIUS_METERS, BASKETBALL_MASS, BASKETBALL_RADIUS_METERS


def build(n, seed=0):
    rng = np.random.default_rng(seed)
    earth = CelestialBody(0.0, 0.0, EARTH_MASS, EARTH_RADIUS_METERS, fixed=True, name="Earth")
    angles = rng.uniform(0.0, 2 * np.pi, n)
    heights = rng.uniform(1.0, 50.0, n)
    falling = [
        CelestialBody(
            np.cos(a) * (EARTH_RADIUS_METERS + h),
            np.sin(a) * (EARTH_RADIUS_METERS + h),
            BASKETBALL_MASS,
            BASKETBALL_RADIUS_METERS,
        )
        for a, h in zip(angles, heights)
    ]
    return Simulation(earth, falling, clock=lambda: 0.0)


if __name__ == "__main__":
    N = 1000
    FRAMES = 600
    sim = build(N)

    t0 = time.time()
    for _ in range(FRAMES):
        sim.tick(1 / 60)
    t1 = time.time()

    min_gap = min(
        b.position.distance_to(sim.central.position) - (sim.central.radius + b.radius)
        for b in sim.falling
    )
    assert min_gap >= 0.0
    print(f"{N} bodies x {FRAMES} frames: {t1 - t0:.3f}s")
    print(f"Per frame  : {(t1 - t0) / FRAMES * 1000:.2f} ms")
