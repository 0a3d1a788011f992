import math

from gravitydrop import constants as C
from gravitydrop.body import CelestialBody
from gravitydrop.physics import system_energy, surface_altitude
from gravitydrop.simulation import Simulation
from gravitydrop.vector2 import Vector2


def test_system_energy_two_bodies():
    central = CelestialBody(0.0, 0.0, 2.0, 0.0, fixed=True)
    ball = CelestialBody(2.0, 0.0, 1.0, 0.0)
    ball.velocity = Vector2(0.0, 3.0)
    ke, pe, total = system_energy([ball], central, g_constant=1.0)
    assert math.isclose(ke, 4.5)
    assert math.isclose(pe, -1.0)
    assert math.isclose(total, 3.5)


def test_bounces_lose_energy():
    sim = Simulation.from_preset("Single Drop", clock=lambda: 0.0)
    e0 = system_energy(sim.falling, sim.central)[2]
    for _ in range(20 * 60):
        sim.tick(1 / 60)
    e1 = system_energy(sim.falling, sim.central)[2]
    # the ball drops roughly 11 m and settles, shedding m * g * h
    assert e1 < e0 - 0.5 * C.BASKETBALL_MASS * 9.8 * 11.0
    assert surface_altitude(sim.falling[0], sim.central) < 1.0
