import math

import pytest

from gravitydrop import constants as C
from gravitydrop.body import CelestialBody
from gravitydrop.presets import PRESETS
from gravitydrop.simulation import Simulation
from gravitydrop.vector2 import Vector2

R = C.EARTH_RADIUS_METERS


def _fixed_clock():
    return 0.0


def test_load_preset_creates_bodies():
    sim = Simulation.from_preset("Basketball Drop", clock=_fixed_clock)
    assert len(sim.falling) == len(PRESETS["Basketball Drop"]) - 1 == 11
    assert sim.central.name == "Earth"
    assert sim.central.fixed
    assert all(b.velocity == Vector2(0.0, 0.0) for b in sim.falling)
    heights = [-(b.position.y + R) for b in sim.falling]
    assert heights == pytest.approx([float(i) for i in range(5, 16)])


def test_unknown_preset():
    with pytest.raises(KeyError):
        Simulation(clock=_fixed_clock).load_preset("Moon Landing")


def test_drop_bounces_and_never_penetrates():
    earth = CelestialBody(0.0, 0.0, C.EARTH_MASS, R, fixed=True)
    ball = CelestialBody(0.0, -(R + 11.0), C.BASKETBALL_MASS, C.BASKETBALL_RADIUS_METERS)
    sim = Simulation(earth, [ball], clock=_fixed_clock)
    min_distance = earth.radius + ball.radius

    fell = False
    bounced = False
    for _ in range(6 * 60):
        sim.tick(1 / 60)
        assert ball.position.distance_to(earth.position) >= min_distance
        if not bounced and ball.velocity.y > 0:
            fell = True
        if fell and ball.velocity.y < 0:
            bounced = True
    assert fell
    assert bounced
    assert math.isclose(sim.simulation_time, 6.0, rel_tol=1e-9)


def test_fall_matches_free_fall_before_contact():
    earth = CelestialBody(0.0, 0.0, C.EARTH_MASS, R, fixed=True)
    ball = CelestialBody(0.0, -(R + 11.0), C.BASKETBALL_MASS, C.BASKETBALL_RADIUS_METERS)
    sim = Simulation(earth, [ball], clock=_fixed_clock)
    for _ in range(60):
        sim.tick(1 / 60)
    g = C.G_REAL * C.EARTH_MASS / (R + 11.0) ** 2
    assert ball.velocity.y == pytest.approx(g, rel=1e-3)
    assert ball.velocity.x == 0.0


def test_bodies_are_independent():
    earth = CelestialBody(0.0, 0.0, C.EARTH_MASS, R, fixed=True)
    lone = CelestialBody(0.0, -(R + 10.0), C.BASKETBALL_MASS, C.BASKETBALL_RADIUS_METERS)
    a = Simulation(earth, [lone], clock=_fixed_clock)
    b = Simulation.from_preset("Basketball Drop", clock=_fixed_clock)
    for _ in range(30):
        a.tick(1 / 60)
        b.tick(1 / 60)
    # ball 5 in the row starts 10 m up, directly above the centre
    assert b.falling[5].position.x == 0.0
    assert b.falling[5].position.y == lone.position.y
    assert b.falling[5].velocity == lone.velocity


def test_tick_samples_clock_and_clamps_stalls():
    # construction, preset load, then one reading per tick
    times = iter([0.0, 0.0, 0.01, 10.0])
    sim = Simulation.from_preset("Single Drop", clock=lambda: next(times))
    sim.tick()
    assert sim.simulation_time == pytest.approx(0.01)
    sim.tick()
    assert sim.simulation_time == pytest.approx(0.01 + C.MAX_FRAME_TIME)


def test_large_step_is_substepped():
    steps = []
    sim = Simulation.from_preset("Single Drop", clock=_fixed_clock, max_frame_time=None)
    original = sim.step
    sim.step = lambda dt: (steps.append(dt), original(dt))
    sim.tick(0.1)
    assert len(steps) == 6
    assert sum(steps) == pytest.approx(0.1)
    assert max(steps) == pytest.approx(C.MAX_SUBSTEP)


def test_negative_dt_rejected():
    sim = Simulation.from_preset("Single Drop", clock=_fixed_clock)
    with pytest.raises(ValueError):
        sim.tick(-0.1)


def test_paused_simulation_does_not_move():
    sim = Simulation.from_preset("Single Drop", clock=_fixed_clock)
    start = sim.falling[0].position
    sim.paused = True
    sim.tick(1 / 60)
    assert sim.falling[0].position == start
    assert sim.simulation_time == 0.0


def test_camera_initialised_once():
    sim = Simulation.from_preset("Basketball Drop", clock=_fixed_clock)
    assert sim.zoom_factor == C.ZOOM_DEFAULT
    sim.tick(1 / 60)
    assert sim.zoom_factor == pytest.approx(C.TARGET_BALL_PIXELS / C.BASKETBALL_RADIUS_METERS)
    focus = sim.falling[5]
    assert (sim.center_x, sim.center_y) == (focus.position.x, focus.position.y)
    centre = (sim.center_x, sim.center_y)
    sim.tick(1 / 60)
    assert (sim.center_x, sim.center_y) == centre
    assert focus.position.y != centre[1]


def test_user_zoom_before_first_tick_is_kept():
    sim = Simulation.from_preset("Basketball Drop", clock=_fixed_clock)
    sim.adjust_zoom("in")
    sim.tick(1 / 60)
    assert sim.zoom_factor == pytest.approx(C.ZOOM_DEFAULT * C.ZOOM_STEP)


def test_pan_after_tick():
    sim = Simulation.from_preset("Basketball Drop", clock=_fixed_clock)
    sim.tick(1 / 60)
    x0 = sim.center_x
    sim.pan(sim.zoom_factor * 2.0, 0.0)
    assert sim.center_x == pytest.approx(x0 - 2.0)


def test_zoom_saturates_through_simulation():
    sim = Simulation.from_preset("Single Drop", clock=_fixed_clock)
    for _ in range(500):
        sim.adjust_zoom("in")
    assert sim.zoom_factor == C.ZOOM_MAX
    for _ in range(1000):
        sim.adjust_zoom("out")
    assert sim.zoom_factor == C.ZOOM_MIN


def test_empty_simulation_ticks():
    earth = CelestialBody(0.0, 0.0, C.EARTH_MASS, R, fixed=True)
    sim = Simulation(earth, [], clock=_fixed_clock)
    sim.tick(1 / 60)
    assert sim.zoom_factor == C.ZOOM_DEFAULT
    assert sim.status()["altitude"] is None


def test_status_reports_first_ball():
    sim = Simulation.from_preset("Single Drop", clock=_fixed_clock)
    info = sim.status()
    assert info["count"] == 1
    assert info["altitude"] == pytest.approx(11.0)
    assert info["speed"] == 0.0
    expected = C.G_REAL * C.EARTH_MASS * C.BASKETBALL_MASS / (R + 11.0) ** 2
    assert info["gravity"] == pytest.approx(expected, rel=1e-12)


def test_reset_restores_preset():
    sim = Simulation.from_preset("Single Drop", clock=_fixed_clock)
    start = sim.falling[0].position
    for _ in range(10):
        sim.tick(1 / 60)
    sim.reset()
    assert sim.falling[0].position == start
    assert sim.simulation_time == 0.0


def test_g_constant_keyword_builds_engine():
    earth = CelestialBody(0.0, 0.0, 4.0, 0.0, fixed=True)
    ball = CelestialBody(2.0, 0.0, 1.0, 0.0)
    sim = Simulation(earth, [ball], g_constant=1.0, clock=_fixed_clock)
    assert sim.engine.g_constant == 1.0
    assert sim.status()["gravity"] == pytest.approx(1.0)
    assert Simulation(clock=_fixed_clock).engine.g_constant == C.G_REAL


def test_reset_restarts_default_names():
    CelestialBody(0.0, 0.0, 1.0, 0.0)
    sim = Simulation.from_preset("Tangential Throw", clock=_fixed_clock)
    sim.reset()
    first = [b.id for b in [sim.central] + sim.falling]
    sim.reset()
    assert [b.id for b in [sim.central] + sim.falling] == first == [0, 1]
