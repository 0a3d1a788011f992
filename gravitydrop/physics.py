"""Newtonian force law and energy diagnostics.

Only body-versus-attractor forces are modelled; falling bodies never
attract one another.
"""
from .constants import G_REAL
from .vector2 import Vector2


def gravitational_force(body, attractor, g_constant=G_REAL) -> Vector2:
    """Return the force ``attractor`` exerts on ``body``.

    The vector points from ``body`` toward ``attractor`` with magnitude
    ``G * m1 * m2 / r**2``. Coincident centres, including separations
    whose square underflows, yield the zero vector.
    """
    direction = attractor.position.subtract(body.position)
    distance = direction.magnitude()
    dist_sq = distance * distance
    if dist_sq == 0:
        return Vector2(0.0, 0.0)
    magnitude = g_constant * body.mass * attractor.mass / dist_sq
    return direction.normalize().scale(magnitude)


class PhysicsEngine:
    """Stateless force law bound to a gravitational constant."""

    def __init__(self, g_constant=G_REAL):
        self.g_constant = float(g_constant)

    def force(self, body, attractor) -> Vector2:
        return gravitational_force(body, attractor, self.g_constant)


def surface_altitude(body, central) -> float:
    """Height of ``body``'s centre above the surface of ``central``."""
    return body.position.distance_to(central.position) - central.radius


def system_energy(falling, central, g_constant=G_REAL):
    """Return kinetic, potential and total energy of ``falling`` around ``central``."""
    kinetic = 0.0
    potential = 0.0
    for b in falling:
        if b.fixed:
            continue
        v = b.velocity
        kinetic += 0.5 * b.mass * v.dot(v)
        r = b.position.distance_to(central.position)
        if r == 0:
            continue
        potential -= g_constant * b.mass * central.mass / r
    return kinetic, potential, kinetic + potential
