"""Kinematic state of a single body and its explicit time step."""

import math

from . import constants as C
from .vector2 import Vector2


class CelestialBody:
    """Mass-bearing sphere integrated with semi-implicit Euler."""

    ID_counter = 0

    def __init__(
        self,
        x,
        y,
        mass,
        radius,
        color=C.WHITE,
        fixed: bool = False,
        name=None,
    ):
        """Create a body at rest.

        Parameters
        ----------
        x, y : float
            Initial position in metres.
        mass : float
            Mass in kilograms. Must be finite and strictly positive.
        radius : float
            Physical radius in metres. Must be finite and non-negative.
        color : tuple
            Display colour, passed through untouched to the renderer.
        fixed : bool, optional
            If True the body ignores applied forces and never moves.
        name : str, optional
            Label used in logs. Defaults to ``"Body <id>"``.
        """
        mass = float(mass)
        radius = float(radius)
        if not math.isfinite(mass) or mass <= 0:
            raise ValueError(f"mass must be a positive finite number, got {mass}")
        if not math.isfinite(radius) or radius < 0:
            raise ValueError(f"radius must be a non-negative finite number, got {radius}")

        self.position = Vector2(x, y)
        self.velocity = Vector2(0.0, 0.0)
        self.acceleration = Vector2(0.0, 0.0)
        self.mass = mass
        self.radius = radius
        self.color = color
        self.fixed = fixed
        self.id = CelestialBody.ID_counter
        CelestialBody.ID_counter += 1
        self.name = name if name else f"Body {self.id}"

    @staticmethod
    def from_config(cfg):
        """Create a body from a preset entry."""
        body = CelestialBody(
            cfg.get("x", 0.0),
            cfg.get("y", 0.0),
            cfg["mass"],
            cfg.get("radius", 0.0),
            color=cfg.get("color", C.WHITE),
            fixed=cfg.get("fixed", False),
            name=cfg.get("name"),
        )
        body.velocity = Vector2(cfg.get("vx", 0.0), cfg.get("vy", 0.0))
        return body

    def apply_force(self, force: Vector2) -> None:
        """Accumulate ``force / mass`` into this tick's acceleration."""
        if self.fixed:
            return
        self.acceleration = self.acceleration.add(force.scale(1.0 / self.mass))

    def update(self, dt: float) -> None:
        """Advance velocity, then position with the new velocity, then clear acceleration."""
        if not self.fixed:
            self.velocity = self.velocity.add(self.acceleration.scale(dt))
            self.position = self.position.add(self.velocity.scale(dt))
        self.acceleration = Vector2(0.0, 0.0)

    def speed(self) -> float:
        return self.velocity.magnitude()

    def __repr__(self):
        return (
            f"CelestialBody(name={self.name!r}, mass={self.mass}, radius={self.radius}, "
            f"position=({self.position.x}, {self.position.y}), "
            f"velocity=({self.velocity.x}, {self.velocity.y}), fixed={self.fixed})"
        )
