"""Toy gravity simulation: basketballs dropped onto Earth."""

from importlib.metadata import PackageNotFoundError, version

from .vector2 import Vector2
from .body import CelestialBody
from .physics import PhysicsEngine, gravitational_force, surface_altitude, system_energy
from .camera import Camera
from .simulation import Simulation
from .presets import PRESETS, DEFAULT_PRESET
from .constants import (
    G_REAL,
    EARTH_MASS,
    EARTH_RADIUS_METERS,
    BASKETBALL_MASS,
    BASKETBALL_RADIUS_METERS,
    RESTITUTION,
)

try:
    __version__ = version("gravitydrop")
except PackageNotFoundError:
    # Fallback when package metadata is unavailable (e.g. running from source)
    __version__ = "0.0.0"

__all__ = [
    "Vector2",
    "CelestialBody",
    "PhysicsEngine",
    "gravitational_force",
    "surface_altitude",
    "system_energy",
    "Camera",
    "Simulation",
    "PRESETS",
    "DEFAULT_PRESET",
    "G_REAL",
    "EARTH_MASS",
    "EARTH_RADIUS_METERS",
    "BASKETBALL_MASS",
    "BASKETBALL_RADIUS_METERS",
    "RESTITUTION",
    "__version__",
]
