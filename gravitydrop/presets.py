"""Named starting scenarios.

Each preset is a list of body configs. Exactly one entry carries
``"central": True``; the rest fall toward it in list order.
"""
from . import constants as C


def _earth():
    return {
        "name": "Earth",
        "mass": C.EARTH_MASS,
        "radius": C.EARTH_RADIUS_METERS,
        "x": 0.0,
        "y": 0.0,
        "color": C.EARTH_COLOR,
        "fixed": True,
        "central": True,
    }


def _basketball(height, x=0.0, color=C.BALL_COLORS[0], name=None):
    return {
        "name": name or f"Ball {height:g} m",
        "mass": C.BASKETBALL_MASS,
        "radius": C.BASKETBALL_RADIUS_METERS,
        "x": x,
        "y": -C.EARTH_RADIUS_METERS - height,
        "color": color,
    }


# Eleven balls dropped from 5 m to 15 m, spaced 1 m apart horizontally.
_DROP_ROW = [
    _basketball(i, x=(i - 10) * 1.0, color=C.BALL_COLORS[i - 5])
    for i in range(5, 16)
]

PRESETS = {
    "Basketball Drop": [_earth()] + _DROP_ROW,
    "Single Drop": [_earth(), _basketball(11, name="Ball")],
    "Tangential Throw": [
        _earth(),
        dict(_basketball(10, name="Thrown"), vx=5.0),
    ],
}

DEFAULT_PRESET = "Basketball Drop"
