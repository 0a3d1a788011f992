"""Immutable two dimensional vector used by the physics core."""

import math

import numpy as np


class Vector2:
    """2-D vector whose arithmetic always returns a new instance."""

    __slots__ = ("_x", "_y")

    def __init__(self, x=0.0, y=0.0):
        self._x = float(x)
        self._y = float(y)

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def add(self, other: "Vector2") -> "Vector2":
        return Vector2(self._x + other.x, self._y + other.y)

    def subtract(self, other: "Vector2") -> "Vector2":
        return Vector2(self._x - other.x, self._y - other.y)

    def scale(self, k: float) -> "Vector2":
        return Vector2(self._x * k, self._y * k)

    def dot(self, other: "Vector2") -> float:
        return self._x * other.x + self._y * other.y

    def magnitude(self) -> float:
        return math.hypot(self._x, self._y)

    def normalize(self) -> "Vector2":
        """Return the unit vector, or the zero vector when the length is zero."""
        mag = self.magnitude()
        if mag > 0:
            return Vector2(self._x / mag, self._y / mag)
        return Vector2(0.0, 0.0)

    def distance_to(self, other: "Vector2") -> float:
        return self.subtract(other).magnitude()

    def as_array(self) -> np.ndarray:
        return np.array([self._x, self._y], dtype=float)

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.subtract(other)

    def __mul__(self, k):
        return self.scale(k)

    __rmul__ = __mul__

    def __neg__(self):
        return Vector2(-self._x, -self._y)

    def __iter__(self):
        yield self._x
        yield self._y

    def __eq__(self, other):
        if not isinstance(other, Vector2):
            return NotImplemented
        return self._x == other.x and self._y == other.y

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Vector2({self._x}, {self._y})"
