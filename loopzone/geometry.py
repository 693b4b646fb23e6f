"""Planar vectors, integer rectangles and angle helpers used throughout the game."""

from __future__ import annotations

import math
from dataclasses import dataclass

PI = 3.1415926535
"""The value of pi the game uses for its angle conversions."""

_NORMALIZE_EPSILON = 0.00000001


@dataclass(frozen=True)
class Vector:
    """An immutable 2D vector of floats."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector) -> Vector:
        return Vector(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vector:
        return Vector(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vector:
        return Vector(self.x / value, self.y / value)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y)

    def length_squared(self) -> float:
        """Squared length; cheaper than :meth:`length` for comparisons."""
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Vector:
        """Unit vector in the same direction; a near-zero vector is returned unchanged."""
        size = self.length()
        if size < _NORMALIZE_EPSILON:
            return self
        return Vector(self.x / size, self.y / size)

    def dot(self, other: Vector) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector) -> float:
        return self.x * other.y - other.x * self.y


@dataclass(frozen=True)
class Rect:
    """An integer rectangle with exclusive right and bottom edges."""

    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_center(cls, center: Vector, half_width: float, half_height: float) -> Rect:
        """Build a rectangle around ``center``, truncating each edge toward zero."""
        return cls(
            int(center.x - half_width),
            int(center.y - half_height),
            int(center.x + half_width),
            int(center.y + half_height),
        )

    def intersects(self, other: Rect) -> bool:
        """True when the two rectangles share a non-empty area."""
        left = max(self.left, other.left)
        right = min(self.right, other.right)
        top = max(self.top, other.top)
        bottom = min(self.bottom, other.bottom)
        return left < right and top < bottom


@dataclass
class Stat:
    """Basic combat statistics of a game object."""

    hp: int = 0
    max_hp: int = 0
    speed: float = 0.0


class MyDegree:
    """An angle kept both in game degrees and in window (drawing) degrees.

    The window angle is ``450 - degree`` when built from a game angle.
    """

    __slots__ = ("my_degree", "window_degree")

    def __init__(self, degree: float | None = None) -> None:
        if degree is None:
            self.my_degree = 0.0
            self.window_degree = 0.0
        else:
            self.my_degree = float(degree)
            self.window_degree = 450 - self.my_degree

    @classmethod
    def _raw(cls, my_degree: float, window_degree: float) -> MyDegree:
        result = cls()
        result.my_degree = my_degree
        result.window_degree = window_degree
        return result

    def rotated_by(self, degree: float) -> MyDegree:
        """A new angle turned by ``degree``: the game angle grows, the window angle shrinks."""
        return self._raw(self.my_degree + degree, self.window_degree - degree)

    def __iadd__(self, value: float) -> MyDegree:
        self.window_degree -= value
        self.my_degree += value
        return self

    def __isub__(self, value: float) -> MyDegree:
        self.window_degree += value
        self.my_degree -= value
        return self

    def __add__(self, degree: float) -> MyDegree:
        my_degree = self.my_degree - degree
        return self._raw(my_degree, 450 - my_degree - degree)

    def __sub__(self, degree: float) -> MyDegree:
        my_degree = self.my_degree + degree
        return self._raw(my_degree, 450 - my_degree + degree)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MyDegree):
            return NotImplemented
        return (self.my_degree, self.window_degree) == (other.my_degree, other.window_degree)

    def __repr__(self) -> str:
        return f"MyDegree(my_degree={self.my_degree!r}, window_degree={self.window_degree!r})"


def radian_to_degree(radian: float) -> float:
    return radian * 180 / PI


def degree_to_radian(degree: float) -> float:
    return degree * PI / 180