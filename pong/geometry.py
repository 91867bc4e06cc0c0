"""Board geometry on a normalised 0..1 board, colours and random helpers."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass

Color = tuple[int, int, int, int]

ORANGE: Color = (255, 161, 0, 255)
RED: Color = (230, 41, 55, 255)
YELLOW: Color = (253, 249, 0, 255)
LIGHTGRAY: Color = (200, 200, 200, 255)
DARKGRAY: Color = (80, 80, 80, 255)
BLACK: Color = (0, 0, 0, 255)

TARGET_FPS = 60

BOARD_LEFT = 0.0
BOARD_RIGHT = 1.0
BOARD_TOP = 0.0
BOARD_BOTTOM = 1.0
BOARD_CENTER_X = (BOARD_RIGHT - BOARD_LEFT) / 2.0
BOARD_CENTER_Y = (BOARD_BOTTOM - BOARD_TOP) / 2.0


@dataclass(frozen=True)
class Vec2:
    """An immutable two-dimensional vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        length = self.length()
        if length > 0.0:
            return Vec2(self.x / length, self.y / length)
        return Vec2()

    def dot(self, other: Vec2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float


def check_collision_circle_rect(center: Vec2, radius: float, rect: Rect) -> bool:
    """Whether a circle touches or overlaps a rectangle."""
    half_w = rect.width / 2.0
    half_h = rect.height / 2.0
    dx = abs(center.x - (rect.x + half_w))
    dy = abs(center.y - (rect.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True
    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius


def random_float(low: float = 0.0, high: float = 1.0) -> float:
    """A random float between low and high."""
    return random.uniform(low, high)


def random_vec2(low: Vec2 = Vec2(0.0, 0.0), high: Vec2 = Vec2(1.0, 1.0)) -> Vec2:
    """A random vector with each component between those of low and high."""
    return Vec2(random_float(low.x, high.x), random_float(low.y, high.y))


def random_color() -> Color:
    """A random opaque colour."""
    return (random.randint(0, 255), random.randint(0, 255), random.randint(0, 255), 255)