"""The ball: movement, bounces and collisions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import pygame

from .geometry import (
    BOARD_BOTTOM,
    BOARD_LEFT,
    BOARD_RIGHT,
    BOARD_TOP,
    ORANGE,
    Color,
    Rect,
    Vec2,
    check_collision_circle_rect,
)

BALL_SIZE = 0.01
MIN_SPEED = 0.2


class BallStatus(Enum):
    """Where the ball ended up after the last bounds check."""

    IN_BOUNDS = auto()
    OUT_LEFT = auto()
    OUT_RIGHT = auto()
    OUT_TOP = auto()
    OUT_BOTTOM = auto()


def _at_least(value: float, minimum: float) -> float:
    if abs(value) < minimum:
        return -minimum if value < 0 else minimum
    return value


@dataclass
class Ball:
    """A ball on the normalised board."""

    position: Vec2 = field(default_factory=lambda: Vec2(0.5, 0.5))
    speed: Vec2 = field(default_factory=Vec2)
    color: Color = ORANGE
    radius: float = BALL_SIZE
    status: BallStatus = field(default=BallStatus.IN_BOUNDS, init=False)

    def update(self, dt: float) -> None:
        """Keep each speed component above the minimum and move."""
        self.speed = Vec2(_at_least(self.speed.x, MIN_SPEED), _at_least(self.speed.y, MIN_SPEED))
        self.position = self.position + self.speed * dt

    def render(self, surface: pygame.Surface) -> None:
        """Draw the ball scaled to the surface."""
        width, height = surface.get_size()
        center = (int(self.position.x * width), int(self.position.y * height))
        pygame.draw.circle(surface, self.color, center, self.radius * width)

    def reflect_on_rectangle(self, rect: Rect) -> bool:
        """Bounce off a rectangle along the axis of least overlap."""
        if not check_collision_circle_rect(self.position, self.radius, rect):
            return False

        x, y = self.position
        overlap_left = rect.x - (x + self.radius)
        overlap_right = (rect.x + rect.width) - (x - self.radius)
        overlap_top = rect.y - (y + self.radius)
        overlap_bottom = (rect.y + rect.height) - (y - self.radius)

        min_x = overlap_left if abs(overlap_left) < abs(overlap_right) else overlap_right
        min_y = overlap_top if abs(overlap_top) < abs(overlap_bottom) else overlap_bottom

        if abs(min_x) < abs(min_y):
            self.speed = Vec2(-self.speed.x, self.speed.y)
            self.position = Vec2(x + min_x, y)
        else:
            self.speed = Vec2(self.speed.x, -self.speed.y)
            self.position = Vec2(x, y + min_y)
        return True

    def check_collision(self, other: Ball) -> bool:
        """Bounce two touching balls apart."""
        diff = self.position - other.position
        distance = diff.length()
        if distance == 0.0 or distance > self.radius + other.radius:
            return False

        normal = diff / distance
        self.speed = self.speed - normal * (2.0 * self.speed.dot(normal))
        other.speed = other.speed - normal * (2.0 * other.speed.dot(normal))

        correction = normal * ((self.radius + other.radius - distance) / 2.0)
        self.position = self.position + correction
        other.position = other.position - correction
        return True

    def check_out_of_bounds(self) -> BallStatus:
        """Bounce off the edge the ball crossed and record which one."""
        x, y = self.position
        sx, sy = self.speed
        if y + self.radius >= BOARD_BOTTOM:
            self.position, self.speed = Vec2(x, BOARD_BOTTOM - self.radius), Vec2(sx, -sy)
            self.status = BallStatus.OUT_BOTTOM
        elif y - self.radius <= BOARD_TOP:
            self.position, self.speed = Vec2(x, BOARD_TOP + self.radius), Vec2(sx, -sy)
            self.status = BallStatus.OUT_TOP
        elif x + self.radius >= BOARD_RIGHT:
            self.position, self.speed = Vec2(BOARD_RIGHT - self.radius, y), Vec2(-sx, sy)
            self.status = BallStatus.OUT_RIGHT
        elif x - self.radius <= BOARD_LEFT:
            self.position, self.speed = Vec2(BOARD_LEFT + self.radius, y), Vec2(-sx, sy)
            self.status = BallStatus.OUT_LEFT
        else:
            self.status = BallStatus.IN_BOUNDS
        return self.status

    def reset_size(self) -> None:
        """Restore the default radius."""
        self.radius = BALL_SIZE