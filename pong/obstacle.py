"""Rectangular obstacles that balls bounce off."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from .geometry import (
    BOARD_BOTTOM,
    BOARD_LEFT,
    BOARD_RIGHT,
    BOARD_TOP,
    RED,
    Color,
    Rect,
    Vec2,
)


@dataclass
class Obstacle:
    """An obstacle that may drift and bounces off the board edges."""

    position: Vec2 = field(default_factory=lambda: Vec2(0.5, 0.5))
    speed: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=lambda: Vec2(0.1, 0.02))
    color: Color = RED

    def update(self, dt: float) -> None:
        """Move by the speed and bounce off the board edges."""
        x, y = self.position + self.speed * dt
        sx, sy = self.speed

        if y < BOARD_TOP:
            y, sy = BOARD_TOP, -sy
        elif y + self.size.y > BOARD_BOTTOM:
            y, sy = BOARD_BOTTOM - self.size.y, -sy

        if x < BOARD_LEFT:
            x, sx = BOARD_LEFT, -sx
        elif x + self.size.x > BOARD_RIGHT:
            x, sx = BOARD_RIGHT - self.size.x, -sx

        self.position = Vec2(x, y)
        self.speed = Vec2(sx, sy)

    def bounding_box(self) -> Rect:
        """The area the obstacle covers."""
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the obstacle scaled to the surface."""
        width, height = surface.get_size()
        pygame.draw.rect(
            surface,
            self.color,
            pygame.Rect(
                int(self.position.x * width),
                int(self.position.y * height),
                int(self.size.x * width),
                int(self.size.y * height),
            ),
        )