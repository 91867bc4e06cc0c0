"""Player paddles on the normalised board."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import pygame

from .geometry import (
    BOARD_BOTTOM,
    BOARD_CENTER_X,
    BOARD_CENTER_Y,
    BOARD_RIGHT,
    BOARD_TOP,
    ORANGE,
    TARGET_FPS,
    Color,
    Rect,
    Vec2,
)

PADDLE_WIDTH = 0.03
PADDLE_HEIGHT = 0.15
PADDLE_TRAVEL_TIME = 0.75
PADDLE_OFFSET = 0.05


class PaddleMove(Enum):
    """Direction a paddle is asked to move."""

    NONE = 0
    UP = 1
    DOWN = 2


class PaddleType(Enum):
    """Which side of the board a paddle belongs to."""

    NONE = 0
    LEFT = 1
    RIGHT = 2


def _lerp(start: float, end: float, amount: float) -> float:
    return start + amount * (end - start)


@dataclass
class Paddle:
    """A paddle that slides vertically and stays on the board."""

    kind: PaddleType = PaddleType.NONE
    position: Vec2 = field(default_factory=Vec2)
    size: Vec2 = field(default_factory=lambda: Vec2(PADDLE_WIDTH, PADDLE_HEIGHT))
    color: Color = ORANGE
    travel_time: float = PADDLE_TRAVEL_TIME

    def update(self, dt: float, move: PaddleMove) -> None:
        """Ease towards the requested position and clamp to the board."""
        speed = (BOARD_BOTTOM - BOARD_TOP) / self.travel_time
        target = self.position.y
        if move is PaddleMove.UP:
            target -= speed * dt
        elif move is PaddleMove.DOWN:
            target += speed * dt

        y = _lerp(self.position.y, target, 1.0 - 0.1 ** (dt * TARGET_FPS))
        if y < BOARD_TOP:
            y = BOARD_TOP
        elif y + self.size.y > BOARD_BOTTOM:
            y = BOARD_BOTTOM - self.size.y
        self.position = Vec2(self.position.x, y)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the paddle scaled to the surface."""
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

    def bounding_box(self) -> Rect:
        """The area the paddle covers."""
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    def reset(self) -> None:
        """Restore default size and starting position."""
        self.reset_size()
        self.reset_position()

    def reset_size(self) -> None:
        """Restore the default size."""
        self.size = Vec2(PADDLE_WIDTH, PADDLE_HEIGHT)

    def reset_position(self) -> None:
        """Place the paddle at its side's starting position."""
        centered_y = BOARD_CENTER_Y - self.size.y / 2.0
        if self.kind is PaddleType.LEFT:
            self.position = Vec2(PADDLE_OFFSET, centered_y)
        elif self.kind is PaddleType.RIGHT:
            self.position = Vec2(BOARD_RIGHT - PADDLE_OFFSET - self.size.x, centered_y)
        else:
            self.position = Vec2(BOARD_CENTER_X, BOARD_CENTER_Y)