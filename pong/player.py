"""Players: the paddle owner, steered by the keyboard or by the computer."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

import pygame

from .ball import Ball
from .controls import InputState, Key
from .geometry import random_float
from .paddle import Paddle, PaddleMove, PaddleType
from .settings import Difficulty

DEAD_ZONE = 0.07


class PlayerType(Enum):
    """Side of the board a player defends."""

    LEFT = 0
    RIGHT = 1


class Player(ABC):
    """A player owning a paddle and a score."""

    def __init__(self, kind: PlayerType) -> None:
        self.kind = kind
        self.paddle = Paddle(PaddleType.LEFT if kind is PlayerType.LEFT else PaddleType.RIGHT)
        self.paddle.reset()
        self.score = 0

    @abstractmethod
    def update(self, dt: float, keys: InputState | None = None) -> None:
        """Move the paddle for one frame."""

    def render(self, surface: pygame.Surface) -> None:
        """Draw the player's paddle."""
        self.paddle.render(surface)

    def scored(self) -> None:
        """Add one point."""
        self.score += 1


class HumanPlayer(Player):
    """A player steered with W/S on the left or the arrow keys on the right."""

    def update(self, dt: float, keys: InputState | None = None) -> None:
        if keys is None:
            return
        left = self.kind is PlayerType.LEFT
        if keys.is_down(Key.W if left else Key.UP):
            self.paddle.update(dt, PaddleMove.UP)
        if keys.is_down(Key.S if left else Key.DOWN):
            self.paddle.update(dt, PaddleMove.DOWN)


@dataclass(frozen=True)
class _Tuning:
    speed_factor: float
    error_margin: float
    offset: float
    tracking_distance: float
    prediction: float


_TUNING = {
    Difficulty.EASY: _Tuning(0.7, 0.7, 0.2, 0.8, 0.0),
    Difficulty.NORMAL: _Tuning(1.0, 0.4, 0.1, 0.5, 0.0),
    Difficulty.HARD: _Tuning(1.2, 0.0, 0.0, 0.3, 0.2),
}


class ComputerPlayer(Player):
    """A player that follows the nearest approaching ball."""

    def __init__(self, kind: PlayerType, difficulty: Difficulty = Difficulty.NORMAL) -> None:
        super().__init__(kind)
        self.difficulty = difficulty
        self.target: Ball | None = None

    def update(self, dt: float, keys: InputState | None = None) -> None:
        if self.target is None:
            return
        tuning = _TUNING[self.difficulty]
        paddle_height = self.paddle.size.y
        paddle_center = self.paddle.position.y + paddle_height / 2.0
        ball_y = self.target.position.y

        if abs(ball_y - paddle_center) < DEAD_ZONE:
            return

        ball_y += self.target.speed.y * tuning.prediction
        if tuning.error_margin:
            margin = paddle_height * tuning.error_margin
            ball_y += random_float(-margin, margin)

        step = dt * tuning.speed_factor
        slack = paddle_height * tuning.offset
        if ball_y < paddle_center - slack:
            self.paddle.update(step, PaddleMove.UP)
        elif ball_y > paddle_center + slack:
            self.paddle.update(step, PaddleMove.DOWN)

    def track_balls(self, balls: Iterable[Ball]) -> Ball | None:
        """Pick the closest ball heading for this paddle within reach, and return it."""
        threshold = _TUNING[self.difficulty].tracking_distance
        closest = math.inf
        best: Ball | None = None
        for ball in balls:
            approaching = (self.kind is PlayerType.LEFT and ball.speed.x < 0) or (
                self.kind is PlayerType.RIGHT and ball.speed.x > 0
            )
            if not approaching:
                continue
            distance = abs(self.paddle.position.x - ball.position.x)
            if distance <= threshold and distance < closest:
                closest = distance
                best = ball
        self.target = best
        return best