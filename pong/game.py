"""A single match: players, balls, obstacles and rounds."""

from __future__ import annotations

import random

import pygame

from .ball import Ball, BallStatus
from .controls import InputState, Key
from .drawing import draw_centered_text_horizontal, draw_text, measure_text
from .geometry import LIGHTGRAY, Vec2, random_color, random_float, random_vec2
from .obstacle import Obstacle
from .player import ComputerPlayer, HumanPlayer, Player, PlayerType
from .settings import PongSettings


def _make_player(kind: PlayerType, is_computer: bool, settings_difficulty) -> Player:
    if is_computer:
        return ComputerPlayer(kind, settings_difficulty)
    return HumanPlayer(kind)


class Pong:
    """One match played to a number of rounds."""

    def __init__(self, settings: PongSettings) -> None:
        self.settings = settings
        self.game_over = False
        self.quit_requested = False
        self.rounds_played = 0
        self.balls: list[Ball] = []
        self.obstacles: list[Obstacle] = []
        self.left_player = _make_player(
            PlayerType.LEFT, settings.left_computer, settings.left_difficulty
        )
        self.right_player = _make_player(
            PlayerType.RIGHT, settings.right_computer, settings.right_difficulty
        )
        self.reset()

    @property
    def players(self) -> tuple[Player, Player]:
        return self.left_player, self.right_player

    def update(self, dt: float, keys: InputState | None = None) -> None:
        """Advance the match by one frame."""
        keys = keys if keys is not None else InputState()
        for obstacle in self.obstacles:
            obstacle.update(dt)

        if self.game_over:
            if keys.is_pressed(Key.ENTER):
                self.quit_requested = True
            return

        for player in self.players:
            if isinstance(player, ComputerPlayer):
                player.track_balls(self.balls)
        for player in self.players:
            player.update(dt, keys)

        pending = list(self.balls)
        kept: list[Ball] = []
        paddles = [player.paddle.bounding_box() for player in self.players]
        for index, ball in enumerate(pending):
            ball.update(dt)
            for box in paddles:
                ball.reflect_on_rectangle(box)
            for obstacle in self.obstacles:
                ball.reflect_on_rectangle(obstacle.bounding_box())
            for other in pending[index + 1 :]:
                ball.check_collision(other)

            status = ball.check_out_of_bounds()
            if status is BallStatus.OUT_LEFT:
                self.right_player.scored()
            elif status is BallStatus.OUT_RIGHT:
                self.left_player.scored()
            else:
                kept.append(ball)
        self.balls = kept

        if pending and not kept:
            self.rounds_played += 1
            if self.rounds_played >= self.settings.rounds:
                self.game_over = True
            else:
                self.reset()

    def render(self, surface: pygame.Surface) -> None:
        """Draw the board, scores and, once over, the result."""
        for ball in self.balls:
            ball.render(surface)
        for obstacle in self.obstacles:
            obstacle.render(surface)
        for player in self.players:
            player.render(surface)

        padding, font_size = 20, 30
        left_score, right_score = self.left_player.score, self.right_player.score
        draw_text(surface, f"Player 1: {left_score}", padding, padding, font_size, LIGHTGRAY)
        right_info = f"Player 2: {right_score}"
        draw_text(
            surface,
            right_info,
            surface.get_width() - measure_text(right_info, font_size) - padding,
            padding,
            font_size,
            LIGHTGRAY,
        )

        if not self.game_over:
            return

        offset, spacing = -150, 60
        middle = surface.get_height() // 2
        draw_centered_text_horizontal(surface, "GAME OVER", middle + offset, 100, LIGHTGRAY)

        if left_score > right_score:
            winner = "Player 1 Wins!"
        elif right_score > left_score:
            winner = "Player 2 Wins!"
        else:
            winner = "It's a Draw!"
        draw_centered_text_horizontal(
            surface, winner, int(middle + spacing + offset / 1.5), 50, LIGHTGRAY
        )
        draw_centered_text_horizontal(
            surface,
            f"Final Score: {left_score} - {right_score}",
            int(middle + spacing * 2 + offset / 1.5),
            40,
            LIGHTGRAY,
        )
        draw_centered_text_horizontal(
            surface,
            "Press ENTER to return to menu",
            middle + spacing * 4 + offset // 2,
            30,
            LIGHTGRAY,
        )

    def reset(self) -> None:
        """Start a new round with fresh balls and obstacles."""
        self.balls = []
        self.obstacles = []

        for _ in range(self.settings.ball_count):
            direction = Vec2(1.0, random_float(-1.0, 1.0))
            self.balls.append(
                Ball(
                    position=random_vec2(Vec2(0.45, 0.1), Vec2(0.55, 0.9)),
                    speed=direction.normalized() * random_float(0.45, 0.5),
                    color=random_color(),
                )
            )

        for _ in range(self.settings.static_obstacles):
            self.obstacles.append(self._random_obstacle())

        for _ in range(self.settings.moving_obstacles):
            obstacle = self._random_obstacle()
            choice = random.randint(0, 2)
            if choice == 0:
                obstacle.speed = Vec2(0.0, random_float(-0.3, 0.3))
            elif choice == 1:
                obstacle.speed = Vec2(random_float(-0.3, 0.3), 0.0)
            else:
                obstacle.speed = random_vec2(Vec2(-0.3, -0.3), Vec2(0.3, 0.3))
            self.obstacles.append(obstacle)

    @staticmethod
    def _random_obstacle() -> Obstacle:
        return Obstacle(
            position=random_vec2(Vec2(0.15, 0.1), Vec2(0.85, 0.9)),
            size=random_vec2(Vec2(0.05, 0.05), Vec2(0.1, 0.1)),
            color=random_color(),
        )