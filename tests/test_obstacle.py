import pygame
import pytest

from pong.geometry import BOARD_BOTTOM, BOARD_LEFT, BOARD_RIGHT, BOARD_TOP, RED, Rect, Vec2
from pong.obstacle import Obstacle


def test_defaults():
    obstacle = Obstacle()
    assert obstacle.position == Vec2(0.5, 0.5)
    assert obstacle.speed == Vec2()
    assert obstacle.size == Vec2(0.1, 0.02)
    assert obstacle.color == RED


def test_static_obstacle_does_not_move():
    obstacle = Obstacle(position=Vec2(0.3, 0.4))
    obstacle.update(1.0)
    assert obstacle.position == Vec2(0.3, 0.4)


def test_moves_with_speed():
    start, speed = Vec2(0.4, 0.4), Vec2(0.1, -0.05)
    obstacle = Obstacle(position=start, speed=speed)
    obstacle.update(0.5)
    assert obstacle.position.x == pytest.approx(start.x + speed.x * 0.5)
    assert obstacle.position.y == pytest.approx(start.y + speed.y * 0.5)
    assert obstacle.speed == speed


def test_bounces_off_top():
    obstacle = Obstacle(position=Vec2(0.5, 0.01), speed=Vec2(0.0, -0.2))
    obstacle.update(0.1)
    assert obstacle.position.y == BOARD_TOP
    assert obstacle.speed.y == 0.2


def test_bounces_off_bottom():
    obstacle = Obstacle(position=Vec2(0.5, 0.97), speed=Vec2(0.0, 0.2))
    obstacle.update(0.1)
    assert obstacle.position.y == pytest.approx(BOARD_BOTTOM - obstacle.size.y)
    assert obstacle.speed.y == -0.2


def test_bounces_off_left():
    obstacle = Obstacle(position=Vec2(0.01, 0.5), speed=Vec2(-0.2, 0.0))
    obstacle.update(0.1)
    assert obstacle.position.x == BOARD_LEFT
    assert obstacle.speed.x == 0.2


def test_bounces_off_right():
    obstacle = Obstacle(position=Vec2(0.89, 0.5), speed=Vec2(0.2, 0.0))
    obstacle.update(0.1)
    assert obstacle.position.x == pytest.approx(BOARD_RIGHT - obstacle.size.x)
    assert obstacle.speed.x == -0.2


def test_bounding_box_matches_position_and_size():
    obstacle = Obstacle(position=Vec2(0.2, 0.3), size=Vec2(0.05, 0.08))
    assert obstacle.bounding_box() == Rect(0.2, 0.3, 0.05, 0.08)


def test_render_fills_its_area():
    surface = pygame.Surface((200, 100))
    color = (20, 140, 220, 255)
    Obstacle(position=Vec2(0.25, 0.25), size=Vec2(0.5, 0.5), color=color).render(surface)
    assert tuple(surface.get_at((100, 50)))[:3] == color[:3]
    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 0)