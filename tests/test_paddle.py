import pygame
import pytest

from pong.geometry import (
    BOARD_BOTTOM,
    BOARD_CENTER_X,
    BOARD_CENTER_Y,
    BOARD_RIGHT,
    BOARD_TOP,
    Rect,
    Vec2,
)
from pong.paddle import (
    PADDLE_HEIGHT,
    PADDLE_OFFSET,
    PADDLE_TRAVEL_TIME,
    PADDLE_WIDTH,
    Paddle,
    PaddleMove,
    PaddleType,
)


def make(kind):
    paddle = Paddle(kind)
    paddle.reset()
    return paddle


def test_defaults():
    paddle = Paddle()
    assert paddle.size == Vec2(PADDLE_WIDTH, PADDLE_HEIGHT)
    assert paddle.travel_time == PADDLE_TRAVEL_TIME
    assert paddle.kind is PaddleType.NONE


def test_reset_left():
    paddle = make(PaddleType.LEFT)
    assert paddle.position.x == PADDLE_OFFSET
    assert paddle.position.y + paddle.size.y / 2 == pytest.approx(BOARD_CENTER_Y)


def test_reset_right():
    paddle = make(PaddleType.RIGHT)
    assert paddle.position.x + paddle.size.x == pytest.approx(BOARD_RIGHT - PADDLE_OFFSET)
    assert paddle.position.y + paddle.size.y / 2 == pytest.approx(BOARD_CENTER_Y)


def test_reset_none_goes_to_centre():
    paddle = make(PaddleType.NONE)
    assert paddle.position == Vec2(BOARD_CENTER_X, BOARD_CENTER_Y)


def test_reset_size_restores_default():
    paddle = Paddle(PaddleType.LEFT, size=Vec2(0.5, 0.5))
    paddle.reset_size()
    assert paddle.size == Vec2(PADDLE_WIDTH, PADDLE_HEIGHT)


def test_move_up_and_down():
    up, down = make(PaddleType.LEFT), make(PaddleType.LEFT)
    start = up.position.y
    up.update(0.05, PaddleMove.UP)
    down.update(0.05, PaddleMove.DOWN)
    assert up.position.y < start < down.position.y
    assert start - up.position.y == pytest.approx(down.position.y - start)
    assert up.position.x == PADDLE_OFFSET


def test_no_move_keeps_position():
    paddle = make(PaddleType.RIGHT)
    start = paddle.position
    paddle.update(0.1, PaddleMove.NONE)
    assert paddle.position == start


def test_longer_travel_time_moves_less():
    fast, slow = make(PaddleType.LEFT), make(PaddleType.LEFT)
    slow.travel_time = PADDLE_TRAVEL_TIME * 2
    start = fast.position.y
    fast.update(0.05, PaddleMove.DOWN)
    slow.update(0.05, PaddleMove.DOWN)
    assert fast.position.y - start > slow.position.y - start > 0


def test_clamps_at_top():
    paddle = make(PaddleType.LEFT)
    paddle.position = Vec2(paddle.position.x, BOARD_TOP)
    paddle.update(1.0, PaddleMove.UP)
    assert paddle.position.y == BOARD_TOP


def test_clamps_at_bottom():
    paddle = make(PaddleType.RIGHT)
    paddle.position = Vec2(paddle.position.x, BOARD_BOTTOM - paddle.size.y)
    paddle.update(1.0, PaddleMove.DOWN)
    assert paddle.position.y == pytest.approx(BOARD_BOTTOM - paddle.size.y)


def test_bounding_box():
    paddle = make(PaddleType.LEFT)
    box = paddle.bounding_box()
    assert box == Rect(paddle.position.x, paddle.position.y, paddle.size.x, paddle.size.y)


def test_render_draws_paddle():
    surface = pygame.Surface((200, 100))
    color = (90, 30, 200, 255)
    Paddle(position=Vec2(0.25, 0.25), size=Vec2(0.5, 0.5), color=color).render(surface)
    assert tuple(surface.get_at((100, 50)))[:3] == color[:3]
    assert tuple(surface.get_at((190, 90)))[:3] == (0, 0, 0)