import math

import pytest

from pong.geometry import (
    Rect,
    Vec2,
    check_collision_circle_rect,
    random_color,
    random_float,
    random_vec2,
)


def test_add_then_subtract_round_trips():
    a, b = Vec2(0.3, -1.2), Vec2(2.5, 0.7)
    result = (a + b) - b
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)


def test_scalar_multiply_matches_addition():
    a = Vec2(0.25, -0.75)
    assert a * 2 == a + a
    assert 2 * a == a + a


def test_divide_undoes_multiply():
    a = Vec2(1.5, -3.25)
    assert (a * 4.0) / 4.0 == a


def test_negation_cancels():
    a = Vec2(0.4, 0.9)
    assert a + (-a) == Vec2()


def test_length_of_three_four():
    assert math.isclose(Vec2(3.0, 4.0).length(), 5.0)


def test_normalized_has_unit_length():
    assert Vec2(-7.0, 2.5).normalized().length() == pytest.approx(1.0)


def test_normalized_zero_stays_zero():
    assert Vec2().normalized() == Vec2()


def test_dot_of_perpendicular_is_zero():
    assert Vec2(1.0, 0.0).dot(Vec2(0.0, 1.0)) == 0.0


def test_dot_with_itself_is_length_squared():
    a = Vec2(1.25, -0.5)
    assert a.dot(a) == pytest.approx(a.length() ** 2)


def test_iteration_unpacks_components():
    x, y = Vec2(0.1, 0.2)
    assert (x, y) == (0.1, 0.2)


RECT = Rect(0.4, 0.4, 0.2, 0.2)


@pytest.mark.parametrize(
    "center, radius, expected",
    [
        (Vec2(0.5, 0.5), 0.01, True),
        (Vec2(0.9, 0.9), 0.01, False),
        (Vec2(0.395, 0.5), 0.01, True),
        (Vec2(0.392, 0.392), 0.01, False),
        (Vec2(0.395, 0.395), 0.01, True),
    ],
)
def test_circle_rect_collision(center, radius, expected):
    assert check_collision_circle_rect(center, radius, RECT) is expected


def test_random_float_within_bounds():
    values = [random_float(-2.0, 3.0) for _ in range(500)]
    assert all(-2.0 <= v <= 3.0 for v in values)


def test_random_float_degenerate_range():
    assert random_float(0.7, 0.7) == 0.7


def test_random_float_defaults_to_unit_range():
    assert all(0.0 <= random_float() <= 1.0 for _ in range(200))


def test_random_vec2_within_bounds():
    low, high = Vec2(0.45, 0.1), Vec2(0.55, 0.9)
    for _ in range(200):
        v = random_vec2(low, high)
        assert low.x <= v.x <= high.x
        assert low.y <= v.y <= high.y


def test_random_color_is_opaque_and_in_range():
    for _ in range(100):
        color = random_color()
        assert len(color) == 4
        assert color[3] == 255
        assert all(0 <= c <= 255 for c in color[:3])