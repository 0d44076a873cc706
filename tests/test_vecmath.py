import math

import pytest

from tilequest.vecmath import (
    TWO_PI,
    Vec2,
    angle_signed,
    angle_unsigned,
    clamp,
    damp,
    det,
    dot,
    get_direction,
    is_clockwise,
    is_convex,
    is_zero,
    length,
    length_squared,
    lerp,
    lerp_angle,
    lerp_polar,
    lerp_vec,
    normalize,
    rotate,
    rotate_90deg,
    smootherstep,
    smoothstep,
    triangulate,
    unit_vector,
    vabs,
    vmax,
    vmin,
)


def _area(points):
    total = 0.0
    for i, p in enumerate(points):
        q = points[(i + 1) % len(points)]
        total += p.x * q.y - q.x * p.y
    return abs(total) / 2.0


@pytest.mark.parametrize("fn", [smoothstep, smootherstep])
def test_steps_endpoints_and_symmetry(fn):
    assert fn(0.0) == 0.0
    assert fn(1.0) == 1.0
    for x in (0.1, 0.3, 0.45):
        assert fn(x) + fn(1.0 - x) == pytest.approx(1.0)


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0
    assert lerp_vec(Vec2(1, 2), Vec2(3, 6), 1.0) == Vec2(3, 6)


def test_lerp_angle_reaches_target_modulo_full_turn():
    a, b = 0.1, TWO_PI - 0.1
    result = lerp_angle(a, b, 1.0)
    assert abs(result - a) < math.pi
    assert math.cos(result) == pytest.approx(math.cos(b))
    assert math.sin(result) == pytest.approx(math.sin(b))


def test_zero_and_lengths():
    assert is_zero(Vec2())
    assert not is_zero(Vec2(0, 1))
    v = Vec2(3, 4)
    assert length_squared(v) == pytest.approx(length(v) ** 2)


def test_normalize():
    assert normalize(Vec2()) == Vec2(0.0, 0.0)
    assert length(normalize(Vec2(-7, 2))) == pytest.approx(1.0)


def test_unit_vector_and_rotate():
    for angle in (0.0, 1.0, -2.5):
        assert length(unit_vector(angle)) == pytest.approx(1.0)
    v = Vec2(2, -1)
    r = rotate(v, 0.7)
    assert length(r) == pytest.approx(length(v))
    assert angle_signed(v, r) == pytest.approx(0.7)


def test_rotate_90deg_is_perpendicular():
    v = Vec2(5, 3)
    assert dot(v, rotate_90deg(v)) == 0
    assert det(v, rotate_90deg(v)) == pytest.approx(length_squared(v))


def test_vabs_min_max_clamp():
    assert vabs(Vec2(-1, 2)) == Vec2(1, 2)
    a, b = Vec2(1, 5), Vec2(3, 2)
    assert vmin(a, b) == Vec2(1, 2)
    assert vmax(a, b) == Vec2(3, 5)
    assert clamp(Vec2(-3, 10), Vec2(0, 0), Vec2(4, 4)) == Vec2(0, 4)


def test_angles():
    assert angle_unsigned(Vec2(), Vec2(1, 0)) == 0.0
    assert angle_unsigned(Vec2(1, 0), Vec2(0, 1)) == pytest.approx(math.pi / 2)
    assert angle_signed(Vec2(1, 0), Vec2(0, -1)) == pytest.approx(-math.pi / 2)


def test_is_clockwise_y_down():
    assert is_clockwise(Vec2(1, 0), Vec2(0, 1))
    assert not is_clockwise(Vec2(0, 1), Vec2(1, 0))


def test_lerp_polar_endpoints_keep_length():
    a, b = Vec2(2, 0), Vec2(0, 4)
    assert length(lerp_polar(a, b, 0.0)) == pytest.approx(2.0)
    end = lerp_polar(a, b, 1.0)
    assert end.x == pytest.approx(0.0, abs=1e-6)
    assert end.y == pytest.approx(4.0)


def test_damp():
    a, b = Vec2(0, 0), Vec2(10, 10)
    assert damp(a, b, 0.0, 0.0) == a
    assert damp(a, b, 0.5, 0.0) == a
    assert damp(a, b, 0.0, 1.0) == b
    mid = damp(a, b, 0.5, 1.0)
    assert 0 < mid.x < 10


@pytest.mark.parametrize(
    "v, expected",
    [(Vec2(1, 0), "r"), (Vec2(-1, 0), "l"), (Vec2(0, 1), "d"), (Vec2(0, -1), "u")],
)
def test_get_direction(v, expected):
    assert get_direction(v) == expected


def test_is_convex():
    square = [Vec2(0, 0), Vec2(1, 0), Vec2(1, 1), Vec2(0, 1)]
    assert is_convex(square)
    arrow = [Vec2(0, 0), Vec2(2, 0), Vec2(1, 0.5), Vec2(2, 2), Vec2(0, 2)]
    assert not is_convex(arrow)


def test_triangulate_triangle_is_unchanged():
    tri = [Vec2(0, 0), Vec2(1, 0), Vec2(0, 1)]
    assert triangulate(tri) == tri


def test_triangulate_convex_preserves_area():
    pentagon = [unit_vector(i * TWO_PI / 5) * 3 for i in range(5)]
    triangles = triangulate(pentagon)
    assert len(triangles) == 3 * (len(pentagon) - 2)
    total = sum(_area(triangles[i : i + 3]) for i in range(0, len(triangles), 3))
    assert total == pytest.approx(_area(pentagon))
    assert set(triangles) <= set(pentagon)


def test_triangulate_rejects_degenerate():
    with pytest.raises(ValueError):
        triangulate([Vec2(0, 0), Vec2(1, 1)])