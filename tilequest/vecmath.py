"""Two-dimensional vector arithmetic and small computational geometry helpers.

All functions are safe to call on zero vectors, and all angles are in radians.
The world uses a y-down coordinate system.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence

PI = 3.141592654
TWO_PI = 6.283185307
INV_PI = 0.318309886
INV_TWO_PI = 0.159154943
HALF_PI = 1.570796327
QUARTER_PI = 0.785398163


@dataclass(frozen=True)
class Vec2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y


# SCALARS


def smoothstep(x: float) -> float:
    return x * x * (3.0 - 2.0 * x)


def smootherstep(x: float) -> float:
    return x * x * x * (x * (x * 6.0 - 15.0) + 10.0)


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate between two angles along the shorter arc."""
    angle = math.fmod(b - a, TWO_PI)
    if angle > PI:
        angle -= TWO_PI
    elif angle < -PI:
        angle += TWO_PI
    return a + angle * t


# VECTORS


def is_zero(v: Vec2) -> bool:
    return v.x == 0 and v.y == 0


def length_squared(v: Vec2) -> float:
    return v.x * v.x + v.y * v.y


def length(v: Vec2) -> float:
    return math.sqrt(length_squared(v))


def unit_vector(angle: float) -> Vec2:
    return Vec2(math.cos(angle), math.sin(angle))


def normalize(v: Vec2) -> Vec2:
    n = length(v)
    if n:
        return v / n
    return Vec2(0.0, 0.0)


def vabs(v: Vec2) -> Vec2:
    return Vec2(abs(v.x), abs(v.y))


def rotate_90deg(v: Vec2) -> Vec2:
    return Vec2(-v.y, v.x)


def dot(a: Vec2, b: Vec2) -> float:
    return a.x * b.x + a.y * b.y


def det(a: Vec2, b: Vec2) -> float:
    """Determinant, also known as the 2D cross product."""
    return a.x * b.y - a.y * b.x


def angle_unsigned(a: Vec2, b: Vec2) -> float:
    len2 = length_squared(a) * length_squared(b)
    if len2:
        cosine = dot(a, b) / math.sqrt(len2)
        return math.acos(max(-1.0, min(1.0, cosine)))
    return 0.0


def angle_signed(a: Vec2, b: Vec2) -> float:
    return math.atan2(det(a, b), dot(a, b))


def is_clockwise(a: Vec2, b: Vec2) -> bool:
    """True if b is clockwise of a (with the y axis pointing down)."""
    return det(a, b) > 0


def rotate(v: Vec2, angle: float) -> Vec2:
    c = math.cos(angle)
    s = math.sin(angle)
    return Vec2(v.x * c - v.y * s, v.x * s + v.y * c)


def vmin(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(min(a.x, b.x), min(a.y, b.y))


def vmax(a: Vec2, b: Vec2) -> Vec2:
    return Vec2(max(a.x, b.x), max(a.y, b.y))


def lerp_vec(a: Vec2, b: Vec2, t: float) -> Vec2:
    return a + (b - a) * t


def lerp_polar(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Interpolate length and direction separately."""
    n = lerp(length(a), length(b), t)
    angle = lerp_angle(math.atan2(a.y, a.x), math.atan2(b.y, b.x), t)
    return unit_vector(angle) * n


def damp(a: Vec2, b: Vec2, damping: float, dt: float) -> Vec2:
    """Frame-rate independent approach from a towards b."""
    damping = max(0.0, min(1.0, damping))
    dt = max(dt, 0.0)
    if not damping and not dt:
        return a
    return lerp_vec(a, b, 1.0 - damping**dt)


def _clamp_scalar(x: float, lo: float, hi: float) -> float:
    if x < lo:
        return lo
    if hi < x:
        return hi
    return x


def clamp(v: Vec2, lo: Vec2, hi: Vec2) -> Vec2:
    return Vec2(_clamp_scalar(v.x, lo.x, hi.x), _clamp_scalar(v.y, lo.y, hi.y))


def get_direction(v: Vec2) -> str:
    """Return 'r', 'l', 'd' or 'u' for the axis direction in which v points."""
    if v.x >= abs(v.y):
        return "r"
    if v.x <= -abs(v.y):
        return "l"
    if v.y >= abs(v.x):
        return "d"
    if v.y <= -abs(v.x):
        return "u"
    return " "


# COMPUTATIONAL GEOMETRY


def is_convex(polygon: Sequence[Vec2]) -> bool:
    first_nonzero = 0.0
    count = len(polygon)
    for i, p0 in enumerate(polygon):
        p1 = polygon[(i + 1) % count]
        p2 = polygon[(i + 2) % count]
        current = det(p0 - p1, p2 - p1)
        if not current:
            continue
        if not first_nonzero:
            first_nonzero = current
            continue
        if current * first_nonzero < 0:
            return False
    return True


def _interior_angle(prev: Vec2, corner: Vec2, nxt: Vec2, polygon_clockwise: bool) -> float:
    v_prev = prev - corner
    v_next = nxt - corner
    angle = angle_unsigned(v_prev, v_next)
    if is_clockwise(v_prev, v_next) != polygon_clockwise:
        angle = TWO_PI - angle
    return angle


def triangulate(polygon: Sequence[Vec2]) -> list[Vec2]:
    """Ear-clip a simple polygon; returns a flat list of triangle vertices."""
    count = len(polygon)
    if count < 3:
        raise ValueError(f"a polygon needs at least 3 vertices, got {count}")
    points = list(polygon)
    if count == 3:
        return points

    rightmost = max(range(count), key=lambda i: points[i].x)
    polygon_clockwise = is_clockwise(
        points[(rightmost - 1) % count] - points[rightmost],
        points[(rightmost + 1) % count] - points[rightmost],
    )

    angles = [
        _interior_angle(points[i - 1], points[i], points[(i + 1) % count], polygon_clockwise)
        for i in range(count)
    ]

    triangles: list[Vec2] = []
    while count > 3:
        tip = min(range(count), key=angles.__getitem__)
        i0 = (tip - 2) % count
        i1 = (tip - 1) % count
        i3 = (tip + 1) % count
        i4 = (tip + 2) % count
        triangles.extend((points[i1], points[tip], points[i3]))
        angles[i1] = _interior_angle(points[i0], points[i1], points[i3], polygon_clockwise)
        angles[i3] = _interior_angle(points[i1], points[i3], points[i4], polygon_clockwise)
        del points[tip]
        del angles[tip]
        count -= 1
    triangles.extend(points[:3])
    return triangles