"""Random number helpers for gameplay."""

from __future__ import annotations

import math
import random
from typing import Optional

from tilequest.vecmath import Vec2

_TWO_PI = 6.28318530718


class Rng:
    """A random source; seed it for reproducible sequences."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._random = random.Random(seed)

    def chance(self, probability_of_true: float = 0.5) -> bool:
        if not 0.0 <= probability_of_true <= 1.0:
            raise ValueError(f"probability must be within [0, 1], got {probability_of_true}")
        return self._random.random() < probability_of_true

    def range_f(self, lo: float = 0.0, hi: float = 1.0) -> float:
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi})")
        if lo == hi:
            return lo
        value = self._random.uniform(lo, hi)
        return lo if value >= hi else value

    def range_i(self, lo: int, hi: int) -> int:
        """Uniform integer in the inclusive range [lo, hi]."""
        if lo > hi:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return self._random.randint(lo, hi)

    def range_ui(self, lo: int, hi: int) -> int:
        """Uniform non-negative integer in the inclusive range [lo, hi]."""
        if lo < 0:
            raise ValueError(f"lower bound must be non-negative, got {lo}")
        return self.range_i(lo, hi)

    def color(self) -> tuple[int, int, int]:
        return _color_from(self._random)

    def on_circle(self, radius: float = 1.0) -> Vec2:
        angle = self.range_f(0.0, _TWO_PI)
        return Vec2(math.cos(angle) * radius, math.sin(angle) * radius)

    def in_circle(self, radius: float = 1.0) -> Vec2:
        r = math.sqrt(self.range_f(0.0, radius))
        return self.on_circle(r)


def _color_from(source: random.Random) -> tuple[int, int, int]:
    return (source.randint(0, 255), source.randint(0, 255), source.randint(0, 255))


def seeded_color(seed: int) -> tuple[int, int, int]:
    """Return an RGB colour that depends only on the seed."""
    return _color_from(random.Random(seed))