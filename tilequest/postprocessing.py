"""Post-processing effect state for the game framebuffer.

Effects are applied in order: shockwaves, darkness, screen transition,
Gaussian blur. Each Gaussian blur iteration uses a 9x9 kernel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from tilequest.vecmath import Vec2

MAX_GAUSSIAN_BLUR_ITERATIONS = 5

_SHOCKWAVE_INITIAL_FORCE = 0.2
_SHOCKWAVE_FORCE_DECAY = 0.4
_SHOCKWAVE_SIZE_GROWTH = 0.7
_SHOCKWAVE_THICKNESS_GROWTH = 0.2


@dataclass
class Shockwave:
    position: Vec2  # world space
    force: float = 0.0
    size: float = 0.0
    thickness: float = 0.0


def map_world_to_target(
    pos: Vec2,
    camera_min: Vec2,
    camera_max: Vec2,
    target_width: float,
    target_height: float,
) -> Vec2:
    """Map a world-space position to pixel coordinates of a render target."""
    x = (pos.x - camera_min.x) / (camera_max.x - camera_min.x) * target_width
    y = (pos.y - camera_min.y) / (camera_max.y - camera_min.y) * target_height
    return Vec2(x, y)


class PostProcessor:
    """Holds effect parameters and produces per-pass uniform data."""

    def __init__(self, resolution: Sequence[float]) -> None:
        width, height = resolution
        self.resolution = Vec2(float(width), float(height))
        self._shockwaves: list[Shockwave] = []
        self._darkness_intensity = 0.0
        self._darkness_center = Vec2()
        self._screen_transition_progress = 0.0
        self._gaussian_blur_iterations = 0

    @property
    def shockwaves(self) -> tuple[Shockwave, ...]:
        return tuple(self._shockwaves)

    @property
    def darkness_intensity(self) -> float:
        return self._darkness_intensity

    @property
    def darkness_center(self) -> Vec2:
        return self._darkness_center

    @property
    def screen_transition_progress(self) -> float:
        return self._screen_transition_progress

    @property
    def gaussian_blur_iterations(self) -> int:
        return self._gaussian_blur_iterations

    def update(self, dt: float) -> None:
        """Advance shockwaves; those whose force runs out are removed."""
        for wave in self._shockwaves:
            wave.force -= dt * _SHOCKWAVE_FORCE_DECAY
            wave.size += dt * _SHOCKWAVE_SIZE_GROWTH
            wave.thickness += dt * _SHOCKWAVE_THICKNESS_GROWTH
        self._shockwaves = [wave for wave in self._shockwaves if wave.force > 0.0]

    def add_shockwave(self, position: Vec2) -> Shockwave:
        wave = Shockwave(position=position, force=_SHOCKWAVE_INITIAL_FORCE)
        self._shockwaves.append(wave)
        return wave

    def set_darkness_intensity(self, intensity: float) -> None:
        self._darkness_intensity = min(max(intensity, 0.0), 1.0)

    def set_darkness_center(self, position: Vec2) -> None:
        self._darkness_center = position

    def set_screen_transition_progress(self, progress: float) -> None:
        self._screen_transition_progress = min(max(progress, -1.0), 1.0)

    def set_gaussian_blur_iterations(self, iterations: int) -> None:
        if iterations < 0:
            raise ValueError(f"iterations must be non-negative, got {iterations}")
        self._gaussian_blur_iterations = min(iterations, MAX_GAUSSIAN_BLUR_ITERATIONS)

    def shockwave_uniforms(self, camera_min: Vec2, camera_max: Vec2) -> list[dict[str, Any]]:
        """Uniform block contents for each shockwave pass, in draw order."""
        return [
            {
                "resolution": self.resolution,
                "center": map_world_to_target(
                    wave.position, camera_min, camera_max,
                    self.resolution.x, self.resolution.y,
                ),
                "force": wave.force,
                "size": wave.size,
                "thickness": wave.thickness,
            }
            for wave in self._shockwaves
        ]

    def darkness_uniforms(self, camera_min: Vec2, camera_max: Vec2) -> Optional[dict[str, Any]]:
        """Uniform block contents for the darkness pass, or None if it is skipped."""
        if self._darkness_intensity == 0.0:
            return None
        return {
            "resolution": self.resolution,
            "center": map_world_to_target(
                self._darkness_center, camera_min, camera_max,
                self.resolution.x, self.resolution.y,
            ),
            "intensity": self._darkness_intensity,
        }

    def passes(self) -> list[str]:
        """Names of the fullscreen passes that rendering would draw, in order."""
        result = ["shockwave"] * len(self._shockwaves)
        if self._darkness_intensity != 0.0:
            result.append("darkness")
        if self._screen_transition_progress != 0.0:
            result.append("screen_transition")
        for _ in range(self._gaussian_blur_iterations):
            result.extend(("gaussian_blur_horizontal", "gaussian_blur_vertical"))
        return result