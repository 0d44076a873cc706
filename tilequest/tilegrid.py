"""Tile grid of a map: passability, corner terrains and A* pathfinding."""

from __future__ import annotations

import heapq
import itertools
import math
from enum import Enum
from typing import Sequence

from tilequest.vecmath import Vec2

Tile = tuple[int, int]

_SQRT_2 = 1.41421356237

# Order chosen to walk memory row-wise while expanding neighbours.
_MOVEMENT_DIRECTIONS: tuple[Tile, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


class TerrainType(Enum):
    NONE = "None"
    DIRT = "Dirt"
    LIGHT_GRASS = "LightGrass"
    DARK_GRASS = "DarkGrass"
    COBBLESTONE = "Cobblestone"
    SHALLOW_WATER = "ShallowWater"
    DEEP_WATER = "DeepWater"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_name(cls, name: str) -> TerrainType:
        """Match a terrain name ignoring whitespace and case; unknown names give NONE."""
        key = "".join(name.split()).lower()
        for terrain in cls:
            if terrain.value.lower() == key:
                return terrain
        return cls.NONE


class Corner(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


def _as_tile(tile: Sequence[int]) -> Tile:
    return (int(tile[0]), int(tile[1]))


def _manhattan_distance(a: Tile, b: Tile) -> int:
    return abs(b[0] - a[0]) + abs(b[1] - a[1])


def _euclidean_distance_on_grid(a: Tile, b: Tile) -> float:
    dx = abs(b[0] - a[0])
    dy = abs(b[1] - a[1])
    return abs(dx - dy) + min(dx, dy) * _SQRT_2


class TileGrid:
    """A width x height grid of tiles, each tile_width x tile_height pixels."""

    def __init__(self, width: int, height: int, tile_width: int, tile_height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must be non-negative, got {width}x{height}")
        self.width = width
        self.height = height
        self.tile_width = tile_width
        self.tile_height = tile_height
        self._passable = [True] * (width * height)
        self._terrains: list[dict[Corner, TerrainType]] = [{} for _ in range(width * height)]

    @property
    def size(self) -> Tile:
        return (self.width, self.height)

    @property
    def tile_size(self) -> Tile:
        return (self.tile_width, self.tile_height)

    def _index(self, tile: Tile) -> int | None:
        x, y = tile
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return None
        return x + y * self.width

    def set_collision(self, gids: Sequence[int]) -> bool:
        """Mark tiles with a non-zero gid as blocked.

        A layer whose size does not match the grid is ignored and False is returned.
        """
        if len(gids) != len(self._passable):
            return False
        self._passable = [gid == 0 for gid in gids]
        return True

    def set_terrain(self, tile: Sequence[int], corner: Corner, terrain: TerrainType) -> None:
        index = self._index(_as_tile(tile))
        if index is None:
            raise IndexError(f"tile {tuple(tile)} is outside the grid")
        self._terrains[index][corner] = terrain

    def is_passable(self, tile: Sequence[int]) -> bool:
        index = self._index(_as_tile(tile))
        return index is not None and self._passable[index]

    def world_to_tile(self, world_pos: Vec2) -> Tile:
        if not self.tile_width or not self.tile_height:
            return (-1, -1)
        return (
            math.floor(world_pos.x / self.tile_width),
            math.floor(world_pos.y / self.tile_height),
        )

    def get_tile_center(self, tile: Sequence[int]) -> Vec2:
        x, y = _as_tile(tile)
        return Vec2((x + 0.5) * self.tile_width, (y + 0.5) * self.tile_height)

    def terrain_at(self, world_pos: Vec2) -> TerrainType:
        """Terrain of the tile corner nearest to a world position."""
        index = self._index(self.world_to_tile(world_pos))
        if index is None:
            return TerrainType.NONE
        left = int(world_pos.x) % self.tile_width < self.tile_width // 2
        top = int(world_pos.y) % self.tile_height < self.tile_height // 2
        if top:
            corner = Corner.TOP_LEFT if left else Corner.TOP_RIGHT
        else:
            corner = Corner.BOTTOM_LEFT if left else Corner.BOTTOM_RIGHT
        return self._terrains[index].get(corner, TerrainType.NONE)

    def pathfind(self, start: Sequence[int], end: Sequence[int]) -> list[Tile]:
        """Find a 4-connected path from start to end, both included.

        Returns an empty list when start equals end or no path exists.
        """
        start = _as_tile(start)
        end = _as_tile(end)
        if start == end:
            return []
        if not self.is_passable(start) or not self.is_passable(end):
            return []

        g_scores: dict[Tile, float] = {start: 0.0}
        parents: dict[Tile, Tile] = {}
        closed: set[Tile] = set()
        order = itertools.count()
        open_heap = [(_euclidean_distance_on_grid(start, end), next(order), start)]

        while open_heap:
            _, _, current = heapq.heappop(open_heap)
            if current == end:
                break
            if current in closed:
                continue
            closed.add(current)
            current_g = g_scores[current]
            for dx, dy in _MOVEMENT_DIRECTIONS:
                neighbor = (current[0] + dx, current[1] + dy)
                if not self.is_passable(neighbor) or neighbor in closed:
                    continue
                tentative = current_g + _manhattan_distance(current, neighbor)
                if tentative >= g_scores.get(neighbor, math.inf):
                    continue
                parents[neighbor] = current
                g_scores[neighbor] = tentative
                priority = tentative + _euclidean_distance_on_grid(neighbor, end)
                heapq.heappush(open_heap, (priority, next(order), neighbor))
        else:
            return []

        path = [end]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        path.reverse()
        return path