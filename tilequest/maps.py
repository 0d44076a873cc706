"""Map switching with fade transitions and per-map persistent patches."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Callable, Optional, Sequence

DEFAULT_TRANSITION_DURATION = 0.6  # seconds

_MUSIC_EVENTS = (
    ("summer_forest", "event:/music/map/summer_forest"),
    ("eternal_dungeon", "event:/music/map/eternal_dungeon"),
)


class MapNotFoundError(LookupError):
    """Raised when a map to open is not among the loaded maps."""


class TransitionType(Enum):
    OPEN = "open"  # open a new map
    CLOSE = "close"  # close the current map
    RESET = "reset"  # reset the current map


class LayerType(Enum):
    TILE = "tile"
    OBJECT = "object"
    IMAGE = "image"
    GROUP = "group"


@dataclass(frozen=True)
class MapLayer:
    name: str
    type: LayerType = LayerType.TILE


@dataclass(frozen=True)
class MapInfo:
    path: str
    layers: tuple[MapLayer, ...] = ()

    @property
    def stem(self) -> str:
        return _stem(self.path)


def _stem(path: str) -> str:
    return PurePosixPath(path.replace("\\", "/")).stem if path else ""


def _insert_sorted(values: list[int], value: int) -> bool:
    index = bisect.bisect_left(values, value)
    if index < len(values) and values[index] == value:
        return False
    values.insert(index, value)
    return True


@dataclass
class MapPatch:
    """Changes to a map that persist across reloads of it."""

    destroyed_entities: list[int] = field(default_factory=list)
    opened_chests: list[int] = field(default_factory=list)

    def mark_destroyed(self, entity: int) -> bool:
        """Record an entity as destroyed; False if it already was."""
        return _insert_sorted(self.destroyed_entities, entity)

    def mark_opened(self, entity: int) -> bool:
        """Record a chest as opened; False if it already was."""
        return _insert_sorted(self.opened_chests, entity)


def music_event_for_map(map_path: str) -> Optional[str]:
    """The music event that belongs to a map, or None if it has none."""
    for key, event in _MUSIC_EVENTS:
        if key in map_path:
            return event
    return None


OpenCallback = Callable[[MapInfo, MapPatch], None]
CloseCallback = Callable[[MapInfo], None]


class MapManager:
    """Tracks the current map and moves between maps through timed transitions.

    Transition progress runs from 0 to 1 while fading out of a map and from
    -1 to 0 while fading in to the next one.
    """

    def __init__(
        self,
        maps: Sequence[MapInfo],
        tilesets: Sequence[str] = (),
        on_open: Optional[OpenCallback] = None,
        on_close: Optional[CloseCallback] = None,
    ) -> None:
        self.maps = list(maps)
        self.tilesets = list(tilesets)
        self._on_open = on_open
        self._on_close = on_close
        self._current_path = ""
        self._next_path = ""
        self._duration = -1.0  # negative when not transitioning
        self._progress = 1.0
        self._patches: dict[str, MapPatch] = {}
        self.object_layer_index = 0
        self.next_free_layer_index = 0

    def _find_by_path(self, path: str) -> Optional[MapInfo]:
        if not path:
            return None
        return next((m for m in self.maps if m.path == path), None)

    def _find_by_stem(self, stem: str) -> Optional[MapInfo]:
        if not stem:
            return None
        return next((m for m in self.maps if m.stem == stem), None)

    def transition(
        self,
        kind: TransitionType,
        map_name: str = "",
        duration: float = DEFAULT_TRANSITION_DURATION,
    ) -> bool:
        """Start a transition; False if one is running or it makes no sense."""
        if self._duration >= 0.0:
            return False
        if kind is TransitionType.OPEN:
            if not map_name or self._current_path == map_name:
                return False
            target = self._find_by_stem(map_name)
            if target is None:
                raise MapNotFoundError(f"Map not found: {map_name}")
            self._next_path = target.path
        elif kind is TransitionType.CLOSE:
            if not self._current_path:
                return False
        elif kind is TransitionType.RESET:
            if not self._current_path:
                return False
            self._next_path = self._current_path
        else:
            return False
        self._duration = max(duration, 0.0)
        return True

    def update(self, dt: float) -> None:
        if self._duration < 0.0:
            return
        delta = dt / self._duration if self._duration else 1.0
        change_map = False
        self._progress += delta
        if self._progress - delta < 0.0:
            if self._progress >= 0.0:
                self._progress = 0.0
                self._duration = -1.0
        elif self._progress >= 1.0:
            if not self._next_path:
                self._progress = 1.0
                self._duration = -1.0
            else:
                self._progress = -1.0
            change_map = True

        if change_map:
            self._change_map()

    def _change_map(self) -> None:
        current = self._find_by_path(self._current_path)
        target = self._find_by_path(self._next_path)
        self._current_path = self._next_path
        self._next_path = ""

        if current is not None:
            self.object_layer_index = 0
            self.next_free_layer_index = 0
            if self._on_close is not None:
                self._on_close(current)

        if target is None:
            return

        for index, layer in enumerate(target.layers):
            if layer.type is LayerType.TILE:
                if layer.name.startswith(("object", "Object")):
                    self.object_layer_index = index
                    break
            elif layer.type is LayerType.OBJECT:
                self.object_layer_index = index
                break
        self.next_free_layer_index = len(target.layers)

        patch = self._patches.setdefault(self._current_path, MapPatch())
        if self._on_open is not None:
            self._on_open(target, patch)

    def open(self, map_name: str, transition_duration: float = DEFAULT_TRANSITION_DURATION) -> bool:
        return self.transition(TransitionType.OPEN, map_name, transition_duration)

    def close(self, transition_duration: float = DEFAULT_TRANSITION_DURATION) -> bool:
        return self.transition(TransitionType.CLOSE, "", transition_duration)

    def reset(self, transition_duration: float = DEFAULT_TRANSITION_DURATION) -> bool:
        return self.transition(TransitionType.RESET, "", transition_duration)

    def is_open(self) -> bool:
        return bool(self._current_path)

    def name(self) -> str:
        """Stem of the current map's path, or an empty string."""
        return _stem(self._current_path)

    def find_tileset_by_name(self, name: str) -> Optional[int]:
        """Index of the named tileset, or None if there is none."""
        if not name:
            return None
        return next((i for i, n in enumerate(self.tilesets) if n == name), None)

    def transition_progress(self) -> float:
        return self._progress if self._duration >= 0.0 else 0.0

    def is_dark(self) -> bool:
        return self.name().startswith("muddy_cave")

    def current_patch(self) -> Optional[MapPatch]:
        if not self._current_path:
            return None
        return self._patches.setdefault(self._current_path, MapPatch())

    def mark_entity_as_destroyed(self, entity: int) -> bool:
        patch = self.current_patch()
        return patch is not None and patch.mark_destroyed(entity)

    def mark_chest_as_opened(self, entity: int) -> bool:
        patch = self.current_patch()
        return patch is not None and patch.mark_opened(entity)