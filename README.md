# tilequest

Game logic for a top-down, tile-based role-playing game. It has no ties to any
engine. The package holds state and rules only. A renderer or game loop calls
into it and draws the results.

## Installation

```
pip install .
```

To install the test tools as well:

```
pip install ".[test]"
```

## Modules

### `tilequest.vecmath`

- `Vec2` is an immutable 2D vector. It supports `+`, `-`, `*` and `/` by a scalar, unary `-`, and unpacking.
- Scalar helpers: `smoothstep`, `smootherstep`, `lerp` and `lerp_angle`. `lerp_angle` takes the shorter arc.
- Vector helpers:
  - size and direction: `is_zero`, `length`, `length_squared`, `normalize`, `unit_vector`
  - component-wise: `vabs`, `vmin`, `vmax`, `clamp`
  - products and angles: `dot`, `det`, `angle_unsigned`, `angle_signed`, `is_clockwise`
  - rotation: `rotate`, `rotate_90deg`
  - interpolation: `lerp_vec`, `lerp_polar`, `damp`
  - `get_direction`, which returns `'r'`, `'l'`, `'d'` or `'u'`.
- The world uses a y-down coordinate system. Every function is safe on zero vectors.
- `is_convex(polygon)` tests whether a polygon is convex.
- `triangulate(polygon)` ear-clips a simple polygon. It returns a flat list of vertices, three for each triangle, and raises `ValueError` for fewer than three vertices.

### `tilequest.rng`

- `Rng(seed=None)` is a random source. Its methods are:
  - `chance`
  - `range_f`
  - `range_i`, inclusive of both ends
  - `range_ui`
  - `color`, which returns an RGB tuple
  - `on_circle`
  - `in_circle`
- An invalid probability or an empty range raises `ValueError`.
- `seeded_color(seed)` returns a colour that depends only on the seed.

### `tilequest.settings`

- `AppSettings` is a dataclass with these fields: `fullscreen`, `window_scale`, `vsync`, `volume_master`, `volume_music` and `volume_sound`.
- `save_to_stream` and `save_to_file` write one `key value` line per setting. Booleans are written as `0` or `1`.
- `load_from_stream` and `load_from_file` return a new `AppSettings`.
  - They start from the settings you pass in, or from the defaults.
  - Unknown keys are ignored.
  - `load_from_file` raises `OSError` if the file cannot be read.
- `APP_SETTINGS_PATH` is `"settings.txt"`.

### `tilequest.tilegrid`

- `TileGrid(width, height, tile_width, tile_height)` has these members:
  - `set_collision(gids)` marks tiles with a non-zero gid as blocked. It returns `False` and changes nothing if the size does not match the grid.
  - `set_terrain(tile, corner, terrain)` records a `TerrainType` at a `Corner` of a tile.
  - `terrain_at(world_pos)` returns the terrain of the nearest corner.
  - `is_passable`, `world_to_tile` and `get_tile_center`.
  - `pathfind(start, end)` runs A* over the four direct neighbours of each tile. It returns the list of tiles from `start` to `end`, both included. The list is empty when `start == end` or when no path exists.
- `TerrainType.from_name(name)` matches names while ignoring case and whitespace. It returns `TerrainType.NONE` for unknown names.

### `tilequest.postprocessing`

- `PostProcessor(resolution)` tracks these effects:
  - shockwaves: `add_shockwave`, advanced by `update(dt)`; a shockwave is removed once its force runs out
  - darkness intensity, clamped to [0, 1], and darkness centre
  - screen-transition progress, clamped to [-1, 1]
  - Gaussian-blur iterations, at most `MAX_GAUSSIAN_BLUR_ITERATIONS`
- `shockwave_uniforms` and `darkness_uniforms` return the uniform values for each pass, with positions mapped to target pixels.
- `passes()` lists the fullscreen passes to draw, in order.
- `map_world_to_target` maps a world position to render-target pixels.

### `tilequest.outfit`

- Enums for each clothing slot: `Body`, `Socks`, `Shoes`, `Lowerwear`, `Shirt`, `Gloves`, `Outerwear`, `Neckwear`, `Glasses`, `Hair` and `Hat`.
- `Outfit` is the dataclass that holds the pieces and their colours.
- `randomize_outfit(rng=None)` picks every piece and colour at random.
- `outfit_layers(outfit)` returns the `OutfitLayer`s to draw, bottom to top.
  - Each layer carries its texture path and up to two `LutType` palette lookups.
  - Each layer has `uniform_block()` and `lut_paths()`.
  - A bandana or headscarf hides the hair.
- `lut_texture_path(lut_type)` names the palette texture for a lookup type.

### `tilequest.maps`

- `MapManager(maps, tilesets=(), on_open=None, on_close=None)` moves between `MapInfo` maps through timed fade transitions.
- `open`, `close`, `reset` and `transition` start a transition. They return `False` when a transition is already running or when the request does not apply.
- Opening an unknown map raises `MapNotFoundError`.
- `update(dt)` advances the transition and calls the callbacks when the map changes.
- `transition_progress()` runs from 0 to 1 while fading out and from -1 to 0 while fading in. It is 0 when no transition is running.
- Other members: `is_open`, `name`, `is_dark` and `find_tileset_by_name`, plus the `object_layer_index` and `next_free_layer_index` attributes.
- Each map has a `MapPatch`. It records destroyed entities and opened chests, and is kept across reloads of that map.
  - Record into it with `mark_entity_as_destroyed` and `mark_chest_as_opened`.
  - Read it with `current_patch()`.
- `music_event_for_map(path)` returns the music event for a map, or `None`.

## Example

```python
from tilequest.vecmath import Vec2, triangulate
from tilequest.tilegrid import TileGrid

grid = TileGrid(4, 3, 16, 16)
grid.set_collision([0, 0, 0, 0,
                    0, 1, 1, 0,
                    0, 0, 0, 0])
path = grid.pathfind((0, 1), (3, 1))

triangles = triangulate([Vec2(0, 0), Vec2(4, 0), Vec2(4, 4), Vec2(0, 4)])
```

## What the package does not do

The package does none of the following:

- It does not render, open windows or play audio.
- It does not read map, tileset or image files.
- It does not create game entities or physics bodies. `MapManager` calls your `on_open` and `on_close` callbacks for that work.
- It has no game loop and no command-line program.

## Running the tests

```
pytest
```