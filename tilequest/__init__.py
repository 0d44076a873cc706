"""Game logic for a tile-based role-playing game: vector math, random helpers,
settings, tile-grid pathfinding, post-processing state, player outfits and maps."""

__version__ = "0.1.0"

__all__ = ["maps", "outfit", "postprocessing", "rng", "settings", "tilegrid", "vecmath"]