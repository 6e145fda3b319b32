# isocity

Building blocks for an isometric city-building game, usable on their own
without any graphics or audio backend. Pure Python, no dependencies.

## Modules

- `isocity.point`: the `Point` map coordinate. Two points are equal when their
  `x` and `y` match; `z`, `height` and `raw_height` are carried along.
  Methods: `invalid()`, `is_within_map_boundaries(map_size)`,
  `is_neighbor_of(other, map_size)`, `is_direct_neighbor_of(other)`,
  `manhattan_distance_to(target)`, `distance_to(target)` (truncated to an
  integer) and `to_index(map_size)`.
- `isocity.point_functions`: `get_line` (Bresenham line), `get_straight_line`
  (L-shaped path, x first then y), `get_area` (inclusive rectangle),
  `get_neighbors(center, include_central_node, map_size, distance=1)`, and
  `get_neighbor_position_to_origin`, which returns a `NeighborNodesPosition`
  bit flag and raises `ValueError` for points that are not adjacent.
- `isocity.strings`: `remove_substring` (first occurrence only), `starts_with`
  and `ends_with`.
- `isocity.compression`: `compress_string` (zlib, best compression; text is
  encoded as UTF-8) and `decompress_string`, which returns bytes. Both raise
  `CompressionError` on failure, including a truncated stream.
- `isocity.map_edit`: the `TerrainEdit` enum and a `MapEditState` dataclass
  holding the active terrain tool, the tile to place and the demolish and
  highlight flags, with `reset()`.
- `isocity.tile_data`: `TileData`, `TileSetData` and `TileSize` dataclasses,
  the `TileType`, `ZoneType`, `ZoneDensity` and `Style` enums, and the `TD_*`
  limit constants.
- `isocity.settings`: the `Settings` dataclass with `from_json` / `to_json`
  (missing keys keep their defaults), `load_settings(local_path, cached_path)`
  which prefers the cached file unless the local file has a newer
  `SettingsVersion`, `save_settings(settings, path)` and
  `reset_settings_to_defaults(local_path)`. A missing or unparsable local file
  raises `ConfigurationError`.
- `isocity.iso_math`: `ScreenPoint`, `calculate_iso_coordinates`,
  `convert_iso_to_screen_coordinates`, `convert_screen_to_iso_coordinates`
  (takes an optional `find_node` callback and otherwise computes and clamps the
  result to the map), `are_points_within_map_boundaries` and `clamp`.
- `isocity.camera`: a `Camera` dataclass with zoom in steps of 0.5 between 0.5
  and 4.0, pinch-to-zoom, centring on a point or on the map centre, and
  panning. Optional `on_refresh` and `find_node` callbacks connect it to a map.
- `isocity.terrain`: `BiomeData` (with `from_json`), `TerrainSettings`, and
  `load_biome_data(path)`, which reads every biome from a JSON file and raises
  `ConfigurationError` if it cannot be read or parsed.

## Example

```python
from isocity.point import Point
from isocity.point_functions import get_line, get_neighbors
from isocity.compression import compress_string, decompress_string

line = get_line(Point(0, 0), Point(4, 2))
around = get_neighbors(Point(5, 5), False, 128)

packed = compress_string("savegame contents")
assert decompress_string(packed) == b"savegame contents"
```

## What it does not do

There is no window, rendering or input handling, no sound playback or audio
configuration, and no map object: the package does not generate terrain
heights or rivers, place tiles, or load and save savegames. `isocity.terrain`
only holds the generator's settings and the biome tile lists, and the camera
refreshes or looks up map nodes only through the callbacks it is given.

## Installation and tests

```
pip install ".[test]"
pytest
```