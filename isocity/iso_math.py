"""Conversions between isometric map coordinates and screen coordinates."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import NamedTuple, TypeVar

from .point import Point

_HEIGHT_OFFSET = 24

T = TypeVar("T")


class ScreenPoint(NamedTuple):
    """A position in screen pixels."""

    x: int
    y: int


def _round(value: float) -> float:
    """Round half away from zero."""
    return math.copysign(math.floor(abs(value) + 0.5), value)


def calculate_iso_coordinates(
    screen: ScreenPoint,
    camera_offset: ScreenPoint,
    zoom_level: float,
    tile_size: ScreenPoint,
) -> Point:
    """Compute the iso coordinates under a screen position, ignoring tile height."""
    sx = screen.x + camera_offset.x
    sy = screen.y + camera_offset.y
    scale = tile_size.x * zoom_level
    iso_x = int((sx + 2.0 * sy) / scale + 1)
    iso_y = int((sx - 2.0 * sy) / scale)
    return Point(iso_x, iso_y, 0, 0)


def convert_iso_to_screen_coordinates(
    iso: Point,
    camera_offset: ScreenPoint,
    zoom_level: float,
    tile_size: ScreenPoint,
    calc_without_offset: bool = False,
) -> ScreenPoint:
    """Return the screen position at which the node at ``iso`` is drawn."""
    x = int(_round((iso.x + iso.y) * tile_size.x * zoom_level) / 2)
    y = int(_round((iso.x - iso.y) * tile_size.y * zoom_level) / 2)

    if not calc_without_offset:
        x -= camera_offset.x
        y -= camera_offset.y

    if iso.height > 0:
        y -= int(_round((tile_size.x - _HEIGHT_OFFSET) * iso.height * zoom_level))

    return ScreenPoint(x, y)


def convert_screen_to_iso_coordinates(
    screen: ScreenPoint,
    camera_offset: ScreenPoint,
    zoom_level: float,
    tile_size: ScreenPoint,
    map_size: int,
    find_node: Callable[[ScreenPoint], Point] | None = None,
) -> Point:
    """Return the map node under a screen position.

    ``find_node`` looks the position up among the drawn nodes and returns a
    point with x == -1 when nothing is hit; the coordinates are then computed
    and clamped to the map.
    """
    found = find_node(screen) if find_node is not None else Point(-1, -1)
    if found.x != -1:
        return found
    calculated = calculate_iso_coordinates(screen, camera_offset, zoom_level, tile_size)
    return Point(
        clamp(calculated.x, 0, map_size - 1),
        clamp(calculated.y, 0, map_size - 1),
        calculated.z,
        calculated.height,
    )


def are_points_within_map_boundaries(points: Iterable[Point], map_size: int) -> bool:
    """Whether every point lies on the map."""
    return all(p.is_within_map_boundaries(map_size) for p in points)


def clamp(value: T, lower: T, upper: T) -> T:
    """Limit ``value`` to the range [lower, upper]."""
    return max(lower, min(value, upper))