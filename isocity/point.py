"""Integer map coordinates with optional height information."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, eq=False)
class Point:
    """A position on the isometric map.

    Two points are equal when their x and y coordinates match; the z index,
    the height level and the raw height are carried along but not compared.
    """

    x: int = 0
    y: int = 0
    z: int = 0
    height: int = 0
    raw_height: float = 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash(self.x) ^ hash(self.y)

    @staticmethod
    def invalid() -> Point:
        """Return the sentinel point used for "no such coordinate"."""
        return Point(-1, -1, -1, -1)

    def is_within_map_boundaries(self, map_size: int) -> bool:
        """Whether the point lies on a square map of ``map_size`` nodes per side."""
        return 0 <= self.x < map_size and 0 <= self.y < map_size

    def is_neighbor_of(self, other: Point, map_size: int) -> bool:
        """Whether ``other`` is within one node of this point in any direction."""
        return self.is_within_map_boundaries(map_size) and (
            max(abs(other.x - self.x), abs(other.y - self.y)) <= 1
        )

    def is_direct_neighbor_of(self, other: Point) -> bool:
        """Whether ``other`` touches this point in a cardinal direction."""
        return (self.x == other.x and abs(self.y - other.y) <= 1) or (
            self.y == other.y and abs(self.x - other.x) <= 1
        )

    def manhattan_distance_to(self, target: Point) -> int:
        """Sum of the absolute coordinate differences to ``target``."""
        return abs(self.x - target.x) + abs(self.y - target.y)

    def distance_to(self, target: Point) -> int:
        """Euclidean distance to ``target``, truncated to an integer."""
        dx = self.x - target.x
        dy = self.y - target.y
        return int(math.sqrt(dx * dx + dy * dy))

    def to_index(self, map_size: int) -> int:
        """Index of this point in a row-major list of map nodes."""
        return self.x * map_size + self.y