"""Lines, areas and neighbourhoods of map points."""

from __future__ import annotations

from enum import IntFlag

from .point import Point


class NeighborNodesPosition(IntFlag):
    """Position of a neighbouring node relative to a centre node, as a bit."""

    CENTER = 0
    TOP = 1
    BOTTOM = 1 << 1
    LEFT = 1 << 2
    RIGHT = 1 << 3
    TOP_LEFT = 1 << 4
    TOP_RIGHT = 1 << 5
    BOTTOM_LEFT = 1 << 6
    BOTTOM_RIGHT = 1 << 7


_POSITIONS_BY_OFFSET = {
    (0, 0): NeighborNodesPosition.CENTER,
    (0, 1): NeighborNodesPosition.TOP,
    (0, -1): NeighborNodesPosition.BOTTOM,
    (1, 0): NeighborNodesPosition.RIGHT,
    (1, 1): NeighborNodesPosition.TOP_RIGHT,
    (1, -1): NeighborNodesPosition.BOTTOM_RIGHT,
    (-1, 0): NeighborNodesPosition.LEFT,
    (-1, 1): NeighborNodesPosition.TOP_LEFT,
    (-1, -1): NeighborNodesPosition.BOTTOM_LEFT,
}


def get_line(start: Point, end: Point) -> list[Point]:
    """Return the nodes of a four-connected Bresenham line from start to end."""
    x0, y0 = start.x, start.y
    x1, y1 = end.x, end.y
    line = [Point(x0, y0)]

    if x0 == x1 and y0 == y1:
        return line

    dx = x1 - x0
    dy = y1 - y0
    step_x = -1 if dx < 0 else 1
    step_y = -1 if dy < 0 else 1
    dx = abs(dx) << 1
    dy = abs(dy) << 1

    if dx > dy:
        fraction = dy - (dx >> 1)
        while x0 != x1:
            x0 += step_x
            if fraction >= 0:
                line.append(Point(x0, y0))
                y0 += step_y
                fraction -= dx
            fraction += dy
            if x0 >= 0 and y0 >= 0:
                line.append(Point(x0, y0))
    else:
        fraction = dx - (dy >> 1)
        while y0 != y1:
            if fraction >= 0:
                x0 += step_x
                fraction -= dy
                line.append(Point(x0, y0))
            y0 += step_y
            fraction += dx
            if x0 >= 0 and y0 >= 0:
                line.append(Point(x0, y0))

    return line


def get_straight_line(start: Point, end: Point) -> list[Point]:
    """Return the nodes of an L-shaped path from start towards end.

    The path runs along x first and then along y; when the points are one
    node apart along y only, the y leg is walked at the start's column.
    """
    direction_x = 1 if start.x < end.x else -1
    direction_y = 1 if start.y < end.y else -1
    x_dist = abs(start.x - end.x)
    y_dist = abs(start.y - end.y)

    path: list[Point] = []
    if x_dist == 0 and y_dist == 0:
        path.append(Point(start.x, start.y))

    if x_dist == 0 and y_dist == 1:
        static_x, static_y = start.x, end.y
    else:
        static_x, static_y = end.x, start.y

    path.extend(Point(x, static_y) for x in range(start.x, end.x, direction_x))
    path.extend(Point(static_x, y) for y in range(start.y, end.y, direction_y))
    return path


def get_area(start: Point, end: Point) -> list[Point]:
    """Return every node of the rectangle spanned by start and end, inclusive."""
    min_x, max_x = sorted((start.x, end.x))
    min_y, max_y = sorted((start.y, end.y))
    return [
        Point(x, y)
        for x in range(min_x, max_x + 1)
        for y in range(min_y, max_y + 1)
    ]


def get_neighbors(
    center: Point, include_central_node: bool, map_size: int, distance: int = 1
) -> list[Point]:
    """Return the on-map nodes within ``distance`` of ``center``."""
    neighbors = []
    for x_offset in range(-distance, distance + 1):
        for y_offset in range(-distance, distance + 1):
            if not include_central_node and x_offset == 0 and y_offset == 0:
                continue
            neighbor = Point(center.x + x_offset, center.y + y_offset)
            if neighbor.is_within_map_boundaries(map_size):
                neighbors.append(neighbor)
    return neighbors


def get_neighbor_position_to_origin(
    neighboring_point: Point, origin_point: Point
) -> NeighborNodesPosition:
    """Return where ``neighboring_point`` lies relative to ``origin_point``.

    Raises ValueError if the two points are not adjacent.
    """
    offset = (
        neighboring_point.x - origin_point.x,
        neighboring_point.y - origin_point.y,
    )
    try:
        return _POSITIONS_BY_OFFSET[offset]
    except KeyError:
        raise ValueError(
            f"{neighboring_point!r} is not adjacent to {origin_point!r}"
        ) from None