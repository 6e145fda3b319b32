"""The camera that looks at the isometric map: zoom, offset and centring."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from .iso_math import (
    ScreenPoint,
    convert_iso_to_screen_coordinates,
    convert_screen_to_iso_coordinates,
)
from .point import Point
from .settings import Settings

_MAX_ZOOM = 4.0
_MIN_ZOOM = 0.5
_ZOOM_STEP = 0.5
_PINCH_THRESHOLD = 0.25


@dataclass
class Camera:
    """Position and zoom of the view onto the map.

    ``on_refresh`` is called whenever the visible part of the map has to be
    redrawn; ``find_node`` looks up the map node drawn at a screen position
    (returning a point with x == -1 when nothing is hit).
    """

    settings: Settings = field(default_factory=Settings)
    on_refresh: Callable[[], None] | None = None
    find_node: Callable[[ScreenPoint], Point] | None = None
    tile_size: ScreenPoint = ScreenPoint(32, 16)
    camera_offset: ScreenPoint = ScreenPoint(0, 0)
    zoom_level: float = 1.0
    can_scale: bool = True
    can_move: bool = True
    center_iso_coordinates: Point = field(default_factory=Point)
    _pinch_distance: float = field(default=0.0, init=False, repr=False)

    def _refresh(self) -> None:
        if self.on_refresh is not None:
            self.on_refresh()

    def increase_zoom_level(self) -> None:
        """Zoom in one step, up to the maximum zoom level."""
        if not self.can_scale:
            return
        if self.zoom_level < _MAX_ZOOM:
            self.zoom_level += _ZOOM_STEP
            self.center_screen_on_point(self.center_iso_coordinates)
            self._refresh()

    def decrease_zoom_level(self) -> None:
        """Zoom out one step, down to the minimum zoom level."""
        if not self.can_scale:
            return
        if self.zoom_level > _MIN_ZOOM:
            self.zoom_level -= _ZOOM_STEP
            self.center_screen_on_point(self.center_iso_coordinates)
            self._refresh()

    def change_zoom_level(self, increase: bool) -> None:
        """Zoom in if ``increase`` is true, otherwise zoom out."""
        if increase:
            self.increase_zoom_level()
        else:
            self.decrease_zoom_level()

    def set_pinch_distance(self, pinch_distance: float, iso_x: int, iso_y: int) -> None:
        """Accumulate a touch pinch and zoom around (iso_x, iso_y) once it is large enough."""
        self._pinch_distance += pinch_distance

        if self._pinch_distance > _PINCH_THRESHOLD:
            self._pinch_distance = 0.0
            if self.zoom_level < _MAX_ZOOM:
                self.center_screen_on_point(Point(iso_x, iso_y, 0, 0))
            self.increase_zoom_level()
        elif self._pinch_distance < -_PINCH_THRESHOLD:
            self._pinch_distance = 0.0
            if self.zoom_level > _MIN_ZOOM:
                self.center_screen_on_point(Point(iso_x, iso_y, 0, 0))
            self.decrease_zoom_level()

    def center_screen_on_point(self, iso_coordinates: Point) -> None:
        """Move the camera so that ``iso_coordinates`` is in the middle of the screen.

        Points outside the map are ignored.
        """
        if not iso_coordinates.is_within_map_boundaries(self.settings.map_size):
            return

        self.center_iso_coordinates = iso_coordinates
        screen = convert_iso_to_screen_coordinates(
            iso_coordinates, self.camera_offset, self.zoom_level, self.tile_size, True
        )
        tile_w = self.tile_size.x * self.zoom_level
        tile_h = self.tile_size.y * self.zoom_level

        x = int((screen.x + tile_w * 0.5) - self.settings.screen_width * 0.5)
        y = int((screen.y + tile_h * 0.25) - self.settings.screen_height * 0.5)
        x -= int(tile_w * 0.75)
        y -= int(tile_h)

        self.camera_offset = ScreenPoint(x, y)
        self._refresh()

    def center_screen_on_map_center(self) -> None:
        """Centre the camera on the middle of the map."""
        half = self.settings.map_size // 2
        self.center_iso_coordinates = Point(half, half, 0, 0)
        self.center_screen_on_point(self.center_iso_coordinates)
        self._refresh()

    def move_camera(self, x_offset: int, y_offset: int) -> None:
        """Scroll the view by the given number of pixels."""
        if not self.can_move:
            return

        self.camera_offset = ScreenPoint(
            self.camera_offset.x - x_offset, self.camera_offset.y - y_offset
        )
        self._refresh()
        screen_center = ScreenPoint(
            self.settings.screen_width // 2, self.settings.screen_height // 2
        )
        self.center_iso_coordinates = convert_screen_to_iso_coordinates(
            screen_center,
            self.camera_offset,
            self.zoom_level,
            self.tile_size,
            self.settings.map_size,
            self.find_node,
        )