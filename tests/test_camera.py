import pytest

from isocity.camera import Camera
from isocity.iso_math import ScreenPoint
from isocity.point import Point
from isocity.settings import Settings


def make_camera(**kwargs):
    return Camera(settings=Settings(), **kwargs)


def test_increase_zoom_steps_by_half():
    camera = make_camera()
    start = camera.zoom_level
    camera.increase_zoom_level()
    assert camera.zoom_level == start + 0.5


def test_zoom_is_capped_at_maximum():
    camera = make_camera()
    for _ in range(20):
        camera.increase_zoom_level()
    assert camera.zoom_level == 4.0


def test_zoom_is_capped_at_minimum():
    camera = make_camera()
    for _ in range(20):
        camera.decrease_zoom_level()
    assert camera.zoom_level == 0.5


def test_zoom_disabled_when_cannot_scale():
    camera = make_camera()
    camera.can_scale = False
    camera.increase_zoom_level()
    camera.decrease_zoom_level()
    assert camera.zoom_level == 1.0


@pytest.mark.parametrize("increase, delta", [(True, 0.5), (False, -0.5)])
def test_change_zoom_level(increase, delta):
    camera = make_camera()
    camera.change_zoom_level(increase)
    assert camera.zoom_level == 1.0 + delta


def test_center_on_map_center_worked_example():
    camera = make_camera()
    camera.center_screen_on_map_center()
    assert camera.center_iso_coordinates == Point(64, 64)
    assert camera.camera_offset == ScreenPoint(1640, -312)


def test_center_on_point_outside_map_is_ignored():
    camera = make_camera()
    camera.center_screen_on_point(Point(-1, 5))
    assert camera.camera_offset == ScreenPoint(0, 0)
    assert camera.center_iso_coordinates == Point(0, 0)


def test_center_on_point_is_independent_of_previous_offset():
    camera = make_camera()
    camera.center_screen_on_point(Point(10, 20))
    first = camera.camera_offset
    camera.move_camera(33, -17)
    camera.center_screen_on_point(Point(10, 20))
    assert camera.camera_offset == first
    assert camera.center_iso_coordinates == Point(10, 20)


def test_move_camera_shifts_offset():
    camera = make_camera(find_node=lambda screen: Point(5, 6))
    camera.move_camera(10, -4)
    assert camera.camera_offset == ScreenPoint(-10, 4)
    assert camera.center_iso_coordinates == Point(5, 6)


def test_move_camera_disabled():
    camera = make_camera()
    camera.can_move = False
    camera.move_camera(10, 10)
    assert camera.camera_offset == ScreenPoint(0, 0)


def test_move_camera_clamps_center_to_map():
    camera = make_camera()
    camera.move_camera(100000, 100000)
    center = camera.center_iso_coordinates
    assert 0 <= center.x < camera.settings.map_size
    assert 0 <= center.y < camera.settings.map_size


def test_refresh_callback_is_called():
    calls = []
    camera = make_camera(on_refresh=lambda: calls.append(1))
    camera.increase_zoom_level()
    assert len(calls) >= 1
    before = len(calls)
    camera.move_camera(1, 1)
    assert len(calls) == before + 1


def test_pinch_accumulates_before_zooming():
    camera = make_camera()
    camera.set_pinch_distance(0.1, 10, 10)
    camera.set_pinch_distance(0.1, 10, 10)
    assert camera.zoom_level == 1.0
    camera.set_pinch_distance(0.1, 10, 10)
    assert camera.zoom_level == 1.0 + 0.5
    assert camera.center_iso_coordinates == Point(10, 10)


def test_pinch_out_zooms_out():
    camera = make_camera()
    camera.set_pinch_distance(-0.3, 7, 8)
    assert camera.zoom_level == 0.5
    assert camera.center_iso_coordinates == Point(7, 8)


def test_pinch_resets_after_zoom():
    camera = make_camera()
    camera.set_pinch_distance(0.3, 1, 1)
    zoom = camera.zoom_level
    camera.set_pinch_distance(0.1, 1, 1)
    assert camera.zoom_level == zoom