"""
Unit Tests for the viewer camera transform.
"""

import pytest

import constants as C
from camera import Camera


class TestCamera:

    def test_screen_center_maps_to_camera_center(self):
        camera = Camera()
        assert camera.screen_to_world(C.SCREEN_WIDTH / 2, C.SCREEN_HEIGHT / 2) == pytest.approx(C.CAMERA_CENTER)

    def test_world_y_points_up(self):
        camera = Camera()
        _, low = camera.world_to_screen(0.0, 0.0)
        _, high = camera.world_to_screen(0.0, 0.5)
        assert high < low

    def test_round_trip(self):
        camera = Camera()
        sx, sy = camera.world_to_screen(0.1, 0.2)
        wx, wy = camera.screen_to_world(sx, sy)
        assert wx == pytest.approx(0.1, abs=1 / camera.zoom)
        assert wy == pytest.approx(0.2, abs=1 / camera.zoom)

    def test_zoom_is_clamped(self):
        camera = Camera()
        for _ in range(500):
            camera.zoom_out()
        assert camera.zoom == C.CAMERA_MIN_PIXELS_PER_UNIT
        for _ in range(1000):
            camera.zoom_in()
        assert camera.zoom == C.CAMERA_MAX_PIXELS_PER_UNIT

    def test_zoom_keeps_anchor_under_cursor(self):
        camera = Camera()
        anchor = (100, 150)
        before = camera.screen_to_world(*anchor)
        camera.zoom_in(anchor)
        assert camera.screen_to_world(*anchor) == pytest.approx(before)

    def test_pan_is_clamped(self):
        camera = Camera()
        for _ in range(10000):
            camera.pan(C.CAMERA_PANSPEED_PIXELS, 0)
        assert camera.x == C.CAMERA_PAN_LIMIT_UNITS
