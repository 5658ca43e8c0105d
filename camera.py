#camera.py

import pygame
import constants as C
import logger as log

class Camera:
    def __init__(self):
        self.x, self.y = C.CAMERA_CENTER
        self.zoom = C.CAMERA_PIXELS_PER_UNIT
        log.log(f"Camera initialized at world coordinates ({self.x:.2f}, {self.y:.2f}) with zoom {self.zoom:.0f} px/unit")

    def world_to_screen(self, world_x, world_y):
        # Screen y grows downwards, world y grows upwards.
        screen_x = (world_x - self.x) * self.zoom + C.SCREEN_WIDTH / 2
        screen_y = (self.y - world_y) * self.zoom + C.SCREEN_HEIGHT / 2
        return int(round(screen_x)), int(round(screen_y))

    def screen_to_world(self, screen_x, screen_y):
        """Converts a point from screen coordinates to world coordinates."""
        world_x = (screen_x - C.SCREEN_WIDTH / 2) / self.zoom + self.x
        world_y = self.y - (screen_y - C.SCREEN_HEIGHT / 2) / self.zoom
        return world_x, world_y

    def pan(self, dx, dy):
        """Pans the camera by a screen-space offset and clamps it near the origin."""
        self.x += dx / self.zoom
        self.y -= dy / self.zoom

        self.x = max(-C.CAMERA_PAN_LIMIT_UNITS, min(C.CAMERA_PAN_LIMIT_UNITS, self.x))
        self.y = max(-C.CAMERA_PAN_LIMIT_UNITS, min(C.CAMERA_PAN_LIMIT_UNITS, self.y))

    def zoom_in(self, screen_pos=None):
        """Zooms in, clamping to a maximum zoom level and keeping screen_pos fixed if given."""
        self._zoom_by(1 + C.CAMERA_ZOOM_SPEED, screen_pos)

    def zoom_out(self, screen_pos=None):
        """Zooms out, clamping to a minimum zoom level."""
        self._zoom_by(1 - C.CAMERA_ZOOM_SPEED, screen_pos)

    def _zoom_by(self, factor, screen_pos):
        anchor = self.screen_to_world(*screen_pos) if screen_pos is not None else None
        self.zoom *= factor
        self.zoom = max(C.CAMERA_MIN_PIXELS_PER_UNIT, min(C.CAMERA_MAX_PIXELS_PER_UNIT, self.zoom))
        if anchor is not None:
            # Shift so the world point under the cursor stays under the cursor.
            after = self.screen_to_world(*screen_pos)
            self.x += anchor[0] - after[0]
            self.y += anchor[1] - after[1]

    def draw_triangle(self, screen, corners, color, width=1):
        points = [self.world_to_screen(c.x, c.y) for c in corners]
        pygame.draw.polygon(screen, color, points, width)

    def draw_point(self, screen, point, color, radius):
        pygame.draw.circle(screen, color, self.world_to_screen(point.x, point.y), radius)
