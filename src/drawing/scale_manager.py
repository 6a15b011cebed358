"""
Scale Manager - Handle camera calibration and pixel to meter conversion
"""

import math

from PySide6.QtCore import QObject, Signal

from calculations.debug_logger import debug_logger
from calculations.geometry import clamp, distance_2d, polygon_area_pixels
from calculations.measurement_constants import (
    DEFAULT_DISTANCE_TO_SURFACE_M, DEFAULT_HORIZONTAL_FOV_DEG,
    MIN_DISTANCE_TO_SURFACE_M, MAX_DISTANCE_TO_SURFACE_M, CALIBRATION_DECIMALS, CALIBRATION_STEP_M
)
from calculations.projection import (
    meters_per_pixel, pixel_area_to_real_world, pixel_to_real_world, visible_width
)
from models.measurement import Calibration


class ScaleManager(QObject):
    """Manages the calibration distance and the pixel to meter scale

    The distance to the surface is always kept inside the calibration range;
    out-of-range requests are clamped silently. The screen width must be set
    to a positive value before converting pixels.
    """

    calibration_changed = Signal(float)  # distance_to_surface in meters

    def __init__(self, screen_width_pixels, screen_height_pixels=0,
                 distance_to_surface=DEFAULT_DISTANCE_TO_SURFACE_M,
                 horizontal_fov=DEFAULT_HORIZONTAL_FOV_DEG):
        super().__init__()
        self.screen_width_pixels = screen_width_pixels
        self.screen_height_pixels = screen_height_pixels
        self.horizontal_fov = horizontal_fov
        self.distance_to_surface = self._clamp_distance(distance_to_surface)

    @staticmethod
    def _clamp_distance(distance):
        return clamp(distance, MIN_DISTANCE_TO_SURFACE_M, MAX_DISTANCE_TO_SURFACE_M)

    @staticmethod
    def _round_half_up(value, decimals=CALIBRATION_DECIMALS):
        """Round exact halves upwards (0.25 -> 0.3), as the calibration display does"""
        factor = 10 ** decimals
        return math.floor(value * factor + 0.5) / factor

    def set_screen_dimensions(self, width_pixels, height_pixels):
        """Set the camera preview dimensions in pixels"""
        self.screen_width_pixels = width_pixels
        self.screen_height_pixels = height_pixels

    def set_horizontal_fov(self, fov_degrees):
        self.horizontal_fov = fov_degrees

    def set_distance_to_surface(self, distance):
        """Set the calibration distance, clamped into the valid range"""
        applied = self._clamp_distance(distance)
        debug_logger.log_calibration_change("ScaleManager", distance, applied)
        if applied != self.distance_to_surface:
            self.distance_to_surface = applied
            self.calibration_changed.emit(applied)
        return applied

    def adjust_calibration(self, delta):
        """Step the calibration distance by delta meters

        The result is clamped and rounded to one decimal, matching the
        calibration display.
        """
        target = self._round_half_up(self._clamp_distance(self.distance_to_surface + delta))
        return self.set_distance_to_surface(target)

    def step_calibration(self, direction):
        """Move one calibration step closer (direction < 0) or further (direction > 0)"""
        if direction == 0:
            return self.distance_to_surface
        step = CALIBRATION_STEP_M if direction > 0 else -CALIBRATION_STEP_M
        return self.adjust_calibration(step)

    @property
    def calibration(self):
        return Calibration(
            distance_to_surface=self.distance_to_surface,
            horizontal_fov=self.horizontal_fov,
            screen_width_pixels=self.screen_width_pixels,
        )

    def visible_width(self):
        """Width in meters of the plane covered by the full preview"""
        return visible_width(self.distance_to_surface, self.horizontal_fov)

    def meters_per_pixel(self):
        return meters_per_pixel(self.screen_width_pixels, self.distance_to_surface, self.horizontal_fov)

    def pixels_to_real(self, pixels):
        """Convert a pixel distance to meters"""
        return pixel_to_real_world(pixels, self.screen_width_pixels,
                                   self.distance_to_surface, self.horizontal_fov)

    def pixel_area_to_real(self, pixel_area):
        """Convert a pixel^2 area to square meters"""
        return pixel_area_to_real_world(pixel_area, self.screen_width_pixels,
                                        self.distance_to_surface, self.horizontal_fov)

    def calculate_distance(self, p1, p2):
        """Calculate real-world distance between two screen points"""
        return self.pixels_to_real(distance_2d(p1, p2))

    def calculate_polygon_area(self, points):
        """Calculate real-world area of a polygon given in tap order"""
        return self.pixel_area_to_real(polygon_area_pixels(points))

    def get_scale_info(self):
        """Get current scale information"""
        return {
            'distance_to_surface': self.distance_to_surface,
            'horizontal_fov': self.horizontal_fov,
            'screen_width_pixels': self.screen_width_pixels,
            'screen_height_pixels': self.screen_height_pixels,
            'visible_width': self.visible_width(),
            'meters_per_pixel': self.meters_per_pixel() if self.screen_width_pixels > 0 else 0,
        }
