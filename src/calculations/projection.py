"""
Pinhole camera projection - convert on-screen pixel sizes into meters

Every measured point is assumed to lie on one plane at the calibrated
distance from the camera. Lens distortion and off-center placement are not
corrected. The distance must already be clamped by the caller and the
screen width must be positive.
"""

import math

from .measurement_constants import DEFAULT_DISTANCE_TO_SURFACE_M, DEFAULT_HORIZONTAL_FOV_DEG


def visible_width(distance_to_surface: float,
                  horizontal_fov: float = DEFAULT_HORIZONTAL_FOV_DEG) -> float:
    """Width of the plane seen by the camera at the given distance (meters)"""
    fov_rad = (horizontal_fov * math.pi) / 180
    return 2 * distance_to_surface * math.tan(fov_rad / 2)


def meters_per_pixel(screen_width: float,
                     distance_to_surface: float = DEFAULT_DISTANCE_TO_SURFACE_M,
                     horizontal_fov: float = DEFAULT_HORIZONTAL_FOV_DEG) -> float:
    """Scale factor k shared by distance and area conversion"""
    return visible_width(distance_to_surface, horizontal_fov) / screen_width


def pixel_to_real_world(pixel_distance: float, screen_width: float,
                        distance_to_surface: float = DEFAULT_DISTANCE_TO_SURFACE_M,
                        horizontal_fov: float = DEFAULT_HORIZONTAL_FOV_DEG) -> float:
    """Estimate real-world distance (meters) from a pixel distance

    RealSize = (PixelSize / ScreenWidth) * (2 * Distance * tan(FOV / 2))
    """
    screen_proportion = pixel_distance / screen_width
    return screen_proportion * visible_width(distance_to_surface, horizontal_fov)


def pixel_area_to_real_world(pixel_area: float, screen_width: float,
                             distance_to_surface: float = DEFAULT_DISTANCE_TO_SURFACE_M,
                             horizontal_fov: float = DEFAULT_HORIZONTAL_FOV_DEG) -> float:
    """Convert pixel^2 to m^2 using the square of the linear scale factor"""
    k = meters_per_pixel(screen_width, distance_to_surface, horizontal_fov)
    return pixel_area * k * k
