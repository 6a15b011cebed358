"""
Measurement calculation engines for distance, area and unit handling
"""

# Common constants (imported first for use by other modules)
from .measurement_constants import (
    DEFAULT_HORIZONTAL_FOV_DEG, DEFAULT_DISTANCE_TO_SURFACE_M,
    MIN_DISTANCE_TO_SURFACE_M, MAX_DISTANCE_TO_SURFACE_M, CALIBRATION_STEP_M,
    LINE_POINT_THRESHOLD, AREA_POINT_THRESHOLD
)
from .geometry import (
    distance_2d, distance_3d, magnitude, normalize, dot_product, cross_product,
    lerp, clamp, polygon_area_pixels, polygon_perimeter_pixels
)
from .units import (
    MeasurementUnit, convert, convert_area, format_distance, format_area,
    format_optional_distance, toggle_unit, parse_unit,
    meters_to_cm, meters_to_inches, cm_to_inches, inches_to_cm
)
from .projection import visible_width, meters_per_pixel, pixel_to_real_world, pixel_area_to_real_world
from .result_types import ResultStatus, CaptureResult, ValidationResult
from .debug_logger import debug_logger

__all__ = [
    # Constants
    'DEFAULT_HORIZONTAL_FOV_DEG',
    'DEFAULT_DISTANCE_TO_SURFACE_M',
    'MIN_DISTANCE_TO_SURFACE_M',
    'MAX_DISTANCE_TO_SURFACE_M',
    'CALIBRATION_STEP_M',
    'LINE_POINT_THRESHOLD',
    'AREA_POINT_THRESHOLD',
    # Vector math
    'distance_2d',
    'distance_3d',
    'magnitude',
    'normalize',
    'dot_product',
    'cross_product',
    'lerp',
    'clamp',
    'polygon_area_pixels',
    'polygon_perimeter_pixels',
    # Units
    'MeasurementUnit',
    'convert',
    'convert_area',
    'format_distance',
    'format_area',
    'format_optional_distance',
    'toggle_unit',
    'parse_unit',
    'meters_to_cm',
    'meters_to_inches',
    'cm_to_inches',
    'inches_to_cm',
    # Projection
    'visible_width',
    'meters_per_pixel',
    'pixel_to_real_world',
    'pixel_area_to_real_world',
    # Results
    'ResultStatus',
    'CaptureResult',
    'ValidationResult',
    'debug_logger',
]
