"""
Measurement Constants - Centralized definition of all magic numbers
Shared by the projection, unit conversion and point session code
"""

from typing import Tuple

# =============================================================================
# CAMERA / PROJECTION CONSTANTS
# =============================================================================

# Horizontal field of view of a typical phone camera (degrees)
DEFAULT_HORIZONTAL_FOV_DEG: float = 60.0

# Calibration distance to the measured surface (meters)
MIN_DISTANCE_TO_SURFACE_M: float = 0.1
MAX_DISTANCE_TO_SURFACE_M: float = 5.0
DEFAULT_DISTANCE_TO_SURFACE_M: float = 0.5

# Step used by the calibration +/- buttons (meters)
CALIBRATION_STEP_M: float = 0.1

# Calibration values are displayed and stored with one decimal
CALIBRATION_DECIMALS: int = 1

# =============================================================================
# UNIT CONVERSION CONSTANTS
# =============================================================================

METERS_TO_CM: float = 100.0
METERS_TO_INCHES: float = 39.3701
CM_TO_INCHES: float = 0.393701
INCHES_TO_CM: float = 2.54

# Default number of decimals in formatted values
DEFAULT_DISPLAY_DECIMALS: int = 2

# Shown when there is no value to display
EMPTY_VALUE_DISPLAY: str = "--"

# =============================================================================
# POINT SESSION CONSTANTS
# =============================================================================

# Points required to complete one measurement
LINE_POINT_THRESHOLD: int = 2
AREA_POINT_THRESHOLD: int = 4

# Valid ranges for configuration values
FOV_RANGE_DEG: Tuple[float, float] = (1.0, 179.0)
