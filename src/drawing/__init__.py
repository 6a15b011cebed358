"""
Measurement session components: calibration, point session, history and capture
"""

from .scale_manager import ScaleManager
from .measurement_store import MeasurementStore
from .point_session import PointSession, ModeProfile, MODE_PROFILES
from .capture_bridge import (
    CaptureBridge, PermissionRequest, PermissionResponse, ScreenshotRequest, ScreenshotResponse
)

__all__ = [
    'ScaleManager',
    'MeasurementStore',
    'PointSession',
    'ModeProfile',
    'MODE_PROFILES',
    'CaptureBridge',
    'PermissionRequest',
    'PermissionResponse',
    'ScreenshotRequest',
    'ScreenshotResponse',
]
