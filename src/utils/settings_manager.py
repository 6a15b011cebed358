"""
Settings Manager - Handles measurement defaults persistence using QSettings
"""

from PySide6.QtCore import QSettings

from calculations.debug_logger import debug_logger
from calculations.geometry import clamp
from calculations.measurement_constants import (
    DEFAULT_DISTANCE_TO_SURFACE_M, DEFAULT_HORIZONTAL_FOV_DEG, FOV_RANGE_DEG,
    MIN_DISTANCE_TO_SURFACE_M, MAX_DISTANCE_TO_SURFACE_M
)
from calculations.result_types import ValidationResult
from calculations.units import MeasurementUnit, parse_unit


class SettingsManager:
    """Manages measurement defaults using QSettings

    Only defaults are stored here; measurement history is never persisted.
    """

    ORGANIZATION = "Camera Measure"
    APPLICATION = "Camera Measure Tool"

    # Settings keys
    KEY_DEFAULT_UNIT = "measurement/default_unit"
    KEY_HORIZONTAL_FOV = "measurement/horizontal_fov"
    KEY_DEFAULT_DISTANCE = "measurement/default_distance"

    def __init__(self, settings=None):
        """Initialize the settings manager

        Args:
            settings (QSettings, optional): Settings store to use instead of the
                per-user native store (e.g. an INI file in tests)
        """
        if settings is None:
            settings = QSettings(SettingsManager.ORGANIZATION, SettingsManager.APPLICATION)
        self.settings = settings

    def _read_float(self, key, default):
        raw = self.settings.value(key, None)
        if raw is None:
            return default
        try:
            return float(raw)
        except (TypeError, ValueError):
            debug_logger.warning("SettingsManager", "Invalid stored number, using default",
                                 {'key': key, 'stored': str(raw), 'default': default})
            return default

    def get_default_unit(self):
        """
        Get the unit new sessions start in

        Returns:
            MeasurementUnit: Stored unit, or centimeters if unset or invalid
        """
        raw = self.settings.value(self.KEY_DEFAULT_UNIT, None)
        if raw is None:
            return MeasurementUnit.CM
        try:
            return parse_unit(raw)
        except ValueError:
            debug_logger.warning("SettingsManager", "Invalid stored unit, using cm",
                                 {'stored': str(raw)})
            return MeasurementUnit.CM

    def set_default_unit(self, unit):
        self.settings.setValue(self.KEY_DEFAULT_UNIT, unit.value)
        self.settings.sync()

    def get_horizontal_fov(self):
        fov = self._read_float(self.KEY_HORIZONTAL_FOV, DEFAULT_HORIZONTAL_FOV_DEG)
        low, high = FOV_RANGE_DEG
        if not low <= fov <= high:
            debug_logger.warning("SettingsManager", "Stored FOV out of range, using default",
                                 {'stored': fov})
            return DEFAULT_HORIZONTAL_FOV_DEG
        return fov

    def set_horizontal_fov(self, fov_degrees):
        """
        Store the horizontal field of view

        Returns:
            ValidationResult: invalid (and nothing stored) when outside the FOV range
        """
        result = self.validate_fov(fov_degrees)
        if result.is_valid:
            self.settings.setValue(self.KEY_HORIZONTAL_FOV, float(fov_degrees))
            self.settings.sync()
        return result

    def get_default_distance(self):
        """Default calibration distance in meters, clamped into the calibration range"""
        distance = self._read_float(self.KEY_DEFAULT_DISTANCE, DEFAULT_DISTANCE_TO_SURFACE_M)
        return clamp(distance, MIN_DISTANCE_TO_SURFACE_M, MAX_DISTANCE_TO_SURFACE_M)

    def set_default_distance(self, distance):
        applied = clamp(float(distance), MIN_DISTANCE_TO_SURFACE_M, MAX_DISTANCE_TO_SURFACE_M)
        self.settings.setValue(self.KEY_DEFAULT_DISTANCE, applied)
        self.settings.sync()
        return applied

    def clear(self):
        """Remove all stored defaults"""
        for key in (self.KEY_DEFAULT_UNIT, self.KEY_HORIZONTAL_FOV, self.KEY_DEFAULT_DISTANCE):
            self.settings.remove(key)
        self.settings.sync()

    @staticmethod
    def validate_fov(fov_degrees):
        result = ValidationResult(is_valid=True)
        try:
            fov = float(fov_degrees)
        except (TypeError, ValueError):
            result.add_error(f"Field of view must be a number, got {fov_degrees!r}")
            return result
        low, high = FOV_RANGE_DEG
        if not low <= fov <= high:
            result.add_error(f"Field of view must be between {low:g} and {high:g} degrees")
        elif fov < 30 or fov > 120:
            result.add_warning("Field of view is unusual for a phone camera")
        return result


# Global instance
_settings_manager = None


def get_settings_manager():
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
