"""
Unit conversion and display formatting for measurements

All engine values are stored in meters (distances) and square meters (areas).
Conversion happens only when a value is formatted for display.
"""

from typing import Optional

from models.measurement import MeasurementUnit
from .measurement_constants import (
    METERS_TO_CM, METERS_TO_INCHES, CM_TO_INCHES, INCHES_TO_CM,
    DEFAULT_DISPLAY_DECIMALS, EMPTY_VALUE_DISPLAY
)

_METERS_PER_UNIT_FACTOR = {
    MeasurementUnit.CM: METERS_TO_CM,
    MeasurementUnit.INCH: METERS_TO_INCHES,
    MeasurementUnit.M: 1.0,
}

_UNIT_ALIASES = {
    "cm": MeasurementUnit.CM,
    "inch": MeasurementUnit.INCH,
    "in": MeasurementUnit.INCH,
    "m": MeasurementUnit.M,
}


def meters_to_cm(meters: float) -> float:
    return meters * METERS_TO_CM


def meters_to_inches(meters: float) -> float:
    return meters * METERS_TO_INCHES


def cm_to_inches(cm: float) -> float:
    return cm * CM_TO_INCHES


def inches_to_cm(inches: float) -> float:
    return inches * INCHES_TO_CM


def convert(meters: float, unit: MeasurementUnit) -> float:
    """Convert a distance in meters to the given display unit"""
    return meters * _METERS_PER_UNIT_FACTOR[unit]


def convert_area(square_meters: float, unit: MeasurementUnit) -> float:
    """Convert an area in square meters to the square of the given unit"""
    factor = _METERS_PER_UNIT_FACTOR[unit]
    return square_meters * factor * factor


def format_distance(meters: float, unit: MeasurementUnit = MeasurementUnit.CM,
                    decimals: int = DEFAULT_DISPLAY_DECIMALS) -> str:
    """Format distance like '12.50 cm'"""
    return f"{convert(meters, unit):.{decimals}f} {unit.label}"


def format_area(square_meters: float, unit: MeasurementUnit = MeasurementUnit.CM,
                decimals: int = DEFAULT_DISPLAY_DECIMALS) -> str:
    """Format area like '100.00 cm²'"""
    return f"{convert_area(square_meters, unit):.{decimals}f} {unit.label}²"


def format_optional_distance(meters: Optional[float], unit: MeasurementUnit = MeasurementUnit.CM,
                             decimals: int = DEFAULT_DISPLAY_DECIMALS) -> str:
    if meters is None:
        return EMPTY_VALUE_DISPLAY
    return format_distance(meters, unit, decimals)


def toggle_unit(unit: MeasurementUnit) -> MeasurementUnit:
    """Cycle between centimeters and inches.

    Meters is only reachable by setting it explicitly; toggling from meters
    goes back into the cm/inch cycle at centimeters.
    """
    if unit == MeasurementUnit.CM:
        return MeasurementUnit.INCH
    return MeasurementUnit.CM


def parse_unit(text: str) -> MeasurementUnit:
    """Parse 'cm', 'inch', 'in' or 'm' into a MeasurementUnit"""
    key = str(text).strip().lower()
    if key not in _UNIT_ALIASES:
        raise ValueError(f"Unknown measurement unit: {text!r}")
    return _UNIT_ALIASES[key]
