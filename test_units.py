#!/usr/bin/env python3
"""
Test script for unit conversion and formatting
"""

import math
import os
import sys

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

import pytest

from calculations.units import (
    MeasurementUnit, convert, convert_area, format_distance, format_area,
    format_optional_distance, toggle_unit, parse_unit,
    meters_to_cm, meters_to_inches, cm_to_inches, inches_to_cm
)


def test_convert():
    assert convert(1.5, MeasurementUnit.CM) == 150.0
    assert math.isclose(convert(1.0, MeasurementUnit.INCH), 39.3701)
    assert convert(2.25, MeasurementUnit.M) == 2.25
    assert meters_to_cm(0.01) == 1.0
    assert math.isclose(meters_to_inches(0.0254), 1.0, rel_tol=1e-5)


def test_cm_inch_round_trip_within_tolerance():
    for value in [0.001, 0.5, 1.0, 12.34, 987.6, 1e6]:
        assert math.isclose(cm_to_inches(inches_to_cm(value)), value, rel_tol=1e-6)


def test_format_distance_labels_and_decimals():
    assert format_distance(0.125, MeasurementUnit.CM) == "12.50 cm"
    assert format_distance(1.0, MeasurementUnit.INCH) == "39.37 in"
    assert format_distance(1.0, MeasurementUnit.M, decimals=3) == "1.000 m"
    assert format_distance(0.125, MeasurementUnit.CM, decimals=0) == "12 cm"


def test_format_area():
    assert convert_area(1.0, MeasurementUnit.CM) == 10000.0
    assert format_area(0.01, MeasurementUnit.CM) == "100.00 cm²"
    assert format_area(2.0, MeasurementUnit.M) == "2.00 m²"
    assert format_area(1.0, MeasurementUnit.INCH, decimals=0) == "1550 in²"


def test_empty_value_placeholder():
    assert format_optional_distance(None) == "--"
    assert format_optional_distance(0.0) == "0.00 cm"


def test_toggle_twice_restores_unit():
    for unit in (MeasurementUnit.CM, MeasurementUnit.INCH):
        assert toggle_unit(toggle_unit(unit)) == unit
    assert toggle_unit(MeasurementUnit.CM) == MeasurementUnit.INCH
    assert toggle_unit(MeasurementUnit.INCH) == MeasurementUnit.CM


def test_meters_is_outside_toggle_cycle():
    assert toggle_unit(MeasurementUnit.M) == MeasurementUnit.CM


def test_parse_unit():
    assert parse_unit("cm") == MeasurementUnit.CM
    assert parse_unit(" IN ") == MeasurementUnit.INCH
    assert parse_unit("inch") == MeasurementUnit.INCH
    assert parse_unit("m") == MeasurementUnit.M
    with pytest.raises(ValueError):
        parse_unit("furlong")


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
