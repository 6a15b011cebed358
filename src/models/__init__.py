"""
Data models for the measurement engine
"""

from .measurement import (
	MeasurementUnit,
	MeasurementMode,
	PositionKind,
	Point2D,
	Point3D,
	Position,
	MeasurementPoint,
	LineMeasurement,
	AreaMeasurement,
	Calibration,
	new_id,
)

__all__ = [
	'MeasurementUnit',
	'MeasurementMode',
	'PositionKind',
	'Point2D',
	'Point3D',
	'Position',
	'MeasurementPoint',
	'LineMeasurement',
	'AreaMeasurement',
	'Calibration',
	'new_id',
]
