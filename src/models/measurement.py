"""
Measurement Models - Points and completed measurements produced by the point session
"""

import time
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Tuple


class MeasurementUnit(Enum):
	"""Display units for measurements"""
	CM = "cm"
	INCH = "inch"
	M = "m"

	@property
	def label(self) -> str:
		"""Short label shown after a value"""
		return {"cm": "cm", "inch": "in", "m": "m"}[self.value]


class MeasurementMode(Enum):
	"""Measurement modes - exactly one is active at a time"""
	LINE = "line"
	AREA = "area"


class PositionKind(Enum):
	TWO_D = "2d"
	THREE_D = "3d"


@dataclass(frozen=True)
class Point2D:
	"""Screen-space pixel coordinates"""
	x: float
	y: float


@dataclass(frozen=True)
class Point3D:
	"""3D point. For tapped points z carries a precomputed real-world distance, not depth."""
	x: float
	y: float
	z: float


@dataclass(frozen=True)
class Position:
	"""Tagged position: the kind says whether z is meaningful"""
	kind: PositionKind
	x: float
	y: float
	z: float = 0.0

	@classmethod
	def two_d(cls, x: float, y: float) -> 'Position':
		return cls(PositionKind.TWO_D, float(x), float(y))

	@classmethod
	def three_d(cls, x: float, y: float, z: float) -> 'Position':
		return cls(PositionKind.THREE_D, float(x), float(y), float(z))

	@property
	def is_3d(self) -> bool:
		return self.kind == PositionKind.THREE_D

	def as_point2d(self) -> Point2D:
		return Point2D(self.x, self.y)

	def as_point3d(self) -> Point3D:
		return Point3D(self.x, self.y, self.z if self.is_3d else 0.0)

	def to_dict(self):
		data = {'kind': self.kind.value, 'x': self.x, 'y': self.y}
		if self.is_3d:
			data['z'] = self.z
		return data


def _now_ms() -> int:
	return int(time.time() * 1000)


def new_id(prefix: str) -> str:
	"""Generate ids like 'point_1700000000000_3f2a9c...'"""
	return f"{prefix}_{_now_ms()}_{uuid.uuid4().hex[:12]}"


@dataclass(frozen=True)
class MeasurementPoint:
	"""A tapped point"""
	position: Position
	id: str = field(default_factory=lambda: new_id("point"))
	timestamp: int = field(default_factory=_now_ms)

	def with_position(self, position: Position) -> 'MeasurementPoint':
		return replace(self, position=position)

	def to_dict(self):
		return {
			'id': self.id,
			'position': self.position.to_dict(),
			'timestamp': self.timestamp,
		}


@dataclass(frozen=True)
class LineMeasurement:
	"""Completed two-point distance measurement (distance in meters)"""
	start_point: MeasurementPoint
	end_point: MeasurementPoint
	distance: float
	unit: MeasurementUnit
	id: str = field(default_factory=lambda: new_id("measurement"))

	kind = MeasurementMode.LINE

	@property
	def value(self) -> float:
		return self.distance

	def to_dict(self):
		"""Convert to dictionary for overlay rendering"""
		return {
			'id': self.id,
			'type': 'line',
			'start': self.start_point.to_dict(),
			'end': self.end_point.to_dict(),
			'distance': self.distance,
			'unit': self.unit.value,
		}


@dataclass(frozen=True)
class AreaMeasurement:
	"""Completed four-point area measurement (area in square meters)

	Vertices keep the tap order; they are never re-sorted into convex order.
	"""
	vertices: Tuple[Point2D, ...]
	area: float
	unit: MeasurementUnit
	id: str = field(default_factory=lambda: new_id("area"))

	kind = MeasurementMode.AREA

	@property
	def value(self) -> float:
		return self.area

	def to_dict(self):
		"""Convert to dictionary for overlay rendering"""
		return {
			'id': self.id,
			'type': 'area',
			'points': [{'x': p.x, 'y': p.y} for p in self.vertices],
			'area': self.area,
			'unit': self.unit.value,
		}


@dataclass(frozen=True)
class Calibration:
	"""Snapshot of the camera calibration used for projection"""
	distance_to_surface: float
	horizontal_fov: float
	screen_width_pixels: float
