"""
Geometry utilities for measurement tools

Provides 2D/3D vector algebra and polygon area and perimeter calculations
in screen pixel space. Every function is total: degenerate input such as
coincident points or zero-length vectors gives zero results.
"""

import math
from typing import Sequence

from models.measurement import Point2D, Point3D


def distance_2d(a: Point2D, b: Point2D) -> float:
	"""Euclidean distance between two screen points."""
	dx = b.x - a.x
	dy = b.y - a.y
	return math.sqrt(dx * dx + dy * dy)


def distance_3d(a: Point3D, b: Point3D) -> float:
	"""Euclidean distance between two 3D points."""
	dx = b.x - a.x
	dy = b.y - a.y
	dz = b.z - a.z
	return math.sqrt(dx * dx + dy * dy + dz * dz)


def magnitude(v: Point3D) -> float:
	return math.sqrt(v.x * v.x + v.y * v.y + v.z * v.z)


def normalize(v: Point3D) -> Point3D:
	"""Return the unit vector of v, or the zero vector when |v| is 0."""
	length = magnitude(v)
	if length == 0:
		return Point3D(0.0, 0.0, 0.0)
	return Point3D(v.x / length, v.y / length, v.z / length)


def dot_product(v1: Point3D, v2: Point3D) -> float:
	return v1.x * v2.x + v1.y * v2.y + v1.z * v2.z


def cross_product(v1: Point3D, v2: Point3D) -> Point3D:
	return Point3D(
		v1.y * v2.z - v1.z * v2.y,
		v1.z * v2.x - v1.x * v2.z,
		v1.x * v2.y - v1.y * v2.x,
	)


def lerp(start: float, end: float, t: float) -> float:
	"""Linear interpolation; t is not restricted to [0, 1]."""
	return start + (end - start) * t


def clamp(value: float, minimum: float, maximum: float) -> float:
	return min(max(value, minimum), maximum)


def polygon_area_pixels(points: Sequence[Point2D]) -> float:
	"""Compute the area in pixel^2 using the shoelace formula.

	Vertices are used in the given order (no convex re-sorting), so a
	self-intersecting tap order gives the net signed area. Returns absolute area.
	"""
	if len(points) < 3:
		return 0.0
	area2 = 0.0
	count = len(points)
	for i in range(count):
		p1 = points[i]
		p2 = points[(i + 1) % count]
		area2 += (p1.x * p2.y) - (p2.x * p1.y)
	return abs(area2) / 2.0


def polygon_perimeter_pixels(points: Sequence[Point2D]) -> float:
	"""Compute closed polygon perimeter length in pixels."""
	if len(points) < 2:
		return 0.0
	perim = 0.0
	count = len(points)
	for i in range(count):
		perim += distance_2d(points[i], points[(i + 1) % count])
	return perim
