"""
Point Session - Turn taps into completed line and area measurements
"""

from dataclasses import dataclass
from typing import Callable, List

from PySide6.QtCore import QObject, Signal

from calculations.debug_logger import debug_logger
from calculations.measurement_constants import (
    LINE_POINT_THRESHOLD, AREA_POINT_THRESHOLD, EMPTY_VALUE_DISPLAY
)
from calculations.units import (
    MeasurementUnit, format_area, format_distance, format_optional_distance, toggle_unit
)
from models.measurement import (
    AreaMeasurement, LineMeasurement, MeasurementMode, MeasurementPoint, Point2D, Position
)
from .measurement_store import MeasurementStore
from .scale_manager import ScaleManager


def build_line_measurement(points: List[MeasurementPoint], scale_manager: ScaleManager,
                           unit: MeasurementUnit) -> LineMeasurement:
    """Build a line measurement from two tapped points

    The end point is stored as a 3D position whose z holds the real-world
    distance in meters.
    """
    start, end = points
    distance = scale_manager.calculate_distance(start.position.as_point2d(), end.position.as_point2d())
    end = end.with_position(Position.three_d(end.position.x, end.position.y, distance))
    return LineMeasurement(start_point=start, end_point=end, distance=distance, unit=unit)


def build_area_measurement(points: List[MeasurementPoint], scale_manager: ScaleManager,
                           unit: MeasurementUnit) -> AreaMeasurement:
    """Build an area measurement from four tapped points in tap order"""
    vertices = tuple(p.position.as_point2d() for p in points)
    area = scale_manager.calculate_polygon_area(vertices)
    return AreaMeasurement(vertices=vertices, area=area, unit=unit)


@dataclass(frozen=True)
class ModeProfile:
    """How many points a mode consumes and how it turns them into a record"""
    threshold: int
    emit: Callable


MODE_PROFILES = {
    MeasurementMode.LINE: ModeProfile(LINE_POINT_THRESHOLD, build_line_measurement),
    MeasurementMode.AREA: ModeProfile(AREA_POINT_THRESHOLD, build_area_measurement),
}


class PointSession(QObject):
    """Accumulates tapped points into completed measurements for the active mode

    Working points are flushed into a completed record the moment the mode's
    threshold is reached, so the list never holds more than threshold - 1
    points between calls. All methods run synchronously to completion.
    """

    point_added = Signal(object)              # MeasurementPoint
    measurement_completed = Signal(object)    # LineMeasurement | AreaMeasurement
    preview_changed = Signal(object)          # float meters or None
    mode_changed = Signal(str)
    unit_changed = Signal(str)
    session_reset = Signal()

    def __init__(self, scale_manager: ScaleManager, store: MeasurementStore = None,
                 mode: MeasurementMode = MeasurementMode.LINE,
                 unit: MeasurementUnit = MeasurementUnit.CM):
        super().__init__()
        self.scale_manager = scale_manager
        self.store = store if store is not None else MeasurementStore()
        self._mode = mode
        self._unit = unit
        self._points = []
        self._current_value = None
        self._touch_position = None
        self._is_placing = False

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def mode(self):
        return self._mode

    @property
    def unit(self):
        return self._unit

    @property
    def profile(self):
        return MODE_PROFILES[self._mode]

    @property
    def threshold(self):
        return self.profile.threshold

    @property
    def points(self):
        return tuple(self._points)

    @property
    def points_count(self):
        return len(self._points)

    @property
    def measurements(self):
        return self.store.all()

    @property
    def current_value(self):
        """Last computed distance/area (or live preview distance), None when cleared"""
        return self._current_value

    @property
    def touch_position(self):
        return self._touch_position

    @property
    def is_placing(self):
        return self._is_placing

    @property
    def is_pending(self):
        """True while a line measurement is waiting for its second point"""
        return self._mode == MeasurementMode.LINE and len(self._points) == 1

    # ------------------------------------------------------------------
    # Input events
    # ------------------------------------------------------------------

    def add_point(self, x, y):
        """Handle a tap; returns the completed record when this tap flushed one"""
        point = MeasurementPoint(position=Position.two_d(x, y))
        self._points.append(point)
        self._is_placing = True
        self.point_added.emit(point)
        debug_logger.debug("PointSession", "Point added",
                           {'x': x, 'y': y, 'count': len(self._points), 'mode': self._mode})

        profile = self.profile
        if len(self._points) < profile.threshold:
            return None

        record = profile.emit(list(self._points), self.scale_manager, self._unit)
        self._points = []
        self._touch_position = None
        self.store.append(record)
        self._current_value = record.value
        debug_logger.log_measurement_completed("PointSession", record.kind.value,
                                               record.value, profile.threshold)
        self.measurement_completed.emit(record)
        return record

    def update_preview(self, x, y):
        """Handle a drag/live touch without changing the working points

        In line mode with one pending point this computes the live distance.
        Returns the preview distance, or None when no preview applies.
        """
        self._touch_position = Point2D(float(x), float(y))
        if not self.is_pending:
            return None
        anchor = self._points[0].position.as_point2d()
        distance = self.scale_manager.calculate_distance(anchor, self._touch_position)
        self._current_value = distance
        self.preview_changed.emit(distance)
        return distance

    def end_touch(self):
        self._touch_position = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def reset(self):
        """Clear working points, history and the cached value"""
        self._points = []
        self.store.clear()
        self._current_value = None
        self._touch_position = None
        self._is_placing = False
        debug_logger.debug("PointSession", "Session reset", {'mode': self._mode})
        self.session_reset.emit()
        self.preview_changed.emit(None)

    def set_mode(self, mode: MeasurementMode):
        """Switch mode; in-progress points are discarded, never reinterpreted"""
        self.reset()
        self._mode = mode
        self.mode_changed.emit(mode.value)

    def toggle_mode(self):
        if self._mode == MeasurementMode.LINE:
            next_mode = MeasurementMode.AREA
        else:
            next_mode = MeasurementMode.LINE
        self.set_mode(next_mode)
        return next_mode

    def remove_last(self):
        """Remove the newest completed measurement; working points are untouched"""
        record = self.store.remove_last()
        if len(self.store) == 0 and self._current_value is not None:
            self._current_value = None
            self.preview_changed.emit(None)
        return record

    def set_unit(self, unit: MeasurementUnit):
        """Change the unit for future records and live formatting only"""
        self._unit = unit
        self.unit_changed.emit(unit.value)

    def toggle_unit(self):
        self.set_unit(toggle_unit(self._unit))
        return self._unit

    # ------------------------------------------------------------------
    # Formatting for the rendering layer
    # ------------------------------------------------------------------

    def formatted_value(self, decimals=2):
        """Current value formatted in the active unit, '--' when there is none"""
        if self._mode == MeasurementMode.AREA:
            if self._current_value is None:
                return EMPTY_VALUE_DISPLAY
            return format_area(self._current_value, self._unit, decimals)
        return format_optional_distance(self._current_value, self._unit, decimals)

    def format_measurement(self, record, decimals=2):
        """Format a completed record in the unit it was created with"""
        if record.kind == MeasurementMode.AREA:
            return format_area(record.value, record.unit, decimals)
        return format_distance(record.value, record.unit, decimals)
