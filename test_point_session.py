#!/usr/bin/env python3
"""
Test script for the tap-to-measurement state machine
"""

import math
import os
import sys

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

from calculations.units import MeasurementUnit
from drawing.point_session import PointSession, MODE_PROFILES
from drawing.scale_manager import ScaleManager
from models.measurement import (
    AreaMeasurement, LineMeasurement, MeasurementMode, Point2D, Point3D, PositionKind
)


def make_session(mode=MeasurementMode.LINE, screen_width=1000, distance=0.5):
    scale_manager = ScaleManager(screen_width, distance_to_surface=distance, horizontal_fov=60)
    return PointSession(scale_manager, mode=mode)


def test_mode_profiles():
    assert MODE_PROFILES[MeasurementMode.LINE].threshold == 2
    assert MODE_PROFILES[MeasurementMode.AREA].threshold == 4


def test_two_taps_make_one_line_measurement():
    session = make_session()
    completed = []
    session.measurement_completed.connect(completed.append)

    assert session.add_point(0, 0) is None
    assert session.is_pending
    record = session.add_point(300, 400)

    assert isinstance(record, LineMeasurement)
    assert completed == [record]
    assert session.measurements == (record,)
    assert session.points == ()
    assert not session.is_pending

    expected = 0.5 * 2 * 0.5 * math.tan(math.radians(30))
    assert math.isclose(record.distance, expected)
    assert record.unit == MeasurementUnit.CM
    assert session.current_value == record.distance
    assert session.formatted_value() == "28.87 cm"


def test_line_end_point_carries_distance_in_z():
    session = make_session()
    session.add_point(10, 20)
    record = session.add_point(310, 420)
    assert record.start_point.position.kind == PositionKind.TWO_D
    assert record.end_point.position.kind == PositionKind.THREE_D
    assert record.end_point.position.z == record.distance
    assert record.end_point.position.as_point2d() == Point2D(310, 420)


def test_third_tap_starts_fresh_pending_state():
    session = make_session()
    session.add_point(0, 0)
    session.add_point(100, 0)
    session.add_point(50, 50)
    assert session.points_count == 1
    assert session.is_pending
    assert len(session.measurements) == 1


def test_preview_does_not_mutate_working_points():
    session = make_session()
    previews = []
    session.preview_changed.connect(previews.append)

    # No anchor yet: nothing to preview
    assert session.update_preview(50, 50) is None
    session.add_point(0, 0)
    before = session.points

    preview = session.update_preview(300, 400)
    assert session.points == before
    assert math.isclose(preview, 0.5 * 2 * 0.5 * math.tan(math.radians(30)))
    assert session.current_value == preview
    assert previews == [preview]
    assert session.touch_position == Point2D(300, 400)
    session.end_touch()
    assert session.touch_position is None


def test_area_mode_four_taps_square():
    session = make_session(MeasurementMode.AREA, screen_width=400, distance=1.0)
    for x, y in [(0, 0), (100, 0), (100, 100)]:
        assert session.add_point(x, y) is None
        # No partial values in area mode
        assert session.current_value is None
        assert session.update_preview(x + 5, y + 5) is None

    record = session.add_point(0, 100)
    assert isinstance(record, AreaMeasurement)
    k = (2 * 1.0 * math.tan(math.radians(30))) / 400
    assert math.isclose(record.area, (k * 100) ** 2)
    assert record.vertices == (Point2D(0, 0), Point2D(100, 0), Point2D(100, 100), Point2D(0, 100))
    assert session.points_count == 0
    assert session.formatted_value(decimals=4) == f"{record.area * 10000:.4f} cm²"


def test_area_vertices_keep_tap_order():
    session = make_session(MeasurementMode.AREA)
    taps = [(0, 0), (100, 100), (100, 0), (0, 100)]
    for x, y in taps:
        record = session.add_point(x, y)
    assert [(p.x, p.y) for p in record.vertices] == taps


def test_reset_from_any_state():
    session = make_session()
    session.add_point(0, 0)
    session.add_point(10, 0)
    session.add_point(20, 0)
    resets = []
    session.session_reset.connect(lambda: resets.append(True))

    session.reset()
    assert session.points == ()
    assert session.measurements == ()
    assert session.current_value is None
    assert session.formatted_value() == "--"
    assert not session.is_placing
    assert resets == [True]

    # Reset on an empty session is fine too
    session.reset()
    assert session.points_count == 0


def test_mode_switch_discards_in_progress_points():
    session = make_session()
    session.add_point(0, 0)
    session.add_point(100, 0)
    session.add_point(5, 5)
    modes = []
    session.mode_changed.connect(modes.append)

    assert session.toggle_mode() == MeasurementMode.AREA
    assert session.points == ()
    assert session.measurements == ()
    assert session.threshold == 4
    assert modes == ["area"]

    # Three area points, then back to line: nothing is reinterpreted
    for x, y in [(0, 0), (1, 1), (2, 0)]:
        session.add_point(x, y)
    session.set_mode(MeasurementMode.LINE)
    assert session.points == ()
    assert session.measurements == ()


def test_remove_last_keeps_working_points():
    session = make_session()
    session.add_point(0, 0)
    session.add_point(100, 0)
    session.add_point(0, 0)
    session.add_point(200, 0)
    session.add_point(7, 7)

    removed = session.remove_last()
    assert math.isclose(removed.distance, session.scale_manager.pixels_to_real(200))
    assert len(session.measurements) == 1
    assert session.points_count == 1
    assert session.current_value is not None


def test_remove_last_clears_value_when_history_empties():
    session = make_session()
    session.add_point(0, 0)
    session.add_point(100, 0)
    session.remove_last()
    assert session.measurements == ()
    assert session.current_value is None
    assert session.formatted_value() == "--"


def test_remove_last_on_empty_history_is_noop():
    session = make_session()
    assert session.remove_last() is None
    assert session.measurements == ()


def test_unit_toggle_does_not_rewrite_completed_records():
    session = make_session()
    session.add_point(0, 0)
    first = session.add_point(300, 400)
    units = []
    session.unit_changed.connect(units.append)

    assert session.toggle_unit() == MeasurementUnit.INCH
    assert units == ["inch"]
    session.add_point(0, 0)
    second = session.add_point(300, 400)

    assert first.unit == MeasurementUnit.CM
    assert second.unit == MeasurementUnit.INCH
    assert session.format_measurement(first) == "28.87 cm"
    assert session.format_measurement(second) == "11.37 in"
    assert session.formatted_value().endswith(" in")

    session.toggle_unit()
    assert session.unit == MeasurementUnit.CM


def test_record_serialization():
    session = make_session()
    session.add_point(1, 2)
    line = session.add_point(3, 4)
    data = line.to_dict()
    assert data['type'] == 'line'
    assert data['start']['position'] == {'kind': '2d', 'x': 1.0, 'y': 2.0}
    assert data['end']['position']['z'] == line.distance
    assert data['unit'] == 'cm'


def test_position_as_point3d():
    session = make_session()
    session.add_point(10, 20)
    line = session.add_point(310, 420)
    assert line.start_point.position.as_point3d() == Point3D(10.0, 20.0, 0.0)
    assert line.end_point.position.as_point3d() == Point3D(310.0, 420.0, line.distance)


if __name__ == '__main__':
    for name, func in list(globals().items()):
        if name.startswith('test_') and callable(func):
            func()
            print(f"✅ {name}")
