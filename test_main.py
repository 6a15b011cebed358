#!/usr/bin/env python3
"""
Minimal test of the command line entry point
"""

import os
import sys
import tempfile

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

import pytest
from PySide6.QtCore import QSettings

import main
from calculations.units import MeasurementUnit
from utils.settings_manager import SettingsManager


def test_line_measurement_output(capsys):
    code = main.main(["--screen-width", "1000", "--distance", "0.5", "--fov", "60",
                      "--unit", "cm", "0,0", "300,400"])
    assert code == 0
    out = capsys.readouterr().out
    assert "line 1: 28.87 cm" in out


def test_area_measurement_output(capsys):
    main.main(["--mode", "area", "--screen-width", "400", "--distance", "1", "--fov", "60",
               "--unit", "m", "--decimals", "4", "0,0", "100,0", "100,100", "0,100"])
    out = capsys.readouterr().out
    assert "area 1: 0.0833 m²" in out


def test_pending_points_reported(capsys):
    main.main(["--screen-width", "400", "--distance", "1", "--fov", "60", "--unit", "inch",
               "0,0", "100,0", "5,5"])
    out = capsys.readouterr().out
    assert "line 1:" in out
    assert "1/2 points pending" in out


def test_defaults_come_from_settings(capsys, monkeypatch):
    with tempfile.TemporaryDirectory() as tmp_dir:
        settings = QSettings(os.path.join(tmp_dir, "settings.ini"), QSettings.Format.IniFormat)
        manager = SettingsManager(settings)
        manager.set_default_unit(MeasurementUnit.M)
        manager.set_default_distance(1.0)
        monkeypatch.setattr(main, "get_settings_manager", lambda: manager)

        args = main.parse_args(["--screen-width", "400"])
        session = main.build_session(args)
        assert session.unit == MeasurementUnit.M
        assert session.scale_manager.distance_to_surface == 1.0
        assert session.scale_manager.horizontal_fov == 60.0


def test_bad_arguments_exit():
    with pytest.raises(SystemExit):
        main.parse_args(["--screen-width", "400", "12;40"])
    with pytest.raises(SystemExit):
        main.parse_args(["--screen-width", "0"])
    with pytest.raises(SystemExit):
        main.parse_args(["--screen-width", "400", "--unit", "yard"])


if __name__ == '__main__':
    sys.exit(pytest.main([__file__, '-v']))
