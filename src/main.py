#!/usr/bin/env python3
"""
Camera Measure Tool - Command line entry point
Replays a sequence of screen taps through a measurement session and prints the results
"""

import argparse
import logging
import os
import sys

# Add src directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from calculations.units import parse_unit
from drawing.point_session import PointSession
from drawing.scale_manager import ScaleManager
from models.measurement import MeasurementMode
from utils.settings_manager import get_settings_manager

logger = logging.getLogger(__name__)


def parse_point(text):
    """Parse an 'x,y' tap argument"""
    try:
        x_text, y_text = text.split(',')
        return float(x_text), float(y_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a point as x,y but got {text!r}")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Estimate real-world distances and areas from taps on a camera preview.")
    parser.add_argument("points", nargs="*", type=parse_point, metavar="X,Y",
                        help="Tapped screen points in pixels, in tap order.")
    parser.add_argument("--mode", choices=[m.value for m in MeasurementMode], default="line",
                        help="line: every 2 taps make a distance; area: every 4 taps make an area.")
    parser.add_argument("--screen-width", type=float, required=True,
                        help="Width of the camera preview in pixels.")
    parser.add_argument("--distance", type=float, default=None,
                        help="Estimated distance to the surface in meters (clamped to 0.1-5.0).")
    parser.add_argument("--fov", type=float, default=None,
                        help="Horizontal field of view in degrees.")
    parser.add_argument("--unit", default=None, help="Display unit: cm, inch or m.")
    parser.add_argument("--decimals", type=int, default=2, help="Decimals in printed values.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    args = parser.parse_args(argv)
    if args.screen_width <= 0:
        parser.error("--screen-width must be positive")
    if args.unit is not None:
        try:
            args.unit = parse_unit(args.unit)
        except ValueError as e:
            parser.error(str(e))
    return args


def build_session(args) -> PointSession:
    """Create a session, filling unset options from stored settings"""
    settings = get_settings_manager()
    distance = args.distance if args.distance is not None else settings.get_default_distance()
    fov = args.fov if args.fov is not None else settings.get_horizontal_fov()
    unit = args.unit if args.unit is not None else settings.get_default_unit()

    scale_manager = ScaleManager(args.screen_width, distance_to_surface=distance, horizontal_fov=fov)
    return PointSession(scale_manager, mode=MeasurementMode(args.mode), unit=unit)


def main(argv=None) -> int:
    """Application entry point"""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    session = build_session(args)
    logger.debug(f"Scale: {session.scale_manager.get_scale_info()}")

    count = 0
    for x, y in args.points:
        record = session.add_point(x, y)
        if record is not None:
            count += 1
            print(f"{record.kind.value} {count}: {session.format_measurement(record, args.decimals)}")

    if session.points_count:
        print(f"{session.points_count}/{session.threshold} points pending")
    if count == 0:
        print("No measurements completed")
    return 0


if __name__ == '__main__':
    sys.exit(main())
