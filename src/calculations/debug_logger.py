"""
Debug logging framework for the measurement engine
Centralizes and standardizes debug output across sessions, calibration and capture
"""

import os
import logging
from typing import Any, Dict, Optional
import json


class MeasurementDebugLogger:
    """Centralized debug logger for the measurement engine"""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not self._initialized:
            self._setup_logger()
            MeasurementDebugLogger._initialized = True

    def _setup_logger(self):
        """Initialize the logging configuration"""
        # Check environment variable for debug output
        env_val = str(os.environ.get("MEASURE_DEBUG", "")).strip().lower()
        self.debug_enabled = env_val in {"1", "true", "yes", "on"}

        debug_level = os.environ.get("MEASURE_DEBUG_LEVEL", "INFO").upper()

        self.logger = logging.getLogger('measurement_debug')
        self.logger.setLevel(getattr(logging, debug_level, logging.INFO))

        # Clear existing handlers
        self.logger.handlers.clear()

        # Only add handlers if debug is enabled
        if self.debug_enabled:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(logging.DEBUG)

            # Format with timestamp and component
            formatter = logging.Formatter(
                '%(asctime)s [MEASURE-%(levelname)s] %(component)s: %(message)s',
                datefmt='%H:%M:%S'
            )
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

            log_file = os.environ.get("MEASURE_DEBUG_FILE")
            if log_file:
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(logging.DEBUG)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)

    def _log(self, level: int, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        if not self.debug_enabled:
            return
        if data:
            message = f"{message} {self._format_debug_data(data)}"
        self.logger.log(level, message, extra={'component': component})

    def debug(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log debug message with component context"""
        self._log(logging.DEBUG, component, message, data)

    def info(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log info message with component context"""
        self._log(logging.INFO, component, message, data)

    def warning(self, component: str, message: str, data: Optional[Dict[str, Any]] = None):
        """Log warning message with component context"""
        self._log(logging.WARNING, component, message, data)

    def error(self, component: str, message: str, error: Optional[Exception] = None, data: Optional[Dict[str, Any]] = None):
        """Log error message with component context"""
        if error:
            message += f" Error: {str(error)}"
        self._log(logging.ERROR, component, message, data)

    def _format_debug_data(self, data: Dict[str, Any]) -> str:
        """Format debug data for logging"""
        formatted = {}
        for key, value in data.items():
            if key.endswith('_m') or key.endswith('_m2') or key.endswith('_px'):
                # Physical and pixel quantities
                if isinstance(value, (int, float)):
                    formatted[key] = f"{float(value):.4f}"
                else:
                    formatted[key] = value
            elif key in ['x', 'y']:
                formatted[key] = round(float(value), 1) if value is not None else None
            elif hasattr(value, 'value') and not isinstance(value, (int, float, str)):
                # Enums
                formatted[key] = value.value
            else:
                formatted[key] = value
        try:
            return json.dumps(formatted, separators=(',', ':'))
        except (TypeError, ValueError):
            # Fallback to string representation
            return str(data)

    def log_measurement_completed(self, component: str, kind: str, value: float, point_count: int):
        """Log a completed measurement"""
        data = {'kind': kind, 'points': point_count}
        data['value_m2' if kind == 'area' else 'value_m'] = value
        self.info(component, "Measurement completed", data)

    def log_calibration_change(self, component: str, requested: float, applied: float):
        """Log calibration updates, noting when a value was clamped"""
        data = {'requested_m': requested, 'applied_m': applied}
        if requested != applied:
            self.debug(component, "Calibration clamped", data)
        else:
            self.debug(component, "Calibration set", data)


# Global logger instance
debug_logger = MeasurementDebugLogger()
