"""
Capture Bridge - Request/response messages for camera permission and screenshots

The camera and gallery collaborators are asynchronous and live outside the
engine. The bridge only emits requests and accepts already-resolved responses,
so nothing here ever waits.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from PySide6.QtCore import QObject, Signal

from calculations.debug_logger import debug_logger
from calculations.result_types import CaptureResult
from models.measurement import new_id

SCREENSHOT_SAVED_MESSAGE = "Screenshot saved to gallery!"
SCREENSHOT_FAILED_MESSAGE = "Failed to save screenshot"
PERMISSION_REQUIRED_MESSAGE = "Please grant camera permission to use the measurement tool."


@dataclass(frozen=True)
class PermissionRequest:
    request_id: str = field(default_factory=lambda: new_id("permission"))


@dataclass(frozen=True)
class PermissionResponse:
    request_id: str
    granted: bool


@dataclass(frozen=True)
class ScreenshotRequest:
    view_handle: Any
    request_id: str = field(default_factory=lambda: new_id("screenshot"))


@dataclass(frozen=True)
class ScreenshotResponse:
    request_id: str
    result: CaptureResult


class CaptureBridge(QObject):
    """Tracks outstanding permission and screenshot requests"""

    permission_requested = Signal(object)   # PermissionRequest
    permission_resolved = Signal(bool)
    screenshot_requested = Signal(object)   # ScreenshotRequest
    screenshot_finished = Signal(bool)
    status_message = Signal(str)

    def __init__(self):
        super().__init__()
        self.has_permission: Optional[bool] = None
        self.is_saving = False
        self._pending_permission = None
        self._pending_screenshot = None

    def request_permission(self):
        request = PermissionRequest()
        self._pending_permission = request.request_id
        self.permission_requested.emit(request)
        return request

    def handle_permission_response(self, response: PermissionResponse):
        """Record the resolved permission; returns False for unknown requests"""
        if response.request_id != self._pending_permission:
            debug_logger.warning("CaptureBridge", "Ignoring unknown permission response",
                                 {'request_id': response.request_id})
            return False
        self._pending_permission = None
        self.has_permission = bool(response.granted)
        if not self.has_permission:
            self.status_message.emit(PERMISSION_REQUIRED_MESSAGE)
        self.permission_resolved.emit(self.has_permission)
        return True

    def request_screenshot(self, view_handle):
        """Ask the collaborator to capture and save the view

        Returns None while a previous save is still outstanding.
        """
        if self.is_saving:
            debug_logger.debug("CaptureBridge", "Screenshot already in progress")
            return None
        request = ScreenshotRequest(view_handle=view_handle)
        self._pending_screenshot = request.request_id
        self.is_saving = True
        self.screenshot_requested.emit(request)
        return request

    def cancel_screenshot(self):
        """Give up on the outstanding save; a late response for it is ignored"""
        if not self.is_saving:
            return False
        debug_logger.warning("CaptureBridge", "Screenshot request cancelled",
                             {'request_id': self._pending_screenshot})
        self._pending_screenshot = None
        self.is_saving = False
        return True

    def handle_screenshot_response(self, response: ScreenshotResponse):
        """Finish a save with the collaborator's resolved result"""
        if response.request_id != self._pending_screenshot:
            debug_logger.warning("CaptureBridge", "Ignoring unknown screenshot response",
                                 {'request_id': response.request_id})
            return False
        self._pending_screenshot = None
        self.is_saving = False
        if response.result.is_success:
            self.status_message.emit(SCREENSHOT_SAVED_MESSAGE)
        else:
            debug_logger.error("CaptureBridge", "Screenshot save failed",
                               data={'reason': response.result.error_message})
            self.status_message.emit(SCREENSHOT_FAILED_MESSAGE)
        self.screenshot_finished.emit(response.result.is_success)
        return True
