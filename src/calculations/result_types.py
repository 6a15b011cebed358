"""
Standardized result types for external collaborators and settings validation
Ensures consistent return patterns at the engine boundary
"""

from typing import Optional, List
from dataclasses import dataclass
from enum import Enum


class ResultStatus(Enum):
    """Enumeration of possible result statuses"""
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class CaptureResult:
    """
    Resolved outcome of an asynchronous collaborator (e.g. screenshot save)

    The collaborator awaits its own work and hands back one of these.
    """
    status: ResultStatus
    error_message: Optional[str] = None
    uri: Optional[str] = None

    @property
    def is_success(self) -> bool:
        """Check if the operation was successful"""
        return self.status == ResultStatus.SUCCESS

    @property
    def is_error(self) -> bool:
        """Check if the operation failed"""
        return self.status == ResultStatus.ERROR

    @classmethod
    def success(cls, uri: Optional[str] = None) -> 'CaptureResult':
        """Create a successful result"""
        return cls(status=ResultStatus.SUCCESS, uri=uri)

    @classmethod
    def error(cls, error_message: str) -> 'CaptureResult':
        """Create an error result"""
        return cls(status=ResultStatus.ERROR, error_message=error_message)


@dataclass
class ValidationResult:
    """Result of validation operations"""
    is_valid: bool
    errors: List[str] = None
    warnings: List[str] = None

    def __post_init__(self):
        if self.errors is None:
            self.errors = []
        if self.warnings is None:
            self.warnings = []

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def add_error(self, error: str) -> None:
        """Add an error and mark the result invalid"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)
