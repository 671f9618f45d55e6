"""Exceptions raised by hostenv."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import LocalTimeSpec


class HostEnvError(Exception):
    """Base exception for all hostenv errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details


class RangeError(HostEnvError, ValueError):
    """Raised when a local time has no representable point on the epoch timeline.

    Attributes:
        spec: The rejected LocalTimeSpec, unchanged
    """

    def __init__(self, message: str, spec: "LocalTimeSpec"):
        super().__init__(message, details=spec.as_dict())
        self.spec = spec


class HostConfigurationError(HostEnvError, RuntimeError):
    """Raised when an OS facility that must not fail does fail.

    This is a fatal environment misconfiguration; callers are not expected
    to recover from it.

    Attributes:
        operation: Name of the OS call that failed
    """

    def __init__(self, message: str, operation: str, details: dict | None = None):
        super().__init__(message, details)
        self.operation = operation
