"""
Host locale, timezone, calendar and page size primitives.

The module-level functions share one process-wide HostEnvironment.
"""

from .errors import HostConfigurationError, HostEnvError, RangeError
from .host import UNAMBIGUOUS_LOCALE, HostEnvironment
from .host_platform import (
    HostPlatform,
    PosixHostPlatform,
    WindowsHostPlatform,
    detect_platform,
)
from .models import DstFlag, LocalTimeSpec, TimezoneNames

__version__ = "0.1.0"

_default_host = HostEnvironment()

force_unambiguous_locale = _default_host.force_unambiguous_locale
get_timezone_offset_seconds = _default_host.get_timezone_offset_seconds
get_timezone_names = _default_host.get_timezone_names
to_epoch_seconds = _default_host.to_epoch_seconds
get_page_size_bytes = _default_host.get_page_size_bytes
strftime = _default_host.strftime

__all__ = [
    "DstFlag",
    "HostConfigurationError",
    "HostEnvError",
    "HostEnvironment",
    "HostPlatform",
    "LocalTimeSpec",
    "PosixHostPlatform",
    "RangeError",
    "TimezoneNames",
    "UNAMBIGUOUS_LOCALE",
    "WindowsHostPlatform",
    "detect_platform",
    "force_unambiguous_locale",
    "get_page_size_bytes",
    "get_timezone_names",
    "get_timezone_offset_seconds",
    "strftime",
    "to_epoch_seconds",
]
