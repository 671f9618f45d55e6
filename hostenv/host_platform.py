import logging
import mmap
import os
import time

logger = logging.getLogger(__name__)


class HostPlatform:
    """
    OS-specific primitives used by HostEnvironment.

    Subclasses implement the pieces whose API shape differs between
    operating systems; everything else reads the `time` and `locale`
    modules directly.
    """

    name = "generic"

    def set_environment_variable(self, key: str, value: str) -> None:
        # os.environ assignment also calls putenv so C-level lookups see it
        os.environ[key] = value

    def refresh_timezone(self) -> None:
        raise NotImplementedError

    def page_size_bytes(self) -> int:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class PosixHostPlatform(HostPlatform):
    name = "posix"

    def refresh_timezone(self) -> None:
        # Re-reads TZ and recomputes time.timezone, time.altzone,
        # time.daylight and time.tzname.
        time.tzset()

    def page_size_bytes(self) -> int:
        return os.sysconf("SC_PAGE_SIZE")


class WindowsHostPlatform(HostPlatform):
    name = "nt"

    def refresh_timezone(self) -> None:
        # No tzset on Windows; the values captured at interpreter start stay in effect.
        logger.debug("timezone refresh unavailable on Windows")

    def page_size_bytes(self) -> int:
        # GetSystemInfo().dwPageSize, not the allocation granularity
        return mmap.PAGESIZE


def detect_platform() -> HostPlatform:
    platform: HostPlatform
    if os.name == "nt":
        platform = WindowsHostPlatform()
    else:
        platform = PosixHostPlatform()
    logger.debug("Detected host platform %r", platform)
    return platform
