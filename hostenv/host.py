import locale
import logging
import time

from .errors import HostConfigurationError, RangeError
from .formatting import strftime as _strftime
from .host_platform import HostPlatform, detect_platform
from .models import LocalTimeSpec, TimezoneNames

logger = logging.getLogger(__name__)

UNAMBIGUOUS_LOCALE = "C"
_LOCALE_ENVIRONMENT_VARIABLES = ("LANG", "LC_ALL")


class HostEnvironment:
    """
    Locale, timezone, calendar and memory primitives of the host OS.

    None of these operations hold state of their own: the locale and the
    timezone are process-wide OS state, shared by every thread.
    """

    def __init__(self, platform: HostPlatform | None = None) -> None:
        self.platform = platform if platform is not None else detect_platform()

    def force_unambiguous_locale(self) -> None:
        """
        Pin the process to the "C" locale.

        LANG and LC_ALL are overwritten before the live locale is changed, so
        code that later re-reads the locale from the environment
        (setlocale(LC_ALL, "")) still lands on "C". Process-wide and not
        thread-safe: call once at startup, before spawning threads that parse
        or format numbers.
        """
        for key in _LOCALE_ENVIRONMENT_VARIABLES:
            self.platform.set_environment_variable(key, UNAMBIGUOUS_LOCALE)

        try:
            locale.setlocale(locale.LC_ALL, UNAMBIGUOUS_LOCALE)
        except locale.Error as exc:
            logger.error("Unable to set locale to %r: %s", UNAMBIGUOUS_LOCALE, exc)
            raise HostConfigurationError(
                f"Unable to set locale to {UNAMBIGUOUS_LOCALE!r}: {exc}",
                operation="setlocale",
            ) from exc

        logger.debug("Locale forced to %r", UNAMBIGUOUS_LOCALE)

    def get_timezone_offset_seconds(self) -> int:
        """
        Standard (non-DST) offset of local time from UTC, in seconds.

        WEST-POSITIVE: zones behind UTC are positive, zones ahead of UTC are
        negative. UTC+2 returns -7200, UTC-5 returns 18000. This is the sign
        of C's `timezone` variable and Python's `time.timezone`, the opposite
        of `datetime.utcoffset()`.
        """
        self.platform.refresh_timezone()
        offset = int(time.timezone)
        logger.debug("Timezone offset is %d seconds west of UTC", offset)
        return offset

    def get_timezone_names(self) -> TimezoneNames:
        """
        Standard and daylight abbreviations, read fresh on every call.

        The daylight name is empty when the zone has no DST.
        """
        self.platform.refresh_timezone()
        standard_name, daylight_name = time.tzname
        if not time.daylight:
            daylight_name = ""
        # copy out of the module-level tuple the next refresh replaces
        return TimezoneNames(str(standard_name), str(daylight_name))

    def to_epoch_seconds(self, spec: LocalTimeSpec) -> float:
        """
        Seconds since the epoch for a local wall time, with mktime semantics.

        Out-of-range fields roll over into their neighbours (hour 25 is 1 AM
        the next day). With DstFlag.UNSPECIFIED the platform decides whether
        the wall time is standard or daylight time; near a transition the
        answer for a repeated or skipped hour is whatever the platform picks.
        """
        try:
            return time.mktime(spec.to_mktime_tuple())
        except OverflowError as exc:
            raise RangeError(
                f"Local time {spec!r} cannot be represented as epoch seconds: {exc}",
                spec,
            ) from exc

    def get_page_size_bytes(self) -> int:
        try:
            page_size = self.platform.page_size_bytes()
        except (OSError, ValueError) as exc:
            logger.error("Unable to query page size: %s", exc)
            raise HostConfigurationError(
                f"Unable to query page size: {exc}", operation="page_size"
            ) from exc

        if page_size <= 0:
            logger.error("Platform reported invalid page size %r", page_size)
            raise HostConfigurationError(
                f"Platform reported invalid page size {page_size!r}",
                operation="page_size",
                details={"page_size": page_size},
            )
        return page_size

    def strftime(self, fmt: str, timestamp: float | None = None) -> str:
        return _strftime(fmt, timestamp)

    def __repr__(self) -> str:
        return f"HostEnvironment(platform={self.platform!r})"
