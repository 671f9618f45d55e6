import time
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Iterator


class DstFlag(Enum):
    """
    Represents the tm_isdst hint handed to the platform's mktime.
    """

    UNSPECIFIED = -1
    STANDARD = 0
    DAYLIGHT = 1


@dataclass(frozen=True)
class LocalTimeSpec:
    """
    Broken-down local wall time.

    `year` is the absolute year (1970, not 70) and `month` is zero-based
    (0 = January). Fields are not validated; out-of-range values are
    normalized by the conversion the same way mktime does.
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    dst: DstFlag = DstFlag.UNSPECIFIED

    @classmethod
    def from_struct_time(cls, st: time.struct_time) -> "LocalTimeSpec":
        dst = DstFlag(st.tm_isdst) if st.tm_isdst in (0, 1) else DstFlag.UNSPECIFIED
        return cls(
            st.tm_year,
            st.tm_mon - 1,
            st.tm_mday,
            st.tm_hour,
            st.tm_min,
            st.tm_sec,
            dst,
        )

    def to_mktime_tuple(self) -> tuple[int, ...]:
        # wday and yday are ignored by mktime
        return (
            self.year,
            self.month + 1,
            self.day,
            self.hour,
            self.minute,
            self.second,
            0,
            0,
            self.dst.value,
        )

    def as_dict(self) -> dict:
        fields = asdict(self)
        fields["dst"] = self.dst.name
        return fields


@dataclass(frozen=True)
class TimezoneNames:
    """
    Standard and daylight abbreviations of the local timezone.
    """

    standard_name: str
    daylight_name: str

    def __iter__(self) -> Iterator[str]:
        yield self.standard_name
        yield self.daylight_name

    @property
    def has_daylight(self) -> bool:
        return self.daylight_name != ""
