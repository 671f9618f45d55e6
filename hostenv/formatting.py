import re
import time

_DIRECTIVE = re.compile(r"%(.)", re.DOTALL)


def _fields(t: time.struct_time) -> dict[str, str]:
    return {
        "S": f"{t.tm_sec:02d}",
        "M": f"{t.tm_min:02d}",
        "H": f"{t.tm_hour:02d}",
        "d": f"{t.tm_mday:02d}",
        "m": f"{t.tm_mon:02d}",
        "Y": str(t.tm_year),
        # struct_time counts from Monday = 0; %w counts from Sunday = 0
        "w": str((t.tm_wday + 1) % 7),
        "%": "%",
    }


def strftime(fmt: str, timestamp: float | None = None) -> str:
    """
    Partial strftime over local time.

    Supports %S %M %H %d %m %Y %w and %%. Any other directive is copied to
    the output as is, so "%q" stays "%q". Unlike time.strftime the output
    does not depend on the active locale.
    """
    t = time.localtime(timestamp)
    fields = _fields(t)
    return _DIRECTIVE.sub(lambda m: fields.get(m.group(1), m.group(0)), fmt)
