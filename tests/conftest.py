import locale
import os
import time

import pytest

_LOCALE_KEYS = ("LANG", "LC_ALL")


def _restore_env(key: str, value: str | None) -> None:
    if value is None:
        os.environ.pop(key, None)
    else:
        os.environ[key] = value


@pytest.fixture
def set_tz():
    """
    Pin the process timezone to a POSIX TZ string for the duration of a test.
    """
    if not hasattr(time, "tzset"):
        pytest.skip("time.tzset is not available on this platform")

    original = os.environ.get("TZ")

    def _set(tz: str) -> None:
        os.environ["TZ"] = tz
        time.tzset()

    yield _set

    _restore_env("TZ", original)
    time.tzset()


@pytest.fixture
def restore_locale():
    saved_locale = locale.setlocale(locale.LC_ALL)
    saved_env = {key: os.environ.get(key) for key in _LOCALE_KEYS}

    yield

    for key, value in saved_env.items():
        _restore_env(key, value)
    locale.setlocale(locale.LC_ALL, saved_locale)
