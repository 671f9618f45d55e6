import locale
import os

import pytest

import hostenv
from hostenv import HostConfigurationError, HostEnvironment, UNAMBIGUOUS_LOCALE
from hostenv.host_platform import PosixHostPlatform


def _try_comma_decimal_locale() -> bool:
    for name in ("de_DE.UTF-8", "de_DE.utf8", "fr_FR.UTF-8", "fr_FR.utf8"):
        try:
            locale.setlocale(locale.LC_ALL, name)
        except locale.Error:
            continue
        os.environ["LANG"] = name
        os.environ["LC_ALL"] = name
        return True
    return False


class RecordingPlatform(PosixHostPlatform):
    def __init__(self) -> None:
        self.environment: list[tuple[str, str]] = []

    def set_environment_variable(self, key: str, value: str) -> None:
        self.environment.append((key, value))
        super().set_environment_variable(key, value)


def test_force_unambiguous_locale_parses_dot_decimal(restore_locale):
    if not _try_comma_decimal_locale():
        pytest.skip("no comma-decimal locale is installed")
    assert locale.localeconv()["decimal_point"] == ","
    assert locale.atof("3,14") == 3.14

    hostenv.force_unambiguous_locale()

    assert locale.atof("3.14") == 3.14
    assert locale.localeconv()["decimal_point"] == "."
    assert float("3.14") == 3.14


def test_force_unambiguous_locale_overwrites_environment(restore_locale):
    os.environ["LANG"] = "en_US.UTF-8"
    os.environ["LC_ALL"] = "en_US.UTF-8"

    hostenv.force_unambiguous_locale()

    assert os.environ["LANG"] == UNAMBIGUOUS_LOCALE
    assert os.environ["LC_ALL"] == UNAMBIGUOUS_LOCALE


def test_locale_from_environment_resolves_to_c_after_forcing(restore_locale):
    hostenv.force_unambiguous_locale()

    # Code that re-reads the locale from the environment lands on "C" too
    assert locale.setlocale(locale.LC_ALL, "") == UNAMBIGUOUS_LOCALE
    assert locale.localeconv()["decimal_point"] == "."


def test_force_unambiguous_locale_is_idempotent(restore_locale):
    platform = RecordingPlatform()
    host = HostEnvironment(platform)

    host.force_unambiguous_locale()
    host.force_unambiguous_locale()

    assert platform.environment == [
        ("LANG", "C"),
        ("LC_ALL", "C"),
        ("LANG", "C"),
        ("LC_ALL", "C"),
    ]
    assert locale.setlocale(locale.LC_NUMERIC) == "C"


def test_force_unambiguous_locale_failure_is_fatal(restore_locale, monkeypatch):
    def _reject(category, value=None):
        raise locale.Error("unsupported locale setting")

    monkeypatch.setattr(locale, "setlocale", _reject)

    with pytest.raises(HostConfigurationError) as exc_info:
        HostEnvironment(PosixHostPlatform()).force_unambiguous_locale()

    assert exc_info.value.operation == "setlocale"
    assert isinstance(exc_info.value, RuntimeError)
    assert isinstance(exc_info.value.__cause__, locale.Error)
