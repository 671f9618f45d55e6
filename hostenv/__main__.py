import time

from .host import HostEnvironment


def main() -> int:
    host = HostEnvironment()
    names = host.get_timezone_names()
    print(f"platform        : {host.platform.name}")
    print(f"timezone offset : {host.get_timezone_offset_seconds()} s (west-positive)")
    print(f"standard name   : {names.standard_name}")
    print(f"daylight name   : {names.daylight_name or '-'}")
    print(f"page size       : {host.get_page_size_bytes()} bytes")
    print(f"local time      : {host.strftime('%Y-%m-%d %H:%M:%S', time.time())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
