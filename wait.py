import re
import time

LEADING_INT = re.compile(r'^\s*([+-]?[0-9]+)')


def parse_milliseconds(value):
    """Reads the leading integer of value, e.g. '250ms' -> 250."""
    match = LEADING_INT.match(str(value))
    if not match:
        raise ValueError('milliseconds not a number')
    return int(match.group(1))


def wait(milliseconds, sleep=time.sleep):
    """Suspends for the given number of milliseconds."""
    if isinstance(milliseconds, bool) or not isinstance(milliseconds, int):
        raise ValueError('milliseconds not a number')
    sleep(max(milliseconds, 0) / 1000)
