import re
from datetime import timedelta
from numbers import Integral, Real
from typing import Union

__duration_conversions = {
    'us': timedelta(microseconds=1),
    'ms': timedelta(milliseconds=1),
    's': timedelta(seconds=1),
    'm': timedelta(minutes=1),
}

__duration_pattern = re.compile(r"^\s*([0-9]+(?:\.[0-9]+)?)\s*([a-zA-Z]*)\s*$")


def parse_duration_string(duration_string: str) -> timedelta:
    """
    Parses strings like '5ms', '1.5s' or '250us'. A number without unit is interpreted as milliseconds.
    """
    m = __duration_pattern.match(duration_string)
    if m is None:
        raise ValueError('invalid duration %r' % duration_string)

    number = m.group(1)
    unit = m.group(2) or 'ms'
    if unit not in __duration_conversions:
        raise ValueError('unknown duration unit %r in %r' % (unit, duration_string))

    if '.' in number:
        return float(number) * __duration_conversions[unit]
    return int(number) * __duration_conversions[unit]


def to_duration(value: Union[timedelta, Real, str]) -> timedelta:
    """
    Converts a latency value into a timedelta. Numbers are interpreted as milliseconds.
    """
    if isinstance(value, timedelta):
        duration = value
    elif isinstance(value, str):
        duration = parse_duration_string(value)
    elif isinstance(value, bool):
        raise TypeError('cannot convert %r to a duration' % (value,))
    elif isinstance(value, Integral):
        duration = timedelta(milliseconds=int(value))
    elif isinstance(value, Real):
        duration = timedelta(milliseconds=float(value))
    else:
        raise TypeError('cannot convert %r to a duration' % (value,))

    if duration < timedelta(0):
        raise ValueError('latency must not be negative, got %s' % value)

    return duration


def to_millis(duration: timedelta) -> float:
    return duration / timedelta(milliseconds=1)


def to_duration_string(duration: timedelta, unit='ms', precision=0) -> str:
    value = duration / __duration_conversions[unit]

    fmt = f'%0.{precision}f{unit}'

    return fmt % value
