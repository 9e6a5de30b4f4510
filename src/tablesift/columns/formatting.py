"""Date formatting with PHP ``date()``-style format characters.

DataTables column definitions are commonly shared with PHP backends, so
date formats are written as ``Y-m-d H:i:s`` rather than ``%Y-%m-%d``.
Every letter listed in ``_FORMATTERS`` is replaced by the corresponding
part of the value; a backslash escapes the next character and any other
character is copied as is.

Example:
    >>> format_datetime(datetime(2024, 1, 2, 3, 4, 5), "d/m/Y H:i")
    '02/01/2024 03:04'
"""

from __future__ import annotations

import calendar
import math
from collections.abc import Callable
from datetime import datetime, timedelta

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)  # fmt: skip


def _offset(value: datetime, separator: str) -> str:
    offset = value.utcoffset() or timedelta(0)
    minutes = int(offset.total_seconds()) // 60
    sign = "-" if minutes < 0 else "+"
    hours, minutes = divmod(abs(minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _timezone_name(value: datetime) -> str:
    key = getattr(value.tzinfo, "key", None)
    return key or value.tzname() or _offset(value, ":")


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _hour12(value: datetime) -> int:
    return value.hour % 12 or 12


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    # Day
    "d": lambda v: f"{v.day:02d}",
    "D": lambda v: _DAY_NAMES[v.weekday()][:3],
    "j": lambda v: str(v.day),
    "l": lambda v: _DAY_NAMES[v.weekday()],
    "N": lambda v: str(v.isoweekday()),
    "S": lambda v: _ordinal_suffix(v.day),
    "w": lambda v: str(v.isoweekday() % 7),
    "z": lambda v: str(v.timetuple().tm_yday - 1),
    # Week
    "W": lambda v: f"{v.isocalendar()[1]:02d}",
    # Month
    "F": lambda v: _MONTH_NAMES[v.month - 1],
    "M": lambda v: _MONTH_NAMES[v.month - 1][:3],
    "m": lambda v: f"{v.month:02d}",
    "n": lambda v: str(v.month),
    "t": lambda v: str(calendar.monthrange(v.year, v.month)[1]),
    # Year
    "L": lambda v: "1" if calendar.isleap(v.year) else "0",
    "o": lambda v: str(v.isocalendar()[0]),
    "Y": lambda v: f"{v.year:04d}",
    "y": lambda v: f"{v.year % 100:02d}",
    # Time
    "a": lambda v: "am" if v.hour < 12 else "pm",
    "A": lambda v: "AM" if v.hour < 12 else "PM",
    "g": lambda v: str(_hour12(v)),
    "G": lambda v: str(v.hour),
    "h": lambda v: f"{_hour12(v):02d}",
    "H": lambda v: f"{v.hour:02d}",
    "i": lambda v: f"{v.minute:02d}",
    "s": lambda v: f"{v.second:02d}",
    "u": lambda v: f"{v.microsecond:06d}",
    "v": lambda v: f"{v.microsecond // 1000:03d}",
    # Timezone
    "e": _timezone_name,
    "O": lambda v: _offset(v, ""),
    "P": lambda v: _offset(v, ":"),
    "T": lambda v: v.tzname() or _offset(v, ":"),
    "Z": lambda v: str(int((v.utcoffset() or timedelta(0)).total_seconds())),
    # Full date/time
    "c": lambda v: format_datetime(v, "Y-m-d\\TH:i:sP"),
    "r": lambda v: format_datetime(v, "D, d M Y H:i:s O"),
    "U": lambda v: str(math.floor(v.timestamp())),
}


def format_datetime(value: datetime, fmt: str) -> str:
    """Format *value* according to the PHP-style format string *fmt*.

    Args:
        value: A timezone-aware datetime. Naive values are formatted
            with a zero UTC offset for the timezone characters.
        fmt: Format string, e.g. ``"c"`` or ``"Y-m-d H:i:s"``.

    Returns:
        The formatted string.
    """
    parts: list[str] = []
    escaped = False
    for char in fmt:
        if escaped:
            parts.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in _FORMATTERS:
            parts.append(_FORMATTERS[char](value))
        else:
            parts.append(char)
    return "".join(parts)
