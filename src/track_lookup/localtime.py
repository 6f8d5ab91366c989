"""Local UTC offset resolution and wall-clock conversions."""

from __future__ import annotations

import re
from datetime import date, datetime, timedelta, timezone, tzinfo

from .errors import InvalidRequestedTime, TimezoneError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):(\d{2})$")


def resolve_local_offset() -> tzinfo:
    """Return the host's current UTC offset as a fixed tzinfo.

    Resolved once per session; a DST change while the session runs is not
    picked up.
    """
    tz = datetime.now().astimezone().tzinfo
    if tz is None or tz.utcoffset(None) is None:
        raise TimezoneError("Unable to determine the local UTC offset")
    return tz


def parse_offset(text: str) -> timezone:
    """Parse a ``±HH:MM`` offset such as ``+02:00`` or ``-05:30``."""
    match = _OFFSET_RE.match(text.strip())
    if not match:
        raise TimezoneError(f"Invalid UTC offset {text!r}, expected ±HH:MM")
    sign, hours, minutes = match.groups()
    if int(hours) > 23 or int(minutes) > 59:
        raise TimezoneError(f"UTC offset {text!r} is out of range")
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


def format_offset(tz: tzinfo) -> str:
    """Render the offset of ``tz`` as ``±HH:MM``."""
    offset = tz.utcoffset(None)
    if offset is None:
        raise TimezoneError(f"Time zone {tz!r} has no fixed UTC offset")
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def zone_label(tz: tzinfo) -> str:
    """Symbolic zone name with its offset, e.g. ``CET (+01:00)``.

    Bare offsets such as ``UTC+02:00`` are shown as just ``+02:00``.
    """
    offset = format_offset(tz)
    name = tz.tzname(None)
    if not name or (name.startswith("UTC") and name != "UTC"):
        return offset
    return f"{name} ({offset})"


def parse_clock_time(text: str) -> tuple[int, int, int]:
    """Parse ``HH:MM[:SS]`` into (hour, minute, second).

    Raises:
        InvalidRequestedTime: a field is missing, non-numeric, or out of range.
    """
    parts = text.strip().split(":")
    if len(parts) > 3:
        raise InvalidRequestedTime(f"Too many fields in {text.strip()!r}, expected HH:MM:SS")
    if not parts[0]:
        raise InvalidRequestedTime("Hour is missing")

    values = []
    for label, part, upper in zip(("Hour", "Minute", "Second"), parts, (23, 59, 59)):
        if not (part.isascii() and part.isdigit()):
            raise InvalidRequestedTime(f"{label} is invalid: {part!r}")
        value = int(part)
        if value > upper:
            raise InvalidRequestedTime(f"{label} {value} is out of range 0-{upper}")
        values.append(value)

    if len(values) < 2:
        raise InvalidRequestedTime("Minute is missing")
    if len(values) == 2:
        values.append(0)
    hour, minute, second = values
    return hour, minute, second


def requested_instant(reference: datetime, hour: int, minute: int, second: int, tz: tzinfo) -> datetime:
    """Anchor a wall-clock time to the local date of ``reference``."""
    return reference.astimezone(tz).replace(hour=hour, minute=minute, second=second, microsecond=0)


def local_date(moment: datetime, tz: tzinfo) -> date:
    return moment.astimezone(tz).date()


def local_time(moment: datetime, tz: tzinfo) -> str:
    return moment.astimezone(tz).strftime(TIME_FORMAT)


def utc_time(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime(TIME_FORMAT)
