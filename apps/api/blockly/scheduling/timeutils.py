from __future__ import annotations

import re
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from blockly.scheduling.errors import InvalidDateFormat, InvalidTimeFormat

# A/B alternation is counted from this day (a Monday, offset 0 = "A").
EPOCH = date(2024, 1, 1)

MINUTES_PER_DAY = 24 * 60

DateLike = Union[date, str]

# ASCII digits only
_HHMM = re.compile(r"(\d{1,2}):(\d{1,2})", re.ASCII)
_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


# ---------- time of day ----------
def to_minutes(t: str) -> int:
    """Convert an "HH:MM" string to minutes since midnight."""
    if not isinstance(t, str):
        raise InvalidTimeFormat(f"Expected an HH:MM string, got {t!r}")

    match = _HHMM.fullmatch(t.strip())
    if not match:
        raise InvalidTimeFormat(f"Invalid time {t!r}. Use HH:MM")

    hour, minute = int(match.group(1)), int(match.group(2))
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise InvalidTimeFormat(f"Time out of range: {t!r}")

    return hour * 60 + minute


def format_time(t: str, use_24h: bool = False) -> str:
    """
    Render an "HH:MM" string for display.
      24h: "08:05", "13:40"
      12h: "8:05 AM", "1:40 PM" (midnight is 12 AM, noon is 12 PM)
    """
    minutes = to_minutes(t)
    hour, minute = divmod(minutes, 60)
    if use_24h:
        return f"{hour:02d}:{minute:02d}"
    ampm = "PM" if hour >= 12 else "AM"
    return f"{hour % 12 or 12}:{minute:02d} {ampm}"


# ---------- calendar dates ----------
def parse_date(value: DateLike) -> date:
    """Accept a date (not a datetime) or an ISO "YYYY-MM-DD" string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        # fromisoformat also takes "20240101" and "2024-W01-1" on 3.11+
        if not _ISO_DATE.fullmatch(text):
            raise InvalidDateFormat(f"Invalid date {value!r}. Use YYYY-MM-DD")
        try:
            return date.fromisoformat(text)
        except ValueError:
            raise InvalidDateFormat(f"Invalid date {value!r}. Use YYYY-MM-DD") from None
    raise InvalidDateFormat(f"Expected a date or YYYY-MM-DD string, got {value!r}")


def weekday(d: DateLike) -> int:
    """Day of week with 0=Sun ... 6=Sat."""
    # date.weekday() is 0=Mon ... 6=Sun
    return (parse_date(d).weekday() + 1) % 7


def is_weekend(d: DateLike) -> bool:
    """Check if day is weekend (0=Sun, 6=Sat)."""
    dow = weekday(d)
    return dow == 0 or dow == 6


def day_offset(d: DateLike, epoch: DateLike = EPOCH) -> int:
    """Whole days from `epoch` to `d` (negative before the epoch)."""
    return (parse_date(d) - parse_date(epoch)).days


def daterange(start: DateLike, end: DateLike) -> Iterator[date]:
    """Generate dates from start to end, both inclusive."""
    cur = parse_date(start)
    last = parse_date(end)
    while cur <= last:
        yield cur
        cur += timedelta(days=1)
