from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple, Union

from blockly.scheduling.errors import InvalidDateFormat
from blockly.scheduling.records import Catalog, ResolvedDay, UserPreferences
from blockly.scheduling.resolver import is_holiday, resolve
from blockly.scheduling.timeline import blocks_for
from blockly.scheduling.timeutils import DateLike, is_weekend, parse_date, weekday

YearMonth = Union[str, date, Tuple[int, int]]


def _parse_year_month(value: YearMonth) -> Tuple[int, int]:
    if isinstance(value, date):
        return value.year, value.month
    try:
        if isinstance(value, tuple):
            year, month = (int(v) for v in value)
        else:
            yy, mm = str(value).strip().split("-")
            year, month = int(yy), int(mm)
    except (TypeError, ValueError):
        raise InvalidDateFormat(f"Invalid month {value!r}. Use YYYY-MM") from None
    if not date.min.year <= year <= date.max.year:
        raise InvalidDateFormat(f"Year out of range: {value!r}")
    if not 1 <= month <= 12:
        raise InvalidDateFormat(f"Month out of range: {value!r}")
    return year, month


def month_grid(year_month: YearMonth) -> List[Optional[date]]:
    """
    Month layout in Sunday-first weeks: leading None cells up to the 1st's
    weekday, one cell per day, trailing None cells to fill the last week.
    """
    year, month = _parse_year_month(year_month)
    first = date(year, month, 1)
    days_in_month = calendar.monthrange(year, month)[1]

    cells: List[Optional[date]] = [None] * weekday(first)
    cells.extend(first + timedelta(days=i) for i in range(days_in_month))
    # pad to full weeks
    while len(cells) % 7 != 0:
        cells.append(None)
    return cells


def monday_for(d: DateLike) -> date:
    day = parse_date(d)
    dow = weekday(day)
    try:
        return day + timedelta(days=-6 if dow == 0 else 1 - dow)
    except OverflowError:
        raise InvalidDateFormat(f"Date out of range: {d!r}") from None


def week_grid(anchor: DateLike, show_weekends: bool = False) -> List[date]:
    """Mon-Fri of the anchor's week, or Sun-Sat (Sunday before that Monday) with weekends."""
    monday = monday_for(anchor)
    if show_weekends:
        offsets = range(-1, 6)
    else:
        offsets = range(5)
    try:
        return [monday + timedelta(days=i) for i in offsets]
    except OverflowError:
        # the first and last weeks of the calendar are cut off by date.min / date.max
        raise InvalidDateFormat(f"Week of {anchor!r} is out of range") from None


def resolve_day(d: DateLike, catalog: Catalog, prefs: Optional[UserPreferences] = None) -> ResolvedDay:
    prefs = prefs or UserPreferences()
    day = parse_date(d)
    active = resolve(day, catalog.types, catalog.overrides, prefs.default_schedule_id)
    return ResolvedDay(
        date=day,
        schedule_type=active,
        is_weekend=is_weekend(day),
        is_holiday=is_holiday(active),
        has_override=day in catalog.overrides,
        blocks=tuple(blocks_for(active, catalog.blocks)),
    )


def resolve_days(
    cells: Iterable[Optional[date]],
    catalog: Catalog,
    prefs: Optional[UserPreferences] = None,
) -> List[Optional[ResolvedDay]]:
    """Resolve every non-empty grid cell; padding cells stay None."""
    return [None if c is None else resolve_day(c, catalog, prefs) for c in cells]
