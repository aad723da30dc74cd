"""
Day / week / month payloads.

Every view is computed from one catalog snapshot through the shared engine
in `blockly.scheduling`; nothing here reads the clock or the database.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional, Sequence

from blockly.models.task import Task
from blockly.scheduling.calendar_grid import (
    YearMonth,
    month_grid,
    monday_for,
    resolve_day,
    resolve_days,
    week_grid,
)
from blockly.scheduling.records import (
    Catalog,
    ResolvedDay,
    ScheduleBlock,
    ScheduleType,
    TimelineStatus,
    UserPreferences,
)
from blockly.scheduling.timeline import minutes_of_day, timeline_status
from blockly.scheduling.timeutils import DateLike, format_time
from blockly.services.tasks import task_out


def greeting_for(now_minutes: int) -> str:
    if now_minutes < 12 * 60:
        return "Good morning"
    if now_minutes < 17 * 60:
        return "Good afternoon"
    return "Good evening"


# ---------- serializers ----------
def type_out(t: Optional[ScheduleType], use_24h: bool = False) -> Optional[dict]:
    if t is None:
        return None
    return {
        "id": t.id,
        "name": t.name,
        "lunch_enabled": t.lunch_enabled,
        "lunch_start": t.lunch_start,
        "lunch_end": t.lunch_end,
        "lunch_label": (
            f"{format_time(t.lunch_start, use_24h)} - {format_time(t.lunch_end, use_24h)}"
            if t.lunch_enabled and t.lunch_start and t.lunch_end
            else None
        ),
    }


def block_out(b: ScheduleBlock, use_24h: bool = False) -> dict:
    return {
        "id": b.id,
        "schedule_type_id": b.schedule_type_id,
        "name": b.name,
        "start_time": b.start_time,
        "end_time": b.end_time,
        "start_label": format_time(b.start_time, use_24h),
        "end_label": format_time(b.end_time, use_24h),
        "block_index": b.block_index,
        "is_lunch": b.is_lunch,
    }


def resolved_day_out(rd: Optional[ResolvedDay], use_24h: bool = False) -> Optional[dict]:
    if rd is None:
        return None
    return {
        "date": rd.date.isoformat(),
        "schedule_type": type_out(rd.schedule_type, use_24h),
        "is_weekend": rd.is_weekend,
        "is_holiday": rd.is_holiday,
        "has_override": rd.has_override,
        "blocks": [block_out(b, use_24h) for b in rd.blocks],
    }


def timeline_out(status: TimelineStatus) -> dict:
    return {
        "current_block_id": status.current,
        "next_block_id": status.next,
        "progress_percent": status.progress_percent,
    }


# ---------- views ----------
def day_view(
    catalog: Catalog,
    day: DateLike,
    prefs: UserPreferences,
    now: datetime,
    tasks: Sequence[Task] = (),
) -> dict:
    """
    One resolved day plus its tasks. The timeline (current/next block,
    progress, greeting) is only filled in when `now` falls on that day.
    """
    rd = resolve_day(day, catalog, prefs)
    payload = resolved_day_out(rd, prefs.use_24h)
    payload["is_today"] = rd.date == now.date()
    payload["tasks"] = [task_out(t) for t in tasks]

    if payload["is_today"]:
        now_minutes = minutes_of_day(now)
        payload["timeline"] = timeline_out(timeline_status(rd.blocks, now_minutes))
        payload["greeting"] = greeting_for(now_minutes)
    else:
        payload["timeline"] = None
        payload["greeting"] = None
    return payload


def week_view(catalog: Catalog, anchor: DateLike, prefs: UserPreferences, today: Optional[date] = None) -> dict:
    days: List[date] = week_grid(anchor, prefs.show_weekends)
    resolved = resolve_days(days, catalog, prefs)
    return {
        "start": days[0].isoformat(),
        "end": days[-1].isoformat(),
        "show_weekends": prefs.show_weekends,
        "is_this_week": today is not None and monday_for(today) == monday_for(anchor),
        "days": [resolved_day_out(rd, prefs.use_24h) for rd in resolved],
    }


def month_view(catalog: Catalog, year_month: YearMonth, prefs: UserPreferences) -> dict:
    cells = month_grid(year_month)
    resolved = resolve_days(cells, catalog, prefs)
    first = next(c for c in cells if c is not None)
    return {
        "year": first.year,
        "month": first.month,
        "weekday_labels": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
        "cells": [resolved_day_out(rd, prefs.use_24h) for rd in resolved],
    }
