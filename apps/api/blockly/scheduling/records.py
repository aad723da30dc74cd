"""
Immutable value records the scheduling engine works on.

The engine never stores or mutates these; callers build a fresh snapshot
(usually from ORM rows via `model_validate`) for every computation.
"""

from __future__ import annotations

import datetime as dt
from typing import Dict, Iterable, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, from_attributes=True)


class ScheduleType(_Record):
    id: str
    name: str
    lunch_enabled: bool = False
    lunch_start: Optional[str] = None  # HH:MM
    lunch_end: Optional[str] = None  # HH:MM
    created_at: Optional[dt.datetime] = None


class ScheduleBlock(_Record):
    id: str
    schedule_type_id: str
    name: str
    start_time: str  # HH:MM
    end_time: str  # HH:MM
    block_index: int
    is_lunch: bool = False


class ScheduleOverride(_Record):
    id: str
    override_date: dt.date
    schedule_type_id: str


class UserPreferences(_Record):
    use_24h: bool = False
    # empty / None = auto-detect (A/B or first type)
    default_schedule_id: Optional[str] = None
    show_weekends: bool = False


class TimelineStatus(_Record):
    current: Optional[str] = None
    next: Optional[str] = None
    progress_percent: Optional[int] = None


class ResolvedDay(_Record):
    date: dt.date
    schedule_type: Optional[ScheduleType] = None
    is_weekend: bool = False
    is_holiday: bool = False
    has_override: bool = False
    blocks: Tuple[ScheduleBlock, ...] = ()


def index_overrides(overrides: Iterable[ScheduleOverride]) -> Dict[dt.date, ScheduleOverride]:
    """Key overrides by date. A later row for the same date replaces an earlier one."""
    return {o.override_date: o for o in overrides}


class Catalog(_Record):
    """Full snapshot of schedule data for one computation."""

    types: Tuple[ScheduleType, ...] = ()  # creation order
    blocks: Tuple[ScheduleBlock, ...] = ()
    overrides: Mapping[dt.date, ScheduleOverride] = Field(default_factory=dict)

    @classmethod
    def from_rows(
        cls,
        types: Iterable[ScheduleType],
        blocks: Iterable[ScheduleBlock] = (),
        overrides: Iterable[ScheduleOverride] = (),
    ) -> "Catalog":
        return cls(
            types=tuple(types),
            blocks=tuple(blocks),
            overrides=index_overrides(overrides),
        )
