from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from blockly.core.database import get_db
from blockly.models.task import Task
from blockly.scheduling.calendar_grid import month_grid, week_grid
from blockly.scheduling.records import UserPreferences
from blockly.scheduling.timeutils import parse_date
from blockly.services.calendar_views import day_view, month_view, week_view
from blockly.services.catalog import load_catalog

router = APIRouter()


def get_preferences(
    use_24h: bool = Query(False),
    default_schedule_id: Optional[str] = Query(None, description="Empty = auto-detect"),
    show_weekends: bool = Query(False),
) -> UserPreferences:
    return UserPreferences(
        use_24h=use_24h,
        default_schedule_id=default_schedule_id or None,
        show_weekends=show_weekends,
    )


@router.get("/day/{day}")
def get_day(
    day: str,
    now: Optional[datetime] = Query(None, description="Local wall-clock time; defaults to the server clock"),
    prefs: UserPreferences = Depends(get_preferences),
    db: Session = Depends(get_db),
):
    target = parse_date(day)
    now = now or datetime.now()

    catalog = load_catalog(db, target, target)
    tasks = db.execute(
        select(Task).where(Task.due_date == target).order_by(Task.created_at.desc())
    ).scalars().all()
    return day_view(catalog, target, prefs, now, tasks)


@router.get("/week/{anchor}")
def get_week(
    anchor: str,
    prefs: UserPreferences = Depends(get_preferences),
    db: Session = Depends(get_db),
):
    days = week_grid(anchor, prefs.show_weekends)
    catalog = load_catalog(db, days[0], days[-1])
    return week_view(catalog, anchor, prefs, today=date.today())


@router.get("/month/{year_month}")
def get_month(
    year_month: str,
    prefs: UserPreferences = Depends(get_preferences),
    db: Session = Depends(get_db),
):
    cells = month_grid(year_month)
    first = next(c for c in cells if c is not None)
    last = max(c for c in cells if c is not None)
    catalog = load_catalog(db, first, last)
    return month_view(catalog, year_month, prefs)
