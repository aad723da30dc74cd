from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import List, Optional

from sqlalchemy import and_, delete, select, update
from sqlalchemy.orm import Session

from blockly.models.schedule_block import ScheduleBlock
from blockly.models.schedule_override import ScheduleOverride
from blockly.models.schedule_type import ScheduleType
from blockly.models.task import Task
from blockly.scheduling import records
from blockly.scheduling.errors import InvalidTimeRange
from blockly.scheduling.templates import DEMO_TASKS, DEMO_TEMPLATE
from blockly.services.validators import validate_time_range

logger = logging.getLogger(__name__)

HOLIDAY_NAME = "Holiday"


# ---------- snapshot ----------
def load_catalog(db: Session, start: Optional[date] = None, end: Optional[date] = None) -> records.Catalog:
    """
    Read a full snapshot of types, blocks and overrides for the engine.
    `start`/`end` only narrow the overrides that are loaded.
    """
    type_rows = db.execute(select(ScheduleType).order_by(ScheduleType.created_at)).scalars().all()
    block_rows = db.execute(
        select(ScheduleBlock).order_by(ScheduleBlock.schedule_type_id, ScheduleBlock.block_index)
    ).scalars().all()

    ov_query = select(ScheduleOverride).order_by(ScheduleOverride.override_date)
    if start is not None:
        ov_query = ov_query.where(ScheduleOverride.override_date >= start)
    if end is not None:
        ov_query = ov_query.where(ScheduleOverride.override_date <= end)
    override_rows = db.execute(ov_query).scalars().all()

    types = [records.ScheduleType.model_validate(r) for r in type_rows]
    known = {t.id for t in types}
    for o in override_rows:
        if o.schedule_type_id not in known:
            logger.warning("Override on %s references missing schedule type %s", o.override_date, o.schedule_type_id)

    return records.Catalog.from_rows(
        types=types,
        blocks=[records.ScheduleBlock.model_validate(r) for r in block_rows],
        overrides=[records.ScheduleOverride.model_validate(r) for r in override_rows],
    )


# ---------- schedule types & blocks ----------
def apply_lunch_fields(row: ScheduleType, lunch_enabled: bool, lunch_start: Optional[str], lunch_end: Optional[str]) -> None:
    if lunch_enabled:
        if lunch_start is None or lunch_end is None:
            raise InvalidTimeRange("lunch_start and lunch_end are required when lunch is enabled")
        validate_time_range(lunch_start, lunch_end)
        row.lunch_start, row.lunch_end = lunch_start, lunch_end
    else:
        row.lunch_start, row.lunch_end = None, None
    row.lunch_enabled = lunch_enabled


def delete_schedule_type(db: Session, type_row: ScheduleType) -> None:
    """Remove a type together with its blocks and overrides; tasks lose their block link."""
    block_ids = select(ScheduleBlock.id).where(ScheduleBlock.schedule_type_id == type_row.id)
    db.execute(update(Task).where(Task.schedule_block_id.in_(block_ids)).values(schedule_block_id=None))
    db.execute(delete(ScheduleBlock).where(ScheduleBlock.schedule_type_id == type_row.id))
    db.execute(delete(ScheduleOverride).where(ScheduleOverride.schedule_type_id == type_row.id))
    db.delete(type_row)


def delete_block(db: Session, block_row: ScheduleBlock) -> None:
    db.execute(update(Task).where(Task.schedule_block_id == block_row.id).values(schedule_block_id=None))
    db.delete(block_row)


def unique_name(raw_name: str, existing_lower: set, prefix: str = "") -> str:
    """
    "Day A" -> "Day A", then "Day A (2)", "Day A (3)", ...
    Names compare case-insensitively; the chosen name is added to `existing_lower`.
    """
    prefix = prefix.strip()
    base = f"{prefix} {raw_name}" if prefix else raw_name
    candidate = base
    counter = 2
    while candidate.lower() in existing_lower:
        candidate = f"{base} ({counter})"
        counter += 1
    existing_lower.add(candidate.lower())
    return candidate


def apply_template(db: Session, template: dict, name_prefix: str = "") -> List[ScheduleType]:
    existing = {n.lower() for n in db.execute(select(ScheduleType.name)).scalars().all()}
    created: List[ScheduleType] = []
    base_ts = datetime.now()

    for i, st in enumerate(template["schedule_types"]):
        row = ScheduleType(
            name=unique_name(st["name"], existing, name_prefix),
            lunch_enabled=st["lunch_enabled"],
            lunch_start=st["lunch_start"],
            lunch_end=st["lunch_end"],
            # keep template order as catalog order
            created_at=base_ts + timedelta(microseconds=i),
        )
        db.add(row)
        db.flush()

        for idx, b in enumerate(st["blocks"], start=1):
            db.add(
                ScheduleBlock(
                    schedule_type_id=row.id,
                    name=b["name"],
                    start_time=b["start_time"],
                    end_time=b["end_time"],
                    block_index=idx,
                    is_lunch=bool(b.get("is_lunch", False)),
                )
            )
        created.append(row)

    db.commit()
    for row in created:
        db.refresh(row)
    logger.info("Applied template %s (%d schedule types)", template["id"], len(created))
    return created


def load_demo_data(db: Session, today: date) -> Optional[List[ScheduleType]]:
    """
    Seed the demo catalog: the two demo day types, their tasks, and an
    override pointing tomorrow at Demo Day B. Returns None (and writes
    nothing) when the demo types already exist.
    """
    first_name = DEMO_TEMPLATE["schedule_types"][0]["name"]
    if db.execute(select(ScheduleType).where(ScheduleType.name == first_name)).scalars().first():
        logger.info("Demo data already present, skipping")
        return None

    day_a, day_b = apply_template(db, DEMO_TEMPLATE)
    block_ids = {
        b.name: b.id
        for b in db.execute(
            select(ScheduleBlock).where(ScheduleBlock.schedule_type_id == day_a.id)
        ).scalars().all()
    }
    for title, due_today, block_name in DEMO_TASKS:
        db.add(
            Task(
                title=title,
                due_date=today if due_today else None,
                schedule_block_id=block_ids.get(block_name),
            )
        )
    # upsert_override commits the tasks too
    upsert_override(db, today + timedelta(days=1), day_b.id)
    logger.info("Loaded demo data (%d tasks)", len(DEMO_TASKS))
    return [day_a, day_b]


# ---------- overrides ----------
def get_override(db: Session, day: date) -> Optional[ScheduleOverride]:
    return db.execute(select(ScheduleOverride).where(ScheduleOverride.override_date == day)).scalars().first()


def upsert_override(db: Session, day: date, schedule_type_id: str) -> ScheduleOverride:
    """Last write wins: an existing override for the day is repointed."""
    existing = get_override(db, day)
    if existing:
        existing.schedule_type_id = schedule_type_id
        row = existing
    else:
        row = ScheduleOverride(override_date=day, schedule_type_id=schedule_type_id)
        db.add(row)
    db.commit()
    db.refresh(row)
    return row


def delete_override(db: Session, day: date) -> bool:
    existing = get_override(db, day)
    if not existing:
        return False
    db.delete(existing)
    db.commit()
    return True


def ensure_holiday_type(db: Session) -> ScheduleType:
    """Find the type named exactly "holiday" (any case), creating it if needed."""
    types = db.execute(select(ScheduleType).order_by(ScheduleType.created_at)).scalars().all()
    for t in types:
        if t.name.lower() == HOLIDAY_NAME.lower():
            return t

    row = ScheduleType(name=HOLIDAY_NAME, lunch_enabled=False, lunch_start=None, lunch_end=None)
    db.add(row)
    db.flush()
    logger.info("Created %s schedule type %s", HOLIDAY_NAME, row.id)
    return row


def mark_holiday(db: Session, day: date) -> ScheduleOverride:
    holiday = ensure_holiday_type(db)
    row = upsert_override(db, day, holiday.id)
    logger.info("Marked %s as holiday", day)
    return row


def list_overrides(db: Session, start: Optional[date] = None, end: Optional[date] = None) -> List[ScheduleOverride]:
    conds = []
    if start is not None:
        conds.append(ScheduleOverride.override_date >= start)
    if end is not None:
        conds.append(ScheduleOverride.override_date <= end)
    query = select(ScheduleOverride).order_by(ScheduleOverride.override_date)
    if conds:
        query = query.where(and_(*conds))
    return db.execute(query).scalars().all()
