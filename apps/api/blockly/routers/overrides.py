from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from blockly.core.database import get_db
from blockly.models.schedule_override import ScheduleOverride
from blockly.models.schedule_type import ScheduleType
from blockly.schemas.overrides import OverrideUpsert
from blockly.services import catalog as catalog_svc

router = APIRouter()


def _override_out(db: Session, ov: ScheduleOverride) -> dict:
    t = db.get(ScheduleType, ov.schedule_type_id)
    return {
        "id": ov.id,
        "override_date": ov.override_date.isoformat(),
        "schedule_type_id": ov.schedule_type_id,
        "schedule_type_name": t.name if t else None,
    }


@router.get("")
@router.get("/")
def list_overrides(
    start: Optional[date] = Query(None),
    end: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    if start and end and end < start:
        raise HTTPException(status_code=400, detail="end must be >= start")
    rows = catalog_svc.list_overrides(db, start, end)
    return [_override_out(db, r) for r in rows]


@router.put("/{override_date}")
def upsert_override(override_date: date, req: OverrideUpsert, db: Session = Depends(get_db)):
    """Assign a schedule type to one date, replacing any existing override."""
    if not db.get(ScheduleType, req.schedule_type_id):
        raise HTTPException(status_code=400, detail="Unknown schedule_type_id")
    row = catalog_svc.upsert_override(db, override_date, req.schedule_type_id)
    return _override_out(db, row)


@router.delete("/{override_date}")
def delete_override(override_date: date, db: Session = Depends(get_db)):
    if not catalog_svc.delete_override(db, override_date):
        raise HTTPException(status_code=404, detail="No override for that date")
    return {"deleted": True, "override_date": override_date.isoformat()}


@router.post("/{override_date}/holiday")
def mark_holiday(override_date: date, db: Session = Depends(get_db)):
    row = catalog_svc.mark_holiday(db, override_date)
    return _override_out(db, row)


@router.delete("/{override_date}/holiday")
def remove_holiday(override_date: date, db: Session = Depends(get_db)):
    # Removing a holiday just drops the day's override, whatever it points to
    removed = catalog_svc.delete_override(db, override_date)
    return {"deleted": removed, "override_date": override_date.isoformat()}
