from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.orm import Session

from blockly.core.database import get_db
from blockly.models.schedule_block import ScheduleBlock
from blockly.models.schedule_type import ScheduleType
from blockly.scheduling import records
from blockly.scheduling.templates import SCHEDULE_TEMPLATES, get_template
from blockly.scheduling.timeline import blocks_for
from blockly.schemas.schedules import (
    ScheduleBlockCreate,
    ScheduleBlockUpdate,
    ScheduleTypeCreate,
    ScheduleTypeUpdate,
    TemplateApply,
)
from blockly.services import catalog as catalog_svc
from blockly.services.calendar_views import block_out, type_out
from blockly.services.validators import validate_time_range

router = APIRouter()


def _type_with_blocks(db: Session, row: ScheduleType) -> dict:
    t = records.ScheduleType.model_validate(row)
    block_rows = db.execute(
        select(ScheduleBlock).where(ScheduleBlock.schedule_type_id == row.id)
    ).scalars().all()
    blocks = blocks_for(t, [records.ScheduleBlock.model_validate(b) for b in block_rows])
    out = type_out(t)
    out["created_at"] = row.created_at.isoformat() if row.created_at else None
    out["blocks"] = [block_out(b) for b in blocks]
    return out


def _get_type_or_404(db: Session, type_id: str) -> ScheduleType:
    row = db.get(ScheduleType, type_id)
    if not row:
        raise HTTPException(status_code=404, detail="Schedule type not found")
    return row


def _get_block_or_404(db: Session, type_id: str, block_id: str) -> ScheduleBlock:
    block = db.get(ScheduleBlock, block_id)
    if not block or block.schedule_type_id != type_id:
        raise HTTPException(status_code=404, detail="Schedule block not found")
    return block


# ----------------------------
# Templates
# ----------------------------
@router.get("/templates")
def list_templates():
    return [
        {
            "id": t["id"],
            "label": t["label"],
            "description": t["description"],
            "schedule_type_names": [st["name"] for st in t["schedule_types"]],
        }
        for t in SCHEDULE_TEMPLATES
    ]


@router.post("/templates/{template_id}")
def apply_template(template_id: str, req: TemplateApply = TemplateApply(), db: Session = Depends(get_db)):
    template = get_template(template_id)
    if not template:
        raise HTTPException(status_code=404, detail="Template not found")

    created = catalog_svc.apply_template(db, template, req.name_prefix)
    return {
        "template_id": template_id,
        "schedule_types": [_type_with_blocks(db, row) for row in created],
    }


@router.post("/demo")
def load_demo(db: Session = Depends(get_db)):
    """Seed demo schedule types, tasks and an override for tomorrow (once)."""
    created = catalog_svc.load_demo_data(db, date.today())
    if created is None:
        return {"created": False, "schedule_types": []}
    return {
        "created": True,
        "schedule_types": [_type_with_blocks(db, row) for row in created],
    }


# ----------------------------
# Schedule types
# ----------------------------
@router.get("")
@router.get("/")
def list_schedule_types(db: Session = Depends(get_db)):
    """All schedule types in catalog (creation) order, each with its ordered blocks."""
    rows = db.execute(select(ScheduleType).order_by(ScheduleType.created_at)).scalars().all()
    return [_type_with_blocks(db, r) for r in rows]


@router.post("", status_code=201)
def create_schedule_type(req: ScheduleTypeCreate, db: Session = Depends(get_db)):
    row = ScheduleType(name=req.name)
    catalog_svc.apply_lunch_fields(row, req.lunch_enabled, req.lunch_start, req.lunch_end)
    db.add(row)
    db.commit()
    db.refresh(row)
    return _type_with_blocks(db, row)


@router.get("/{type_id}")
def get_schedule_type(type_id: str, db: Session = Depends(get_db)):
    return _type_with_blocks(db, _get_type_or_404(db, type_id))


@router.put("/{type_id}")
def update_schedule_type(type_id: str, req: ScheduleTypeUpdate, db: Session = Depends(get_db)):
    row = _get_type_or_404(db, type_id)
    row.name = req.name
    catalog_svc.apply_lunch_fields(row, req.lunch_enabled, req.lunch_start, req.lunch_end)
    db.commit()
    db.refresh(row)
    return _type_with_blocks(db, row)


@router.delete("/{type_id}")
def delete_schedule_type(type_id: str, db: Session = Depends(get_db)):
    """Delete a schedule type along with its blocks and any overrides that use it."""
    row = _get_type_or_404(db, type_id)
    catalog_svc.delete_schedule_type(db, row)
    db.commit()
    return {"deleted": True, "id": type_id}


# ----------------------------
# Blocks
# ----------------------------
@router.post("/{type_id}/blocks", status_code=201)
def create_block(type_id: str, req: ScheduleBlockCreate, db: Session = Depends(get_db)):
    _get_type_or_404(db, type_id)
    validate_time_range(req.start_time, req.end_time)

    block = ScheduleBlock(
        schedule_type_id=type_id,
        name=req.name.strip(),
        start_time=req.start_time,
        end_time=req.end_time,
        block_index=req.block_index,
        is_lunch=req.is_lunch,
    )
    db.add(block)
    db.commit()
    db.refresh(block)
    return block_out(records.ScheduleBlock.model_validate(block))


@router.put("/{type_id}/blocks/{block_id}")
def update_block(type_id: str, block_id: str, req: ScheduleBlockUpdate, db: Session = Depends(get_db)):
    block = _get_block_or_404(db, type_id, block_id)
    validate_time_range(req.start_time, req.end_time)

    block.name = req.name.strip()
    block.start_time = req.start_time
    block.end_time = req.end_time
    block.block_index = req.block_index
    block.is_lunch = req.is_lunch
    db.commit()
    db.refresh(block)
    return block_out(records.ScheduleBlock.model_validate(block))


@router.delete("/{type_id}/blocks/{block_id}")
def delete_block(type_id: str, block_id: str, db: Session = Depends(get_db)):
    block = _get_block_or_404(db, type_id, block_id)
    catalog_svc.delete_block(db, block)
    db.commit()
    return {"deleted": True, "id": block_id}
