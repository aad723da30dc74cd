from datetime import date, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.orm import Session

from blockly.core.config import settings
from blockly.core.database import get_db
from blockly.models.schedule_block import ScheduleBlock
from blockly.models.task import Task
from blockly.schemas.tasks import TaskCreate, TaskFilter, TaskUpdate
from blockly.services import tasks as task_svc

router = APIRouter()


def _get_task_or_404(db: Session, task_id: str) -> Task:
    task = db.get(Task, task_id)
    if not task:
        raise HTTPException(status_code=404, detail="Task not found")
    return task


def _check_block(db: Session, block_id: Optional[str]) -> None:
    if block_id and not db.get(ScheduleBlock, block_id):
        raise HTTPException(status_code=400, detail="Unknown schedule_block_id")


@router.get("")
@router.get("/")
def list_tasks(
    filter: TaskFilter = Query("all"),
    due_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    """Active first, then completed; dated tasks before undated ones, earliest due first."""
    query = select(Task)
    if due_date is not None:
        query = query.where(Task.due_date == due_date)
    rows = db.execute(query).scalars().all()

    tasks = task_svc.filter_tasks(task_svc.sort_tasks(rows), filter)
    return {
        "active_count": sum(1 for t in rows if not t.is_completed),
        "completed_count": sum(1 for t in rows if t.is_completed),
        "tasks": [task_svc.task_out(t) for t in tasks],
    }


@router.post("", status_code=201)
def create_task(req: TaskCreate, db: Session = Depends(get_db)):
    _check_block(db, req.schedule_block_id)
    task = Task(
        title=req.title.strip(),
        due_date=req.due_date,
        schedule_block_id=req.schedule_block_id or None,
    )
    db.add(task)
    db.commit()
    db.refresh(task)
    return task_svc.task_out(task)


@router.delete("/completed")
def clear_completed(db: Session = Depends(get_db)):
    removed = task_svc.delete_all_completed(db)
    db.commit()
    return {"deleted": removed}


@router.put("/{task_id}")
def update_task(task_id: str, req: TaskUpdate, db: Session = Depends(get_db)):
    task = _get_task_or_404(db, task_id)
    _check_block(db, req.schedule_block_id)

    task.title = req.title.strip()
    task.due_date = req.due_date
    task.schedule_block_id = req.schedule_block_id or None
    db.commit()
    db.refresh(task)
    return task_svc.task_out(task)


@router.post("/{task_id}/toggle")
def toggle_task(
    task_id: str,
    auto_cleanup: bool = Query(False),
    db: Session = Depends(get_db),
):
    """Flip completion; with auto_cleanup, also purge long-completed tasks."""
    task = _get_task_or_404(db, task_id)
    now = datetime.now()
    task_svc.set_completed(task, not task.is_completed, now)

    removed = 0
    if task.is_completed and auto_cleanup:
        removed = task_svc.cleanup_completed(db, settings.task_cleanup_days, now)
    db.commit()
    db.refresh(task)
    return {"task": task_svc.task_out(task), "cleaned_up": removed}


@router.delete("/{task_id}")
def delete_task(task_id: str, db: Session = Depends(get_db)):
    task = _get_task_or_404(db, task_id)
    db.delete(task)
    db.commit()
    return {"deleted": True, "id": task_id}
