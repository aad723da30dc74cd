from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import List, Sequence

from sqlalchemy import and_, delete
from sqlalchemy.orm import Session

from blockly.models.task import Task

logger = logging.getLogger(__name__)


def sort_tasks(tasks: Sequence[Task]) -> List[Task]:
    """Active before completed, dated before undated, then by due date."""
    return sorted(
        tasks,
        key=lambda t: (
            bool(t.is_completed),
            t.due_date is None,
            t.due_date or date.min,
        ),
    )


def filter_tasks(tasks: Sequence[Task], which: str = "all") -> List[Task]:
    if which == "active":
        return [t for t in tasks if not t.is_completed]
    if which == "completed":
        return [t for t in tasks if t.is_completed]
    return list(tasks)


def set_completed(task: Task, completed: bool, now: datetime) -> None:
    task.is_completed = completed
    task.completed_at = now if completed else None


def cleanup_completed(db: Session, older_than_days: int, now: datetime) -> int:
    """Delete completed tasks finished more than `older_than_days` ago."""
    threshold = now - timedelta(days=older_than_days)
    result = db.execute(
        delete(Task).where(
            and_(
                Task.is_completed == True,  # noqa: E712
                Task.completed_at < threshold,
            )
        )
    )
    removed = result.rowcount or 0
    if removed:
        logger.info("Removed %d completed tasks older than %d days", removed, older_than_days)
    return removed


def delete_all_completed(db: Session) -> int:
    result = db.execute(delete(Task).where(Task.is_completed == True))  # noqa: E712
    return result.rowcount or 0


def task_out(t: Task) -> dict:
    return {
        "id": t.id,
        "title": t.title,
        "due_date": t.due_date.isoformat() if t.due_date else None,
        "schedule_block_id": t.schedule_block_id,
        "is_completed": bool(t.is_completed),
        "completed_at": t.completed_at.isoformat() if t.completed_at else None,
        "created_at": t.created_at.isoformat() if t.created_at else None,
    }
