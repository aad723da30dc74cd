from datetime import date
from typing import Literal, Optional

from pydantic import BaseModel, Field

TaskFilter = Literal["all", "active", "completed"]

class TaskCreate(BaseModel):
    title: str = Field(min_length=1)
    due_date: Optional[date] = None
    schedule_block_id: Optional[str] = None

class TaskUpdate(TaskCreate):
    pass
