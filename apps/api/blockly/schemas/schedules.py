from typing import Optional

from pydantic import BaseModel, Field, field_validator

from blockly.scheduling.timeutils import to_minutes


def _check_hhmm(v: Optional[str]) -> Optional[str]:
    if v is None:
        return v
    minutes = to_minutes(v)
    # store the canonical zero-padded form
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


class ScheduleTypeCreate(BaseModel):
    name: str = Field(min_length=1)
    lunch_enabled: bool = True
    lunch_start: Optional[str] = "12:00"
    lunch_end: Optional[str] = "12:30"

    check_lunch_times = field_validator("lunch_start", "lunch_end")(_check_hhmm)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v


class ScheduleTypeUpdate(ScheduleTypeCreate):
    pass


class ScheduleBlockCreate(BaseModel):
    name: str = Field(min_length=1)
    start_time: str
    end_time: str
    block_index: int = 1
    is_lunch: bool = False

    check_block_times = field_validator("start_time", "end_time")(_check_hhmm)


class ScheduleBlockUpdate(ScheduleBlockCreate):
    pass


class TemplateApply(BaseModel):
    # e.g. "Fall" -> "Fall Day A", "Fall Day B"
    name_prefix: str = ""
