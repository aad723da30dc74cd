from pydantic import BaseModel

class OverrideUpsert(BaseModel):
    schedule_type_id: str
