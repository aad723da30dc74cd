import uuid
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, String

from blockly.core.database import Base

class ScheduleOverride(Base):
    __tablename__ = "schedule_overrides"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    override_date = Column(Date, nullable=False, unique=True)  # one override per day
    schedule_type_id = Column(
        String(36),
        ForeignKey("schedule_types.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    created_at = Column(DateTime, nullable=False, default=datetime.now)
