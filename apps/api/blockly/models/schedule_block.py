import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text

from blockly.core.database import Base

class ScheduleBlock(Base):
    __tablename__ = "schedule_blocks"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    schedule_type_id = Column(
        String(36),
        ForeignKey("schedule_types.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    name = Column(Text, nullable=False)
    start_time = Column(String(5), nullable=False)  # HH:MM
    end_time = Column(String(5), nullable=False)  # HH:MM
    block_index = Column(Integer, nullable=False)
    is_lunch = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, nullable=False, default=datetime.now)
