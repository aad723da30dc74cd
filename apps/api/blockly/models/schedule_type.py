import uuid
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, String, Text

from blockly.core.database import Base

class ScheduleType(Base):
    __tablename__ = "schedule_types"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(Text, nullable=False)

    lunch_enabled = Column(Boolean, nullable=False, default=False)
    lunch_start = Column(String(5), nullable=True)  # HH:MM
    lunch_end = Column(String(5), nullable=True)  # HH:MM

    # Catalog order (and the "first type" fallback) follows creation time
    created_at = Column(DateTime, nullable=False, default=datetime.now, index=True)
