from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

# Load environment variables once, at import time
load_dotenv()

from blockly.core.config import settings  # noqa: E402


def _connect_args(url: str) -> dict:
    # SQLite connections are used from FastAPI's threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(
    settings.database_url,
    pool_pre_ping=True,
    connect_args=_connect_args(settings.database_url),
)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
)

class Base(DeclarativeBase):
    pass

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def init_db(bind=None) -> None:
    """Create any missing tables (fresh SQLite files, tests)."""
    # Import models so their tables are registered on Base.metadata
    from blockly.models.schedule_type import ScheduleType  # noqa: F401
    from blockly.models.schedule_block import ScheduleBlock  # noqa: F401
    from blockly.models.schedule_override import ScheduleOverride  # noqa: F401
    from blockly.models.task import Task  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
