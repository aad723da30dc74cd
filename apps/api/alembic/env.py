from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

from dotenv import load_dotenv

# .env in apps/api/ (DATABASE_URL)
load_dotenv()

from blockly.core.config import settings  # noqa: E402
from blockly.core.database import Base  # noqa: E402

# Register every table on Base.metadata for autogenerate
from blockly.models.schedule_type import ScheduleType  # noqa: F401,E402
from blockly.models.schedule_block import ScheduleBlock  # noqa: F401,E402
from blockly.models.schedule_override import ScheduleOverride  # noqa: F401,E402
from blockly.models.task import Task  # noqa: F401,E402

config = context.config
config.set_main_option("sqlalchemy.url", settings.database_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# SQLite can only ALTER tables through batch mode (copy + swap)
MIGRATION_OPTS = {
    "target_metadata": Base.metadata,
    "render_as_batch": True,
    "compare_type": True,
}


def run_offline() -> None:
    """Print the SQL instead of executing it (alembic upgrade --sql)."""
    context.configure(
        url=settings.database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **MIGRATION_OPTS,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_online() -> None:
    connectable = engine_from_config(
        config.get_section(config.config_ini_section),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, **MIGRATION_OPTS)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_offline()
else:
    run_online()
