"""create schedule, override and task tables

Revision ID: create_schedule_tables
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'create_schedule_tables'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'schedule_types',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('lunch_enabled', sa.Boolean(), nullable=False),
        sa.Column('lunch_start', sa.String(5), nullable=True),
        sa.Column('lunch_end', sa.String(5), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_schedule_types_created_at', 'schedule_types', ['created_at'])

    op.create_table(
        'schedule_blocks',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('schedule_type_id', sa.String(36), sa.ForeignKey('schedule_types.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.Text(), nullable=False),
        sa.Column('start_time', sa.String(5), nullable=False),
        sa.Column('end_time', sa.String(5), nullable=False),
        sa.Column('block_index', sa.Integer(), nullable=False),
        sa.Column('is_lunch', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_schedule_blocks_schedule_type_id', 'schedule_blocks', ['schedule_type_id'])

    op.create_table(
        'schedule_overrides',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('override_date', sa.Date(), nullable=False, unique=True),
        sa.Column('schedule_type_id', sa.String(36), sa.ForeignKey('schedule_types.id', ondelete='CASCADE'), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_schedule_overrides_schedule_type_id', 'schedule_overrides', ['schedule_type_id'])

    op.create_table(
        'tasks',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('schedule_block_id', sa.String(36), sa.ForeignKey('schedule_blocks.id', ondelete='SET NULL'), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_tasks_due_date', 'tasks', ['due_date'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table('tasks')
    op.drop_table('schedule_overrides')
    op.drop_table('schedule_blocks')
    op.drop_table('schedule_types')
