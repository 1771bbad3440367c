"""programs_saved_items_insights

Revision ID: 0002b3c4d5e6
Revises: 0001a2b3c4d5
Create Date: 2026-10-19 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '0002b3c4d5e6'
down_revision: Union[str, None] = '0001a2b3c4d5'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_str = sqlmodel.sql.sqltypes.AutoString
_guid = sqlmodel.sql.sqltypes.GUID


def upgrade() -> None:
    op.create_table('wellness_programs',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('program_type', _str(), nullable=False),
        sa.Column('title', _str(), nullable=False),
        sa.Column('description', _str(), nullable=False),
        sa.Column('duration_days', sa.Integer(), nullable=False),
        sa.Column('is_premium', sa.Boolean(), nullable=False),
        sa.Column('image_url', _str(), nullable=True),
        sa.Column('daily_activities', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_wellness_programs_program_type', 'wellness_programs', ['program_type'])

    op.create_table('program_enrollments',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('user_id', _str(), nullable=False),
        sa.Column('program_id', _guid(), nullable=False),
        sa.Column('current_day', sa.Integer(), nullable=False),
        sa.Column('completed_days', sa.JSON(), nullable=True),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('completed_at', sa.DateTime(), nullable=True),
        sa.Column('enrolled_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['program_id'], ['wellness_programs.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'program_id', name='uq_program_enrollments_user_program'),
    )
    op.create_index('ix_program_enrollments_user_id', 'program_enrollments', ['user_id'])
    op.create_index('ix_program_enrollments_program_id', 'program_enrollments', ['program_id'])

    op.create_table('program_analytics',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('program_id', _guid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('active_users', sa.Integer(), nullable=False),
        sa.Column('completions', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['program_id'], ['wellness_programs.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('program_id', 'date', name='uq_program_analytics_program_date'),
    )
    op.create_index('ix_program_analytics_program_id', 'program_analytics', ['program_id'])
    op.create_index('ix_program_analytics_date', 'program_analytics', ['date'])

    op.create_table('community_insights',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('title', _str(), nullable=False),
        sa.Column('description', _str(), nullable=False),
        sa.Column('insight_type', _str(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_community_insights_is_active', 'community_insights', ['is_active'])

    op.create_table('saved_renewal_items',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('user_id', _str(), nullable=False),
        sa.Column('item_type', _str(), nullable=False),
        sa.Column('item_id', _str(), nullable=False),
        sa.Column('is_paused', sa.Boolean(), nullable=False),
        sa.Column('saved_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('user_id', 'item_id', name='uq_saved_renewal_items_user_item'),
    )
    op.create_index('ix_saved_renewal_items_user_id', 'saved_renewal_items', ['user_id'])
    op.create_index('ix_saved_renewal_items_item_id', 'saved_renewal_items', ['item_id'])


def downgrade() -> None:
    for table in (
        'saved_renewal_items', 'community_insights', 'program_analytics',
        'program_enrollments', 'wellness_programs',
    ):
        op.drop_table(table)
