"""initial_wellness_schema

Revision ID: 0001a2b3c4d5
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
import sqlmodel


# revision identifiers, used by Alembic.
revision: str = '0001a2b3c4d5'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_str = sqlmodel.sql.sqltypes.AutoString
_guid = sqlmodel.sql.sqltypes.GUID


def upgrade() -> None:
    op.create_table('activities',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('activity_type', _str(), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
        sa.Column('notes', _str(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_activities_date', 'activities', ['date'])
    op.create_index('ix_activities_activity_type', 'activities', ['activity_type'])

    op.create_table('nutrition_logs',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('meal_type', _str(), nullable=False),
        sa.Column('food_name', _str(), nullable=False),
        sa.Column('calories', sa.Integer(), nullable=False),
        sa.Column('protein', sa.Integer(), nullable=True),
        sa.Column('carbs', sa.Integer(), nullable=True),
        sa.Column('fats', sa.Integer(), nullable=True),
        sa.Column('notes', _str(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_nutrition_logs_date', 'nutrition_logs', ['date'])

    op.create_table('workouts',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('workout_type', _str(), nullable=False),
        sa.Column('title', _str(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('calories_burned', sa.Integer(), nullable=True),
        sa.Column('notes', _str(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_workouts_date', 'workouts', ['date'])

    op.create_table('workout_exercises',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('workout_id', _guid(), nullable=False),
        sa.Column('exercise_name', _str(), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['workout_id'], ['workouts.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_workout_exercises_workout_id', 'workout_exercises', ['workout_id'])

    op.create_table('meditation_sessions',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('practice_type', _str(), nullable=False),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('mood_before', _str(), nullable=True),
        sa.Column('mood_after', _str(), nullable=True),
        sa.Column('notes', _str(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_meditation_sessions_date', 'meditation_sessions', ['date'])

    op.create_table('journal_entries',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('content', _str(), nullable=False),
        sa.Column('mood', _str(), nullable=True),
        sa.Column('energy', sa.Integer(), nullable=True),
        sa.Column('intention', _str(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )

    op.create_table('wellness_goals',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('goal_type', _str(), nullable=False),
        sa.Column('target_value', sa.Integer(), nullable=False),
        sa.Column('current_streak', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_wellness_goals_is_active', 'wellness_goals', ['is_active'])

    # Une seule citation par semaine
    op.create_table('weekly_quotes',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('week_start_date', sa.Date(), nullable=False),
        sa.Column('quote_text', _str(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_weekly_quotes_week_start_date', 'weekly_quotes', ['week_start_date'], unique=True)

    op.create_table('visual_themes',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('theme_name', _str(), nullable=False),
        sa.Column('background_color', _str(), nullable=False),
        sa.Column('card_color', _str(), nullable=False),
        sa.Column('text_color', _str(), nullable=False),
        sa.Column('text_secondary_color', _str(), nullable=False),
        sa.Column('primary_color', _str(), nullable=False),
        sa.Column('secondary_color', _str(), nullable=False),
        sa.Column('accent_color', _str(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_visual_themes_theme_name', 'visual_themes', ['theme_name'])

    op.create_table('user_preferences',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('user_id', _str(), nullable=False),
        sa.Column('selected_theme_id', _guid(), nullable=True),
        sa.Column('auto_theme_by_time', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(['selected_theme_id'], ['visual_themes.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_user_preferences_user_id', 'user_preferences', ['user_id'], unique=True)

    op.create_table('rhythm_visuals',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('rhythm_category', _str(), nullable=False),
        sa.Column('rhythm_name', _str(), nullable=False),
        sa.Column('image_url', _str(), nullable=False),
        sa.Column('video_url', _str(), nullable=True),
        sa.Column('month_active', sa.Integer(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_rhythm_visuals_rhythm_category', 'rhythm_visuals', ['rhythm_category'])
    op.create_index('ix_rhythm_visuals_month_active', 'rhythm_visuals', ['month_active'])

    op.create_table('renewal_visuals',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('visual_type', _str(), nullable=False),
        sa.Column('season', _str(), nullable=True),
        sa.Column('month', sa.Integer(), nullable=True),
        sa.Column('day_of_week', sa.Integer(), nullable=True),
        sa.Column('image_url', _str(), nullable=False),
        sa.Column('description', _str(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_renewal_visuals_visual_type', 'renewal_visuals', ['visual_type'])

    # Une seule ligne d'abonnement par utilisateur
    op.create_table('user_subscriptions',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('user_id', _str(), nullable=False),
        sa.Column('subscription_tier', _str(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('started_at', sa.DateTime(), nullable=True),
        sa.Column('expires_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_user_subscriptions_user_id', 'user_subscriptions', ['user_id'], unique=True)

    op.create_table('subscription_plans',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('plan_name', _str(), nullable=False),
        sa.Column('plan_description', _str(), nullable=True),
        sa.Column('price', _str(), nullable=False),
        sa.Column('billing_period', _str(), nullable=False),
        sa.Column('features', sa.JSON(), nullable=True),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_subscription_plans_display_order', 'subscription_plans', ['display_order'])

    op.create_table('admin_categories',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('category_name', _str(), nullable=False),
        sa.Column('icon_name', _str(), nullable=False),
        sa.Column('route_path', _str(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admin_categories_display_order', 'admin_categories', ['display_order'])

    op.create_table('admin_content',
        sa.Column('id', _guid(), nullable=False),
        sa.Column('page_name', _str(), nullable=False),
        sa.Column('content_type', _str(), nullable=False),
        sa.Column('content_key', _str(), nullable=False),
        sa.Column('content_value', _str(), nullable=False),
        sa.Column('display_order', sa.Integer(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_admin_content_page_name', 'admin_content', ['page_name'])


def downgrade() -> None:
    for table in (
        'admin_content', 'admin_categories', 'subscription_plans', 'user_subscriptions',
        'renewal_visuals', 'rhythm_visuals', 'user_preferences', 'visual_themes',
        'weekly_quotes', 'wellness_goals', 'journal_entries', 'meditation_sessions',
        'workout_exercises', 'workouts', 'nutrition_logs', 'activities',
    ):
        op.drop_table(table)
