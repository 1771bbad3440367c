"""
Entité WellnessGoal - Domain Layer
Objectif quotidien ou hebdomadaire suivi par le tableau de bord
"""
from sqlmodel import SQLModel, Field
from pydantic import BaseModel
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum

from .validators import non_nullable


class GoalType(str, Enum):
    """Types d'objectifs (chacun a sa propre source de progression)"""
    DAILY_CALORIES = "daily_calories"
    DAILY_PROTEIN = "daily_protein"
    WEEKLY_WORKOUTS = "weekly_workouts"
    DAILY_MEDITATION = "daily_meditation"
    DAILY_STEPS = "daily_steps"
    DAILY_WATER = "daily_water"
    DAILY_SLEEP = "daily_sleep"


class WellnessGoalBase(SQLModel):
    goal_type: GoalType
    target_value: int


class WellnessGoal(WellnessGoalBase, table=True):
    __tablename__ = "wellness_goals"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    goal_type: str
    current_streak: int = Field(default=0)
    is_active: bool = Field(default=True, index=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class WellnessGoalCreate(WellnessGoalBase):
    pass


class WellnessGoalRead(SQLModel):
    id: UUID
    goal_type: str
    target_value: int
    current_streak: int
    is_active: bool
    created_at: dt.datetime
    updated_at: dt.datetime


class WellnessGoalUpdate(SQLModel):
    target_value: Optional[int] = None
    is_active: Optional[bool] = None

    _required = non_nullable("target_value", "is_active")


class GoalProgress(BaseModel):
    goal_type: str
    target: int
    current: int
    percentage: int
    on_track: bool
