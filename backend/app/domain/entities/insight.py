"""
Entités ProgramAnalytics et CommunityInsight - Domain Layer
Fréquentation quotidienne des programmes et messages de la communauté
"""
from sqlmodel import SQLModel, Field, UniqueConstraint
from pydantic import BaseModel
from typing import Optional, List
import datetime as dt
from uuid import UUID, uuid4


class ProgramAnalytics(SQLModel, table=True):
    """Une ligne par programme et par jour"""
    __tablename__ = "program_analytics"
    __table_args__ = (UniqueConstraint("program_id", "date", name="uq_program_analytics_program_date"),)

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    program_id: UUID = Field(foreign_key="wellness_programs.id", index=True)
    date: dt.date = Field(index=True)
    active_users: int = Field(default=0)
    completions: int = Field(default=0)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class AnalyticsRecord(SQLModel):
    program_id: UUID
    date: dt.date
    active_users: int = Field(default=0, ge=0)
    completions: int = Field(default=0, ge=0)


class CommunityInsightBase(SQLModel):
    title: str
    description: str
    insight_type: str
    display_order: int = 0
    is_active: bool = True


class CommunityInsight(CommunityInsightBase, table=True):
    __tablename__ = "community_insights"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    is_active: bool = Field(default=True, index=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class CommunityInsightCreate(CommunityInsightBase):
    pass


class CommunityInsightRead(BaseModel):
    id: UUID
    title: str
    description: str
    type: str

    @classmethod
    def from_entity(cls, insight: CommunityInsight) -> "CommunityInsightRead":
        return cls(
            id=insight.id,
            title=insight.title,
            description=insight.description,
            type=insight.insight_type,
        )


class TrendingProgram(BaseModel):
    id: UUID
    title: str
    category: str
    participants: int
    growth: float
    icon: str
    color: str


class WellnessStats(BaseModel):
    total_active_users: int
    most_popular_time: str
    completion_rate: int
    trending_categories: List[str]
