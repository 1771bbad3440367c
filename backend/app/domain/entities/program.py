"""
Entités WellnessProgram et ProgramEnrollment - Domain Layer
Programmes guidés sur plusieurs jours et inscription d'un utilisateur
"""
from sqlmodel import SQLModel, Field, JSON, Column, UniqueConstraint
from pydantic import BaseModel
from typing import Optional, List
import datetime as dt
from uuid import UUID, uuid4

from .validators import non_nullable


class DailyActivity(SQLModel):
    """Activité proposée pour un jour du programme"""
    day: int = Field(ge=1)
    title: str
    activity: str


class WellnessProgramBase(SQLModel):
    program_type: str = Field(index=True)  # stress_relief, energy_reset, gratitude...
    title: str
    description: str
    duration_days: int = Field(ge=1)
    is_premium: bool = False
    image_url: Optional[str] = None


class WellnessProgram(WellnessProgramBase, table=True):
    __tablename__ = "wellness_programs"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    daily_activities: List[dict] = Field(default_factory=list, sa_column=Column(JSON))
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class WellnessProgramCreate(WellnessProgramBase):
    daily_activities: List[DailyActivity] = []


class WellnessProgramUpdate(SQLModel):
    program_type: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None
    duration_days: Optional[int] = Field(default=None, ge=1)
    is_premium: Optional[bool] = None
    image_url: Optional[str] = None
    daily_activities: Optional[List[DailyActivity]] = None

    _required = non_nullable(
        "program_type", "title", "description", "duration_days", "is_premium", "daily_activities"
    )


class WellnessProgramSummary(WellnessProgramBase):
    """Forme de liste : sans le détail des activités quotidiennes"""
    id: UUID
    created_at: dt.datetime


class WellnessProgramRead(WellnessProgramSummary):
    daily_activities: List[DailyActivity] = []
    updated_at: dt.datetime


class ProgramEnrollment(SQLModel, table=True):
    """Inscription d'un utilisateur ; une seule par programme"""
    __tablename__ = "program_enrollments"
    __table_args__ = (UniqueConstraint("user_id", "program_id", name="uq_program_enrollments_user_program"),)

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(index=True)
    program_id: UUID = Field(foreign_key="wellness_programs.id", index=True)
    current_day: int = Field(default=1)
    completed_days: List[int] = Field(default_factory=list, sa_column=Column(JSON))
    is_completed: bool = Field(default=False)
    completed_at: Optional[dt.datetime] = None
    enrolled_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class EnrollmentCreate(SQLModel):
    program_id: UUID


class ProgressUpdate(SQLModel):
    day: int = Field(ge=1)


class EnrolledProgram(BaseModel):
    id: UUID
    title: str
    description: str
    duration_days: int
    is_premium: bool


class ProgramEnrollmentRead(BaseModel):
    id: UUID
    program_id: UUID
    enrolled_at: dt.datetime
    current_day: int
    completed_days: List[int]
    is_completed: bool
    completed_at: Optional[dt.datetime] = None
    program: Optional[EnrolledProgram] = None

    @classmethod
    def from_entity(
        cls, enrollment: ProgramEnrollment, program: Optional[WellnessProgram]
    ) -> "ProgramEnrollmentRead":
        return cls(
            id=enrollment.id,
            program_id=enrollment.program_id,
            enrolled_at=enrollment.enrolled_at,
            current_day=enrollment.current_day,
            completed_days=list(enrollment.completed_days or []),
            is_completed=enrollment.is_completed,
            completed_at=enrollment.completed_at,
            program=EnrolledProgram(
                id=program.id,
                title=program.title,
                description=program.description,
                duration_days=program.duration_days,
                is_premium=program.is_premium,
            ) if program else None,
        )
