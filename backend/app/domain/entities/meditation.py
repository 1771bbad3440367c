"""
Entité MeditationSession - Domain Layer
"""
from sqlmodel import SQLModel, Field
from pydantic import BaseModel
from typing import Optional, Dict
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum


class PracticeType(str, Enum):
    """Pratiques proposées dans l'application"""
    BREATHWORK = "breathwork"
    MINDFULNESS = "mindfulness"
    BODY_SCAN = "body_scan"
    LOVING_KINDNESS = "loving_kindness"
    GRATITUDE = "gratitude"


class MeditationSessionBase(SQLModel):
    """Modèle de base pour MeditationSession"""
    date: dt.date = Field(index=True)
    practice_type: str
    duration_minutes: int
    mood_before: Optional[str] = None
    mood_after: Optional[str] = None
    notes: Optional[str] = None


class MeditationSession(MeditationSessionBase, table=True):
    """Entité MeditationSession complète pour la base de données"""
    __tablename__ = "meditation_sessions"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class MeditationSessionCreate(MeditationSessionBase):
    practice_type: PracticeType


class MeditationSessionRead(MeditationSessionBase):
    id: UUID
    created_at: dt.datetime


class MeditationStats(BaseModel):
    """Statistiques calculées sur tout l'historique"""
    total_minutes: int
    total_sessions: int
    current_streak: int
    practice_breakdown: Dict[str, int]
