"""
Entité Activity - Domain Layer
Représente une mesure quotidienne (pas, sommeil, eau, humeur...)
"""
from sqlmodel import SQLModel, Field
from pydantic import BaseModel
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum


class ActivityKind(str, Enum):
    """Types d'activités reconnus par le résumé quotidien"""
    STEPS = "steps"
    SLEEP = "sleep"
    WATER = "water"
    MOOD_CHECK = "mood_check"


# activity_type -> champ du résumé quotidien
SUMMARY_FIELDS = {
    ActivityKind.STEPS.value: "steps",
    ActivityKind.SLEEP.value: "sleep_hours",
    ActivityKind.WATER.value: "water_glasses",
    ActivityKind.MOOD_CHECK.value: "mood_rating",
}


class ActivityBase(SQLModel):
    """Modèle de base pour Activity"""
    date: dt.date = Field(index=True)
    activity_type: str = Field(index=True)  # steps, sleep, water, mood_check, ...
    value: int
    notes: Optional[str] = None


class Activity(ActivityBase, table=True):
    """Entité Activity complète pour la base de données"""
    __tablename__ = "activities"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class ActivityCreate(ActivityBase):
    """Schéma pour créer une activité"""
    pass


class ActivityRead(ActivityBase):
    """Schéma pour lire une activité (réponse API)"""
    id: UUID
    created_at: dt.datetime


class ActivitySummary(BaseModel):
    """Résumé d'une journée, une valeur par type d'activité"""
    steps: int = 0
    sleep_hours: int = 0
    water_glasses: int = 0
    mood_rating: int = 0
