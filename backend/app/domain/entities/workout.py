"""
Entités Workout et WorkoutExercise - Domain Layer
Une séance réalisée et la liste de ses exercices
"""
from sqlmodel import SQLModel, Field, Relationship
from typing import Optional, List
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum

from .validators import non_nullable


class WorkoutType(str, Enum):
    """Types de séances"""
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    SPORTS = "sports"


class WorkoutExerciseBase(SQLModel):
    """Modèle de base pour WorkoutExercise"""
    exercise_name: str
    sets: Optional[int] = None
    reps: Optional[int] = None
    weight: Optional[int] = None
    duration_seconds: Optional[int] = None


class WorkoutExercise(WorkoutExerciseBase, table=True):
    """Exercice rattaché à une séance"""
    __tablename__ = "workout_exercises"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    workout_id: UUID = Field(foreign_key="workouts.id", index=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)

    # Relations
    workout: Optional["Workout"] = Relationship(back_populates="exercises")


class WorkoutExerciseCreate(WorkoutExerciseBase):
    pass


class WorkoutExerciseRead(WorkoutExerciseBase):
    id: UUID
    workout_id: UUID
    created_at: dt.datetime


class WorkoutBase(SQLModel):
    """Modèle de base pour Workout"""
    date: dt.date = Field(index=True)
    workout_type: str  # strength, cardio, flexibility, sports
    title: str
    duration_minutes: int
    calories_burned: Optional[int] = None
    notes: Optional[str] = None


class Workout(WorkoutBase, table=True):
    """Entité Workout complète pour la base de données"""
    __tablename__ = "workouts"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)

    # Relations
    exercises: List[WorkoutExercise] = Relationship(back_populates="workout")


class WorkoutCreate(WorkoutBase):
    """Schéma pour créer une séance avec ses exercices"""
    workout_type: WorkoutType
    exercises: List[WorkoutExerciseCreate] = []


class WorkoutUpdate(SQLModel):
    """Schéma pour mettre à jour une séance.

    Si `exercises` est fourni, la liste complète remplace l'ancienne.
    """
    date: Optional[dt.date] = None
    workout_type: Optional[str] = None
    title: Optional[str] = None
    duration_minutes: Optional[int] = None
    calories_burned: Optional[int] = None
    notes: Optional[str] = None
    exercises: Optional[List[WorkoutExerciseCreate]] = None

    _required = non_nullable("date", "workout_type", "title", "duration_minutes")


class WorkoutRead(WorkoutBase):
    """Schéma pour lire une séance (réponse API)"""
    id: UUID
    created_at: dt.datetime
    updated_at: dt.datetime
    exercises: List[WorkoutExerciseRead] = []

    @classmethod
    def from_entity(cls, workout: Workout, exercises: List[WorkoutExercise]) -> "WorkoutRead":
        return cls(
            id=workout.id,
            date=workout.date,
            workout_type=workout.workout_type,
            title=workout.title,
            duration_minutes=workout.duration_minutes,
            calories_burned=workout.calories_burned,
            notes=workout.notes,
            created_at=workout.created_at,
            updated_at=workout.updated_at,
            exercises=[WorkoutExerciseRead.model_validate(ex) for ex in exercises],
        )
