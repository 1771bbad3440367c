"""
Entité NutritionLog - Domain Layer
Représente un aliment consommé lors d'un repas
"""
from sqlmodel import SQLModel, Field
from pydantic import BaseModel
from typing import Optional, List
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum


class MealType(str, Enum):
    """Types de repas"""
    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"


class NutritionLogBase(SQLModel):
    """Modèle de base pour NutritionLog"""
    date: dt.date = Field(index=True)
    meal_type: str  # breakfast, lunch, dinner, snack
    food_name: str
    calories: int
    protein: Optional[int] = None  # grammes
    carbs: Optional[int] = None  # grammes
    fats: Optional[int] = None  # grammes
    notes: Optional[str] = None


class NutritionLog(NutritionLogBase, table=True):
    """Entité NutritionLog complète pour la base de données"""
    __tablename__ = "nutrition_logs"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class NutritionLogCreate(NutritionLogBase):
    """Schéma pour créer une entrée nutritionnelle"""
    meal_type: MealType


class NutritionLogRead(NutritionLogBase):
    """Schéma pour lire une entrée nutritionnelle (réponse API)"""
    id: UUID
    created_at: dt.datetime


class NutritionTotals(BaseModel):
    total_calories: int = 0
    total_protein: int = 0
    total_carbs: int = 0
    total_fats: int = 0


class NutritionSummary(NutritionTotals):
    """Totaux d'une journée + les entrées qui les composent"""
    meals: List[NutritionLogRead] = []
