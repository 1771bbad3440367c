"""
Entités RhythmVisual et RenewalVisual - Domain Layer
Images affichées selon le mois, la saison ou le jour de la semaine
"""
from sqlmodel import SQLModel, Field, UniqueConstraint
from pydantic import BaseModel
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4
from enum import Enum


class RhythmVisualBase(SQLModel):
    rhythm_category: str = Field(index=True)
    rhythm_name: str
    image_url: str
    video_url: Optional[str] = None
    month_active: int = Field(ge=1, le=12, index=True)
    display_order: int = 0


class RhythmVisual(RhythmVisualBase, table=True):
    __tablename__ = "rhythm_visuals"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class RhythmVisualCreate(RhythmVisualBase):
    pass


class RhythmVisualRead(SQLModel):
    id: UUID
    rhythm_category: str
    rhythm_name: str
    image_url: str
    video_url: Optional[str] = None
    display_order: int


class RenewalVisualType(str, Enum):
    """Ordre de priorité : saison > mois > jour"""
    SEASONAL = "seasonal"
    MONTHLY = "monthly"
    DAILY = "daily"


class Season(str, Enum):
    SPRING = "spring"
    SUMMER = "summer"
    FALL = "fall"
    WINTER = "winter"


class RenewalVisualBase(SQLModel):
    visual_type: RenewalVisualType
    season: Optional[Season] = None
    month: Optional[int] = Field(default=None, ge=1, le=12)
    day_of_week: Optional[int] = Field(default=None, ge=0, le=6)  # 0 = dimanche
    image_url: str
    description: Optional[str] = None


class RenewalVisual(RenewalVisualBase, table=True):
    __tablename__ = "renewal_visuals"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    visual_type: str = Field(index=True)
    season: Optional[str] = None
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class RenewalVisualCreate(RenewalVisualBase):
    pass


class RenewalVisualRead(SQLModel):
    id: UUID
    visual_type: str
    season: Optional[str] = None
    month: Optional[int] = None
    day_of_week: Optional[int] = None
    image_url: str
    description: Optional[str] = None
    created_at: dt.datetime


class CurrentRenewalVisual(BaseModel):
    """Visuel retenu pour aujourd'hui"""
    id: UUID
    image_url: str
    description: Optional[str] = None
    visual_type: str


class SavedItemType(str, Enum):
    PROGRAM = "program"
    RITUAL = "ritual"
    TOOL = "tool"
    VISUAL = "visual"


class SavedRenewalItem(SQLModel, table=True):
    """Élément de renouveau mis de côté par un utilisateur"""
    __tablename__ = "saved_renewal_items"
    __table_args__ = (UniqueConstraint("user_id", "item_id", name="uq_saved_renewal_items_user_item"),)

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(index=True)
    item_type: str
    # Identifiant du programme, rituel, outil ou visuel référencé
    item_id: str = Field(index=True)
    is_paused: bool = Field(default=False)
    saved_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class SavedRenewalItemCreate(SQLModel):
    item_type: SavedItemType
    item_id: str = Field(min_length=1)


class SavedItemPause(SQLModel):
    is_paused: bool


class SavedRenewalItemRead(SQLModel):
    id: UUID
    item_type: str
    item_id: str
    is_paused: bool
    saved_at: dt.datetime
