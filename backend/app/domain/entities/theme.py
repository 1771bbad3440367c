"""
Entités VisualTheme et UserPreferences - Domain Layer
"""
from sqlmodel import SQLModel, Field
from pydantic import BaseModel
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4

from .validators import non_nullable


class ThemeColors(BaseModel):
    """Les sept couleurs d'un thème"""
    background_color: str
    card_color: str
    text_color: str
    text_secondary_color: str
    primary_color: str
    secondary_color: str
    accent_color: str


COLOR_FIELDS = tuple(ThemeColors.model_fields)


class VisualThemeBase(SQLModel):
    theme_name: str = Field(index=True)
    background_color: str
    card_color: str
    text_color: str
    text_secondary_color: str
    primary_color: str
    secondary_color: str
    accent_color: str


class VisualTheme(VisualThemeBase, table=True):
    __tablename__ = "visual_themes"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    is_active: bool = Field(default=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class VisualThemeCreate(VisualThemeBase):
    is_active: bool = True


class VisualThemeUpdate(SQLModel):
    theme_name: Optional[str] = None
    background_color: Optional[str] = None
    card_color: Optional[str] = None
    text_color: Optional[str] = None
    text_secondary_color: Optional[str] = None
    primary_color: Optional[str] = None
    secondary_color: Optional[str] = None
    accent_color: Optional[str] = None
    is_active: Optional[bool] = None

    _required = non_nullable("theme_name", *COLOR_FIELDS, "is_active")


class VisualThemeRead(BaseModel):
    """Forme API d'un thème : couleurs regroupées sous `colors`"""
    id: UUID
    theme_name: str
    colors: ThemeColors
    is_active: bool

    @classmethod
    def from_entity(cls, theme: VisualTheme) -> "VisualThemeRead":
        return cls(
            id=theme.id,
            theme_name=theme.theme_name,
            colors=ThemeColors(**{name: getattr(theme, name) for name in COLOR_FIELDS}),
            is_active=theme.is_active,
        )


class UserPreferences(SQLModel, table=True):
    """Préférences d'affichage (un seul utilisateur par défaut)"""
    __tablename__ = "user_preferences"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    user_id: str = Field(unique=True, index=True)
    selected_theme_id: Optional[UUID] = Field(default=None, foreign_key="visual_themes.id")
    auto_theme_by_time: bool = Field(default=False)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class UserPreferencesRead(SQLModel):
    user_id: str
    selected_theme_id: Optional[UUID] = None
    auto_theme_by_time: bool = False


class UserPreferencesUpdate(SQLModel):
    selected_theme_id: Optional[UUID] = None
    auto_theme_by_time: Optional[bool] = None

    _required = non_nullable("auto_theme_by_time")
