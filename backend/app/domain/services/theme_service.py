"""
Service des thèmes visuels et des préférences d'affichage.
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import datetime
from typing import Optional, List

from app.domain.entities import (
    VisualTheme, VisualThemeCreate, VisualThemeUpdate,
    UserPreferences, UserPreferencesUpdate,
)
from app.domain.services.calendar_utils import theme_name_for_hour

logger = logging.getLogger(__name__)

# Les préférences ne sont pas encore rattachées à un compte
DEFAULT_USER_ID = "default_user"


class ThemeService:

    def list_themes(self, session: Session) -> List[VisualTheme]:
        themes = session.exec(select(VisualTheme).order_by(VisualTheme.created_at)).all()
        logger.info(f"Themes recuperes: {len(themes)}")
        return themes

    def get(self, session: Session, theme_id: Optional[UUID]) -> Optional[VisualTheme]:
        return session.get(VisualTheme, theme_id) if theme_id else None

    def create(self, session: Session, data: VisualThemeCreate) -> VisualTheme:
        theme = VisualTheme(**data.model_dump())
        session.add(theme)
        session.commit()
        session.refresh(theme)
        logger.info(f"Theme cree: {theme.id} ({theme.theme_name})")
        return theme

    def update(
        self, session: Session, theme_id: Optional[UUID], updates: VisualThemeUpdate
    ) -> Optional[VisualTheme]:
        theme = self.get(session, theme_id)
        if not theme:
            logger.warning(f"Theme introuvable pour mise a jour: {theme_id}")
            return None

        for field, value in updates.model_dump(exclude_unset=True).items():
            setattr(theme, field, value)

        theme.updated_at = datetime.utcnow()
        session.add(theme)
        session.commit()
        session.refresh(theme)
        logger.info(f"Theme mis a jour: {theme_id}")
        return theme

    # ============ PREFERENCES ============

    def get_preferences(self, session: Session) -> Optional[UserPreferences]:
        return session.exec(
            select(UserPreferences).where(UserPreferences.user_id == DEFAULT_USER_ID)
        ).first()

    def update_preferences(self, session: Session, updates: UserPreferencesUpdate) -> UserPreferences:
        """Upsert des préférences ; ValueError si le thème choisi n'existe pas."""
        fields = updates.model_dump(exclude_unset=True)
        selected = fields.get("selected_theme_id")
        if selected and not self.get(session, selected):
            logger.warning(f"Theme selectionne introuvable: {selected}")
            raise ValueError("Selected theme does not exist")

        prefs = self.get_preferences(session)
        if not prefs:
            prefs = UserPreferences(user_id=DEFAULT_USER_ID)
            logger.info("Creation des preferences par defaut")

        for field, value in fields.items():
            setattr(prefs, field, value)

        prefs.updated_at = datetime.utcnow()
        session.add(prefs)
        session.commit()
        session.refresh(prefs)
        logger.info(
            f"Preferences mises a jour (theme={prefs.selected_theme_id}, auto={prefs.auto_theme_by_time})"
        )
        return prefs

    def current_theme(self, session: Session, now: Optional[datetime] = None) -> Optional[VisualTheme]:
        """Thème selon l'heure si demandé, sinon le thème choisi, sinon le premier thème actif."""
        now = now or datetime.now()
        prefs = self.get_preferences(session)
        theme = None

        if prefs and prefs.auto_theme_by_time:
            name = theme_name_for_hour(now.hour)
            theme = session.exec(select(VisualTheme).where(VisualTheme.theme_name == name).limit(1)).first()
        elif prefs and prefs.selected_theme_id:
            theme = self.get(session, prefs.selected_theme_id)
            if not theme:
                logger.warning(f"Theme selectionne supprime: {prefs.selected_theme_id}, theme par defaut")

        if theme:
            return theme

        default = session.exec(
            select(VisualTheme)
            .where(VisualTheme.is_active == True)  # noqa: E712
            .order_by(VisualTheme.created_at)
            .limit(1)
        ).first()
        if not default:
            logger.warning("Aucun theme actif disponible")
        return default


theme_service = ThemeService()
