"""
Service des visuels : rythmes du mois et visuel de renouveau du jour.
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import date
from typing import Optional, List

from app.domain.entities import (
    RhythmVisual, RhythmVisualCreate, RenewalVisual, RenewalVisualCreate,
)
from app.domain.entities.visual import RenewalVisualType, SavedItemType
from app.domain.services.calendar_utils import day_of_week_index, season_for_month
from app.domain.services.saved_item_service import saved_item_service

logger = logging.getLogger(__name__)


class VisualService:

    # ============ RYTHMES ============

    def rhythms_for_month(
        self, session: Session, month: int, category: Optional[str] = None
    ) -> List[RhythmVisual]:
        query = select(RhythmVisual).where(RhythmVisual.month_active == month)
        if category:
            query = query.where(RhythmVisual.rhythm_category == category)
        visuals = session.exec(query.order_by(RhythmVisual.display_order)).all()
        logger.info(f"Visuels de rythme recuperes: {len(visuals)} (mois={month}, categorie={category})")
        return visuals

    def create_rhythm(self, session: Session, data: RhythmVisualCreate) -> RhythmVisual:
        visual = RhythmVisual(**data.model_dump())
        session.add(visual)
        session.commit()
        session.refresh(visual)
        logger.info(f"Visuel de rythme cree: {visual.id}")
        return visual

    # ============ RENOUVEAU ============

    def list_renewal(self, session: Session) -> List[RenewalVisual]:
        return session.exec(select(RenewalVisual).order_by(RenewalVisual.created_at.desc())).all()

    def create_renewal(self, session: Session, data: RenewalVisualCreate) -> RenewalVisual:
        visual = RenewalVisual(
            **data.model_dump(exclude={"visual_type", "season"}),
            visual_type=data.visual_type.value,
            season=data.season.value if data.season else None,
        )
        session.add(visual)
        session.commit()
        session.refresh(visual)
        logger.info(f"Visuel de renouveau cree: {visual.id} ({visual.visual_type})")
        return visual

    def delete_renewal(self, session: Session, visual_id: Optional[UUID]) -> bool:
        """Supprime le visuel et les sauvegardes qui le référencent, en une transaction."""
        visual = session.get(RenewalVisual, visual_id) if visual_id else None
        if not visual:
            logger.warning(f"Visuel de renouveau introuvable pour suppression: {visual_id}")
            return False

        try:
            removed = saved_item_service.delete_references(session, SavedItemType.VISUAL.value, visual.id)
            session.flush()
            session.delete(visual)
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Erreur lors de la suppression du visuel {visual_id}: {e}")
            raise

        logger.info(f"Visuel de renouveau supprime: {visual_id} ({removed} sauvegardes retirees)")
        return True

    def current_renewal(
        self, session: Session, today: Optional[date] = None
    ) -> Optional[RenewalVisual]:
        """
        Premier visuel trouvé dans l'ordre : saison, mois, jour de la semaine,
        puis n'importe quel visuel.
        """
        today = today or date.today()
        season = season_for_month(today.month)
        day_of_week = day_of_week_index(today)
        logger.debug(f"Selection du visuel: saison={season.value}, mois={today.month}, jour={day_of_week}")

        tiers = [
            (RenewalVisualType.SEASONAL, RenewalVisual.season == season.value),
            (RenewalVisualType.MONTHLY, RenewalVisual.month == today.month),
            (RenewalVisualType.DAILY, RenewalVisual.day_of_week == day_of_week),
        ]
        for visual_type, condition in tiers:
            visual = session.exec(
                select(RenewalVisual)
                .where(RenewalVisual.visual_type == visual_type.value, condition)
                .limit(1)
            ).first()
            if visual:
                logger.info(f"Visuel {visual_type.value} retenu: {visual.id}")
                return visual

        fallback = session.exec(select(RenewalVisual).limit(1)).first()
        if fallback:
            logger.warning(f"Aucun visuel correspondant, visuel de secours: {fallback.id}")
            return fallback

        logger.warning("Aucun visuel de renouveau disponible")
        return None


visual_service = VisualService()
