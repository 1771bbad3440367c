"""
Service des citations hebdomadaires.
Une citation par semaine, identifiée par le lundi de la semaine.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from datetime import date
from typing import Optional

from app.domain.entities import WeeklyQuote
from app.domain.services.ai_content_service import ai_content_service
from app.domain.services.calendar_utils import week_start_monday
from app.domain.services.text_generator import TextGenerator

logger = logging.getLogger(__name__)


class QuoteService:

    def _find(self, session: Session, week_start: date) -> Optional[WeeklyQuote]:
        return session.exec(
            select(WeeklyQuote).where(WeeklyQuote.week_start_date == week_start).limit(1)
        ).first()

    async def current(
        self, session: Session, generator: TextGenerator, today: Optional[date] = None
    ) -> WeeklyQuote:
        week_start = week_start_monday(today or date.today())
        existing = self._find(session, week_start)
        if existing:
            logger.info(f"Citation de la semaine trouvee: {existing.id} ({week_start})")
            return existing

        logger.info(f"Generation d'une nouvelle citation pour la semaine du {week_start}")
        text = await ai_content_service.generate_quote(generator)
        quote = WeeklyQuote(week_start_date=week_start, quote_text=text)
        session.add(quote)
        try:
            session.commit()
        except IntegrityError:
            # Une requete concurrente a deja cree la citation de la semaine
            session.rollback()
            logger.info(f"Citation deja creee pour {week_start}, reutilisation")
            return self._find(session, week_start)

        session.refresh(quote)
        logger.info(f"Citation creee: {quote.id}")
        return quote

    async def regenerate(
        self, session: Session, generator: TextGenerator, today: Optional[date] = None
    ) -> WeeklyQuote:
        week_start = week_start_monday(today or date.today())
        logger.info(f"Regeneration de la citation pour la semaine du {week_start}")
        text = await ai_content_service.generate_quote(generator)

        # Suppression puis insertion dans la meme transaction
        existing = self._find(session, week_start)
        quote = WeeklyQuote(week_start_date=week_start, quote_text=text)
        try:
            if existing:
                session.delete(existing)
                session.flush()
            session.add(quote)
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Erreur lors de la regeneration de la citation {week_start}: {e}")
            raise
        session.refresh(quote)
        logger.info(f"Citation regeneree: {quote.id}")
        return quote


quote_service = QuoteService()
