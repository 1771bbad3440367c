"""
Service meditation : séances et statistiques (total, répartition, série en cours).
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import date
from typing import Optional, List

from app.domain.entities import MeditationSession, MeditationSessionCreate, MeditationStats
from app.domain.services.calendar_utils import compute_streak
from app.domain.services.summary_utils import practice_breakdown

logger = logging.getLogger(__name__)


class MeditationService:

    def list_sessions(self, session: Session, day: Optional[date] = None) -> List[MeditationSession]:
        query = select(MeditationSession)
        if day:
            query = query.where(MeditationSession.date == day)
        sessions = session.exec(query.order_by(MeditationSession.created_at.desc())).all()
        logger.info(f"Seances de meditation recuperees: {len(sessions)} (date={day})")
        return sessions

    def create(self, session: Session, data: MeditationSessionCreate) -> MeditationSession:
        meditation = MeditationSession(
            **data.model_dump(exclude={"practice_type"}), practice_type=data.practice_type.value
        )
        session.add(meditation)
        session.commit()
        session.refresh(meditation)
        logger.info(f"Seance de meditation creee: {meditation.id} ({meditation.practice_type})")
        return meditation

    def for_day(self, session: Session, day: date) -> List[MeditationSession]:
        return session.exec(select(MeditationSession).where(MeditationSession.date == day)).all()

    def stats(self, session: Session, today: Optional[date] = None) -> MeditationStats:
        today = today or date.today()
        sessions = session.exec(select(MeditationSession)).all()

        stats = MeditationStats(
            total_minutes=sum(s.duration_minutes or 0 for s in sessions),
            total_sessions=len(sessions),
            current_streak=compute_streak((s.date for s in sessions), today),
            practice_breakdown=practice_breakdown(sessions),
        )
        logger.info(f"Statistiques meditation: {stats.model_dump()}")
        return stats

    def delete(self, session: Session, session_id: Optional[UUID]) -> bool:
        meditation = session.get(MeditationSession, session_id) if session_id else None
        if not meditation:
            logger.warning(f"Seance de meditation introuvable pour suppression: {session_id}")
            return False
        session.delete(meditation)
        session.commit()
        logger.info(f"Seance de meditation supprimee: {session_id}")
        return True


meditation_service = MeditationService()
