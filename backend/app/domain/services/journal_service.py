"""
Service journal : entrées libres (humeur, énergie, intention).
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import datetime
from typing import Optional, List

from app.domain.entities import JournalEntry, JournalEntryCreate, JournalEntryUpdate

logger = logging.getLogger(__name__)


class JournalService:

    def list_entries(self, session: Session) -> List[JournalEntry]:
        entries = session.exec(select(JournalEntry).order_by(JournalEntry.created_at.desc())).all()
        logger.info(f"Entrees de journal recuperees: {len(entries)}")
        return entries

    def get(self, session: Session, entry_id: Optional[UUID]) -> Optional[JournalEntry]:
        return session.get(JournalEntry, entry_id) if entry_id else None

    def create(self, session: Session, data: JournalEntryCreate) -> JournalEntry:
        entry = JournalEntry(**data.model_dump())
        session.add(entry)
        session.commit()
        session.refresh(entry)
        logger.info(f"Entree de journal creee: {entry.id}")
        return entry

    def update(
        self, session: Session, entry_id: Optional[UUID], updates: JournalEntryUpdate
    ) -> Optional[JournalEntry]:
        entry = self.get(session, entry_id)
        if not entry:
            logger.warning(f"Entree de journal introuvable pour mise a jour: {entry_id}")
            return None

        for field, value in updates.model_dump(exclude_unset=True).items():
            setattr(entry, field, value)

        entry.updated_at = datetime.utcnow()
        session.add(entry)
        session.commit()
        session.refresh(entry)
        logger.info(f"Entree de journal mise a jour: {entry_id}")
        return entry

    def delete(self, session: Session, entry_id: Optional[UUID]) -> bool:
        entry = self.get(session, entry_id)
        if not entry:
            logger.warning(f"Entree de journal introuvable pour suppression: {entry_id}")
            return False
        session.delete(entry)
        session.commit()
        logger.info(f"Entree de journal supprimee: {entry_id}")
        return True


journal_service = JournalService()
