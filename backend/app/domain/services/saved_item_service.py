"""
Service des éléments de renouveau sauvegardés par utilisateur.
La vérification du propriétaire est faite par les routes.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from uuid import UUID
from typing import Optional, List

from app.domain.entities import SavedRenewalItem, SavedRenewalItemCreate

logger = logging.getLogger(__name__)


class SavedItemService:

    def list_for_user(self, session: Session, user_id: str) -> List[SavedRenewalItem]:
        items = session.exec(
            select(SavedRenewalItem)
            .where(SavedRenewalItem.user_id == user_id)
            .order_by(SavedRenewalItem.saved_at.desc())
        ).all()
        logger.info(f"Elements sauvegardes recuperes pour {user_id}: {len(items)}")
        return items

    def get(self, session: Session, item_id: Optional[UUID]) -> Optional[SavedRenewalItem]:
        return session.get(SavedRenewalItem, item_id) if item_id else None

    def save(self, session: Session, user_id: str, data: SavedRenewalItemCreate) -> SavedRenewalItem:
        """Sauvegarde un élément ; ValueError s'il l'est déjà pour cet utilisateur."""
        item = SavedRenewalItem(user_id=user_id, item_type=data.item_type.value, item_id=data.item_id)
        session.add(item)
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.warning(f"Element deja sauvegarde par {user_id}: {data.item_id}")
            raise ValueError("Item already saved")

        session.refresh(item)
        logger.info(f"Element sauvegarde: {item.id} ({item.item_type}={item.item_id})")
        return item

    def set_paused(self, session: Session, item: SavedRenewalItem, is_paused: bool) -> SavedRenewalItem:
        item.is_paused = is_paused
        session.add(item)
        session.commit()
        session.refresh(item)
        logger.info(f"Element {item.id} {'en pause' if is_paused else 'repris'}")
        return item

    def delete(self, session: Session, item: SavedRenewalItem) -> None:
        item_id = item.id
        session.delete(item)
        session.commit()
        logger.info(f"Element sauvegarde supprime: {item_id}")

    def delete_references(self, session: Session, item_type: str, item_id: UUID) -> int:
        """Supprime sans commit les sauvegardes qui pointent vers un élément retiré."""
        items = session.exec(
            select(SavedRenewalItem).where(
                SavedRenewalItem.item_type == item_type,
                SavedRenewalItem.item_id == str(item_id),
            )
        ).all()
        for item in items:
            session.delete(item)
        return len(items)


saved_item_service = SavedItemService()
