"""
Service d'abonnement utilisateur : statut (création paresseuse, expiration
paresseuse) et activation d'un palier payant.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from datetime import datetime
from typing import Optional

from app.domain.entities import UserSubscription
from app.domain.entities.subscription import ACTIVATION_DURATIONS, SubscriptionTier

logger = logging.getLogger(__name__)


class SubscriptionService:

    def _find(self, session: Session, user_id: str) -> Optional[UserSubscription]:
        return session.exec(
            select(UserSubscription).where(UserSubscription.user_id == user_id)
        ).first()

    def _create_free(self, session: Session, user_id: str) -> UserSubscription:
        subscription = UserSubscription(
            user_id=user_id,
            subscription_tier=SubscriptionTier.FREE.value,
            is_active=False,
        )
        session.add(subscription)
        try:
            session.commit()
        except IntegrityError:
            # Creee entre-temps par une autre requete
            session.rollback()
            return self._find(session, user_id)
        session.refresh(subscription)
        logger.info(f"Abonnement gratuit cree pour l'utilisateur {user_id}")
        return subscription

    def get_status(self, session: Session, user_id: str, now: Optional[datetime] = None) -> UserSubscription:
        """Statut courant ; la lecture peut modifier la ligne (creation, expiration)."""
        now = now or datetime.utcnow()
        subscription = self._find(session, user_id)
        if not subscription:
            return self._create_free(session, user_id)

        if subscription.expires_at and subscription.expires_at < now and subscription.is_active:
            subscription.is_active = False
            subscription.updated_at = now
            session.add(subscription)
            session.commit()
            session.refresh(subscription)
            logger.info(f"Abonnement expire pour l'utilisateur {user_id}")

        logger.info(f"Statut d'abonnement {user_id}: {subscription.subscription_tier}")
        return subscription

    def activate(
        self, session: Session, user_id: str, tier: Optional[str], now: Optional[datetime] = None
    ) -> UserSubscription:
        try:
            tier_value = SubscriptionTier(tier)
        except ValueError:
            tier_value = None
        if tier_value not in ACTIVATION_DURATIONS:
            logger.warning(f"Palier d'abonnement invalide: {tier}")
            raise ValueError("Invalid subscription tier")

        now = now or datetime.utcnow()
        duration = ACTIVATION_DURATIONS[tier_value]
        expires_at = now + duration if duration else None

        subscription = self._find(session, user_id) or self._create_free(session, user_id)
        subscription.subscription_tier = tier_value.value
        subscription.is_active = True
        subscription.started_at = now
        subscription.expires_at = expires_at
        subscription.updated_at = now
        session.add(subscription)
        session.commit()
        session.refresh(subscription)
        logger.info(f"Abonnement active pour {user_id}: {tier_value.value} (expire: {expires_at})")
        return subscription


subscription_service = SubscriptionService()
