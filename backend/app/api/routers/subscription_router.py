"""
Routes d'abonnement de l'utilisateur authentifie.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session

from app.core.database import get_session
from app.auth.jwt import get_current_user_id
from app.domain.entities import SubscriptionStatus, ActivateSubscriptionRequest
from app.domain.services.subscription_service import subscription_service
from app.api.routers._shared import security

logger = logging.getLogger(__name__)

router = APIRouter(tags=["subscriptions"])


@router.get("/api/subscriptions/status", response_model=SubscriptionStatus)
async def get_subscription_status(
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    """Statut courant ; cree un abonnement gratuit au premier appel"""
    user_id = get_current_user_id(token.credentials)
    return subscription_service.get_status(session, user_id)


@router.post("/api/subscriptions/activate", response_model=SubscriptionStatus)
async def activate_subscription(
    data: ActivateSubscriptionRequest,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    user_id = get_current_user_id(token.credentials)
    logger.info(f"Activation d'abonnement pour {user_id}: {data.tier}")
    try:
        return subscription_service.activate(session, user_id, data.tier)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
