"""
Routes des elements de renouveau sauvegardes par l'utilisateur authentifie.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.auth.jwt import get_current_user_id
from app.domain.entities import (
    SavedRenewalItem, SavedRenewalItemCreate, SavedRenewalItemRead, SavedItemPause,
)
from app.domain.services.saved_item_service import saved_item_service
from app.api.routers._shared import security, parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/renewal/saved-items", tags=["renewal"])


def _owned_item(session: Session, item_id: str, user_id: str) -> SavedRenewalItem:
    item = saved_item_service.get(session, parse_uuid(item_id))
    if not item:
        raise not_found("Saved item")
    if item.user_id != user_id:
        logger.warning(f"Utilisateur {user_id} non proprietaire de l'element {item_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return item


@router.get("", response_model=List[SavedRenewalItemRead])
async def list_saved_items(
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    return saved_item_service.list_for_user(session, get_current_user_id(token.credentials))


@router.post("", response_model=SavedRenewalItemRead)
async def save_item(
    data: SavedRenewalItemCreate,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    user_id = get_current_user_id(token.credentials)
    logger.info(f"Sauvegarde d'un element {data.item_type.value} pour {user_id}")
    try:
        return saved_item_service.save(session, user_id, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.put("/{item_id}/pause", response_model=SavedRenewalItemRead)
async def pause_saved_item(
    item_id: str,
    data: SavedItemPause,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    item = _owned_item(session, item_id, get_current_user_id(token.credentials))
    return saved_item_service.set_paused(session, item, data.is_paused)


@router.delete("/{item_id}")
async def delete_saved_item(
    item_id: str,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    item = _owned_item(session, item_id, get_current_user_id(token.credentials))
    saved_item_service.delete(session, item)
    return {"success": True, "id": item_id}
