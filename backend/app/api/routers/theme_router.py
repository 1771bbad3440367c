"""
Routes des themes visuels et des preferences d'affichage.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.domain.entities import (
    VisualThemeCreate, VisualThemeUpdate, VisualThemeRead,
    UserPreferencesRead, UserPreferencesUpdate,
)
from app.domain.services.theme_service import theme_service, DEFAULT_USER_ID
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["themes"])


@router.get("/api/themes", response_model=List[VisualThemeRead])
async def list_themes(session: Session = Depends(get_session)):
    return [VisualThemeRead.from_entity(t) for t in theme_service.list_themes(session)]


@router.get("/api/themes/{theme_id}", response_model=VisualThemeRead)
async def get_theme(theme_id: str, session: Session = Depends(get_session)):
    theme = theme_service.get(session, parse_uuid(theme_id))
    if not theme:
        raise not_found("Theme")
    return VisualThemeRead.from_entity(theme)


@router.post("/api/themes", response_model=VisualThemeRead)
async def create_theme(data: VisualThemeCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de theme: {data.theme_name}")
    return VisualThemeRead.from_entity(theme_service.create(session, data))


@router.put("/api/themes/{theme_id}", response_model=VisualThemeRead)
async def update_theme(theme_id: str, updates: VisualThemeUpdate, session: Session = Depends(get_session)):
    theme = theme_service.update(session, parse_uuid(theme_id), updates)
    if not theme:
        raise not_found("Theme")
    return VisualThemeRead.from_entity(theme)


# ============ PREFERENCES ============

@router.get("/api/preferences", response_model=UserPreferencesRead)
async def get_preferences(session: Session = Depends(get_session)):
    """Preferences de l'utilisateur par defaut (valeurs par defaut si aucune ligne)"""
    prefs = theme_service.get_preferences(session)
    if not prefs:
        return UserPreferencesRead(user_id=DEFAULT_USER_ID)
    return prefs


@router.put("/api/preferences", response_model=UserPreferencesRead)
async def update_preferences(updates: UserPreferencesUpdate, session: Session = Depends(get_session)):
    try:
        return theme_service.update_preferences(session, updates)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/api/preferences/current-theme", response_model=VisualThemeRead)
async def get_current_theme(session: Session = Depends(get_session)):
    theme = theme_service.current_theme(session)
    if not theme:
        raise not_found("Theme")
    return VisualThemeRead.from_entity(theme)
