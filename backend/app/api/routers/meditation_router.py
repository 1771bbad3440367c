"""
Routes meditation : seances et statistiques (dont la serie de jours consecutifs).
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from datetime import date
from typing import Optional, List

from app.core.database import get_session
from app.domain.entities import MeditationSessionCreate, MeditationSessionRead, MeditationStats
from app.domain.services.meditation_service import meditation_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["meditation"])


@router.get("/api/meditation/sessions", response_model=List[MeditationSessionRead])
async def list_meditation_sessions(
    session: Session = Depends(get_session),
    day: Optional[date] = Query(default=None, alias="date"),
):
    logger.info(f"Liste des seances de meditation (date={day})")
    return meditation_service.list_sessions(session, day)


@router.post("/api/meditation/sessions", response_model=MeditationSessionRead)
async def create_meditation_session(data: MeditationSessionCreate, session: Session = Depends(get_session)):
    logger.info(f"Ajout d'une seance de meditation: {data.practice_type} ({data.duration_minutes} min)")
    return meditation_service.create(session, data)


@router.get("/api/meditation/stats", response_model=MeditationStats)
async def get_meditation_stats(session: Session = Depends(get_session)):
    return meditation_service.stats(session)


@router.delete("/api/meditation/sessions/{session_id}")
async def delete_meditation_session(session_id: str, session: Session = Depends(get_session)):
    if not meditation_service.delete(session, parse_uuid(session_id)):
        raise not_found("Meditation session")
    return {"success": True}
