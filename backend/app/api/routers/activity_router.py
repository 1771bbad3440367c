"""
Routes des activites quotidiennes : liste filtree, creation, resume, suppression.
Routes = validation + delegation au service. Pas de logique metier ici.
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from datetime import date
from typing import Optional, List

from app.core.database import get_session
from app.domain.entities import ActivityCreate, ActivityRead, ActivitySummary
from app.domain.services.activity_service import activity_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["activities"])


@router.get("/api/activities", response_model=List[ActivityRead])
async def list_activities(
    session: Session = Depends(get_session),
    day: Optional[date] = Query(default=None, alias="date"),
    activity_type: Optional[str] = Query(default=None, alias="type"),
):
    """Liste les activites, filtrables par date et par type"""
    logger.info(f"Liste des activites (date={day}, type={activity_type})")
    return activity_service.list_activities(session, day, activity_type)


@router.post("/api/activities", response_model=ActivityRead)
async def create_activity(data: ActivityCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation d'activite: {data.activity_type} le {data.date}")
    return activity_service.create(session, data)


@router.get("/api/activities/summary", response_model=ActivitySummary)
async def get_activity_summary(
    session: Session = Depends(get_session),
    day: date = Query(alias="date"),
):
    """Resume du jour : une valeur par type suivi, 0 si absente"""
    return activity_service.daily_summary(session, day)


@router.delete("/api/activities/{activity_id}")
async def delete_activity(activity_id: str, session: Session = Depends(get_session)):
    if not activity_service.delete(session, parse_uuid(activity_id)):
        raise not_found("Activity")
    return {"success": True}
