"""
Routes des visuels : rythmes du mois et visuel de renouveau.
"""
import logging
from fastapi import APIRouter, Depends
from sqlmodel import Session
from datetime import date
from typing import List

from app.core.database import get_session
from app.domain.entities import (
    RhythmVisualCreate, RhythmVisualRead,
    RenewalVisualCreate, RenewalVisualRead, CurrentRenewalVisual,
)
from app.domain.services.visual_service import visual_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["visuals"])


@router.get("/api/visuals/rhythms", response_model=List[RhythmVisualRead])
async def list_rhythm_visuals(session: Session = Depends(get_session)):
    """Visuels actifs ce mois-ci"""
    return visual_service.rhythms_for_month(session, date.today().month)


@router.get("/api/visuals/rhythms/{category}", response_model=List[RhythmVisualRead])
async def list_rhythm_visuals_by_category(category: str, session: Session = Depends(get_session)):
    return visual_service.rhythms_for_month(session, date.today().month, category)


@router.post("/api/visuals/rhythms", response_model=RhythmVisualRead)
async def create_rhythm_visual(data: RhythmVisualCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de visuel de rythme: {data.rhythm_name} (mois {data.month_active})")
    return visual_service.create_rhythm(session, data)


# ============ RENOUVEAU ============

@router.get("/api/renewal/visuals/current", response_model=CurrentRenewalVisual)
async def get_current_renewal_visual(session: Session = Depends(get_session)):
    """Visuel du jour : saison, puis mois, puis jour de la semaine, puis n'importe lequel"""
    visual = visual_service.current_renewal(session)
    if not visual:
        raise not_found("Renewal visual")
    return CurrentRenewalVisual(
        id=visual.id,
        image_url=visual.image_url,
        description=visual.description,
        visual_type=visual.visual_type,
    )


@router.get("/api/renewal/visuals", response_model=List[RenewalVisualRead])
async def list_renewal_visuals(session: Session = Depends(get_session)):
    return visual_service.list_renewal(session)


@router.post("/api/renewal/visuals", response_model=RenewalVisualRead)
async def create_renewal_visual(data: RenewalVisualCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de visuel de renouveau: {data.visual_type.value}")
    return visual_service.create_renewal(session, data)


@router.delete("/api/renewal/visuals/{visual_id}")
async def delete_renewal_visual(visual_id: str, session: Session = Depends(get_session)):
    if not visual_service.delete_renewal(session, parse_uuid(visual_id)):
        raise not_found("Renewal visual")
    return {"success": True}
