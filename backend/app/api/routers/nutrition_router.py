"""
Routes nutrition : journal des repas et totaux du jour.
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from datetime import date
from typing import Optional, List

from app.core.database import get_session
from app.domain.entities import NutritionLogCreate, NutritionLogRead, NutritionSummary
from app.domain.services.nutrition_service import nutrition_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["nutrition"])


@router.get("/api/nutrition/logs", response_model=List[NutritionLogRead])
async def list_nutrition_logs(
    session: Session = Depends(get_session),
    day: Optional[date] = Query(default=None, alias="date"),
):
    logger.info(f"Liste des repas (date={day})")
    return nutrition_service.list_logs(session, day)


@router.post("/api/nutrition/logs", response_model=NutritionLogRead)
async def create_nutrition_log(data: NutritionLogCreate, session: Session = Depends(get_session)):
    logger.info(f"Ajout d'un repas: {data.food_name} le {data.date}")
    return nutrition_service.create(session, data)


@router.get("/api/nutrition/summary", response_model=NutritionSummary)
async def get_nutrition_summary(
    session: Session = Depends(get_session),
    day: date = Query(alias="date"),
):
    """Totaux caloriques et macros du jour, macros absentes comptees a zero"""
    return nutrition_service.daily_summary(session, day)


@router.delete("/api/nutrition/logs/{log_id}")
async def delete_nutrition_log(log_id: str, session: Session = Depends(get_session)):
    if not nutrition_service.delete(session, parse_uuid(log_id)):
        raise not_found("Nutrition log")
    return {"success": True}
