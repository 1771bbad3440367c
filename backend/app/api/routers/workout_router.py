"""
Routes des seances d'entrainement et de leurs exercices.
Chaque ecriture (creation, remplacement des exercices, suppression) est une seule transaction.
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from datetime import date
from typing import Optional, List

from app.core.database import get_session
from app.domain.entities import WorkoutCreate, WorkoutUpdate, WorkoutRead
from app.domain.services.workout_service import workout_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["workouts"])


@router.get("/api/workouts", response_model=List[WorkoutRead])
async def list_workouts(
    session: Session = Depends(get_session),
    day: Optional[date] = Query(default=None, alias="date"),
):
    """Seances avec leurs exercices"""
    logger.info(f"Liste des seances (date={day})")
    return workout_service.list_workouts(session, day)


@router.post("/api/workouts", response_model=WorkoutRead)
async def create_workout(data: WorkoutCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de seance: {data.title} ({len(data.exercises)} exercices)")
    return workout_service.create(session, data)


@router.get("/api/workouts/{workout_id}", response_model=WorkoutRead)
async def get_workout(workout_id: str, session: Session = Depends(get_session)):
    workout = workout_service.get(session, parse_uuid(workout_id))
    if not workout:
        raise not_found("Workout")
    return workout


@router.put("/api/workouts/{workout_id}", response_model=WorkoutRead)
async def update_workout(workout_id: str, updates: WorkoutUpdate, session: Session = Depends(get_session)):
    """Mise a jour partielle ; `exercises` remplace la liste complete"""
    workout = workout_service.update(session, parse_uuid(workout_id), updates)
    if not workout:
        raise not_found("Workout")
    return workout


@router.delete("/api/workouts/{workout_id}")
async def delete_workout(workout_id: str, session: Session = Depends(get_session)):
    if not workout_service.delete(session, parse_uuid(workout_id)):
        raise not_found("Workout")
    return {"success": True}
