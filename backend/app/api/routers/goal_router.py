"""
Routes des objectifs bien-etre et du tableau de bord quotidien.
"""
import logging
from fastapi import APIRouter, Depends, Query
from sqlmodel import Session
from datetime import date
from typing import Optional, List

from app.core.database import get_session
from app.domain.entities import WellnessGoalCreate, WellnessGoalRead, WellnessGoalUpdate, GoalProgress
from app.domain.services.goal_service import goal_service
from app.domain.services.dashboard_service import dashboard_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["goals"])


@router.get("/api/goals", response_model=List[WellnessGoalRead])
async def list_goals(session: Session = Depends(get_session)):
    """Objectifs actifs uniquement"""
    return goal_service.list_active(session)


@router.post("/api/goals", response_model=WellnessGoalRead)
async def create_goal(data: WellnessGoalCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation d'objectif: {data.goal_type.value} = {data.target_value}")
    return goal_service.create(session, data)


@router.get("/api/goals/progress", response_model=List[GoalProgress])
async def get_goals_progress(
    session: Session = Depends(get_session),
    day: Optional[date] = Query(default=None, alias="date"),
):
    return goal_service.progress(session, day or date.today())


@router.put("/api/goals/{goal_id}", response_model=WellnessGoalRead)
async def update_goal(goal_id: str, updates: WellnessGoalUpdate, session: Session = Depends(get_session)):
    goal = goal_service.update(session, parse_uuid(goal_id), updates)
    if not goal:
        raise not_found("Goal")
    return goal


@router.delete("/api/goals/{goal_id}")
async def delete_goal(goal_id: str, session: Session = Depends(get_session)):
    if not goal_service.delete(session, parse_uuid(goal_id)):
        raise not_found("Goal")
    return {"success": True}


@router.get("/api/dashboard/overview")
async def get_dashboard_overview(
    session: Session = Depends(get_session),
    day: Optional[date] = Query(default=None, alias="date"),
):
    """Vue d'ensemble du jour : nutrition, seances, meditation, activites, objectifs"""
    day = day or date.today()
    logger.info(f"Vue d'ensemble du {day}")
    return dashboard_service.overview(session, day)
