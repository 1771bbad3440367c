"""
Routes des tendances de la communaute.
"""
import logging
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.domain.entities import (
    AnalyticsRecord, CommunityInsightCreate, CommunityInsightRead, TrendingProgram, WellnessStats,
)
from app.domain.services.insight_service import insight_service
from app.api.routers._shared import not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/insights", tags=["insights"])


@router.get("/trending", response_model=List[TrendingProgram])
async def get_trending_programs(session: Session = Depends(get_session)):
    """Cinq programmes les plus suivis sur les 7 derniers jours"""
    return insight_service.trending(session)


@router.get("/community", response_model=List[CommunityInsightRead])
async def get_community_insights(session: Session = Depends(get_session)):
    return [CommunityInsightRead.from_entity(i) for i in insight_service.community(session)]


@router.post("/community", response_model=CommunityInsightRead)
async def create_community_insight(data: CommunityInsightCreate, session: Session = Depends(get_session)):
    return CommunityInsightRead.from_entity(insight_service.create_insight(session, data))


@router.post("/analytics/record")
async def record_program_analytics(data: AnalyticsRecord, session: Session = Depends(get_session)):
    if not insight_service.record(session, data):
        raise not_found("Program")
    return {"success": True}


@router.get("/stats", response_model=WellnessStats)
async def get_wellness_stats(session: Session = Depends(get_session)):
    return insight_service.stats(session)
