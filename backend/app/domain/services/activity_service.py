"""
Service d'activites : liste filtrée, création, résumé quotidien, suppression.
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import date
from typing import Optional, List

from app.domain.entities import Activity, ActivityCreate, ActivitySummary
from app.domain.services.summary_utils import summarize_activities

logger = logging.getLogger(__name__)


class ActivityService:

    def list_activities(
        self,
        session: Session,
        day: Optional[date] = None,
        activity_type: Optional[str] = None,
    ) -> List[Activity]:
        query = select(Activity)
        if day:
            query = query.where(Activity.date == day)
        if activity_type:
            query = query.where(Activity.activity_type == activity_type)

        query = query.order_by(Activity.created_at.desc())
        activities = session.exec(query).all()
        logger.info(f"Activites recuperees: {len(activities)} (date={day}, type={activity_type})")
        return activities

    def create(self, session: Session, data: ActivityCreate) -> Activity:
        activity = Activity(**data.model_dump())
        session.add(activity)
        session.commit()
        session.refresh(activity)
        logger.info(f"Activite creee: {activity.id} ({activity.activity_type}={activity.value})")
        return activity

    def for_day(self, session: Session, day: date) -> List[Activity]:
        return session.exec(select(Activity).where(Activity.date == day)).all()

    def daily_summary(self, session: Session, day: date) -> ActivitySummary:
        summary = summarize_activities(self.for_day(session, day))
        logger.info(f"Resume activites {day}: {summary.model_dump()}")
        return summary

    def delete(self, session: Session, activity_id: Optional[UUID]) -> bool:
        activity = session.get(Activity, activity_id) if activity_id else None
        if not activity:
            logger.warning(f"Activite introuvable pour suppression: {activity_id}")
            return False
        session.delete(activity)
        session.commit()
        logger.info(f"Activite supprimee: {activity_id}")
        return True


activity_service = ActivityService()
