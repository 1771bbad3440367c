"""
Service nutrition : journal alimentaire et totaux quotidiens.
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import date
from typing import Optional, List

from app.domain.entities import NutritionLog, NutritionLogCreate, NutritionLogRead, NutritionSummary
from app.domain.services.summary_utils import summarize_nutrition

logger = logging.getLogger(__name__)


class NutritionService:

    def list_logs(self, session: Session, day: Optional[date] = None) -> List[NutritionLog]:
        query = select(NutritionLog)
        if day:
            query = query.where(NutritionLog.date == day)
        logs = session.exec(query.order_by(NutritionLog.created_at.desc())).all()
        logger.info(f"Entrees nutrition recuperees: {len(logs)} (date={day})")
        return logs

    def create(self, session: Session, data: NutritionLogCreate) -> NutritionLog:
        log = NutritionLog(**data.model_dump(exclude={"meal_type"}), meal_type=data.meal_type.value)
        session.add(log)
        session.commit()
        session.refresh(log)
        logger.info(f"Entree nutrition creee: {log.id} ({log.food_name}, {log.calories} kcal)")
        return log

    def for_day(self, session: Session, day: date) -> List[NutritionLog]:
        return session.exec(
            select(NutritionLog).where(NutritionLog.date == day).order_by(NutritionLog.created_at)
        ).all()

    def daily_summary(self, session: Session, day: date) -> NutritionSummary:
        logs = self.for_day(session, day)
        totals = summarize_nutrition(logs)
        summary = NutritionSummary(
            **totals.model_dump(),
            meals=[NutritionLogRead.model_validate(log) for log in logs],
        )
        logger.info(f"Resume nutrition {day}: {totals.model_dump()}")
        return summary

    def delete(self, session: Session, log_id: Optional[UUID]) -> bool:
        log = session.get(NutritionLog, log_id) if log_id else None
        if not log:
            logger.warning(f"Entree nutrition introuvable pour suppression: {log_id}")
            return False
        session.delete(log)
        session.commit()
        logger.info(f"Entree nutrition supprimee: {log_id}")
        return True


nutrition_service = NutritionService()
