"""
Service des objectifs : CRUD et calcul de progression pour une date.
"""
import logging
from sqlmodel import Session, select
from uuid import UUID
from datetime import date, datetime
from typing import Optional, List, Dict

from app.domain.entities import (
    WellnessGoal, WellnessGoalCreate, WellnessGoalUpdate, GoalProgress,
    ActivitySummary,
)
from app.domain.entities.goal import GoalType
from app.domain.entities.nutrition import NutritionTotals
from app.domain.services.activity_service import activity_service
from app.domain.services.calendar_utils import week_start_sunday
from app.domain.services.meditation_service import meditation_service
from app.domain.services.nutrition_service import nutrition_service
from app.domain.services.summary_utils import (
    goal_progress, summarize_activities, summarize_nutrition,
)
from app.domain.services.workout_service import workout_service

logger = logging.getLogger(__name__)


class GoalService:

    def list_active(self, session: Session) -> List[WellnessGoal]:
        goals = session.exec(
            select(WellnessGoal)
            .where(WellnessGoal.is_active == True)  # noqa: E712
            .order_by(WellnessGoal.created_at)
        ).all()
        logger.info(f"Objectifs actifs recuperes: {len(goals)}")
        return goals

    def create(self, session: Session, data: WellnessGoalCreate) -> WellnessGoal:
        goal = WellnessGoal(
            goal_type=data.goal_type.value,
            target_value=data.target_value,
            current_streak=0,
            is_active=True,
        )
        session.add(goal)
        session.commit()
        session.refresh(goal)
        logger.info(f"Objectif cree: {goal.id} ({goal.goal_type} -> {goal.target_value})")
        return goal

    def update(
        self, session: Session, goal_id: Optional[UUID], updates: WellnessGoalUpdate
    ) -> Optional[WellnessGoal]:
        goal = session.get(WellnessGoal, goal_id) if goal_id else None
        if not goal:
            logger.warning(f"Objectif introuvable pour mise a jour: {goal_id}")
            return None

        for field, value in updates.model_dump(exclude_unset=True).items():
            setattr(goal, field, value)

        goal.updated_at = datetime.utcnow()
        session.add(goal)
        session.commit()
        session.refresh(goal)
        logger.info(f"Objectif mis a jour: {goal_id}")
        return goal

    def delete(self, session: Session, goal_id: Optional[UUID]) -> bool:
        goal = session.get(WellnessGoal, goal_id) if goal_id else None
        if not goal:
            logger.warning(f"Objectif introuvable pour suppression: {goal_id}")
            return False
        session.delete(goal)
        session.commit()
        logger.info(f"Objectif supprime: {goal_id}")
        return True

    def current_values(
        self,
        session: Session,
        day: date,
        nutrition: Optional[NutritionTotals] = None,
        activities: Optional[ActivitySummary] = None,
        meditation_minutes: Optional[int] = None,
    ) -> Dict[str, int]:
        """Valeur courante de chaque type d'objectif pour `day`.

        Les agrégats déjà calculés par l'appelant peuvent être passés pour
        éviter de relire les mêmes tables.
        """
        if nutrition is None:
            nutrition = summarize_nutrition(nutrition_service.for_day(session, day))
        if activities is None:
            activities = summarize_activities(activity_service.for_day(session, day))
        if meditation_minutes is None:
            meditation_minutes = sum(
                s.duration_minutes or 0 for s in meditation_service.for_day(session, day)
            )

        return {
            GoalType.DAILY_CALORIES.value: nutrition.total_calories,
            GoalType.DAILY_PROTEIN.value: nutrition.total_protein,
            GoalType.WEEKLY_WORKOUTS.value: workout_service.count_between(
                session, week_start_sunday(day), day
            ),
            GoalType.DAILY_MEDITATION.value: meditation_minutes,
            GoalType.DAILY_STEPS.value: activities.steps,
            GoalType.DAILY_WATER.value: activities.water_glasses,
            GoalType.DAILY_SLEEP.value: activities.sleep_hours,
        }

    def progress(self, session: Session, day: date, **aggregates) -> List[GoalProgress]:
        goals = self.list_active(session)
        if not goals:
            return []

        values = self.current_values(session, day, **aggregates)
        progress = [
            goal_progress(goal.goal_type, goal.target_value, values.get(goal.goal_type, 0))
            for goal in goals
        ]
        logger.info(f"Progression des objectifs {day}: {len(progress)} objectifs")
        return progress


goal_service = GoalService()
