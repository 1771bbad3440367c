"""
Service du tableau de bord : vue d'ensemble d'une journée.
"""
import logging
from sqlmodel import Session
from datetime import date

from app.domain.services.activity_service import activity_service
from app.domain.services.goal_service import goal_service
from app.domain.services.meditation_service import meditation_service
from app.domain.services.nutrition_service import nutrition_service
from app.domain.services.summary_utils import (
    count_by, practice_breakdown, summarize_activities, summarize_nutrition,
)
from app.domain.services.workout_service import workout_service

logger = logging.getLogger(__name__)


class DashboardService:

    def overview(self, session: Session, day: date) -> dict:
        logs = nutrition_service.for_day(session, day)
        nutrition = summarize_nutrition(logs)

        workouts = workout_service.for_day(session, day)
        sessions = meditation_service.for_day(session, day)
        meditation_minutes = sum(s.duration_minutes or 0 for s in sessions)
        activities = summarize_activities(activity_service.for_day(session, day))

        goals_progress = goal_service.progress(
            session,
            day,
            nutrition=nutrition,
            activities=activities,
            meditation_minutes=meditation_minutes,
        )

        overview = {
            "date": day,
            "nutrition": {**nutrition.model_dump(), "meal_count": len(logs)},
            "workouts": {
                "total_workouts": len(workouts),
                "total_duration": sum(w.duration_minutes or 0 for w in workouts),
                "total_calories_burned": sum(w.calories_burned or 0 for w in workouts),
                "workout_types": count_by(w.workout_type for w in workouts),
            },
            "meditation": {
                "total_sessions": len(sessions),
                "total_minutes": meditation_minutes,
                "practice_breakdown": practice_breakdown(sessions),
            },
            "activities": activities.model_dump(),
            "goals_progress": [p.model_dump() for p in goals_progress],
        }
        logger.info(f"Vue d'ensemble calculee pour {day}")
        return overview


dashboard_service = DashboardService()
