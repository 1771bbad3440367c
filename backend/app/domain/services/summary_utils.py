"""
Agrégations pures utilisées par les résumés quotidiens et le tableau de bord.
"""
import math
from collections import Counter
from typing import Dict, Iterable, Sequence

from app.domain.entities.activity import Activity, ActivitySummary, SUMMARY_FIELDS
from app.domain.entities.goal import GoalProgress
from app.domain.entities.meditation import MeditationSession
from app.domain.entities.nutrition import NutritionLog, NutritionTotals


def summarize_activities(activities: Sequence[Activity]) -> ActivitySummary:
    """Une valeur par type ; à type égal, la ligne créée en dernier l'emporte."""
    summary = ActivitySummary()
    for activity in sorted(activities, key=lambda a: a.created_at):
        field = SUMMARY_FIELDS.get(activity.activity_type)
        if field:
            setattr(summary, field, activity.value)
    return summary


def summarize_nutrition(logs: Iterable[NutritionLog]) -> NutritionTotals:
    """Somme des calories et macros, les valeurs absentes comptent pour 0."""
    totals = NutritionTotals()
    for log in logs:
        totals.total_calories += log.calories or 0
        totals.total_protein += log.protein or 0
        totals.total_carbs += log.carbs or 0
        totals.total_fats += log.fats or 0
    return totals


def practice_breakdown(sessions: Iterable[MeditationSession]) -> Dict[str, int]:
    return dict(Counter(s.practice_type for s in sessions))


def count_by(values: Iterable[str]) -> Dict[str, int]:
    return dict(Counter(values))


def goal_progress(goal_type: str, target: int, current: int) -> GoalProgress:
    # arrondi au demi supérieur, comme le client
    percentage = math.floor(current * 100 / target + 0.5) if target > 0 else 0
    return GoalProgress(
        goal_type=goal_type,
        target=target,
        current=current,
        percentage=percentage,
        on_track=current >= target,
    )
