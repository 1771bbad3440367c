"""
Tests des agregations : resume d'activites, totaux nutrition, progression.
"""
from datetime import date, datetime, timedelta

from app.domain.entities import Activity, NutritionLog, MeditationSession
from app.domain.services.summary_utils import (
    summarize_activities,
    summarize_nutrition,
    practice_breakdown,
    goal_progress,
)

DAY = date(2025, 10, 16)


def _activity(kind, value, created_at):
    return Activity(date=DAY, activity_type=kind, value=value, created_at=created_at)


def _meal(calories, protein=None, carbs=None, fats=None):
    return NutritionLog(
        date=DAY, meal_type="lunch", food_name="plat",
        calories=calories, protein=protein, carbs=carbs, fats=fats,
    )


class TestSummarizeActivities:

    def test_empty_day_is_all_zero(self):
        summary = summarize_activities([])
        assert summary.model_dump() == {"steps": 0, "sleep_hours": 0, "water_glasses": 0, "mood_rating": 0}

    def test_maps_each_type_to_its_field(self):
        now = datetime(2025, 10, 16, 8, 0)
        summary = summarize_activities([
            _activity("steps", 8000, now),
            _activity("sleep", 7, now),
            _activity("water", 6, now),
            _activity("mood_check", 4, now),
        ])
        assert summary.steps == 8000
        assert summary.sleep_hours == 7
        assert summary.water_glasses == 6
        assert summary.mood_rating == 4

    def test_latest_created_row_wins(self):
        first = datetime(2025, 10, 16, 8, 0)
        # Ordre d'entree volontairement inverse
        summary = summarize_activities([
            _activity("steps", 9000, first + timedelta(hours=2)),
            _activity("steps", 3000, first),
        ])
        assert summary.steps == 9000

    def test_unknown_type_is_ignored(self):
        summary = summarize_activities([_activity("yoga", 1, datetime(2025, 10, 16))])
        assert summary.steps == 0


class TestSummarizeNutrition:

    def test_missing_macros_count_as_zero(self):
        totals = summarize_nutrition([_meal(500, protein=20), _meal(300, protein=10)])
        assert totals.model_dump() == {
            "total_calories": 800,
            "total_protein": 30,
            "total_carbs": 0,
            "total_fats": 0,
        }


def test_practice_breakdown_counts_by_type():
    sessions = [
        MeditationSession(date=DAY, practice_type="breathwork", duration_minutes=5),
        MeditationSession(date=DAY, practice_type="breathwork", duration_minutes=10),
        MeditationSession(date=DAY, practice_type="body_scan", duration_minutes=15),
    ]
    assert practice_breakdown(sessions) == {"breathwork": 2, "body_scan": 1}


class TestGoalProgress:

    def test_rounds_half_up(self):
        # 1/8 = 12.5 %
        assert goal_progress("daily_water", 8, 1).percentage == 13

    def test_on_track_when_target_reached(self):
        progress = goal_progress("daily_steps", 10000, 10000)
        assert progress.percentage == 100
        assert progress.on_track is True

    def test_behind_target(self):
        assert goal_progress("daily_steps", 10000, 2500).on_track is False

    def test_zero_target(self):
        progress = goal_progress("daily_calories", 0, 500)
        assert progress.percentage == 0
        assert progress.on_track is True
