"""
Tests des calculs calendaires : debut de semaine, saisons, jour, serie.
"""
import pytest
from datetime import date, timedelta

from app.domain.entities.visual import Season
from app.domain.services.calendar_utils import (
    week_start_monday,
    week_start_sunday,
    day_of_week_index,
    season_for_month,
    theme_name_for_hour,
    compute_streak,
)


class TestWeekStart:

    def test_monday_of_midweek_day(self):
        # Jeudi 16 octobre 2025
        assert week_start_monday(date(2025, 10, 16)) == date(2025, 10, 13)

    def test_monday_is_its_own_week_start(self):
        assert week_start_monday(date(2025, 10, 13)) == date(2025, 10, 13)

    def test_sunday_belongs_to_previous_monday(self):
        assert week_start_monday(date(2025, 10, 19)) == date(2025, 10, 13)

    def test_sunday_start_of_calendar_week(self):
        assert week_start_sunday(date(2025, 10, 16)) == date(2025, 10, 12)
        assert week_start_sunday(date(2025, 10, 12)) == date(2025, 10, 12)
        assert week_start_sunday(date(2025, 10, 18)) == date(2025, 10, 12)


class TestDayOfWeek:

    def test_sunday_is_zero(self):
        assert day_of_week_index(date(2025, 10, 12)) == 0

    def test_saturday_is_six(self):
        assert day_of_week_index(date(2025, 10, 18)) == 6

    def test_wednesday(self):
        assert day_of_week_index(date(2025, 10, 15)) == 3


class TestSeason:

    @pytest.mark.parametrize("month,season", [
        (3, Season.SPRING), (5, Season.SPRING),
        (6, Season.SUMMER), (8, Season.SUMMER),
        (9, Season.FALL), (11, Season.FALL),
        (12, Season.WINTER), (1, Season.WINTER), (2, Season.WINTER),
    ])
    def test_month_to_season(self, month, season):
        assert season_for_month(month) == season

    def test_invalid_month(self):
        with pytest.raises(ValueError):
            season_for_month(13)


class TestThemeForHour:

    def test_boundaries(self):
        assert theme_name_for_hour(4) == "Neutral Calm"
        assert theme_name_for_hour(5) == "Energizing Dawn"
        assert theme_name_for_hour(11) == "Energizing Dawn"
        assert theme_name_for_hour(12) == "Warm Earth"
        assert theme_name_for_hour(17) == "Deep Grounding"
        assert theme_name_for_hour(21) == "Neutral Calm"


class TestComputeStreak:
    today = date(2025, 10, 16)

    def test_today_and_yesterday(self):
        dates = [self.today, self.today - timedelta(days=1)]
        assert compute_streak(dates, self.today) == 2

    def test_missing_today_is_zero(self):
        assert compute_streak([self.today - timedelta(days=1)], self.today) == 0

    def test_no_sessions(self):
        assert compute_streak([], self.today) == 0

    def test_stops_at_first_gap(self):
        dates = [self.today, self.today - timedelta(days=1), self.today - timedelta(days=3)]
        assert compute_streak(dates, self.today) == 2

    def test_several_sessions_same_day_count_once(self):
        dates = [self.today, self.today, self.today - timedelta(days=1), self.today - timedelta(days=1)]
        assert compute_streak(dates, self.today) == 2

    def test_future_sessions_ignored(self):
        dates = [self.today + timedelta(days=1), self.today]
        assert compute_streak(dates, self.today) == 1
