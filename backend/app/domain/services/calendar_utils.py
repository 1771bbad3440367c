"""
Calculs calendaires purs : début de semaine, saison, jour de la semaine, série.
"""
from datetime import date, timedelta
from typing import Iterable

from app.domain.entities.visual import Season

_SEASONS_BY_MONTH = {
    3: Season.SPRING, 4: Season.SPRING, 5: Season.SPRING,
    6: Season.SUMMER, 7: Season.SUMMER, 8: Season.SUMMER,
    9: Season.FALL, 10: Season.FALL, 11: Season.FALL,
    12: Season.WINTER, 1: Season.WINTER, 2: Season.WINTER,
}

# (heure de début incluse, heure de fin exclue, nom du thème)
TIME_OF_DAY_THEMES = [
    (5, 12, "Energizing Dawn"),
    (12, 17, "Warm Earth"),
    (17, 21, "Deep Grounding"),
]
NIGHT_THEME = "Neutral Calm"


def week_start_monday(day: date) -> date:
    """Lundi de la semaine ISO contenant `day` (un dimanche recule de 6 jours)."""
    return day - timedelta(days=day.weekday())


def week_start_sunday(day: date) -> date:
    """Dimanche qui ouvre la semaine calendaire contenant `day`."""
    return day - timedelta(days=(day.weekday() + 1) % 7)


def day_of_week_index(day: date) -> int:
    """0 = dimanche ... 6 = samedi"""
    return (day.weekday() + 1) % 7


def season_for_month(month: int) -> Season:
    if month not in _SEASONS_BY_MONTH:
        raise ValueError(f"Invalid month: {month}")
    return _SEASONS_BY_MONTH[month]


def theme_name_for_hour(hour: int) -> str:
    for start, end, name in TIME_OF_DAY_THEMES:
        if start <= hour < end:
            return name
    return NIGHT_THEME


def compute_streak(session_dates: Iterable[date], today: date) -> int:
    """
    Nombre de jours consécutifs avec au moins une séance, en remontant depuis
    aujourd'hui. S'arrête au premier jour manquant ; 0 si rien aujourd'hui.
    Plusieurs séances le même jour comptent pour un seul jour.
    """
    streak = 0
    expected = today
    for day in sorted(set(session_dates), reverse=True):
        if day > today:
            continue
        if day != expected:
            break
        streak += 1
        expected = expected - timedelta(days=1)
    return streak
