"""
Service des tendances : programmes en vogue, messages de la communauté,
statistiques globales et enregistrement de la fréquentation quotidienne.
"""
import logging
import math
from collections import defaultdict
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from datetime import date, timedelta
from typing import Optional, List, Dict
from uuid import UUID

from app.domain.entities import (
    WellnessProgram, ProgramAnalytics, AnalyticsRecord,
    CommunityInsight, CommunityInsightCreate, TrendingProgram, WellnessStats,
)

logger = logging.getLogger(__name__)

TRENDING_LIMIT = 5
TRENDING_WINDOW_DAYS = 7
STATS_WINDOW_DAYS = 30
# Pas encore d'horodatage fin des séances
MOST_POPULAR_TIME = "8:00 AM"
# Estimation du nombre de complétions possibles par ligne de fréquentation
COMPLETIONS_PER_RECORD = 100

PROGRAM_ICONS = {
    "stress_relief": "🧘",
    "energy_reset": "⚡",
    "gratitude": "🙏",
    "mindfulness": "🧠",
    "sleep_mastery": "😴",
    "self_compassion": "💗",
}
PROGRAM_COLORS = {
    "stress_relief": "#8B7BA8",
    "energy_reset": "#FDB913",
    "gratitude": "#FF6B6B",
    "mindfulness": "#4ECDC4",
    "sleep_mastery": "#2C3E50",
    "self_compassion": "#FFB6C1",
}
DEFAULT_ICON = "✨"
DEFAULT_COLOR = "#9B9B9B"


def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def growth_percent(current: int, previous: int) -> float:
    """Évolution en pourcentage, arrondie au dixième ; 0 sans historique."""
    if previous <= 0:
        return 0.0
    return _round_half_up((current - previous) / previous * 100, 1)


class InsightService:

    def _users_by_program(self, session: Session, start: date, end: date) -> Dict[UUID, int]:
        totals: Dict[UUID, int] = defaultdict(int)
        for row in session.exec(
            select(ProgramAnalytics).where(ProgramAnalytics.date >= start, ProgramAnalytics.date <= end)
        ).all():
            totals[row.program_id] += row.active_users or 0
        return totals

    def trending(self, session: Session, today: Optional[date] = None) -> List[TrendingProgram]:
        """
        Programmes classés par participants sur les 7 derniers jours, avec
        l'évolution par rapport aux 7 jours précédents.
        """
        today = today or date.today()
        window_start = today - timedelta(days=TRENDING_WINDOW_DAYS)
        current = self._users_by_program(session, window_start, today)
        previous = self._users_by_program(
            session, window_start - timedelta(days=TRENDING_WINDOW_DAYS), window_start - timedelta(days=1)
        )

        programs = session.exec(select(WellnessProgram).order_by(WellnessProgram.created_at)).all()
        trending = [
            TrendingProgram(
                id=program.id,
                title=program.title,
                category=program.program_type,
                participants=current.get(program.id, 0),
                growth=growth_percent(current.get(program.id, 0), previous.get(program.id, 0)),
                icon=PROGRAM_ICONS.get(program.program_type, DEFAULT_ICON),
                color=PROGRAM_COLORS.get(program.program_type, DEFAULT_COLOR),
            )
            for program in programs
        ]
        trending.sort(key=lambda item: item.participants, reverse=True)
        logger.info(f"Programmes en tendance calcules: {min(len(trending), TRENDING_LIMIT)}")
        return trending[:TRENDING_LIMIT]

    def community(self, session: Session) -> List[CommunityInsight]:
        insights = session.exec(
            select(CommunityInsight)
            .where(CommunityInsight.is_active == True)  # noqa: E712
            .order_by(CommunityInsight.display_order, CommunityInsight.created_at.desc())
        ).all()
        logger.info(f"Messages de la communaute recuperes: {len(insights)}")
        return insights

    def create_insight(self, session: Session, data: CommunityInsightCreate) -> CommunityInsight:
        insight = CommunityInsight(**data.model_dump())
        session.add(insight)
        session.commit()
        session.refresh(insight)
        logger.info(f"Message de la communaute cree: {insight.id} ({insight.insight_type})")
        return insight

    def _find_record(self, session: Session, program_id: UUID, day: date) -> Optional[ProgramAnalytics]:
        return session.exec(
            select(ProgramAnalytics).where(
                ProgramAnalytics.program_id == program_id, ProgramAnalytics.date == day
            )
        ).first()

    def record(self, session: Session, data: AnalyticsRecord) -> Optional[ProgramAnalytics]:
        """Upsert de la fréquentation d'un programme pour un jour ; None si le programme n'existe pas."""
        if not session.get(WellnessProgram, data.program_id):
            logger.warning(f"Programme introuvable pour la frequentation: {data.program_id}")
            return None

        row = self._find_record(session, data.program_id, data.date)
        if not row:
            row = ProgramAnalytics(program_id=data.program_id, date=data.date)
            session.add(row)
            try:
                session.flush()
            except IntegrityError:
                # Ligne creee entre-temps par une autre requete
                session.rollback()
                row = self._find_record(session, data.program_id, data.date)

        row.active_users = data.active_users
        row.completions = data.completions
        session.add(row)
        session.commit()
        session.refresh(row)
        logger.info(f"Frequentation enregistree: {data.program_id} le {data.date} ({data.active_users} actifs)")
        return row

    def stats(self, session: Session, today: Optional[date] = None) -> WellnessStats:
        today = today or date.today()
        rows = session.exec(
            select(ProgramAnalytics).where(
                ProgramAnalytics.date >= today - timedelta(days=STATS_WINDOW_DAYS),
                ProgramAnalytics.date <= today,
            )
        ).all()

        # Un même utilisateur peut être compté plusieurs jours : on garde le pic
        total_active_users = max((row.active_users or 0 for row in rows), default=0)
        total_completions = sum(row.completions or 0 for row in rows)
        possible = len(rows) * COMPLETIONS_PER_RECORD
        completion_rate = int(_round_half_up(total_completions / possible * 100)) if possible else 0

        program_types = {p.id: p.program_type for p in session.exec(select(WellnessProgram)).all()}
        users_by_type: Dict[str, int] = defaultdict(int)
        for row in rows:
            program_type = program_types.get(row.program_id)
            if program_type:
                users_by_type[program_type] += row.active_users or 0
        trending_categories = [
            name for name, _ in sorted(users_by_type.items(), key=lambda item: item[1], reverse=True)[:3]
        ]

        stats = WellnessStats(
            total_active_users=total_active_users,
            most_popular_time=MOST_POPULAR_TIME,
            completion_rate=completion_rate,
            trending_categories=trending_categories,
        )
        logger.info(f"Statistiques bien-etre: {stats.model_dump()}")
        return stats


insight_service = InsightService()
