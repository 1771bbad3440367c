"""
Service des seances : CRUD avec exercices.
La seance et ses exercices sont toujours ecrits dans une seule transaction.
"""
import logging
from collections import defaultdict
from sqlmodel import Session, select
from uuid import UUID
from datetime import date, datetime
from typing import Optional, List, Dict

from app.domain.entities import (
    Workout, WorkoutExercise, WorkoutCreate, WorkoutUpdate, WorkoutRead, WorkoutExerciseCreate,
)

logger = logging.getLogger(__name__)


class WorkoutService:

    def _exercises_by_workout(
        self, session: Session, workout_ids: List[UUID]
    ) -> Dict[UUID, List[WorkoutExercise]]:
        grouped: Dict[UUID, List[WorkoutExercise]] = defaultdict(list)
        if not workout_ids:
            return grouped
        exercises = session.exec(
            select(WorkoutExercise)
            .where(WorkoutExercise.workout_id.in_(workout_ids))
            .order_by(WorkoutExercise.created_at)
        ).all()
        for exercise in exercises:
            grouped[exercise.workout_id].append(exercise)
        return grouped

    def _build_exercises(
        self, workout_id: UUID, exercises: List[WorkoutExerciseCreate]
    ) -> List[WorkoutExercise]:
        return [WorkoutExercise(workout_id=workout_id, **ex.model_dump()) for ex in exercises]

    def for_day(self, session: Session, day: date) -> List[Workout]:
        return session.exec(select(Workout).where(Workout.date == day)).all()

    def count_between(self, session: Session, start: date, end: date) -> int:
        return len(session.exec(
            select(Workout.id).where(Workout.date >= start, Workout.date <= end)
        ).all())

    def list_workouts(self, session: Session, day: Optional[date] = None) -> List[WorkoutRead]:
        query = select(Workout)
        if day:
            query = query.where(Workout.date == day)
        workouts = session.exec(query.order_by(Workout.created_at.desc())).all()

        # Un seul aller-retour pour les exercices de toutes les seances
        exercises = self._exercises_by_workout(session, [w.id for w in workouts])
        logger.info(f"Seances recuperees: {len(workouts)} (date={day})")
        return [WorkoutRead.from_entity(w, exercises.get(w.id, [])) for w in workouts]

    def get(self, session: Session, workout_id: Optional[UUID]) -> Optional[WorkoutRead]:
        workout = session.get(Workout, workout_id) if workout_id else None
        if not workout:
            logger.warning(f"Seance introuvable: {workout_id}")
            return None
        exercises = self._exercises_by_workout(session, [workout.id])
        return WorkoutRead.from_entity(workout, exercises.get(workout.id, []))

    def create(self, session: Session, data: WorkoutCreate) -> WorkoutRead:
        workout = Workout(
            **data.model_dump(exclude={"exercises", "workout_type"}), workout_type=data.workout_type.value
        )
        exercises = self._build_exercises(workout.id, data.exercises)
        try:
            session.add(workout)
            session.add_all(exercises)
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Erreur lors de la creation de la seance: {e}")
            raise

        session.refresh(workout)
        for exercise in exercises:
            session.refresh(exercise)
        logger.info(f"Seance creee: {workout.id} ({len(exercises)} exercices)")
        return WorkoutRead.from_entity(workout, exercises)

    def update(
        self, session: Session, workout_id: Optional[UUID], updates: WorkoutUpdate
    ) -> Optional[WorkoutRead]:
        """Mise a jour partielle ; `exercises` present = remplacement complet de la liste."""
        workout = session.get(Workout, workout_id) if workout_id else None
        if not workout:
            logger.warning(f"Seance introuvable pour mise a jour: {workout_id}")
            return None

        fields = updates.model_dump(exclude_unset=True, exclude={"exercises"})
        try:
            for field, value in fields.items():
                setattr(workout, field, value)
            workout.updated_at = datetime.utcnow()
            session.add(workout)

            if updates.exercises is not None:
                for old in session.exec(
                    select(WorkoutExercise).where(WorkoutExercise.workout_id == workout.id)
                ).all():
                    session.delete(old)
                session.add_all(self._build_exercises(workout.id, updates.exercises))

            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Erreur lors de la mise a jour de la seance {workout_id}: {e}")
            raise

        session.refresh(workout)
        logger.info(f"Seance mise a jour: {workout_id}")
        return self.get(session, workout.id)

    def delete(self, session: Session, workout_id: Optional[UUID]) -> bool:
        workout = session.get(Workout, workout_id) if workout_id else None
        if not workout:
            logger.warning(f"Seance introuvable pour suppression: {workout_id}")
            return False

        try:
            # Exercices d'abord, puis la seance, dans la meme transaction
            for exercise in session.exec(
                select(WorkoutExercise).where(WorkoutExercise.workout_id == workout.id)
            ).all():
                session.delete(exercise)
            session.flush()
            session.delete(workout)
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Erreur lors de la suppression de la seance {workout_id}: {e}")
            raise

        logger.info(f"Seance supprimee: {workout_id}")
        return True


workout_service = WorkoutService()
