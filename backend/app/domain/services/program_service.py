"""
Service des programmes bien-être et des inscriptions.

Supprimer un programme retire d'abord ses inscriptions, sa fréquentation et
les sauvegardes qui le référencent, le tout dans une seule transaction.
"""
import logging
from sqlmodel import Session, select
from sqlalchemy.exc import IntegrityError
from uuid import UUID
from datetime import datetime
from typing import Optional, List

from app.domain.entities import (
    WellnessProgram, WellnessProgramCreate, WellnessProgramUpdate,
    ProgramEnrollment, ProgramEnrollmentRead, ProgramAnalytics,
)
from app.domain.entities.visual import SavedItemType
from app.domain.services.saved_item_service import saved_item_service

logger = logging.getLogger(__name__)


class ProgramService:

    # ============ PROGRAMMES ============

    def list_programs(self, session: Session) -> List[WellnessProgram]:
        programs = session.exec(select(WellnessProgram).order_by(WellnessProgram.created_at)).all()
        logger.info(f"Programmes recuperes: {len(programs)}")
        return programs

    def get(self, session: Session, program_id: Optional[UUID]) -> Optional[WellnessProgram]:
        return session.get(WellnessProgram, program_id) if program_id else None

    def create(self, session: Session, data: WellnessProgramCreate) -> WellnessProgram:
        program = WellnessProgram(**data.model_dump())
        session.add(program)
        session.commit()
        session.refresh(program)
        logger.info(f"Programme cree: {program.id} ({program.program_type}, {program.duration_days} jours)")
        return program

    def update(
        self, session: Session, program_id: Optional[UUID], updates: WellnessProgramUpdate
    ) -> Optional[WellnessProgram]:
        program = self.get(session, program_id)
        if not program:
            logger.warning(f"Programme introuvable pour mise a jour: {program_id}")
            return None

        for field, value in updates.model_dump(exclude_unset=True).items():
            setattr(program, field, value)

        program.updated_at = datetime.utcnow()
        session.add(program)
        session.commit()
        session.refresh(program)
        logger.info(f"Programme mis a jour: {program_id}")
        return program

    def delete(self, session: Session, program_id: Optional[UUID]) -> bool:
        program = self.get(session, program_id)
        if not program:
            logger.warning(f"Programme introuvable pour suppression: {program_id}")
            return False

        try:
            for model in (ProgramEnrollment, ProgramAnalytics):
                for row in session.exec(select(model).where(model.program_id == program.id)).all():
                    session.delete(row)
            saved_item_service.delete_references(session, SavedItemType.PROGRAM.value, program.id)
            session.flush()
            session.delete(program)
            session.commit()
        except Exception as e:
            session.rollback()
            logger.error(f"Erreur lors de la suppression du programme {program_id}: {e}")
            raise

        logger.info(f"Programme supprime: {program_id}")
        return True

    # ============ INSCRIPTIONS ============

    def list_enrollments(self, session: Session, user_id: str) -> List[ProgramEnrollmentRead]:
        rows = session.exec(
            select(ProgramEnrollment, WellnessProgram)
            .join(WellnessProgram, ProgramEnrollment.program_id == WellnessProgram.id, isouter=True)
            .where(ProgramEnrollment.user_id == user_id)
            .order_by(ProgramEnrollment.enrolled_at.desc())
        ).all()
        logger.info(f"Inscriptions recuperees pour {user_id}: {len(rows)}")
        return [ProgramEnrollmentRead.from_entity(enrollment, program) for enrollment, program in rows]

    def get_enrollment(self, session: Session, enrollment_id: Optional[UUID]) -> Optional[ProgramEnrollment]:
        return session.get(ProgramEnrollment, enrollment_id) if enrollment_id else None

    def enroll(self, session: Session, user_id: str, program_id: UUID) -> Optional[ProgramEnrollmentRead]:
        """None si le programme n'existe pas ; ValueError si déjà inscrit."""
        program = self.get(session, program_id)
        if not program:
            logger.warning(f"Programme introuvable pour inscription: {program_id}")
            return None

        enrollment = ProgramEnrollment(user_id=user_id, program_id=program.id)
        session.add(enrollment)
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            logger.warning(f"Utilisateur {user_id} deja inscrit au programme {program_id}")
            raise ValueError("Already enrolled in this program")

        session.refresh(enrollment)
        logger.info(f"Inscription creee: {enrollment.id} ({user_id} -> {program_id})")
        return ProgramEnrollmentRead.from_entity(enrollment, program)

    def complete_day(
        self, session: Session, enrollment: ProgramEnrollment, day: int, now: Optional[datetime] = None
    ) -> ProgramEnrollmentRead:
        """
        Marque un jour comme fait. Le programme est terminé quand tous ses jours
        le sont ; ValueError si le jour dépasse la durée du programme.
        """
        program = self.get(session, enrollment.program_id)
        if day > program.duration_days:
            raise ValueError(f"Day must be between 1 and {program.duration_days}")

        completed = sorted(set(enrollment.completed_days or []) | {day})
        # Nouvelle liste : la colonne JSON ne suit pas les mutations en place
        enrollment.completed_days = completed
        enrollment.current_day = completed[-1] + 1
        enrollment.is_completed = len(completed) >= program.duration_days
        if enrollment.is_completed:
            enrollment.completed_at = enrollment.completed_at or now or datetime.utcnow()
        else:
            enrollment.completed_at = None

        session.add(enrollment)
        session.commit()
        session.refresh(enrollment)
        logger.info(
            f"Progression {enrollment.id}: {len(completed)}/{program.duration_days} jours"
            f" (termine={enrollment.is_completed})"
        )
        return ProgramEnrollmentRead.from_entity(enrollment, program)

    def unenroll(self, session: Session, enrollment: ProgramEnrollment) -> None:
        enrollment_id = enrollment.id
        session.delete(enrollment)
        session.commit()
        logger.info(f"Desinscription: {enrollment_id}")


program_service = ProgramService()
