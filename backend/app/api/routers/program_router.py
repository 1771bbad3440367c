"""
Routes des programmes bien-etre et des inscriptions de l'utilisateur authentifie.
"""
import logging
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.auth.jwt import get_current_user_id
from app.domain.entities import (
    WellnessProgramCreate, WellnessProgramUpdate, WellnessProgramSummary, WellnessProgramRead,
    EnrollmentCreate, ProgressUpdate, ProgramEnrollment, ProgramEnrollmentRead,
)
from app.domain.services.program_service import program_service
from app.api.routers._shared import security, parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["wellness-programs"])


# ============ PROGRAMMES ============

@router.get("/api/wellness/programs", response_model=List[WellnessProgramSummary])
async def list_programs(session: Session = Depends(get_session)):
    return program_service.list_programs(session)


@router.get("/api/wellness/programs/{program_id}", response_model=WellnessProgramRead)
async def get_program(program_id: str, session: Session = Depends(get_session)):
    program = program_service.get(session, parse_uuid(program_id))
    if not program:
        raise not_found("Program")
    return program


@router.post("/api/wellness/programs", response_model=WellnessProgramRead)
async def create_program(data: WellnessProgramCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de programme: {data.title} ({data.program_type})")
    return program_service.create(session, data)


@router.put("/api/wellness/programs/{program_id}", response_model=WellnessProgramRead)
async def update_program(
    program_id: str, updates: WellnessProgramUpdate, session: Session = Depends(get_session)
):
    program = program_service.update(session, parse_uuid(program_id), updates)
    if not program:
        raise not_found("Program")
    return program


@router.delete("/api/wellness/programs/{program_id}")
async def delete_program(program_id: str, session: Session = Depends(get_session)):
    """Supprime le programme avec ses inscriptions, sa frequentation et ses sauvegardes"""
    if not program_service.delete(session, parse_uuid(program_id)):
        raise not_found("Program")
    return {"success": True, "id": program_id}


# ============ INSCRIPTIONS ============

def _owned_enrollment(session: Session, enrollment_id: str, user_id: str) -> ProgramEnrollment:
    enrollment = program_service.get_enrollment(session, parse_uuid(enrollment_id))
    if not enrollment:
        raise not_found("Enrollment")
    if enrollment.user_id != user_id:
        logger.warning(f"Utilisateur {user_id} non proprietaire de l'inscription {enrollment_id}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Unauthorized")
    return enrollment


@router.get("/api/wellness/enrollments", response_model=List[ProgramEnrollmentRead])
async def list_enrollments(
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    user_id = get_current_user_id(token.credentials)
    return program_service.list_enrollments(session, user_id)


@router.post("/api/wellness/enrollments", response_model=ProgramEnrollmentRead)
async def enroll(
    data: EnrollmentCreate,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    user_id = get_current_user_id(token.credentials)
    try:
        enrollment = program_service.enroll(session, user_id, data.program_id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    if not enrollment:
        raise not_found("Program")
    return enrollment


@router.put("/api/wellness/enrollments/{enrollment_id}/progress", response_model=ProgramEnrollmentRead)
async def update_progress(
    enrollment_id: str,
    data: ProgressUpdate,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    """Marque un jour du programme comme fait"""
    enrollment = _owned_enrollment(session, enrollment_id, get_current_user_id(token.credentials))
    try:
        return program_service.complete_day(session, enrollment, data.day)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/api/wellness/enrollments/{enrollment_id}")
async def unenroll(
    enrollment_id: str,
    token: HTTPAuthorizationCredentials = Depends(security),
    session: Session = Depends(get_session),
):
    enrollment = _owned_enrollment(session, enrollment_id, get_current_user_id(token.credentials))
    program_service.unenroll(session, enrollment)
    return {"success": True, "id": enrollment_id}
