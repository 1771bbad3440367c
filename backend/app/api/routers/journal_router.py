"""
Routes du journal personnel.
"""
import logging
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.domain.entities import JournalEntryCreate, JournalEntryRead, JournalEntryUpdate
from app.domain.services.journal_service import journal_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(tags=["journal"])


@router.get("/api/journal/entries", response_model=List[JournalEntryRead])
async def list_journal_entries(session: Session = Depends(get_session)):
    return journal_service.list_entries(session)


@router.post("/api/journal/entries", response_model=JournalEntryRead)
async def create_journal_entry(data: JournalEntryCreate, session: Session = Depends(get_session)):
    logger.info("Nouvelle entree de journal")
    return journal_service.create(session, data)


@router.get("/api/journal/entries/{entry_id}", response_model=JournalEntryRead)
async def get_journal_entry(entry_id: str, session: Session = Depends(get_session)):
    entry = journal_service.get(session, parse_uuid(entry_id))
    if not entry:
        raise not_found("Journal entry")
    return entry


@router.put("/api/journal/entries/{entry_id}", response_model=JournalEntryRead)
async def update_journal_entry(
    entry_id: str, updates: JournalEntryUpdate, session: Session = Depends(get_session)
):
    entry = journal_service.update(session, parse_uuid(entry_id), updates)
    if not entry:
        raise not_found("Journal entry")
    return entry


@router.delete("/api/journal/entries/{entry_id}")
async def delete_journal_entry(entry_id: str, session: Session = Depends(get_session)):
    if not journal_service.delete(session, parse_uuid(entry_id)):
        raise not_found("Journal entry")
    return {"success": True}
