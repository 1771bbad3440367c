"""
Entité JournalEntry - Domain Layer
"""
from sqlmodel import SQLModel, Field
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4

from .validators import non_nullable


class JournalEntryBase(SQLModel):
    content: str
    mood: Optional[str] = None
    energy: Optional[int] = None  # 1-10
    intention: Optional[str] = None


class JournalEntry(JournalEntryBase, table=True):
    __tablename__ = "journal_entries"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)
    updated_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class JournalEntryCreate(JournalEntryBase):
    pass


class JournalEntryRead(JournalEntryBase):
    id: UUID
    created_at: dt.datetime
    updated_at: dt.datetime


class JournalEntryUpdate(SQLModel):
    content: Optional[str] = None
    mood: Optional[str] = None
    energy: Optional[int] = None
    intention: Optional[str] = None

    _required = non_nullable("content")
