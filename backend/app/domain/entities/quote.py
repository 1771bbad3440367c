"""
Entité WeeklyQuote - Domain Layer
Une citation générée par semaine (clé = lundi de la semaine)
"""
from sqlmodel import SQLModel, Field
from typing import Optional
import datetime as dt
from uuid import UUID, uuid4


class WeeklyQuote(SQLModel, table=True):
    __tablename__ = "weekly_quotes"

    id: Optional[UUID] = Field(default_factory=uuid4, primary_key=True)
    week_start_date: dt.date = Field(unique=True, index=True)
    quote_text: str
    created_at: dt.datetime = Field(default_factory=dt.datetime.utcnow)


class WeeklyQuoteRead(SQLModel):
    id: UUID
    week_start_date: dt.date
    quote_text: str
    created_at: dt.datetime
