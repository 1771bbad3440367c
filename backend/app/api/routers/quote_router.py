"""
Routes de la citation de la semaine (generee a la premiere lecture de la semaine).
"""
import logging
from fastapi import APIRouter, Depends, Request, Response
from sqlmodel import Session

from app.core.database import get_session
from app.domain.entities import WeeklyQuoteRead
from app.domain.services.quote_service import quote_service
from app.domain.services.text_generator import TextGenerator, get_text_generator
from app.api.routers._shared import limiter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["quotes"])


@router.get("/api/quotes/current", response_model=WeeklyQuoteRead)
async def get_current_quote(
    session: Session = Depends(get_session),
    generator: TextGenerator = Depends(get_text_generator),
):
    return await quote_service.current(session, generator)


@router.post("/api/quotes/regenerate", response_model=WeeklyQuoteRead)
@limiter.limit("10/minute")
async def regenerate_quote(
    request: Request,
    response: Response,
    session: Session = Depends(get_session),
    generator: TextGenerator = Depends(get_text_generator),
):
    """Remplace la citation de la semaine courante"""
    logger.info("Demande de regeneration de la citation")
    return await quote_service.regenerate(session, generator)
