"""
Routes IA de l'administration : generation, amelioration, listes de fonctionnalites.
"""
import logging
from fastapi import APIRouter, Depends, Request, Response

from app.domain.entities import (
    GenerateContentRequest, GenerateContentResponse,
    ImproveContentRequest, ImproveContentResponse,
    GenerateFeaturesRequest, GenerateFeaturesResponse,
)
from app.domain.services.ai_content_service import ai_content_service
from app.domain.services.text_generator import TextGenerator, get_text_generator
from app.api.routers._shared import limiter

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin/ai", tags=["admin-ai"])


@router.post("/generate-content", response_model=GenerateContentResponse)
@limiter.limit("20/minute")
async def generate_content(
    request: Request,
    response: Response,
    data: GenerateContentRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    logger.info(f"Generation de contenu IA (type={data.content_type.value})")
    text = await ai_content_service.generate_content(generator, data.prompt, data.content_type, data.context)
    return GenerateContentResponse(generated_content=text)


@router.post("/improve-content", response_model=ImproveContentResponse)
@limiter.limit("20/minute")
async def improve_content(
    request: Request,
    response: Response,
    data: ImproveContentRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    logger.info(f"Amelioration de contenu IA (type={data.improvement_type.value})")
    text = await ai_content_service.improve_content(generator, data.content, data.improvement_type)
    return ImproveContentResponse(improved_content=text)


@router.post("/generate-features", response_model=GenerateFeaturesResponse)
@limiter.limit("20/minute")
async def generate_features(
    request: Request,
    response: Response,
    data: GenerateFeaturesRequest,
    generator: TextGenerator = Depends(get_text_generator),
):
    logger.info(f"Generation de fonctionnalites pour l'offre {data.plan_name} ({data.plan_type.value})")
    features = await ai_content_service.generate_features(generator, data.plan_name, data.plan_type)
    return GenerateFeaturesResponse(features=features)
