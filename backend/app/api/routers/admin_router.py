"""
Routes d'administration : categories, contenus de page et offres d'abonnement.
Les corps et reponses sont en camelCase.
"""
import logging
from fastapi import APIRouter, Depends
from sqlmodel import Session
from typing import List

from app.core.database import get_session
from app.domain.entities import (
    AdminCategoryCreate, AdminCategoryUpdate, AdminCategoryRead,
    AdminContentCreate, AdminContentUpdate, AdminContentRead,
    SubscriptionPlanCreate, SubscriptionPlanUpdate, SubscriptionPlanRead,
)
from app.domain.services.admin_service import admin_service
from app.api.routers._shared import parse_uuid, not_found

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/admin", tags=["admin"])


# ============ CATEGORIES ============

@router.get("/categories", response_model=List[AdminCategoryRead])
async def list_categories(session: Session = Depends(get_session)):
    return admin_service.list_categories(session)


@router.post("/categories", response_model=AdminCategoryRead)
async def create_category(data: AdminCategoryCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de categorie: {data.category_name}")
    return admin_service.create_category(session, data)


@router.put("/categories/{category_id}", response_model=AdminCategoryRead)
async def update_category(
    category_id: str, updates: AdminCategoryUpdate, session: Session = Depends(get_session)
):
    category = admin_service.update_category(session, parse_uuid(category_id), updates)
    if not category:
        raise not_found("Category")
    return category


@router.delete("/categories/{category_id}")
async def delete_category(category_id: str, session: Session = Depends(get_session)):
    if not admin_service.delete_category(session, parse_uuid(category_id)):
        raise not_found("Category")
    return {"success": True}


# ============ CONTENUS ============

@router.get("/content", response_model=List[AdminContentRead])
async def list_content(session: Session = Depends(get_session)):
    return admin_service.list_content(session)


@router.get("/content/{page_name}", response_model=List[AdminContentRead])
async def list_page_content(page_name: str, session: Session = Depends(get_session)):
    return admin_service.list_content(session, page_name)


@router.post("/content", response_model=AdminContentRead)
async def create_content(data: AdminContentCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation de contenu: {data.page_name}/{data.content_key}")
    return admin_service.create_content(session, data)


@router.put("/content/{content_id}", response_model=AdminContentRead)
async def update_content(
    content_id: str, updates: AdminContentUpdate, session: Session = Depends(get_session)
):
    content = admin_service.update_content(session, parse_uuid(content_id), updates)
    if not content:
        raise not_found("Content")
    return content


@router.delete("/content/{content_id}")
async def delete_content(content_id: str, session: Session = Depends(get_session)):
    if not admin_service.delete_content(session, parse_uuid(content_id)):
        raise not_found("Content")
    return {"success": True}


# ============ OFFRES ============

@router.get("/subscriptions", response_model=List[SubscriptionPlanRead])
async def list_plans(session: Session = Depends(get_session)):
    return admin_service.list_plans(session)


@router.post("/subscriptions", response_model=SubscriptionPlanRead)
async def create_plan(data: SubscriptionPlanCreate, session: Session = Depends(get_session)):
    logger.info(f"Creation d'offre: {data.plan_name} ({len(data.features)} fonctionnalites)")
    return admin_service.create_plan(session, data)


@router.put("/subscriptions/{plan_id}", response_model=SubscriptionPlanRead)
async def update_plan(plan_id: str, updates: SubscriptionPlanUpdate, session: Session = Depends(get_session)):
    plan = admin_service.update_plan(session, parse_uuid(plan_id), updates)
    if not plan:
        raise not_found("Subscription plan")
    return plan


@router.delete("/subscriptions/{plan_id}")
async def delete_plan(plan_id: str, session: Session = Depends(get_session)):
    if not admin_service.delete_plan(session, parse_uuid(plan_id)):
        raise not_found("Subscription plan")
    return {"success": True}
