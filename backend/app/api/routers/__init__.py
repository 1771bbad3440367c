"""
Routers API pour Rhythm.

Ce module regroupe tous les sous-routers et expose un router principal
a inclure dans l'application FastAPI.
"""
from fastapi import APIRouter

from app.api.routers.activity_router import router as activity_router
from app.api.routers.nutrition_router import router as nutrition_router
from app.api.routers.workout_router import router as workout_router
from app.api.routers.meditation_router import router as meditation_router
from app.api.routers.journal_router import router as journal_router
from app.api.routers.goal_router import router as goal_router
from app.api.routers.quote_router import router as quote_router
from app.api.routers.theme_router import router as theme_router
from app.api.routers.visual_router import router as visual_router
from app.api.routers.subscription_router import router as subscription_router
from app.api.routers.admin_router import router as admin_router
from app.api.routers.admin_ai_router import router as admin_ai_router
from app.api.routers.upload_router import router as upload_router
from app.api.routers.saved_item_router import router as saved_item_router
from app.api.routers.program_router import router as program_router
from app.api.routers.insight_router import router as insight_router
from app.api.routers._shared import limiter

router = APIRouter()

router.include_router(activity_router)
router.include_router(nutrition_router)
router.include_router(workout_router)
router.include_router(meditation_router)
router.include_router(journal_router)
router.include_router(goal_router)
router.include_router(quote_router)
router.include_router(theme_router)
router.include_router(visual_router)
router.include_router(subscription_router)
router.include_router(admin_router)
router.include_router(admin_ai_router)
router.include_router(upload_router)
router.include_router(saved_item_router)
router.include_router(program_router)
router.include_router(insight_router)

__all__ = ["router", "limiter"]
