from fastapi import APIRouter

from .cards import cards_router
from .health import health_router
from .recommendation import recommendation_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(cards_router, tags=["Cards"])
router.include_router(recommendation_router, tags=["Recommendations"])
