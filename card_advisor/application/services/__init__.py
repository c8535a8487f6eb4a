"""Application services (use cases)."""

from .card_service import CardService
from .recommendation_service import RecommendationService

__all__ = [
    "CardService",
    "RecommendationService",
]
