"""Data Transfer Objects for application layer."""

from .card import CardDTO
from .recommendation import (
    ComparisonRequest,
    RecommendationRequest,
    RecommendationResponse,
    RecommendedCardDTO,
    RewardEstimateDTO,
)

__all__ = [
    "CardDTO",
    "ComparisonRequest",
    "RecommendationRequest",
    "RecommendationResponse",
    "RecommendedCardDTO",
    "RewardEstimateDTO",
]
