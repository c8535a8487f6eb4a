"""Pydantic schemas for API request/response validation."""

from .card import CardSchema, CardListResponseSchema, CardResponseSchema
from .recommendation import (
    ComparisonRequestSchema,
    ComparisonResponseSchema,
    RecommendationResponseSchema,
    RecommendationsSchema,
    RecommendedCardSchema,
    RewardEstimateSchema,
    UserProfileRequestSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "CardSchema",
    "CardListResponseSchema",
    "CardResponseSchema",
    "ComparisonRequestSchema",
    "ComparisonResponseSchema",
    "RecommendationResponseSchema",
    "RecommendationsSchema",
    "RecommendedCardSchema",
    "RewardEstimateSchema",
    "UserProfileRequestSchema",
    "ErrorResponseSchema",
]
