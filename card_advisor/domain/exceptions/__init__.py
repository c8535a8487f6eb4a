"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .card import (
    CardNotFoundException,
    CatalogUnavailableException,
)
from .recommendation import (
    CardsNotFoundException,
    InvalidComparisonRequestException,
    InvalidRecommendationRequestException,
)

__all__ = [
    "DomainException",
    "CardNotFoundException",
    "CardsNotFoundException",
    "CatalogUnavailableException",
    "InvalidComparisonRequestException",
    "InvalidRecommendationRequestException",
]
