"""Recommendation-related domain exceptions."""

from typing import List

from .base import DomainException


class InvalidRecommendationRequestException(DomainException):
    """Raised when a recommendation request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_RECOMMENDATION_REQUEST",
        )


class InvalidComparisonRequestException(DomainException):
    """Raised when a card comparison request is invalid."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_COMPARISON_REQUEST",
        )


class CardsNotFoundException(DomainException):
    """Raised when some of the cards asked for in a comparison do not exist."""

    def __init__(self, missing_ids: List[int]):
        super().__init__(
            message=f"Some cards not found: {', '.join(str(i) for i in missing_ids)}",
            code="CARDS_NOT_FOUND",
        )
        self.missing_ids = missing_ids
