"""Recommendation service - orchestrates the card recommendation use case."""

from typing import List

import structlog

from card_advisor.application.dto import (
    CardDTO,
    ComparisonRequest,
    RecommendationRequest,
    RecommendationResponse,
    RecommendedCardDTO,
)
from card_advisor.core.metrics import record_catalog_size
from card_advisor.domain.entities import CreditCard
from card_advisor.domain.exceptions import (
    CardsNotFoundException,
    InvalidComparisonRequestException,
    InvalidRecommendationRequestException,
)
from card_advisor.domain.interfaces import CardRepository
from card_advisor.service.recommendation import CardProfile, generate_recommendations

logger = structlog.get_logger(__name__)


class RecommendationService:
    """
    Application service for card recommendation use cases.

    Loads a fresh catalog snapshot for every request and hands it to the
    recommendation engine; nothing is cached between requests.
    """

    def __init__(self, card_repository: CardRepository):
        self._card_repo = card_repository

    async def recommend(self, request: RecommendationRequest) -> RecommendationResponse:
        """
        Generate ranked recommendations for a user profile.

        Args:
            request: The user's declared profile and an optional result limit

        Returns:
            RecommendationResponse with annotated top cards

        Raises:
            InvalidRecommendationRequestException: If request validation fails
            CatalogUnavailableException: If the catalog cannot be read
        """
        errors = request.validate()
        if errors:
            raise InvalidRecommendationRequestException("; ".join(errors))

        log = logger.bind(
            monthly_income=request.monthly_income,
            credit_score=request.credit_score,
            max_annual_fee=request.max_annual_fee,
        )
        log.info("recommendations_requested")

        catalog = await self._card_repo.list_all()
        record_catalog_size(len(catalog))
        log.info("catalog_loaded", count=len(catalog))

        cards_by_id = {card.id: card for card in catalog}

        result = generate_recommendations(
            profile=request.to_profile(),
            catalog=self._convert_cards(catalog),
            limit=request.limit,
        )

        log.info(
            "recommendations_generated",
            total_eligible=result.total_eligible,
            returned=len(result.recommendations),
            top_score=result.recommendations[0].score if result.recommendations else None,
        )

        return RecommendationResponse(
            recommendations=[
                RecommendedCardDTO.from_recommendation(rec, cards_by_id[rec.card.id])
                for rec in result.recommendations
            ],
            total_eligible=result.total_eligible,
        )

    async def compare(self, request: ComparisonRequest) -> List[CardDTO]:
        """
        Fetch several cards for a side-by-side comparison.

        Args:
            request: The card IDs to compare

        Returns:
            The cards, ordered by name

        Raises:
            InvalidComparisonRequestException: If fewer than 2 distinct IDs are given
            CardsNotFoundException: If any of the IDs does not exist
        """
        errors = request.validate()
        if errors:
            raise InvalidComparisonRequestException("; ".join(errors))

        card_ids = list(dict.fromkeys(request.card_ids))
        cards = await self._card_repo.get_by_ids(card_ids)

        found = {card.id for card in cards}
        missing = [card_id for card_id in card_ids if card_id not in found]
        if missing:
            logger.warning("comparison_cards_missing", missing_ids=missing)
            raise CardsNotFoundException(missing)

        logger.info("cards_compared", card_ids=card_ids)

        return [CardDTO.from_entity(card) for card in cards]

    def _convert_cards(self, cards: List[CreditCard]) -> List[CardProfile]:
        """Convert catalog entities to the engine's card format."""
        return [
            CardProfile(
                id=card.id,
                name=card.name,
                issuer=card.issuer,
                joining_fee=float(card.joining_fee),
                annual_fee=float(card.annual_fee),
                reward_type=card.reward_type.value,
                reward_rate=card.reward_rate,
                eligibility_criteria=card.eligibility_criteria,
                perks=card.perks,
                min_income=card.min_income,
                credit_score=card.credit_score,
                category=card.category.value,
            )
            for card in cards
        ]
