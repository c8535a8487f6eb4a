"""Recommendation API endpoints."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends

from card_advisor.application.dto import (
    ComparisonRequest,
    RecommendationRequest,
    RecommendedCardDTO,
    RewardEstimateDTO,
)
from card_advisor.application.services import RecommendationService
from card_advisor.core.dependencies import get_recommendation_service
from card_advisor.core.metrics import record_recommendations, track_recommendation_latency
from card_advisor.presentation.schemas import (
    CardSchema,
    ComparisonRequestSchema,
    ComparisonResponseSchema,
    ErrorResponseSchema,
    RecommendationResponseSchema,
    RecommendationsSchema,
    RecommendedCardSchema,
    RewardEstimateSchema,
    UserProfileRequestSchema,
)

recommendation_router = APIRouter(
    prefix="/recommendations",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        503: {"model": ErrorResponseSchema, "description": "Catalog unavailable"},
    },
)


def _to_recommended_card_schema(recommendation: RecommendedCardDTO) -> RecommendedCardSchema:
    estimate = recommendation.estimated_rewards
    if isinstance(estimate, RewardEstimateDTO):
        estimated_rewards = RewardEstimateSchema(**asdict(estimate))
    else:
        estimated_rewards = estimate

    return RecommendedCardSchema(
        **asdict(recommendation.card),
        score=recommendation.score,
        reasons=recommendation.reasons,
        estimated_rewards=estimated_rewards,
    )


@recommendation_router.post(
    "/personalized",
    response_model=RecommendationResponseSchema,
    status_code=200,
    summary="Get Personalized Recommendations",
    description="""
    Rank the catalog against a user's declared profile.

    Cards the user is not eligible for are dropped, the rest are scored,
    and the top cards are returned with reasons and a projected annual
    reward value.
    """,
)
async def personalized_recommendations(
    request: UserProfileRequestSchema,
    recommendation_service: Annotated[
        RecommendationService, Depends(get_recommendation_service)
    ],
) -> RecommendationResponseSchema:
    dto = RecommendationRequest(
        monthly_income=request.monthly_income,
        spending_habits=request.spending_habits,
        preferred_benefits=request.preferred_benefits,
        existing_cards=request.existing_cards,
        credit_score=request.credit_score.value if request.credit_score else None,
        preferred_card_type=(
            request.preferred_card_type.value if request.preferred_card_type else None
        ),
        max_annual_fee=request.max_annual_fee,
        limit=request.limit,
    )

    with track_recommendation_latency():
        response = await recommendation_service.recommend(dto)

    # Record business metrics
    record_recommendations(
        response.total_eligible,
        [rec.card.category for rec in response.recommendations],
    )

    return RecommendationResponseSchema(
        recommendations=RecommendationsSchema(
            recommendations=[
                _to_recommended_card_schema(rec) for rec in response.recommendations
            ],
            total_eligible=response.total_eligible,
        ),
    )


@recommendation_router.post(
    "/compare",
    response_model=ComparisonResponseSchema,
    status_code=200,
    summary="Compare Cards",
    description="Fetch two or more cards for a side-by-side comparison.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
    },
)
async def compare_cards(
    request: ComparisonRequestSchema,
    recommendation_service: Annotated[
        RecommendationService, Depends(get_recommendation_service)
    ],
) -> ComparisonResponseSchema:
    cards = await recommendation_service.compare(ComparisonRequest(card_ids=request.card_ids))

    return ComparisonResponseSchema(
        comparison=[CardSchema.model_validate(card, from_attributes=True) for card in cards],
    )
