"""Data transfer objects for recommendation operations."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union

from card_advisor.service.recommendation import (
    CreditScoreBand,
    Recommendation,
    RewardEstimate,
    UserProfile,
    describe_estimate,
)

from .card import CardDTO

MAX_RECOMMENDATIONS = 20


@dataclass(frozen=True)
class RecommendationRequest:
    """Input data for requesting card recommendations. Every field is optional."""

    monthly_income: Optional[int] = None
    spending_habits: Optional[Dict[str, Optional[float]]] = None
    preferred_benefits: Optional[List[str]] = None
    existing_cards: Optional[str] = None
    credit_score: Optional[str] = None
    preferred_card_type: Optional[str] = None
    max_annual_fee: Optional[int] = None
    limit: Optional[int] = None

    def validate(self) -> List[str]:
        errors = []

        if self.monthly_income is not None and self.monthly_income < 0:
            errors.append("monthly_income cannot be negative")

        if self.max_annual_fee is not None and self.max_annual_fee < 0:
            errors.append("max_annual_fee cannot be negative")

        if self.spending_habits:
            negative = sorted(k for k, v in self.spending_habits.items() if v is not None and v < 0)
            if negative:
                errors.append(f"spending_habits cannot be negative: {', '.join(negative)}")

        if self.credit_score is not None:
            valid_bands = {band.value for band in CreditScoreBand}
            if self.credit_score not in valid_bands:
                errors.append(f"credit_score must be one of: {', '.join(sorted(valid_bands))}")

        if self.limit is not None and not 1 <= self.limit <= MAX_RECOMMENDATIONS:
            errors.append(f"limit must be between 1 and {MAX_RECOMMENDATIONS}")

        return errors

    def to_profile(self) -> UserProfile:
        """Build the engine's profile from the request."""
        return UserProfile(
            monthly_income=self.monthly_income,
            spending_habits=dict(self.spending_habits) if self.spending_habits is not None else None,
            preferred_benefits=list(self.preferred_benefits) if self.preferred_benefits is not None else None,
            existing_cards=self.existing_cards,
            credit_score=CreditScoreBand(self.credit_score) if self.credit_score else None,
            preferred_card_type=self.preferred_card_type,
            max_annual_fee=self.max_annual_fee,
        )


@dataclass(frozen=True)
class RewardEstimateDTO:
    """Reward projection with display strings and rounded raw amounts."""

    annual_spending: str
    reward_rate: str
    estimated_rewards: str
    net_benefit: str
    annual_spending_amount: int
    estimated_rewards_amount: int
    net_benefit_amount: int

    @classmethod
    def from_estimate(cls, estimate: RewardEstimate) -> "RewardEstimateDTO":
        display = describe_estimate(estimate)
        return cls(
            annual_spending=display["annual_spending"],
            reward_rate=display["reward_rate"],
            estimated_rewards=display["estimated_rewards"],
            net_benefit=display["net_benefit"],
            annual_spending_amount=estimate.rounded_annual_spending,
            estimated_rewards_amount=estimate.rounded_estimated_rewards,
            net_benefit_amount=estimate.rounded_net_benefit,
        )


@dataclass(frozen=True)
class RecommendedCardDTO:
    """A recommended card with its score, reasons and reward projection."""

    card: CardDTO
    score: int
    reasons: List[str] = field(default_factory=list)
    estimated_rewards: Union[RewardEstimateDTO, str] = ""

    @classmethod
    def from_recommendation(cls, recommendation: Recommendation, card) -> "RecommendedCardDTO":
        estimate = recommendation.estimated_rewards
        if isinstance(estimate, RewardEstimate):
            rewards = RewardEstimateDTO.from_estimate(estimate)
        else:
            rewards = describe_estimate(estimate)

        return cls(
            card=CardDTO.from_entity(card),
            score=recommendation.score,
            reasons=list(recommendation.reasons),
            estimated_rewards=rewards,
        )


@dataclass(frozen=True)
class RecommendationResponse:
    """Response data for a recommendation run."""

    recommendations: List[RecommendedCardDTO]
    total_eligible: int


@dataclass(frozen=True)
class ComparisonRequest:
    """Input data for comparing catalog cards side by side."""

    card_ids: List[int]

    def validate(self) -> List[str]:
        errors = []

        if len(set(self.card_ids or [])) < 2:
            errors.append("At least 2 card IDs are required for comparison")

        return errors
