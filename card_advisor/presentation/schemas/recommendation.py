"""Recommendation-related Pydantic schemas."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, field_validator

from card_advisor.domain.entities import CardCategory
from card_advisor.service.recommendation import CreditScoreBand

from .card import CardSchema


class UserProfileRequestSchema(BaseModel):
    """Schema for POST /v1/recommendations/personalized request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "monthly_income": 50000,
                    "spending_habits": {"fuel": 4000, "dining": 2500, "groceries": 6000},
                    "preferred_benefits": ["cashback", "lounge_access"],
                    "credit_score": "good",
                    "max_annual_fee": 1000,
                }
            ]
        }
    )

    monthly_income: Optional[int] = Field(
        None,
        ge=0,
        description="Monthly income",
        examples=[50000],
    )
    spending_habits: Optional[dict[str, Optional[NonNegativeFloat]]] = Field(
        None,
        description="Monthly spend by category (fuel, travel, groceries, dining, shopping)",
        examples=[{"fuel": 4000, "dining": 2500}],
    )
    preferred_benefits: Optional[list[str]] = Field(
        None,
        description="Benefit tags such as cashback or travel_points",
        examples=[["cashback"]],
    )
    existing_cards: Optional[str] = Field(
        None,
        description="Cards the user already holds (informational)",
    )
    credit_score: Optional[CreditScoreBand] = Field(
        None,
        description="Self-reported credit score band",
        examples=["good"],
    )
    preferred_card_type: Optional[CardCategory] = Field(
        None,
        description="Preferred card category (informational)",
    )
    max_annual_fee: Optional[int] = Field(
        None,
        ge=0,
        description="Highest annual fee the user will pay",
        examples=[1000],
    )
    limit: Optional[int] = Field(
        None,
        ge=1,
        le=20,
        description="Maximum number of recommendations (default 5)",
    )

    @field_validator("preferred_benefits")
    @classmethod
    def strip_benefits(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        """Drop blank benefit tags."""
        if v is None:
            return v
        return [benefit.strip() for benefit in v if benefit.strip()]


class RewardEstimateSchema(BaseModel):
    """Schema for a projected annual reward value."""

    annual_spending: str = Field(..., examples=["₹150,000"])
    reward_rate: str = Field(..., examples=["5% on Amazon for Prime members, 1% on other spends"])
    estimated_rewards: str = Field(..., examples=["₹7,500"])
    net_benefit: str = Field(..., examples=["₹7,500"])
    annual_spending_amount: int = Field(..., description="Annual spending, whole units")
    estimated_rewards_amount: int = Field(..., description="Estimated rewards, whole units")
    net_benefit_amount: int = Field(..., description="Rewards minus annual fee, whole units")


class RecommendedCardSchema(CardSchema):
    """Schema for a recommended card."""

    score: int = Field(..., ge=0, description="Desirability score", examples=[95])
    reasons: list[str] = Field(
        ...,
        description="Why the card was recommended",
        examples=[["Matches your preferred cashback rewards."]],
    )
    estimated_rewards: Union[RewardEstimateSchema, str] = Field(
        ...,
        description="Reward projection, or a message when spending data is missing",
    )


class RecommendationsSchema(BaseModel):
    """Ranked recommendations and the eligible catalog size."""

    recommendations: list[RecommendedCardSchema] = Field(
        ...,
        description="Recommended cards, highest score first",
    )
    total_eligible: int = Field(
        ...,
        ge=0,
        description="Number of catalog cards the user is eligible for",
    )


class RecommendationResponseSchema(BaseModel):
    """Schema for POST /v1/recommendations/personalized response body."""

    success: bool = Field(True, description="Always true for successful responses")
    recommendations: RecommendationsSchema


class ComparisonRequestSchema(BaseModel):
    """Schema for POST /v1/recommendations/compare request body."""

    card_ids: list[int] = Field(
        ...,
        description="IDs of the cards to compare (at least 2)",
        examples=[[1, 4]],
    )


class ComparisonResponseSchema(BaseModel):
    """Schema for POST /v1/recommendations/compare response body."""

    success: bool = Field(True, description="Always true for successful responses")
    comparison: list[CardSchema] = Field(..., description="Compared cards ordered by name")
