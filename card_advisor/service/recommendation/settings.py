"""
Recommendation Settings for the Card Advisor engine.

This module contains all configurable parameters for eligibility, scoring,
explanations and reward estimation. The defaults reproduce the production
point model; they can be adjusted via environment variables for experiments.

Environment variables use the RECOMMENDATION_ prefix:
    RECOMMENDATION_BASE_SCORE=50
    RECOMMENDATION_CATEGORY_BONUS=15
    RECOMMENDATION_DEFAULT_LIMIT=5

Usage:
    from card_advisor.service.recommendation.settings import recommendation_settings

    # Use default settings (loaded from env)
    limit = recommendation_settings.default_limit

    # Or create custom settings for testing
    custom = RecommendationSettings(category_bonus=25)
"""

import json
from functools import lru_cache
from typing import List, Tuple

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RecommendationSettings(BaseSettings):
    """
    Configurable parameters for the recommendation engine.

    All settings can be overridden via environment variables with the
    RECOMMENDATION_ prefix. Monetary values are whole currency units.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECOMMENDATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Point Model ===
    base_score: int = Field(
        default=50,
        ge=0,
        description="Score every eligible card starts from",
    )
    reward_type_bonus: int = Field(
        default=20,
        ge=0,
        description="Points when the card's reward type is a preferred benefit",
    )
    perk_keyword_bonus: int = Field(
        default=10,
        ge=0,
        description="Points per preferred benefit found in the card's perks",
    )
    category_bonus: int = Field(
        default=15,
        ge=0,
        description="Points per spend category rule the card satisfies",
    )
    credit_band_bonus: int = Field(
        default=10,
        ge=0,
        description="Points when the card's required score sits in the user's band",
    )

    # === Fee Affordability ===
    fee_ratio_low: float = Field(
        default=0.5,
        gt=0.0,
        description="Fee/budget ratio at or below this earns the full fee bonus",
    )
    fee_ratio_moderate: float = Field(
        default=0.8,
        gt=0.0,
        description="Fee/budget ratio at or below this earns the partial fee bonus",
    )
    fee_low_bonus: int = Field(default=10, ge=0)
    fee_moderate_bonus: int = Field(default=5, ge=0)

    # === Income Headroom ===
    income_ratio_high: float = Field(
        default=2.0,
        gt=0.0,
        description="Income/minimum ratio at or above this earns the full income bonus",
    )
    income_ratio_moderate: float = Field(
        default=1.5,
        gt=0.0,
        description="Income/minimum ratio at or above this earns the partial income bonus",
    )
    income_high_bonus: int = Field(default=10, ge=0)
    income_moderate_bonus: int = Field(default=5, ge=0)

    # === Spend Category Rules ===
    # groceries intentionally drives the "shopping" card category
    category_rules_json: str = Field(
        default=(
            '[["travel","travel",5000],["fuel","fuel",3000],'
            '["dining","dining",2000],["groceries","shopping",3000]]'
        ),
        description=(
            "Spend category rules as JSON array: "
            "[[spending_key, card_category, monthly_threshold], ...]"
        ),
    )

    # === Explanations ===
    explain_fee_ratio: float = Field(
        default=0.8,
        gt=0.0,
        description="Fee at or below this share of the budget is called out as low",
    )
    explain_income_ratio: float = Field(
        default=1.5,
        gt=0.0,
        description="Income at or above this multiple of the minimum is called out",
    )

    # === Output ===
    default_limit: int = Field(
        default=5,
        ge=0,
        description="Number of recommendations returned when no limit is given",
    )
    currency_symbol: str = Field(
        default="₹",
        description="Symbol prefixed to formatted amounts",
    )

    @field_validator("category_rules_json")
    @classmethod
    def validate_category_rules_json(cls, v: str) -> str:
        """Validate that the category rules JSON is parseable and well-formed."""
        try:
            rules = json.loads(v)
            if not isinstance(rules, list):
                raise ValueError("Category rules must be a list")
            for rule in rules:
                if not isinstance(rule, list) or len(rule) != 3:
                    raise ValueError(
                        "Each rule must be [spending_key, card_category, threshold]"
                    )
                spending_key, card_category, threshold = rule
                if not isinstance(spending_key, str) or not isinstance(card_category, str):
                    raise ValueError("Spending key and card category must be strings")
                if not isinstance(threshold, (int, float)) or isinstance(threshold, bool):
                    raise ValueError(f"Threshold must be a number: {threshold!r}")
                if threshold < 0:
                    raise ValueError(f"Threshold cannot be negative: {threshold}")
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON: {e}")
        return v

    @property
    def category_rules(self) -> List[Tuple[str, str, float]]:
        """Spend category rules as (spending_key, card_category, threshold)."""
        rules = json.loads(self.category_rules_json)
        return [tuple(rule) for rule in rules]


@lru_cache
def get_recommendation_settings() -> RecommendationSettings:
    """Get cached recommendation settings instance."""
    return RecommendationSettings()


recommendation_settings = get_recommendation_settings()
