"""
Data models for card recommendations.

These models represent the data structures used throughout the recommendation
pipeline, from the catalog snapshot and the user's declared profile to the
ranked, annotated recommendations returned to the caller.

Catalog records are never mutated: every derived value (score, reasons,
reward estimate) lives on a separate wrapper created fresh per request.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union


class CreditScoreBand(str, Enum):
    """Self-reported credit score band."""
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class CardProfile:
    """
    A single credit card from the catalog, as seen by the engine.

    Attributes:
        id: Catalog identifier
        name: Card name
        issuer: Issuing bank
        joining_fee: One-time joining fee
        annual_fee: Recurring annual fee
        reward_type: One of cashback, points, miles, rewards
        reward_rate: Free text starting with a percentage, e.g. "2.5% on dining"
        eligibility_criteria: Informational only
        perks: Free text scanned for benefit keywords
        min_income: Minimum monthly income the issuer asks for
        credit_score: Minimum credit score the issuer typically requires
        category: One of travel, shopping, fuel, dining, general
    """
    id: int
    name: str
    issuer: str
    joining_fee: float
    annual_fee: float
    reward_type: str
    reward_rate: str
    eligibility_criteria: str = ""
    perks: str = ""
    min_income: int = 0
    credit_score: int = 0
    category: str = "general"


@dataclass(frozen=True)
class UserProfile:
    """
    The user's declared financial profile.

    Every field is optional. An absent field means "no preference" and the
    rule that depends on it is skipped; it is never read as zero.
    """
    monthly_income: Optional[int] = None
    spending_habits: Optional[Dict[str, Optional[float]]] = None
    preferred_benefits: Optional[List[str]] = None
    existing_cards: Optional[str] = None
    credit_score: Optional[CreditScoreBand] = None
    preferred_card_type: Optional[str] = None
    max_annual_fee: Optional[int] = None

    @property
    def total_monthly_spending(self) -> float:
        """Sum of all declared monthly spending (missing values count as 0)."""
        if not self.spending_habits:
            return 0
        return sum(value or 0 for value in self.spending_habits.values())

    @property
    def has_spending_data(self) -> bool:
        return self.spending_habits is not None and self.total_monthly_spending > 0

    def monthly_spend(self, category: str) -> float:
        if not self.spending_habits:
            return 0
        return self.spending_habits.get(category) or 0

    @property
    def credit_band(self) -> Optional[CreditScoreBand]:
        """The declared band, or None when absent or unknown."""
        if self.credit_score is None:
            return None
        band = CreditScoreBand(self.credit_score)
        if band == CreditScoreBand.UNKNOWN:
            return None
        return band


@dataclass(frozen=True)
class ScoredCard:
    """An eligible card paired with its desirability score."""
    card: CardProfile
    score: int


@dataclass(frozen=True)
class RankedCards:
    """
    Output of the ranker.

    Attributes:
        cards: Top cards, highest score first
        total_eligible: Number of cards that were ranked before truncation
    """
    cards: List[ScoredCard]
    total_eligible: int


@dataclass(frozen=True)
class InsufficientData:
    """Returned by the reward estimator when there is no spending to project."""
    reason: str


NO_SPENDING_HABITS = InsufficientData("Unable to calculate without spending data")
NO_SPENDING_DATA = InsufficientData("No spending data available")


@dataclass(frozen=True)
class RewardEstimate:
    """
    Projected annual reward value for a card.

    Values are kept unrounded; use the rounded_* properties for display.
    """
    annual_spending: float
    reward_rate: str
    rate_percent: float
    estimated_rewards: float
    net_benefit: float

    @property
    def rounded_annual_spending(self) -> int:
        return round_half_up(self.annual_spending)

    @property
    def rounded_estimated_rewards(self) -> int:
        return round_half_up(self.estimated_rewards)

    @property
    def rounded_net_benefit(self) -> int:
        return round_half_up(self.net_benefit)


RewardEstimateResult = Union[RewardEstimate, InsufficientData]


@dataclass(frozen=True)
class Recommendation:
    """A ranked card with its explanation and reward projection."""
    card: CardProfile
    score: int
    reasons: List[str] = field(default_factory=list)
    estimated_rewards: RewardEstimateResult = NO_SPENDING_HABITS


@dataclass(frozen=True)
class RecommendationResult:
    """
    The final result of a recommendation run.

    Attributes:
        recommendations: Annotated top cards, highest score first
        total_eligible: Number of catalog cards that passed eligibility
    """
    recommendations: List[Recommendation]
    total_eligible: int


def round_half_up(value: float) -> int:
    """Round to the nearest whole unit, halves rounding towards +infinity."""
    return int(math.floor(value + 0.5))
