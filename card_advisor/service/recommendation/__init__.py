"""
Recommendation Module for the Card Advisor engine
"""

from .models import (
    CardProfile,
    CreditScoreBand,
    InsufficientData,
    RankedCards,
    Recommendation,
    RecommendationResult,
    RewardEstimate,
    ScoredCard,
    UserProfile,
)
from .settings import RecommendationSettings, recommendation_settings
from .eligibility import filter_eligible, is_eligible
from .scoring import score_card, score_cards
from .ranking import rank_cards
from .explanation import explain_card
from .rewards import describe_estimate, estimate_rewards, format_currency, parse_reward_rate
from .engine import generate_recommendations

__all__ = [
    # Settings
    "RecommendationSettings",
    "recommendation_settings",
    # Models
    "CardProfile",
    "CreditScoreBand",
    "InsufficientData",
    "RankedCards",
    "Recommendation",
    "RecommendationResult",
    "RewardEstimate",
    "ScoredCard",
    "UserProfile",
    # Eligibility
    "filter_eligible",
    "is_eligible",
    # Scoring
    "score_card",
    "score_cards",
    # Ranking
    "rank_cards",
    # Explanations
    "explain_card",
    # Rewards
    "describe_estimate",
    "estimate_rewards",
    "format_currency",
    "parse_reward_rate",
    # Engine
    "generate_recommendations",
]
