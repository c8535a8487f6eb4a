"""
Recommendation Engine for the Card Advisor service.

This module orchestrates the complete recommendation process:
1. Filter the catalog down to eligible cards
2. Score every eligible card against the profile
3. Rank by score and keep the top N
4. Attach reasons and a reward estimate to each kept card

This is the main entry point for the recommendation module. It is a pure
function of its inputs: the catalog snapshot is passed in on every call,
nothing is cached between calls and no input is mutated.
"""

from typing import Optional, Sequence

from .eligibility import filter_eligible
from .explanation import explain_card
from .models import CardProfile, Recommendation, RecommendationResult, UserProfile
from .ranking import rank_cards
from .rewards import estimate_rewards
from .scoring import score_cards
from .settings import RecommendationSettings, recommendation_settings


def generate_recommendations(
    profile: UserProfile,
    catalog: Sequence[CardProfile],
    limit: Optional[int] = None,
    settings: RecommendationSettings = recommendation_settings,
) -> RecommendationResult:
    """
    Produce a ranked, explained shortlist of cards for a user.

    Args:
        profile: User profile (any field may be absent)
        catalog: Catalog snapshot, name ascending
        limit: Maximum recommendations (settings.default_limit if None)
        settings: Recommendation settings (uses defaults if not provided)

    Returns:
        RecommendationResult with the annotated top cards and the number
        of eligible cards
    """
    eligible = filter_eligible(catalog, profile)
    scored = score_cards(eligible, profile, settings)
    ranked = rank_cards(scored, limit, settings)

    recommendations = [
        Recommendation(
            card=entry.card,
            score=entry.score,
            reasons=explain_card(entry.card, profile, settings),
            estimated_rewards=estimate_rewards(entry.card, profile),
        )
        for entry in ranked.cards
    ]

    return RecommendationResult(
        recommendations=recommendations,
        total_eligible=ranked.total_eligible,
    )
