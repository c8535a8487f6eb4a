"""
Ranking for the Card Advisor engine.

Scored cards are ordered by score, highest first. Python's sort is stable,
so cards with equal scores keep their catalog order (name ascending), which
makes the output deterministic for identical inputs.
"""

from typing import Optional, Sequence

from .models import RankedCards, ScoredCard
from .settings import RecommendationSettings, recommendation_settings


def rank_cards(
    scored: Sequence[ScoredCard],
    limit: Optional[int] = None,
    settings: RecommendationSettings = recommendation_settings,
) -> RankedCards:
    """
    Order scored cards and keep the top ones.

    Args:
        scored: Scored cards in catalog order
        limit: Maximum number of cards to keep (settings.default_limit if None)
        settings: Recommendation settings (uses defaults if not provided)

    Returns:
        RankedCards with the truncated list and the pre-truncation count

    Raises:
        ValueError: If limit is negative
    """
    if limit is None:
        limit = settings.default_limit
    if limit < 0:
        raise ValueError(f"limit cannot be negative: {limit}")

    ordered = sorted(scored, key=lambda s: s.score, reverse=True)

    return RankedCards(cards=ordered[:limit], total_eligible=len(scored))
