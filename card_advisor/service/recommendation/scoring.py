"""
Card Scoring for the Card Advisor engine.

This module assigns each eligible card an additive desirability score for a
given user profile. Every card starts at the base score and collects
independent bonuses:

- Reward type: the card's reward type is one of the preferred benefits
- Perk keywords: each preferred benefit found in the card's perks text
- Spend categories: heavy monthly spend in a category the card targets
- Fee affordability: the annual fee is a small share of the fee budget
- Income headroom: the user's income comfortably exceeds the card's minimum
- Credit band: the card's required score sits inside the user's band

No bonus is negative, so the base score is a floor. There is no cap.
The reward type and perk keyword bonuses can both fire for the same
benefit; they are cumulative.
"""

from typing import Dict, List, Sequence, Tuple

from .models import CardProfile, CreditScoreBand, ScoredCard, UserProfile
from .settings import RecommendationSettings, recommendation_settings

# Inclusive card score range that earns the credit band bonus
SCORING_SCORE_RANGES: Dict[CreditScoreBand, Tuple[int, int]] = {
    CreditScoreBand.EXCELLENT: (750, 900),
    CreditScoreBand.GOOD: (700, 749),
    CreditScoreBand.FAIR: (650, 699),
    CreditScoreBand.POOR: (300, 649),
}


def normalize_benefit(benefit: str) -> str:
    """Turn a benefit tag like "travel_points" into "travel points"."""
    return benefit.replace("_", " ").lower()


def score_reward_type(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """Bonus when the card's reward type is an exact preferred benefit."""
    if profile.preferred_benefits and card.reward_type in profile.preferred_benefits:
        return settings.reward_type_bonus
    return 0


def score_perk_keywords(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """
    Bonus for every preferred benefit mentioned in the card's perks.

    Matching is a case-insensitive substring test after turning underscores
    into spaces. Each entry in the preference list is counted separately.
    """
    if not profile.preferred_benefits:
        return 0

    perks = card.perks.lower()
    matches = sum(
        1 for benefit in profile.preferred_benefits
        if normalize_benefit(benefit) in perks
    )
    return matches * settings.perk_keyword_bonus


def score_spending_categories(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """
    Bonus for each spend rule whose threshold is exceeded and whose card
    category matches this card.

    Only applies when spending habits are present and sum to more than 0.
    """
    if not profile.has_spending_data:
        return 0

    points = 0
    for spending_key, card_category, threshold in settings.category_rules:
        if profile.monthly_spend(spending_key) > threshold and card.category == card_category:
            points += settings.category_bonus
    return points


def score_fee_affordability(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """Bonus for cards whose annual fee is a small share of the fee budget."""
    if profile.max_annual_fee is None or profile.max_annual_fee <= 0:
        return 0

    fee_ratio = card.annual_fee / profile.max_annual_fee
    if fee_ratio <= settings.fee_ratio_low:
        return settings.fee_low_bonus
    elif fee_ratio <= settings.fee_ratio_moderate:
        return settings.fee_moderate_bonus
    else:
        return 0


def score_income_headroom(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """Bonus for cards whose minimum income is well below the user's income."""
    if profile.monthly_income is None or card.min_income <= 0:
        return 0

    income_ratio = profile.monthly_income / card.min_income
    if income_ratio >= settings.income_ratio_high:
        return settings.income_high_bonus
    elif income_ratio >= settings.income_ratio_moderate:
        return settings.income_moderate_bonus
    else:
        return 0


def score_credit_band(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """Bonus when the card targets the user's credit band."""
    band = profile.credit_band
    if band is None:
        return 0

    lowest, highest = SCORING_SCORE_RANGES[band]
    if lowest <= card.credit_score <= highest:
        return settings.credit_band_bonus
    return 0


def score_card(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> int:
    """
    Calculate the total desirability score of a card for a profile.

    Args:
        card: Eligible catalog card
        profile: User profile
        settings: Recommendation settings (uses defaults if not provided)

    Returns:
        Integer score, never below settings.base_score
    """
    return (
        settings.base_score
        + score_reward_type(card, profile, settings)
        + score_perk_keywords(card, profile, settings)
        + score_spending_categories(card, profile, settings)
        + score_fee_affordability(card, profile, settings)
        + score_income_headroom(card, profile, settings)
        + score_credit_band(card, profile, settings)
    )


def score_cards(
    cards: Sequence[CardProfile],
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> List[ScoredCard]:
    """Score every card, keeping the input order."""
    return [ScoredCard(card=card, score=score_card(card, profile, settings)) for card in cards]
