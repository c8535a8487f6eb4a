"""
Recommendation Explanations for the Card Advisor engine.

Derives the human-readable reasons a card was recommended, using the same
profile/card pair that was scored. Checks run in a fixed order and each one
can contribute a sentence independently:

1. Reward type matches a preferred benefit
2. Heavy spend in a travel, fuel or dining category the card targets
3. Annual fee comfortably inside the fee budget
4. Income well above the card's minimum

An empty list is a valid explanation.
"""

from typing import Dict, List

from .models import CardProfile, UserProfile
from .rewards import format_currency
from .settings import RecommendationSettings, recommendation_settings

# Spend categories without a template (e.g. groceries) still score but are not explained
SPENDING_REASON_TEMPLATES: Dict[str, str] = {
    "travel": "Great for your travel spending ({amount}/month).",
    "fuel": "Excellent fuel rewards for your spending ({amount}/month).",
    "dining": "Perfect for dining rewards ({amount}/month).",
}


def explain_card(
    card: CardProfile,
    profile: UserProfile,
    settings: RecommendationSettings = recommendation_settings,
) -> List[str]:
    """
    Explain why a card suits the user.

    Args:
        card: Recommended card
        profile: User profile
        settings: Recommendation settings (uses defaults if not provided)

    Returns:
        Ordered list of reason sentences (possibly empty)
    """
    reasons = []

    if profile.preferred_benefits and card.reward_type in profile.preferred_benefits:
        reasons.append(f"Matches your preferred {card.reward_type} rewards.")

    if profile.spending_habits:
        for spending_key, card_category, threshold in settings.category_rules:
            template = SPENDING_REASON_TEMPLATES.get(spending_key)
            if template is None:
                continue
            amount = profile.monthly_spend(spending_key)
            if amount > threshold and card.category == card_category:
                reasons.append(template.format(amount=format_currency(amount, settings)))

    if (profile.max_annual_fee is not None
            and card.annual_fee <= profile.max_annual_fee * settings.explain_fee_ratio):
        reasons.append(
            f"Low annual fee ({format_currency(card.annual_fee, settings)}) within your budget."
        )

    if (profile.monthly_income is not None
            and card.min_income > 0
            and profile.monthly_income >= card.min_income * settings.explain_income_ratio):
        reasons.append("Income requirement well within your range.")

    return reasons
