"""
Reward Estimation for the Card Advisor engine.

Projects a card's annual reward value from the user's declared monthly
spending:

    annual_spending   = 12 * total monthly spending
    estimated_rewards = annual_spending * rate / 100
    net_benefit       = estimated_rewards - annual_fee

The rate is the first number found in the card's free-text reward rate
("Up to 10% on dining, 1% other" -> 10). A rate string without any number
is read as 0 rather than failing the request.
"""

import re
from typing import Dict, Union

from .models import (
    NO_SPENDING_DATA,
    NO_SPENDING_HABITS,
    CardProfile,
    RewardEstimate,
    RewardEstimateResult,
    UserProfile,
    round_half_up,
)
from .settings import RecommendationSettings, recommendation_settings

MONTHS_PER_YEAR = 12

_RATE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)")


def parse_reward_rate(reward_rate: str) -> float:
    """
    Extract the leading percentage from a reward rate description.

    Args:
        reward_rate: Free text such as "2.5% on dining"

    Returns:
        The first decimal number in the text, or 0.0 if there is none
    """
    match = _RATE_PATTERN.search(reward_rate or "")
    if match is None:
        return 0.0
    return float(match.group(1))


def format_currency(
    amount: float,
    settings: RecommendationSettings = recommendation_settings,
) -> str:
    """Format an amount as whole currency units with thousands separators."""
    return f"{settings.currency_symbol}{round_half_up(amount):,}"


def estimate_rewards(
    card: CardProfile,
    profile: UserProfile,
) -> RewardEstimateResult:
    """
    Estimate the yearly rewards a card would earn for this profile.

    Args:
        card: Catalog card
        profile: User profile

    Returns:
        RewardEstimate, or an InsufficientData sentinel when spending habits
        are missing or add up to nothing
    """
    if profile.spending_habits is None:
        return NO_SPENDING_HABITS

    total_spending = profile.total_monthly_spending
    if total_spending <= 0:
        return NO_SPENDING_DATA

    rate_percent = parse_reward_rate(card.reward_rate)
    annual_spending = total_spending * MONTHS_PER_YEAR
    estimated_rewards = annual_spending * (rate_percent / 100)

    return RewardEstimate(
        annual_spending=annual_spending,
        reward_rate=card.reward_rate,
        rate_percent=rate_percent,
        estimated_rewards=estimated_rewards,
        net_benefit=estimated_rewards - card.annual_fee,
    )


def describe_estimate(
    estimate: RewardEstimateResult,
    settings: RecommendationSettings = recommendation_settings,
) -> Union[Dict[str, str], str]:
    """
    Render an estimate for display.

    Amounts are rounded to whole units and prefixed with the currency symbol.
    The insufficient-data sentinel renders as its message.
    """
    if not isinstance(estimate, RewardEstimate):
        return estimate.reason

    return {
        "annual_spending": format_currency(estimate.annual_spending, settings),
        "reward_rate": estimate.reward_rate,
        "estimated_rewards": format_currency(estimate.estimated_rewards, settings),
        "net_benefit": format_currency(estimate.net_benefit, settings),
    }
