"""
Eligibility Filter for the Card Advisor engine.

This module narrows the catalog to cards a user could plausibly obtain.
Three gates are applied, each only when the matching profile field is
present:
- Income: the card's minimum income must not exceed the user's income
- Fee budget: the card's annual fee must not exceed the user's maximum
- Credit band: the card's required score must fall in the user's band

Active gates are ANDed. An empty result is a normal outcome, not an error.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .models import CardProfile, CreditScoreBand, UserProfile

# (lowest, highest) required card score per band; None means unbounded
ELIGIBILITY_SCORE_RANGES: Dict[CreditScoreBand, Tuple[Optional[int], Optional[int]]] = {
    CreditScoreBand.EXCELLENT: (750, None),
    CreditScoreBand.GOOD: (700, 749),
    CreditScoreBand.FAIR: (650, 699),
    CreditScoreBand.POOR: (None, 649),
}


def score_in_range(
    credit_score: int,
    score_range: Tuple[Optional[int], Optional[int]],
) -> bool:
    """Check an integer score against an inclusive, possibly open-ended range."""
    lowest, highest = score_range
    if lowest is not None and credit_score < lowest:
        return False
    if highest is not None and credit_score > highest:
        return False
    return True


def is_eligible(card: CardProfile, profile: UserProfile) -> bool:
    """
    Decide whether a single card passes every active eligibility gate.

    Args:
        card: Catalog card
        profile: User profile (any field may be absent)

    Returns:
        True if the card should be scored
    """
    if profile.monthly_income is not None and card.min_income > profile.monthly_income:
        return False

    if profile.max_annual_fee is not None and card.annual_fee > profile.max_annual_fee:
        return False

    band = profile.credit_band
    if band is not None and not score_in_range(card.credit_score, ELIGIBILITY_SCORE_RANGES[band]):
        return False

    return True


def filter_eligible(
    catalog: Sequence[CardProfile],
    profile: UserProfile,
) -> List[CardProfile]:
    """
    Narrow the catalog to the cards the user qualifies for.

    Catalog order is preserved so that the ranker can use it as a tie-break.

    Args:
        catalog: Read-only catalog snapshot, name ascending
        profile: User profile

    Returns:
        Eligible cards in catalog order (possibly empty)
    """
    return [card for card in catalog if is_eligible(card, profile)]
