"""Domain Entities - Core business objects."""

from .card import CreditCard, CardCategory, RewardType

__all__ = [
    "CreditCard",
    "CardCategory",
    "RewardType",
]
