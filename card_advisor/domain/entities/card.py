"""Credit card catalog entity."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class RewardType(str, Enum):
    """How a card pays out rewards."""

    CASHBACK = "cashback"
    POINTS = "points"
    MILES = "miles"
    REWARDS = "rewards"


class CardCategory(str, Enum):
    """Spending category a card is built for."""

    TRAVEL = "travel"
    SHOPPING = "shopping"
    FUEL = "fuel"
    DINING = "dining"
    GENERAL = "general"


@dataclass
class CreditCard:
    """
    A credit card product in the catalog.

    Catalog records are maintained by an external process; the service only
    reads them.
    """

    name: str
    issuer: str
    reward_type: RewardType
    reward_rate: str
    eligibility_criteria: str
    perks: str
    joining_fee: Decimal = Decimal("0")
    annual_fee: Decimal = Decimal("0")
    min_income: int = 0
    credit_score: int = 0
    category: CardCategory = CardCategory.GENERAL
    affiliate_link: Optional[str] = None
    image_url: Optional[str] = None
    id: Optional[int] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

