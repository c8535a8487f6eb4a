"""Data transfer objects for catalog operations."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CardDTO:
    """A catalog card as returned to API callers."""

    id: int
    name: str
    issuer: str
    joining_fee: float
    annual_fee: float
    reward_type: str
    reward_rate: str
    eligibility_criteria: str
    perks: str
    affiliate_link: Optional[str]
    image_url: Optional[str]
    min_income: int
    credit_score: int
    category: str

    @classmethod
    def from_entity(cls, card) -> "CardDTO":
        return cls(
            id=card.id,
            name=card.name,
            issuer=card.issuer,
            joining_fee=float(card.joining_fee),
            annual_fee=float(card.annual_fee),
            reward_type=card.reward_type.value,
            reward_rate=card.reward_rate,
            eligibility_criteria=card.eligibility_criteria,
            perks=card.perks,
            affiliate_link=card.affiliate_link,
            image_url=card.image_url,
            min_income=card.min_income,
            credit_score=card.credit_score,
            category=card.category.value,
        )
