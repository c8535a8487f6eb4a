"""Built-in sample catalog used to seed an empty database."""

from decimal import Decimal
from typing import List

import structlog

from card_advisor.domain.entities import CardCategory, CreditCard, RewardType
from card_advisor.domain.interfaces import CardRepository

logger = structlog.get_logger(__name__)

CATALOG_SEED = [
    {
        "name": "Amazon Pay ICICI Credit Card",
        "issuer": "ICICI Bank",
        "joining_fee": 0,
        "annual_fee": 0,
        "reward_type": "cashback",
        "reward_rate": "5% on Amazon for Prime members, 1% on other spends",
        "eligibility_criteria": "Age 18+, salaried or self-employed with regular income",
        "perks": "5% cashback on Amazon shopping, no annual fee, fuel surcharge waiver",
        "min_income": 25000,
        "credit_score": 700,
        "category": "shopping",
    },
    {
        "name": "Axis Bank Atlas Credit Card",
        "issuer": "Axis Bank",
        "joining_fee": 5000,
        "annual_fee": 5000,
        "reward_type": "miles",
        "reward_rate": "5 EDGE Miles per Rs 100 on travel, 2 on other spends",
        "eligibility_criteria": "Age 18-70, annual income above Rs 15 lakh",
        "perks": "Airport lounge access, travel points on flights and hotels, milestone miles",
        "min_income": 125000,
        "credit_score": 760,
        "category": "travel",
    },
    {
        "name": "BPCL SBI Card Octane",
        "issuer": "SBI Card",
        "joining_fee": 1499,
        "annual_fee": 1499,
        "reward_type": "rewards",
        "reward_rate": "7.25% value back on BPCL fuel, 1 point per Rs 100 elsewhere",
        "eligibility_criteria": "Age 21-60, salaried or self-employed",
        "perks": "Fuel surcharge waiver, 25 reward points per Rs 100 at BPCL pumps, lounge access",
        "min_income": 30000,
        "credit_score": 720,
        "category": "fuel",
    },
    {
        "name": "Flipkart Axis Bank Credit Card",
        "issuer": "Axis Bank",
        "joining_fee": 500,
        "annual_fee": 500,
        "reward_type": "cashback",
        "reward_rate": "5% on Flipkart, 4% on preferred partners, 1% other",
        "eligibility_criteria": "Age 18-70, Indian resident",
        "perks": "Unlimited cashback, welcome vouchers, dining discounts at partner restaurants",
        "min_income": 15000,
        "credit_score": 680,
        "category": "shopping",
    },
    {
        "name": "HDFC Diners Club Black",
        "issuer": "HDFC Bank",
        "joining_fee": 10000,
        "annual_fee": 10000,
        "reward_type": "points",
        "reward_rate": "3.3% reward rate, up to 10X on SmartBuy",
        "eligibility_criteria": "Salaried with net monthly income above Rs 1.75 lakh",
        "perks": "Unlimited lounge access, golf games, travel points, concierge, dining privileges",
        "min_income": 175000,
        "credit_score": 780,
        "category": "travel",
    },
    {
        "name": "HDFC Swiggy Credit Card",
        "issuer": "HDFC Bank",
        "joining_fee": 500,
        "annual_fee": 500,
        "reward_type": "cashback",
        "reward_rate": "10% on Swiggy, 5% on online spends, 1% other",
        "eligibility_criteria": "Age 21-60, salaried or self-employed",
        "perks": "Cashback on food delivery and dining out, complimentary Swiggy One membership",
        "min_income": 25000,
        "credit_score": 710,
        "category": "dining",
    },
    {
        "name": "IDFC FIRST Millennia Credit Card",
        "issuer": "IDFC FIRST Bank",
        "joining_fee": 0,
        "annual_fee": 0,
        "reward_type": "points",
        "reward_rate": "1.5% on online spends, 10X points above Rs 20,000",
        "eligibility_criteria": "Age 18+, minimum income Rs 25,000 per month",
        "perks": "Lifetime free, movie ticket discount, railway lounge access, fuel surcharge waiver",
        "min_income": 25000,
        "credit_score": 650,
        "category": "general",
    },
    {
        "name": "Kotak IndianOil Credit Card",
        "issuer": "Kotak Mahindra Bank",
        "joining_fee": 449,
        "annual_fee": 449,
        "reward_type": "rewards",
        "reward_rate": "4% on IndianOil fuel, 2% on dining and groceries",
        "eligibility_criteria": "Age 21-65, resident of India",
        "perks": "Fuel surcharge waiver, reward points on groceries, annual fee waiver on spends",
        "min_income": 20000,
        "credit_score": 660,
        "category": "fuel",
    },
    {
        "name": "SBI SimplyCLICK Credit Card",
        "issuer": "SBI Card",
        "joining_fee": 499,
        "annual_fee": 499,
        "reward_type": "points",
        "reward_rate": "2.5% on partner online sites, 1.25% other online",
        "eligibility_criteria": "Age 21-70, salaried or self-employed",
        "perks": "Welcome gift voucher, e-voucher milestones, 10X points on partner brands",
        "min_income": 20000,
        "credit_score": 640,
        "category": "shopping",
    },
    {
        "name": "Zomato RBL Bank Edition Card",
        "issuer": "RBL Bank",
        "joining_fee": 0,
        "annual_fee": 0,
        "reward_type": "cashback",
        "reward_rate": "Up to 10% on Zomato orders, 1% other",
        "eligibility_criteria": "Age 21-60, steady income",
        "perks": "Dining cashback, complimentary Zomato Gold, welcome benefits",
        "min_income": 15000,
        "credit_score": 620,
        "category": "dining",
    },
]


def build_seed_cards() -> List[CreditCard]:
    """Build catalog entities from the seed data."""
    return [
        CreditCard(
            name=item["name"],
            issuer=item["issuer"],
            joining_fee=Decimal(item["joining_fee"]),
            annual_fee=Decimal(item["annual_fee"]),
            reward_type=RewardType(item["reward_type"]),
            reward_rate=item["reward_rate"],
            eligibility_criteria=item["eligibility_criteria"],
            perks=item["perks"],
            min_income=item["min_income"],
            credit_score=item["credit_score"],
            category=CardCategory(item["category"]),
        )
        for item in CATALOG_SEED
    ]


async def seed_catalog(repository: CardRepository) -> int:
    """
    Insert the sample catalog if the catalog is empty.

    Args:
        repository: Catalog repository bound to an open session

    Returns:
        Number of cards inserted (0 when the catalog already had cards)
    """
    existing = await repository.count()
    if existing > 0:
        logger.info("catalog_seed_skipped", existing_cards=existing)
        return 0

    cards = await repository.add_many(build_seed_cards())
    logger.info("catalog_seeded", cards=len(cards))
    return len(cards)
