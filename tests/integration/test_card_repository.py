"""
Integration tests for catalog persistence.

These tests verify:
1. Seeding the sample catalog
2. Repository reads (ordering, lookups, category, search)
3. Round-tripping fees and enums through the database
"""

from decimal import Decimal

import pytest

from card_advisor.domain.entities import CardCategory, CreditCard, RewardType
from card_advisor.domain.exceptions import CatalogUnavailableException
from card_advisor.infrastructure.database.seed import CATALOG_SEED, seed_catalog
from card_advisor.infrastructure.repositories import PostgresCardRepository


# =============================================================================
# Seeding Tests
# =============================================================================

class TestSeedCatalog:
    """Tests for seed_catalog."""

    @pytest.mark.asyncio
    async def test_seed_empty_catalog(self, card_repository: PostgresCardRepository):
        inserted = await seed_catalog(card_repository)

        assert inserted == len(CATALOG_SEED)
        assert await card_repository.count() == len(CATALOG_SEED)

    @pytest.mark.asyncio
    async def test_seed_is_skipped_when_catalog_has_cards(
        self,
        seeded_repository: PostgresCardRepository,
    ):
        inserted = await seed_catalog(seeded_repository)

        assert inserted == 0
        assert await seeded_repository.count() == len(CATALOG_SEED)


# =============================================================================
# Read Tests
# =============================================================================

class TestCardRepository:
    """Tests for PostgresCardRepository reads."""

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_name(self, seeded_repository: PostgresCardRepository):
        cards = await seeded_repository.list_all()

        names = [card.name for card in cards]
        assert names == sorted(names)

    @pytest.mark.asyncio
    async def test_get_by_id(self, seeded_repository: PostgresCardRepository):
        card = await seeded_repository.get_by_id(3)

        assert card is not None
        assert card.name == "BPCL SBI Card Octane"
        assert card.annual_fee == Decimal("1499")
        assert card.reward_type is RewardType.REWARDS
        assert card.category is CardCategory.FUEL

    @pytest.mark.asyncio
    async def test_get_by_id_missing(self, seeded_repository: PostgresCardRepository):
        assert await seeded_repository.get_by_id(999) is None

    @pytest.mark.asyncio
    async def test_get_by_ids_skips_missing(self, seeded_repository: PostgresCardRepository):
        cards = await seeded_repository.get_by_ids([10, 2, 999])

        assert [card.id for card in cards] == [2, 10]

    @pytest.mark.asyncio
    async def test_get_by_ids_empty(self, seeded_repository: PostgresCardRepository):
        assert await seeded_repository.get_by_ids([]) == []

    @pytest.mark.asyncio
    async def test_list_by_category(self, seeded_repository: PostgresCardRepository):
        cards = await seeded_repository.list_by_category(CardCategory.TRAVEL)

        assert [card.name for card in cards] == [
            "Axis Bank Atlas Credit Card",
            "HDFC Diners Club Black",
        ]

    @pytest.mark.asyncio
    async def test_search_matches_name(self, seeded_repository: PostgresCardRepository):
        cards = await seeded_repository.search("  swiggy ")

        assert [card.name for card in cards] == ["HDFC Swiggy Credit Card"]

    @pytest.mark.asyncio
    async def test_search_escapes_wildcards(self, seeded_repository: PostgresCardRepository):
        assert await seeded_repository.search("_") == []


# =============================================================================
# Write Tests
# =============================================================================

class TestAddCards:
    """Tests for PostgresCardRepository.add_many."""

    @pytest.mark.asyncio
    async def test_add_many_assigns_ids(self, card_repository: PostgresCardRepository):
        card = CreditCard(
            name="Test Platinum",
            issuer="Test Bank",
            reward_type=RewardType.POINTS,
            reward_rate="2 points per Rs 100",
            eligibility_criteria="Age 21+",
            perks="Lounge access",
            joining_fee=Decimal("999.50"),
            annual_fee=Decimal("999.50"),
            min_income=40000,
            credit_score=730,
            category=CardCategory.GENERAL,
            affiliate_link="https://example.com/apply",
        )

        saved = await card_repository.add_many([card])

        assert saved[0].id is not None

        loaded = await card_repository.get_by_id(saved[0].id)
        assert loaded.annual_fee == Decimal("999.50")
        assert loaded.affiliate_link == "https://example.com/apply"
        assert loaded.category is CardCategory.GENERAL


# =============================================================================
# Failure Tests
# =============================================================================

class TestCatalogFailures:
    """Tests for database failures surfacing as domain errors."""

    @pytest.mark.asyncio
    async def test_read_failure_raises_catalog_unavailable(
        self,
        failing_repository: PostgresCardRepository,
    ):
        with pytest.raises(CatalogUnavailableException):
            await failing_repository.list_all()

    @pytest.mark.asyncio
    async def test_count_failure_raises_catalog_unavailable(
        self,
        failing_repository: PostgresCardRepository,
    ):
        with pytest.raises(CatalogUnavailableException):
            await failing_repository.count()
