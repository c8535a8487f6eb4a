"""PostgreSQL implementation of CardRepository."""

from decimal import Decimal
from typing import List, Optional, Sequence

import structlog
from sqlalchemy import func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from card_advisor.core.metrics import record_catalog_fetch_failure
from card_advisor.domain.entities import CardCategory, CreditCard, RewardType
from card_advisor.domain.exceptions import CatalogUnavailableException
from card_advisor.domain.interfaces import CardRepository
from card_advisor.infrastructure.database.models import CreditCardModel

logger = structlog.get_logger(__name__)


class PostgresCardRepository(CardRepository):
    """
    PostgreSQL implementation of the card catalog repository.

    Uses SQLAlchemy async session for database operations. Read failures
    are reported as CatalogUnavailableException.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def list_all(self) -> List[CreditCard]:
        """Retrieve every card, ordered by name."""
        stmt = select(CreditCardModel).order_by(CreditCardModel.name.asc())
        return await self._fetch(stmt, operation="list_all")

    async def get_by_id(self, card_id: int) -> Optional[CreditCard]:
        """Retrieve a card by ID."""
        stmt = select(CreditCardModel).where(CreditCardModel.id == card_id)
        cards = await self._fetch(stmt, operation="get_by_id")
        return cards[0] if cards else None

    async def get_by_ids(self, card_ids: Sequence[int]) -> List[CreditCard]:
        """Retrieve the existing cards among the given IDs, ordered by name."""
        if not card_ids:
            return []

        stmt = (
            select(CreditCardModel)
            .where(CreditCardModel.id.in_(list(card_ids)))
            .order_by(CreditCardModel.name.asc())
        )
        return await self._fetch(stmt, operation="get_by_ids")

    async def list_by_category(self, category: CardCategory) -> List[CreditCard]:
        """Retrieve the cards in a category, ordered by name."""
        stmt = (
            select(CreditCardModel)
            .where(CreditCardModel.category == CardCategory(category).value)
            .order_by(CreditCardModel.name.asc())
        )
        return await self._fetch(stmt, operation="list_by_category")

    async def search(self, query: str) -> List[CreditCard]:
        """Case-insensitive substring search over name, issuer and reward type."""
        needle = query.strip().lower()
        stmt = (
            select(CreditCardModel)
            .where(
                or_(
                    func.lower(CreditCardModel.name).contains(needle, autoescape=True),
                    func.lower(CreditCardModel.issuer).contains(needle, autoescape=True),
                    func.lower(CreditCardModel.reward_type).contains(needle, autoescape=True),
                )
            )
            .order_by(CreditCardModel.name.asc())
        )
        return await self._fetch(stmt, operation="search")

    async def count(self) -> int:
        """Return the number of cards in the catalog."""
        try:
            result = await self._session.execute(
                select(func.count()).select_from(CreditCardModel)
            )
        except SQLAlchemyError as e:
            raise self._unavailable("count", e)
        return result.scalar_one()

    async def add_many(self, cards: Sequence[CreditCard]) -> List[CreditCard]:
        """Persist new cards and populate their generated IDs."""
        models = [self._to_model(card) for card in cards]

        self._session.add_all(models)
        await self._session.flush()

        for card, model in zip(cards, models):
            card.id = model.id

        return list(cards)

    async def _fetch(self, stmt, operation: str) -> List[CreditCard]:
        """Run a select and convert the rows to entities."""
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise self._unavailable(operation, e)

        return [self._to_entity(model) for model in result.scalars().all()]

    def _unavailable(self, operation: str, error: Exception) -> CatalogUnavailableException:
        record_catalog_fetch_failure(operation)
        logger.error(
            "catalog_query_failed",
            operation=operation,
            error=str(error),
            error_type=type(error).__name__,
        )
        return CatalogUnavailableException()

    def _to_model(self, card: CreditCard) -> CreditCardModel:
        """Convert domain entity to database model."""
        return CreditCardModel(
            id=card.id,
            name=card.name,
            issuer=card.issuer,
            joining_fee=card.joining_fee,
            annual_fee=card.annual_fee,
            reward_type=RewardType(card.reward_type).value,
            reward_rate=card.reward_rate,
            eligibility_criteria=card.eligibility_criteria,
            perks=card.perks,
            affiliate_link=card.affiliate_link,
            image_url=card.image_url,
            min_income=card.min_income,
            credit_score=card.credit_score,
            category=CardCategory(card.category).value,
            created_at=card.created_at,
            updated_at=card.updated_at,
        )

    def _to_entity(self, model: CreditCardModel) -> CreditCard:
        """Convert database model to domain entity."""
        return CreditCard(
            id=model.id,
            name=model.name,
            issuer=model.issuer,
            joining_fee=Decimal(model.joining_fee or 0),
            annual_fee=Decimal(model.annual_fee or 0),
            reward_type=RewardType(model.reward_type),
            reward_rate=model.reward_rate,
            eligibility_criteria=model.eligibility_criteria,
            perks=model.perks,
            affiliate_link=model.affiliate_link,
            image_url=model.image_url,
            min_income=model.min_income,
            credit_score=model.credit_score,
            category=CardCategory(model.category),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
