"""Card service - handles catalog browsing use cases."""

from typing import List

import structlog

from card_advisor.application.dto import CardDTO
from card_advisor.domain.entities import CardCategory
from card_advisor.domain.exceptions import CardNotFoundException
from card_advisor.domain.interfaces import CardRepository

logger = structlog.get_logger(__name__)


class CardService:
    """
    Application service for catalog use cases.

    Handles listing, lookup, category filtering and search.
    """

    def __init__(self, card_repository: CardRepository):
        self._card_repo = card_repository

    async def list_cards(self) -> List[CardDTO]:
        """Return the whole catalog, ordered by name."""
        cards = await self._card_repo.list_all()
        logger.info("cards_listed", count=len(cards))
        return [CardDTO.from_entity(card) for card in cards]

    async def get_card(self, card_id: int) -> CardDTO:
        """
        Retrieve a card by ID.

        Args:
            card_id: The card's identifier

        Returns:
            The card

        Raises:
            CardNotFoundException: If card not found
        """
        card = await self._card_repo.get_by_id(card_id)

        if card is None:
            logger.warning("card_not_found", card_id=card_id)
            raise CardNotFoundException(card_id)

        return CardDTO.from_entity(card)

    async def list_by_category(self, category: CardCategory) -> List[CardDTO]:
        """Return the cards in a category, ordered by name."""
        cards = await self._card_repo.list_by_category(category)
        logger.info("cards_listed_by_category", category=category.value, count=len(cards))
        return [CardDTO.from_entity(card) for card in cards]

    async def search(self, query: str) -> List[CardDTO]:
        """Search cards by name, issuer or reward type."""
        cards = await self._card_repo.search(query)
        logger.info("cards_searched", query=query, count=len(cards))
        return [CardDTO.from_entity(card) for card in cards]
