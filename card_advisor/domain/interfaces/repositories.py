"""Repository interfaces for catalog access."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from card_advisor.domain.entities import CardCategory, CreditCard


class CardRepository(ABC):
    """
    Abstract repository for the credit card catalog.

    Listing methods return cards ordered by name ascending; the
    recommendation engine relies on that order to break score ties.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def list_all(self) -> List[CreditCard]:
        """
        Retrieve the whole catalog.

        Returns:
            All cards, ordered by name ascending

        Raises:
            CatalogUnavailableException: If the store cannot be read
        """
        ...

    @abstractmethod
    async def get_by_id(self, card_id: int) -> Optional[CreditCard]:
        """
        Retrieve a card by ID.

        Args:
            card_id: The card's identifier

        Returns:
            The card if found, None otherwise
        """
        ...

    @abstractmethod
    async def get_by_ids(self, card_ids: Sequence[int]) -> List[CreditCard]:
        """
        Retrieve several cards at once.

        Args:
            card_ids: Card identifiers

        Returns:
            The cards that exist, ordered by name ascending
        """
        ...

    @abstractmethod
    async def list_by_category(self, category: CardCategory) -> List[CreditCard]:
        """
        Retrieve the cards in a category.

        Args:
            category: Card category

        Returns:
            Matching cards, ordered by name ascending
        """
        ...

    @abstractmethod
    async def search(self, query: str) -> List[CreditCard]:
        """
        Search cards by name, issuer or reward type.

        Args:
            query: Case-insensitive substring

        Returns:
            Matching cards, ordered by name ascending
        """
        ...

    @abstractmethod
    async def count(self) -> int:
        """Return the number of cards in the catalog."""
        ...

    @abstractmethod
    async def add_many(self, cards: Sequence[CreditCard]) -> List[CreditCard]:
        """
        Persist new cards.

        Args:
            cards: Cards without IDs

        Returns:
            The saved cards with generated IDs populated
        """
        ...
