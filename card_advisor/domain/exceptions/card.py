"""Catalog-related domain exceptions."""

from .base import DomainException


class CardNotFoundException(DomainException):
    """Raised when a card cannot be found in the catalog."""

    def __init__(self, card_id: int):
        super().__init__(
            message=f"Card not found: {card_id}",
            code="CARD_NOT_FOUND",
        )
        self.card_id = card_id


class CatalogUnavailableException(DomainException):
    """Raised when the catalog store cannot be read."""

    def __init__(self, message: str = "Card catalog is unavailable"):
        super().__init__(
            message=message,
            code="CATALOG_UNAVAILABLE",
        )
