"""Repository implementations."""

from .card_repository import PostgresCardRepository

__all__ = [
    "PostgresCardRepository",
]
