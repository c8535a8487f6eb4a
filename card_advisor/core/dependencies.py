"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from card_advisor.infrastructure.database import get_db_session
from card_advisor.infrastructure.repositories import PostgresCardRepository
from card_advisor.application.services import CardService, RecommendationService


# Repository dependencies
async def get_card_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresCardRepository:
    """Get a CardRepository instance."""
    return PostgresCardRepository(session)


# Service dependencies
async def get_card_service(
    card_repo: Annotated[PostgresCardRepository, Depends(get_card_repository)],
) -> CardService:
    """Get a CardService instance."""
    return CardService(card_repository=card_repo)


async def get_recommendation_service(
    card_repo: Annotated[PostgresCardRepository, Depends(get_card_repository)],
) -> RecommendationService:
    """Get a RecommendationService instance."""
    return RecommendationService(card_repository=card_repo)
