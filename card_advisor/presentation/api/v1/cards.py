"""Card catalog API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from card_advisor.application.services import CardService
from card_advisor.core.dependencies import get_card_service
from card_advisor.domain.entities import CardCategory
from card_advisor.presentation.schemas import (
    CardListResponseSchema,
    CardResponseSchema,
    CardSchema,
    ErrorResponseSchema,
)

cards_router = APIRouter(
    prefix="/cards",
    responses={
        503: {"model": ErrorResponseSchema, "description": "Catalog unavailable"},
    },
)


@cards_router.get(
    "",
    response_model=CardListResponseSchema,
    summary="List Cards",
    description="List every card in the catalog, ordered by name.",
)
async def list_cards(
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> CardListResponseSchema:
    cards = await card_service.list_cards()

    return CardListResponseSchema(
        cards=[CardSchema.model_validate(card, from_attributes=True) for card in cards],
    )


@cards_router.get(
    "/category/{category}",
    response_model=CardListResponseSchema,
    summary="List Cards by Category",
    description="List the cards in one category, ordered by name.",
)
async def list_cards_by_category(
    category: CardCategory,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> CardListResponseSchema:
    cards = await card_service.list_by_category(category)

    return CardListResponseSchema(
        cards=[CardSchema.model_validate(card, from_attributes=True) for card in cards],
    )


@cards_router.get(
    "/search",
    response_model=CardListResponseSchema,
    summary="Search Cards",
    description="""
    Search the catalog by card name, issuer or reward type.

    Matching is a case-insensitive substring match.
    """,
)
async def search_cards(
    q: Annotated[
        str,
        Query(min_length=1, max_length=100, description="Search text"),
    ],
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> CardListResponseSchema:
    cards = await card_service.search(q)

    return CardListResponseSchema(
        cards=[CardSchema.model_validate(card, from_attributes=True) for card in cards],
    )


@cards_router.get(
    "/{card_id}",
    response_model=CardResponseSchema,
    summary="Get Card",
    description="Retrieve a single card by its ID.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Card not found"},
    },
)
async def get_card(
    card_id: int,
    card_service: Annotated[CardService, Depends(get_card_service)],
) -> CardResponseSchema:
    card = await card_service.get_card(card_id)

    return CardResponseSchema(card=CardSchema.model_validate(card, from_attributes=True))
