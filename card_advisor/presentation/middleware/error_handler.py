"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from card_advisor.domain.exceptions import (
    CardNotFoundException,
    CardsNotFoundException,
    CatalogUnavailableException,
    DomainException,
    InvalidComparisonRequestException,
    InvalidRecommendationRequestException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, code: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": code,
            "message": message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(CardNotFoundException)
    async def card_not_found_handler(
        request: Request,
        exc: CardNotFoundException,
    ) -> JSONResponse:
        """Handle card not found errors."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(CardsNotFoundException)
    async def cards_not_found_handler(
        request: Request,
        exc: CardsNotFoundException,
    ) -> JSONResponse:
        """Handle comparisons that name unknown cards."""
        return _error_response(404, exc.code, exc.message)

    @app.exception_handler(InvalidRecommendationRequestException)
    async def invalid_recommendation_handler(
        request: Request,
        exc: InvalidRecommendationRequestException,
    ) -> JSONResponse:
        """Handle invalid recommendation requests."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(InvalidComparisonRequestException)
    async def invalid_comparison_handler(
        request: Request,
        exc: InvalidComparisonRequestException,
    ) -> JSONResponse:
        """Handle invalid comparison requests."""
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(CatalogUnavailableException)
    async def catalog_unavailable_handler(
        request: Request,
        exc: CatalogUnavailableException,
    ) -> JSONResponse:
        """Handle catalog store failures."""
        logger.error(
            "catalog_unavailable",
            request_id=get_request_id(),
            message=exc.message,
        )
        return _error_response(
            503,
            exc.code,
            "Card catalog is temporarily unavailable. Please try again.",
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            request_id=get_request_id(),
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.code, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            request_id=get_request_id(),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "INTERNAL_ERROR", "An unexpected error occurred.")
