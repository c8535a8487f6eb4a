"""
Card Advisor - Main Application Entry Point

A credit card recommendation service that ranks a card catalog against
a user's declared income, spending, preferences and credit band.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from card_advisor import __version__
from card_advisor.core.config import settings
from card_advisor.core.logging import setup_logging
from card_advisor.core.metrics import get_metrics, get_metrics_content_type
from card_advisor.infrastructure.database import db_manager
from card_advisor.infrastructure.database.seed import seed_catalog
from card_advisor.infrastructure.repositories import PostgresCardRepository
from card_advisor.presentation.api import api_router
from card_advisor.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Initialize database connection pool
    - Optionally create tables and seed the sample catalog
    - Clean up on shutdown
    """
    setup_logging()
    db_manager.init()

    logger = structlog.get_logger(__name__)

    if settings.seed_catalog_on_startup:
        await db_manager.create_tables()
        async with db_manager.session() as session:
            await seed_catalog(PostgresCardRepository(session))

    logger.info("application_started", version=__version__)

    yield

    await db_manager.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Card Advisor",
    description="Personalized Credit Card Recommendation Service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)

    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""
    return RedirectResponse(url="/docs")
