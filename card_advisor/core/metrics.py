"""Prometheus metrics for the Card Advisor service.

Metrics are organized into two categories:

Business Metrics (for Product):
- card_advisor_recommendation_requests_total: Recommendation runs by outcome
- card_advisor_recommended_card_total: Recommended cards by category
- card_advisor_eligible_cards: Eligible catalog size per request

Technical Metrics (for Engineering/SRE):
- card_advisor_recommendation_latency_seconds: Recommendation latency
- card_advisor_catalog_size: Cards in the last catalog snapshot
- card_advisor_catalog_fetch_failures_total: Catalog read failures
- card_advisor_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator, Iterable

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics (Product dashboards)
# =============================================================================

recommendation_requests_total = Counter(
    "card_advisor_recommendation_requests_total",
    "Total number of recommendation runs",
    ["outcome"],  # matched, empty
)

recommended_card_total = Counter(
    "card_advisor_recommended_card_total",
    "Cards returned in recommendations by category",
    ["category"],
)

eligible_cards = Histogram(
    "card_advisor_eligible_cards",
    "Number of eligible catalog cards per recommendation run",
    buckets=[0, 1, 2, 5, 10, 20, 50, 100, 250],
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

recommendation_latency = Histogram(
    "card_advisor_recommendation_latency_seconds",
    "Recommendation request latency in seconds",
    buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
)

catalog_size = Gauge(
    "card_advisor_catalog_size",
    "Number of cards in the most recent catalog snapshot",
)

catalog_fetch_failures = Counter(
    "card_advisor_catalog_fetch_failures_total",
    "Total number of catalog read failures",
    ["operation"],
)

http_requests_total = Counter(
    "card_advisor_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "card_advisor_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_recommendations(
    total_eligible: int,
    recommended_categories: Iterable[str],
) -> None:
    """Record the outcome of a recommendation run."""
    categories = list(recommended_categories)

    outcome = "matched" if categories else "empty"
    recommendation_requests_total.labels(outcome=outcome).inc()
    eligible_cards.observe(total_eligible)

    for category in categories:
        recommended_card_total.labels(category=category).inc()


def record_catalog_size(size: int) -> None:
    """Record the size of the catalog snapshot just loaded."""
    catalog_size.set(size)


def record_catalog_fetch_failure(operation: str) -> None:
    """Record a failed catalog read."""
    catalog_fetch_failures.labels(operation=operation).inc()


@contextmanager
def track_recommendation_latency() -> Generator[None, None, None]:
    """Context manager to track recommendation latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        recommendation_latency.observe(duration)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
