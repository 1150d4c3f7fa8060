"""Prometheus metrics for the Multifinance service.

Business Metrics:
- multifinance_transaction_total: Transaction creation attempts by outcome
- multifinance_financed_amount_total: Sum of on-the-road prices financed
- multifinance_registration_total: Customer registrations by outcome
- multifinance_login_total: Login attempts by outcome

Technical Metrics:
- multifinance_transaction_latency_seconds: Transaction workflow latency
- multifinance_rollback_failures_total: Rollbacks that raised
- multifinance_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

transaction_total = Counter(
    "multifinance_transaction_total",
    "Total number of transaction creation attempts",
    ["outcome"],  # created, invalid_tenor, limit_exceeded, error
)

financed_amount_total = Counter(
    "multifinance_financed_amount_total",
    "Sum of on-the-road prices of created transactions",
    ["tenor_month"],
)

registration_total = Counter(
    "multifinance_registration_total",
    "Total number of customer registrations",
    ["outcome"],  # registered, duplicate, error
)

login_total = Counter(
    "multifinance_login_total",
    "Total number of login attempts",
    ["outcome"],  # success, invalid_credentials
)


# =============================================================================
# Technical Metrics
# =============================================================================

transaction_latency = Histogram(
    "multifinance_transaction_latency_seconds",
    "Transaction creation workflow latency in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)

rollback_failures = Counter(
    "multifinance_rollback_failures_total",
    "Total number of database rollbacks that failed",
)

http_requests_total = Counter(
    "multifinance_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "multifinance_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_transaction_outcome(outcome: str) -> None:
    """Record the outcome of a transaction creation attempt."""
    transaction_total.labels(outcome=outcome).inc()


def record_financed_amount(tenor_month: int, amount: int) -> None:
    """Add a created transaction's price to the financed total."""
    financed_amount_total.labels(tenor_month=str(tenor_month)).inc(amount)


def record_registration(outcome: str) -> None:
    registration_total.labels(outcome=outcome).inc()


def record_login(outcome: str) -> None:
    login_total.labels(outcome=outcome).inc()


def record_rollback_failure() -> None:
    rollback_failures.inc()


@contextmanager
def track_transaction_latency() -> Generator[None, None, None]:
    """Context manager to track transaction workflow latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        transaction_latency.observe(duration)


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
