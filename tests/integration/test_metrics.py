"""
Integration tests for metrics tracking.

These tests verify:
1. Metrics endpoint returns valid Prometheus format
2. Transaction outcomes are counted
3. Registrations and logins are counted
"""

import pytest
from httpx import AsyncClient

from src.core.metrics import REGISTRY


def sample(name: str, labels: dict | None = None) -> float:
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


# =============================================================================
# Metrics Endpoint Tests
# =============================================================================

class TestMetricsEndpoint:
    """Tests for GET /metrics endpoint."""

    @pytest.mark.asyncio
    async def test_metrics_endpoint_returns_prometheus_format(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        assert response.status_code == 200
        content_type = response.headers.get("content-type", "")
        assert "text/plain" in content_type or "text/openmetrics" in content_type
        assert "# HELP" in response.text

    @pytest.mark.asyncio
    async def test_metrics_include_service_metrics(
        self,
        client: AsyncClient,
    ):
        response = await client.get("/metrics")

        content = response.text
        assert "multifinance_transaction_total" in content
        assert "multifinance_transaction_latency_seconds" in content
        assert "multifinance_registration_total" in content


# =============================================================================
# Business Metrics Tests
# =============================================================================

class TestTransactionMetrics:
    """Transaction outcomes are recorded by label."""

    @pytest.mark.asyncio
    async def test_created_transaction_is_counted(
        self,
        client: AsyncClient,
        auth_headers: dict,
        transaction_body: dict,
    ):
        created_before = sample("multifinance_transaction_total", {"outcome": "created"})
        financed_before = sample(
            "multifinance_financed_amount_total", {"tenor_month": "3"}
        )

        await client.post("/api/v1/transaction", json=transaction_body, headers=auth_headers)

        assert sample("multifinance_transaction_total", {"outcome": "created"}) == created_before + 1
        assert (
            sample("multifinance_financed_amount_total", {"tenor_month": "3"})
            == financed_before + 500_000
        )

    @pytest.mark.asyncio
    async def test_rejected_transaction_is_counted(
        self,
        client: AsyncClient,
        auth_headers: dict,
        transaction_body: dict,
    ):
        before = sample("multifinance_transaction_total", {"outcome": "limit_exceeded"})
        transaction_body["on_the_road_price"] = 600_000

        await client.post("/api/v1/transaction", json=transaction_body, headers=auth_headers)

        assert sample("multifinance_transaction_total", {"outcome": "limit_exceeded"}) == before + 1

    @pytest.mark.asyncio
    async def test_invalid_tenor_is_counted(
        self,
        client: AsyncClient,
        auth_headers: dict,
        transaction_body: dict,
    ):
        before = sample("multifinance_transaction_total", {"outcome": "invalid_tenor"})
        transaction_body["tenor_month"] = 4

        await client.post("/api/v1/transaction", json=transaction_body, headers=auth_headers)

        assert sample("multifinance_transaction_total", {"outcome": "invalid_tenor"}) == before + 1


class TestAuthMetrics:
    """Registrations and logins are recorded by outcome."""

    @pytest.mark.asyncio
    async def test_registration_outcomes(
        self,
        client: AsyncClient,
        register_body: dict,
    ):
        registered_before = sample("multifinance_registration_total", {"outcome": "registered"})
        duplicate_before = sample("multifinance_registration_total", {"outcome": "duplicate"})

        await client.post("/api/v1/auth/register", json=register_body)
        await client.post("/api/v1/auth/register", json=register_body)

        assert (
            sample("multifinance_registration_total", {"outcome": "registered"})
            == registered_before + 1
        )
        assert (
            sample("multifinance_registration_total", {"outcome": "duplicate"})
            == duplicate_before + 1
        )

    @pytest.mark.asyncio
    async def test_failed_login_is_counted(self, client: AsyncClient):
        before = sample("multifinance_login_total", {"outcome": "invalid_credentials"})

        await client.post(
            "/api/v1/auth/login",
            json={"email": "nobody@example.com", "password": "Secret123"},
        )

        assert sample("multifinance_login_total", {"outcome": "invalid_credentials"}) == before + 1

    @pytest.mark.asyncio
    async def test_http_requests_are_counted_by_route(
        self,
        client: AsyncClient,
    ):
        labels = {"method": "GET", "endpoint": "/api/v1/health", "status": "200"}
        before = sample("multifinance_http_requests_total", labels)

        await client.get("/api/v1/health")

        assert sample("multifinance_http_requests_total", labels) == before + 1

    @pytest.mark.asyncio
    async def test_http_requests_are_labelled_by_route_template(
        self,
        client: AsyncClient,
        auth_headers: dict,
    ):
        response = await client.get("/api/v1/transaction/999", headers=auth_headers)

        labels = {
            "method": "GET",
            "endpoint": "/api/v1/transaction/{transaction_id}",
            "status": str(response.status_code),
        }
        assert sample("multifinance_http_requests_total", labels) >= 1
        assert sample(
            "multifinance_http_requests_total",
            {**labels, "endpoint": "/api/v1/transaction/999"},
        ) == 0
