"""
Integration tests for concurrent transaction creation and login.

Uses a file-backed SQLite database so that every request gets its own
connection, as it would against PostgreSQL.
"""

import asyncio

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.infrastructure.database import (
    AuthTokenModel,
    Base,
    TransactionModel,
    get_session_factory,
)
from src.main import app


@pytest_asyncio.fixture
async def file_session_factory(tmp_path):
    """Session factory over a SQLite file with a generous busy timeout."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'concurrency.db'}",
        connect_args={"timeout": 30},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    await engine.dispose()


@pytest_asyncio.fixture
async def concurrent_client(file_session_factory):
    """Test client safe for parallel requests."""
    app.dependency_overrides[get_session_factory] = lambda: file_session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


class TestConcurrentTransactions:
    """Purchases for the same customer and tenor run in parallel."""

    @pytest.mark.asyncio
    async def test_two_purchases_within_limit_both_succeed(
        self,
        concurrent_client: AsyncClient,
        build_register_body,
        transaction_body: dict,
        file_session_factory,
    ):
        await concurrent_client.post("/api/v1/auth/register", json=build_register_body())
        login = await concurrent_client.post(
            "/api/v1/auth/login",
            json={"email": "budi@example.com", "password": "Secret123"},
        )
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        # Each is within the 500,000 tenor-3 limit; together they are not
        transaction_body["on_the_road_price"] = 300_000
        responses = await asyncio.gather(
            concurrent_client.post("/api/v1/transaction", json=transaction_body, headers=headers),
            concurrent_client.post("/api/v1/transaction", json=transaction_body, headers=headers),
        )

        assert [r.status_code for r in responses] == [201, 201]
        assert responses[0].json()["id"] != responses[1].json()["id"]

        async with file_session_factory() as session:
            total = await session.scalar(select(func.count()).select_from(TransactionModel))
        assert total == 2

    @pytest.mark.asyncio
    async def test_parallel_over_limit_purchases_all_rejected(
        self,
        concurrent_client: AsyncClient,
        build_register_body,
        transaction_body: dict,
        file_session_factory,
    ):
        await concurrent_client.post("/api/v1/auth/register", json=build_register_body())
        login = await concurrent_client.post(
            "/api/v1/auth/login",
            json={"email": "budi@example.com", "password": "Secret123"},
        )
        headers = {"Authorization": f"Bearer {login.json()['token']}"}

        transaction_body["on_the_road_price"] = 500_001
        responses = await asyncio.gather(
            *[
                concurrent_client.post(
                    "/api/v1/transaction", json=transaction_body, headers=headers
                )
                for _ in range(3)
            ]
        )

        assert all(r.status_code == 400 for r in responses)

        async with file_session_factory() as session:
            total = await session.scalar(select(func.count()).select_from(TransactionModel))
        assert total == 0


class TestConcurrentLogins:
    """First logins of the same customer racing on the token registry."""

    @pytest.mark.asyncio
    async def test_two_first_logins_both_succeed(
        self,
        concurrent_client: AsyncClient,
        build_register_body,
        file_session_factory,
    ):
        await concurrent_client.post("/api/v1/auth/register", json=build_register_body())

        credentials = {"email": "budi@example.com", "password": "Secret123"}
        responses = await asyncio.gather(
            concurrent_client.post("/api/v1/auth/login", json=credentials),
            concurrent_client.post("/api/v1/auth/login", json=credentials),
        )

        assert [r.status_code for r in responses] == [200, 200]

        async with file_session_factory() as session:
            rows = (
                await session.execute(
                    select(AuthTokenModel.token_type, func.count()).group_by(
                        AuthTokenModel.token_type
                    )
                )
            ).all()
        assert dict(rows) == {"access_token": 1, "refresh_token": 1}

    @pytest.mark.asyncio
    async def test_last_login_token_is_the_valid_one(
        self,
        concurrent_client: AsyncClient,
        build_register_body,
    ):
        await concurrent_client.post("/api/v1/auth/register", json=build_register_body())

        credentials = {"email": "budi@example.com", "password": "Secret123"}
        responses = await asyncio.gather(
            concurrent_client.post("/api/v1/auth/login", json=credentials),
            concurrent_client.post("/api/v1/auth/login", json=credentials),
        )

        statuses = []
        for response in responses:
            profile = await concurrent_client.get(
                "/api/v1/customer/profile",
                headers={"Authorization": f"Bearer {response.json()['token']}"},
            )
            statuses.append(profile.status_code)

        # Exactly one of the racing logins holds the registered token
        assert sorted(statuses) == [200, 401]
