"""
Fixtures for integration tests.

Provides:
- In-memory database for testing
- Test client for FastAPI app with the session factory overridden
- Registration and login helpers
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.infrastructure.database import Base, get_session_factory


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine."""
    return async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest_asyncio.fixture
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """A session for inspecting the database directly."""
    async with session_factory() as session:
        yield session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the in-memory database.

    Services open their own sessions from the overridden factory.
    """
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

def make_register_body(
    nik: str = "3201011503900001",
    email: str = "budi@example.com",
    salary: int = 4_000_000,
    **overrides,
) -> dict:
    """Valid registration body; override any field by keyword."""
    body = {
        "nik": nik,
        "email": email,
        "password": "Secret123",
        "full_name": "Budi Santoso",
        "legal_name": "Budi Santoso",
        "birth_place": "Bandung",
        "birth_date": "1990-03-15",
        "salary": salary,
        "ktp_photo_path": "uploads/ktp/budi.jpg",
        "selfie_photo_path": "uploads/selfie/budi.jpg",
    }
    body.update(overrides)
    return body


async def register_and_login(
    client: AsyncClient,
    nik: str = "3201011503900001",
    email: str = "budi@example.com",
    salary: int = 4_000_000,
) -> dict:
    """Register a customer and return the login response body."""
    response = await client.post(
        "/api/v1/auth/register",
        json=make_register_body(nik=nik, email=email, salary=salary),
    )
    assert response.status_code == 201, response.text

    response = await client.post(
        "/api/v1/auth/login",
        json={"email": email, "password": "Secret123"},
    )
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def register_body() -> dict:
    """Request body for a customer earning 4,000,000."""
    return make_register_body()


@pytest.fixture
def build_register_body():
    """Factory for registration bodies."""
    return make_register_body


@pytest.fixture
def login_customer(client: AsyncClient):
    """Factory that registers and logs in a customer through the API."""

    async def _login(**kwargs) -> dict:
        return await register_and_login(client, **kwargs)

    return _login


@pytest_asyncio.fixture
async def customer(client: AsyncClient) -> dict:
    """A registered, logged-in customer (salary 4,000,000)."""
    return await register_and_login(client)


@pytest_asyncio.fixture
async def other_customer(client: AsyncClient) -> dict:
    """A second registered customer (salary 12,000,000)."""
    return await register_and_login(
        client,
        nik="3201011503900002",
        email="siti@example.com",
        salary=12_000_000,
    )


@pytest.fixture
def auth_headers(customer: dict) -> dict:
    return {"Authorization": f"Bearer {customer['token']}"}


@pytest.fixture
def transaction_body() -> dict:
    """Request body for a 3-month purchase within the lowest tier."""
    return {
        "on_the_road_price": 500_000,
        "tenor_month": 3,
        "installment_amount": 171_666,
        "interest_amount": 15_000,
        "asset_name": "Honda Beat",
    }
