"""
Pytest configuration and fixtures.
Provides test app client and async DB session replacement.
"""

import os

# Settings are read at import time, so these must be set before the app loads
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from textile_billing.main import app
from textile_billing.db.base import Base
from textile_billing.db.session import get_db
import textile_billing.models  # noqa: F401


# Test database URL (in-memory SQLite for testing)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Day every API test ages bills against
TODAY = date(2025, 8, 20)


@pytest.fixture(scope="function")
async def test_engine():
    """In-memory SQLite engine with all tables created."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    
    yield engine
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture(scope="function")
def test_session_maker(test_engine):
    return async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture(scope="function")
async def test_db_session(test_session_maker):
    """
    Create a test database session.
    Uses in-memory SQLite for fast tests.
    """
    async with test_session_maker() as session:
        yield session


@pytest.fixture(scope="function")
async def test_client(test_session_maker):
    """
    Create a test HTTP client backed by the in-memory database.
    """
    async def override_get_db():
        async with test_session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    
    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
async def references(test_client):
    """One of each reference record, created through the API."""
    async def post(path, payload):
        response = await test_client.post(f"/api/v1/{path}", json=payload)
        assert response.status_code == 201, response.text
        return response.json()
    
    return {
        "buyer": await post("buyers", {
            "name": "Shrusti pvt ltd",
            "address": "Vesu, Surat",
            "contact_number": "9898969858",
            "gst_number": "HGTU231975",
        }),
        "dalal": await post("dalals", {
            "name": "Kishan Patel",
            "contact_number": "7418529635",
            "address": "Katargam, Surat",
        }),
        "material": await post("materials", {"name": "Silk", "hsn_code": "5007"}),
        "dhara": await post("dharas", {"dhara_name": "War to War (10 days)", "days": 10}),
        "tax": await post("taxes", {"name": "GST", "percentage": 10}),
    }


@pytest.fixture
def bill_payload(references):
    """Valid bill inputs pointing at ``references``."""
    def make(**overrides):
        payload = {
            "bill_no": 1,
            "date": "2025-08-05",
            "buyer_id": references["buyer"]["id"],
            "dalal_id": references["dalal"]["id"],
            "material_id": references["material"]["id"],
            "dhara_id": references["dhara"]["id"],
            "tax_id": references["tax"]["id"],
            "meter": 50,
            "price_rate": 200,
            "chalan_no": "8526",
            "taka_count": 120,
        }
        payload.update(overrides)
        return payload
    return make
