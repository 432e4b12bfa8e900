"""API test fixtures — FastAPI test client over an in-memory SQLite database.

Invariants:
    - get_db dependency overridden to use the test session factory
    - db_manager patched so the readiness probe sees the test engine
    - seed_dashboard inserts two customers, four invoices, revenue and one user
"""

import datetime as dt

import pytest
from httpx import ASGITransport, AsyncClient

from finboard.infrastructure.credentials import hash_password
from finboard.infrastructure.database import get_db, DatabaseSessionManager
import finboard.infrastructure.database as db_module
from finboard.main import app
from finboard.models import Customer, Invoice, Revenue, User


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture
async def seed_dashboard(test_db):
    test_db.add_all([
        Customer(id="c-alice", name="Alice Smith", email="alice@example.com",
                 image_url="/customers/alice.png"),
        Customer(id="c-bob", name="Bob Jones", email="bob@example.com",
                 image_url="/customers/bob.png"),
    ])
    await test_db.flush()
    test_db.add_all([
        Invoice(id="inv-1", customer_id="c-alice", amount=500, status="paid",
                date=dt.date(2026, 1, 10)),
        Invoice(id="inv-2", customer_id="c-alice", amount=700, status="paid",
                date=dt.date(2026, 2, 10)),
        Invoice(id="inv-3", customer_id="c-bob", amount=2000, status="pending",
                date=dt.date(2026, 3, 10)),
        Invoice(id="inv-4", customer_id="c-bob", amount=1250, status="pending",
                date=dt.date(2026, 4, 10)),
        Revenue(month="Jan", revenue=2000),
        Revenue(month="Feb", revenue=1800),
        User(name="User", email="user@nextmail.com",
             password=hash_password("123456", rounds=4)),
    ])
    await test_db.commit()
