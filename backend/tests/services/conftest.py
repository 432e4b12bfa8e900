"""Service test fixtures — fake store and authenticator instances."""

import pytest

from finboard.core.errors import AuthenticationError
from tests.services.fake_store import (
    FakeAuthenticator, FakeDashboardStore, make_customer, make_invoice,
)


@pytest.fixture
def fake_store():
    return FakeDashboardStore()


@pytest.fixture
def card_fixture_store():
    """3 invoices ($10 paid, $20 pending, $5 paid) across 2 customers."""
    return FakeDashboardStore(
        invoices=[
            make_invoice("i1", "c1", 1000, "paid", "2026-03-01"),
            make_invoice("i2", "c2", 2000, "pending", "2026-03-02"),
            make_invoice("i3", "c1", 500, "paid", "2026-03-03"),
        ],
        customers=[
            make_customer("c1", "Alice Smith", "alice@example.com"),
            make_customer("c2", "Bob Jones", "bob@example.com"),
        ],
    )


@pytest.fixture
def invalid_credentials():
    return FakeAuthenticator(
        AuthenticationError(AuthenticationError.CREDENTIALS_SIGNIN),
    )
