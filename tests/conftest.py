"""Shared pytest fixtures for all tests."""

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from card_ledger.config import Settings
from card_ledger.database import build_engine, build_session_factory, create_tables
from card_ledger.main import create_app
from card_ledger.services import Services


@pytest.fixture
def engine():
    """In-memory SQLite engine with the schema created.

    Yields:
        Engine bound to a single shared in-memory connection.
    """
    engine = build_engine("sqlite:///:memory:")
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def services(session_factory):
    """Services container over the test database."""
    return Services(session_factory)


@pytest.fixture
def test_settings():
    return Settings(DATABASE_URL="sqlite:///:memory:", LOG_LEVEL="WARNING")


@pytest.fixture
def app(test_settings, services):
    return create_app(test_settings, services=services)


@pytest.fixture
def client(app):
    """HTTP client for the REST and RPC surfaces."""
    return TestClient(app)


@pytest.fixture
def food(services):
    return services.categories.create("Food")


@pytest.fixture
def travel(services):
    return services.categories.create("Travel")


@pytest.fixture
def make_transaction(services):
    """Factory creating a transaction with sensible defaults."""
    def _make(category, amount="10.00", card="1234", when=None, status=None):
        return services.transactions.create(
            card_last_four=card,
            amount=Decimal(amount),
            category_id=category.id,
            transaction_date=when or datetime(2024, 3, 15, 12, 0, 0),
            status=status,
        )
    return _make
