"""
Shared fixtures for tests - in-memory SQLite with the real ORM
"""

from datetime import date, timedelta

import pytest

from tests.database_test_config import (
    TestSessionLocal,
    create_test_database,
    drop_test_database
)
from tests.fakes import RecordingRenderer

from inventory_sync.adapters.secondary.database.sqlalchemy_repository import SQLAlchemyItemStore
from inventory_sync.application.notifier import RenderNotifier
from inventory_sync.application.services import InventorySyncService
from inventory_sync.core.domain.models import InventoryItem


# ============================================================================
# DATABASE FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def clean_database():
    """Fresh tables for every test."""
    drop_test_database()
    create_test_database()
    yield
    drop_test_database()


@pytest.fixture
def store(clean_database):
    return SQLAlchemyItemStore(TestSessionLocal)


# ============================================================================
# SERVICE FIXTURES
# ============================================================================

@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def notifier(renderer):
    notifier = RenderNotifier()
    notifier.subscribe("table", renderer)
    return notifier


@pytest.fixture
def service(store, notifier):
    return InventorySyncService(store, notifier)


@pytest.fixture
def today():
    return date.today()


@pytest.fixture
def yesterday(today):
    return today - timedelta(days=1)


@pytest.fixture
def next_year(today):
    return today + timedelta(days=365)


@pytest.fixture
def milk_items(yesterday, next_year):
    return [
        InventoryItem(id="a", name="Milk", quantity=10, price=2.5, expiration=yesterday),
        InventoryItem(id="b", name="Milk", quantity=5, price=3.0, expiration=next_year),
    ]
