"""Pytest configuration and shared fixtures for BudgetBook tests.

This module provides storage fixtures, ledger/facade fixtures, record factories
and helper utilities for testing the budgeting services without touching the
real application database.
"""

from __future__ import annotations

import itertools

import pytest
from sqlmodel import SQLModel, create_engine

from budgetbook.infra.database import create_session_factory
from budgetbook.infra.repositories import InMemoryStorageGateway, SQLModelStorageGateway
from budgetbook.models import ExpenseCreate, GoalCreate, IncomeCreate, StoredCollection  # noqa: F401
from budgetbook.services import BudgetFacade, ExpenseLedger, GoalTracker, IncomeLedger


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Point configuration at a throwaway data directory for every test."""

    monkeypatch.setenv("BUDGETBOOK_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.delenv("BUDGETBOOK_DATABASE_URL", raising=False)
    monkeypatch.delenv("BUDGETBOOK_STORAGE", raising=False)
    monkeypatch.delenv("BUDGETBOOK_DEV_MODE", raising=False)


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine(tmp_path):
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'test.db'}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what the SQLModel gateway expects."""
    return create_session_factory(db_engine)


@pytest.fixture
def sqlite_storage(session_factory) -> SQLModelStorageGateway:
    return SQLModelStorageGateway(session_factory)


@pytest.fixture
def memory_storage() -> InMemoryStorageGateway:
    return InMemoryStorageGateway()


@pytest.fixture(params=["memory", "sqlite"])
def storage(request):
    """Run a test once against each gateway implementation."""
    if request.param == "memory":
        return InMemoryStorageGateway()
    return SQLModelStorageGateway(request.getfixturevalue("session_factory"))


@pytest.fixture
def sequential_ids():
    """Deterministic id factory yielding id-1, id-2, ..."""

    counter = itertools.count(1)

    def _next() -> str:
        return f"id-{next(counter)}"

    return _next


# =============================================================================
# Service Fixtures
# =============================================================================


@pytest.fixture
def expense_ledger(memory_storage) -> ExpenseLedger:
    return ExpenseLedger(memory_storage)


@pytest.fixture
def income_ledger(memory_storage) -> IncomeLedger:
    return IncomeLedger(memory_storage)


@pytest.fixture
def goal_tracker(memory_storage) -> GoalTracker:
    return GoalTracker(memory_storage)


@pytest.fixture
def budget(expense_ledger, income_ledger, goal_tracker) -> BudgetFacade:
    return BudgetFacade(expense_ledger, income_ledger, goal_tracker)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def expense_data():
    """Factory for expense payloads with sensible defaults."""

    def _create(
        amount: float = 100.0,
        category: str = "Groceries",
        description: str = "Test expense",
        date: str = "2024-03-15",
    ) -> ExpenseCreate:
        return ExpenseCreate(amount=amount, category=category, description=description, date=date)

    return _create


@pytest.fixture
def income_data():
    """Factory for income payloads with sensible defaults."""

    def _create(
        amount: float = 1000.0,
        source: str = "Salary",
        description: str = "Test income",
        date: str = "2024-03-01",
        is_recurring: bool = False,
    ) -> IncomeCreate:
        return IncomeCreate(
            amount=amount,
            source=source,
            description=description,
            date=date,
            is_recurring=is_recurring,
        )

    return _create


@pytest.fixture
def goal_data():
    """Factory for goal payloads with sensible defaults."""

    def _create(
        category: str = "Vacation",
        amount: float = 5000.0,
        end_date: str = "2024-12-31",
    ) -> GoalCreate:
        return GoalCreate(category=category, amount=amount, end_date=end_date)

    return _create


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent)."""
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
