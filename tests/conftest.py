"""Pytest configuration and shared fixtures for BudgetFlow tests.

Provides debt factories, the three-debt reference scenario, and a Flask app
whose log files land in a temporary directory.
"""

from __future__ import annotations

from datetime import date

import pytest

from budgetflow import create_app
from budgetflow.models import Debt, DebtType

# Fixed "today" so payoff date labels are deterministic
TODAY = date(2026, 10, 19)


# =============================================================================
# Debt Fixtures
# =============================================================================


@pytest.fixture
def debt_factory():
    """Factory for creating debts with sensible defaults.

    Usage:
        debt = debt_factory(balance=2500.0, interest_rate=19.99)
    """
    counter = {"n": 0}

    def _create(**kwargs) -> Debt:
        counter["n"] += 1
        defaults = {
            "id": f"debt-{counter['n']}",
            "name": f"Debt {counter['n']}",
            "balance": 1000.0,
            "interest_rate": 15.0,
            "minimum_payment": 50.0,
            "type": DebtType.CREDIT_CARD,
        }
        defaults.update(kwargs)
        return Debt(**defaults)

    return _create


@pytest.fixture
def scenario_debts() -> list[Debt]:
    """Three debts with distinct balances and rates.

    A: $1000 @ 20%, B: $500 @ 10%, C: $2000 @ 5%.
    """
    return [
        Debt("A", "Card A", 1000.0, 20.0, 50.0, DebtType.CREDIT_CARD),
        Debt("B", "Loan B", 500.0, 10.0, 25.0, DebtType.PERSONAL_LOAN),
        Debt("C", "Loan C", 2000.0, 5.0, 100.0, DebtType.STUDENT_LOAN),
    ]


@pytest.fixture
def scenario_payload(scenario_debts) -> dict:
    """Wire payload for the three-debt scenario."""
    return {
        "debts": [debt.to_dict() for debt in scenario_debts],
        "extraMonthlyPayment": 200,
    }


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app(tmp_path, monkeypatch):
    """Flask app using the testing config with logs under ``tmp_path``."""
    monkeypatch.setenv("BUDGETFLOW_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("BUDGETFLOW_DEFAULT_EXTRA_PAYMENT", raising=False)
    monkeypatch.delenv("BUDGETFLOW_IMPULSIVITY_SCORE", raising=False)
    monkeypatch.delenv("BUDGETFLOW_DEFAULT_STRATEGY", raising=False)
    return create_app("testing")


@pytest.fixture
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture
def runner(app):
    return app.test_cli_runner()


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance (default one cent)."""
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
