"""Demo debt portfolio used by the planner until the user enters their own."""

from __future__ import annotations

from dataclasses import dataclass

from ..models.debt import Debt, DebtType


@dataclass(frozen=True, slots=True)
class DebtProfile:
    extra_monthly_payment: float
    impulsivity_score: int


DEMO_PROFILE = DebtProfile(extra_monthly_payment=500.0, impulsivity_score=65)

# Defaults for a freshly added debt row
NEW_DEBT_DEFAULTS = {
    "name": "New Debt",
    "balance": 1000.0,
    "interestRate": 15.0,
    "minimumPayment": 50.0,
    "type": DebtType.CREDIT_CARD.value,
}


def demo_debts() -> list[Debt]:
    """Return a fresh copy of the demo debts."""

    return [
        Debt("cc-a", "Credit Card A", 4200.0, 24.99, 105.0, DebtType.CREDIT_CARD),
        Debt("cc-b", "Credit Card B", 1800.0, 19.99, 55.0, DebtType.CREDIT_CARD),
        Debt("student", "Student Loan", 28000.0, 5.5, 300.0, DebtType.STUDENT_LOAN),
        Debt("car", "Car Loan", 12500.0, 6.9, 280.0, DebtType.CAR_LOAN),
        Debt("medical", "Medical Bill", 3200.0, 0.0, 150.0, DebtType.MEDICAL),
        Debt("personal", "Personal Loan", 8000.0, 11.5, 200.0, DebtType.PERSONAL_LOAN),
    ]
