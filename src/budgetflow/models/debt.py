"""Debt input records consumed by the payoff simulator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DebtType(str, Enum):
    """Categorical debt tag. Display only, never affects the simulation."""

    CREDIT_CARD = "credit-card"
    STUDENT_LOAN = "student-loan"
    CAR_LOAN = "car-loan"
    MEDICAL = "medical"
    PERSONAL_LOAN = "personal-loan"


@dataclass(frozen=True, slots=True)
class Debt:
    """A single liability as entered by the user.

    ``interest_rate`` is an annual percentage (``19.99`` means 19.99% APR)
    compounded monthly by the simulator.
    """

    id: str
    name: str
    balance: float
    interest_rate: float
    minimum_payment: float
    type: DebtType = DebtType.CREDIT_CARD

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "balance": self.balance,
            "interestRate": self.interest_rate,
            "minimumPayment": self.minimum_payment,
            "type": self.type.value,
        }


def total_balance(debts: list[Debt]) -> float:
    """Sum of outstanding balances."""

    return sum(debt.balance for debt in debts)


def total_minimum_payments(debts: list[Debt]) -> float:
    """Sum of contractual monthly minimums."""

    return sum(debt.minimum_payment for debt in debts)
