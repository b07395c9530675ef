"""Payoff simulation result types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Strategy(str, Enum):
    """Where the extra payment pool is directed each month."""

    SNOWBALL = "snowball"
    AVALANCHE = "avalanche"
    HYBRID = "hybrid"
    CUSTOM = "custom"


STRATEGY_LABELS: dict[Strategy, str] = {
    Strategy.SNOWBALL: "Snowball",
    Strategy.AVALANCHE: "Avalanche",
    Strategy.HYBRID: "Hybrid",
    Strategy.CUSTOM: "Custom",
}

STRATEGY_SUBTITLES: dict[Strategy, str] = {
    Strategy.SNOWBALL: "Lowest Balance First",
    Strategy.AVALANCHE: "Highest Interest First",
    Strategy.HYBRID: "High Interest First, Then Smallest Balance",
    Strategy.CUSTOM: "Your Custom Payoff Order",
}


@dataclass(frozen=True, slots=True)
class DebtPayoffScheduleItem:
    """Payoff outcome for one debt, listed in strategy order.

    ``cumulative_payment`` is a running total across the schedule (this debt
    plus every debt listed before it), not this debt's own total.
    """

    debt_id: str
    months_to_payoff: int
    total_interest_paid: float
    payoff_date: str
    monthly_payment: float
    cumulative_payment: float
    paid_off: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "debtId": self.debt_id,
            "monthsToPayoff": self.months_to_payoff,
            "totalInterestPaid": self.total_interest_paid,
            "payoffDate": self.payoff_date,
            "monthlyPayment": self.monthly_payment,
            "cumulativePayment": self.cumulative_payment,
            "paidOff": self.paid_off,
        }


@dataclass(frozen=True, slots=True)
class DebtPayoffResult:
    """Snapshot of one simulation run."""

    strategy: Strategy
    order: tuple[str, ...]
    schedule: tuple[DebtPayoffScheduleItem, ...]
    total_interest_paid: float
    total_months_to_debt_free: int
    total_amount_paid: float
    hit_month_cap: bool = False

    def item_for(self, debt_id: str) -> DebtPayoffScheduleItem | None:
        for item in self.schedule:
            if item.debt_id == debt_id:
                return item
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.value,
            "order": list(self.order),
            "schedule": [item.to_dict() for item in self.schedule],
            "totalInterestPaid": self.total_interest_paid,
            "totalMonthsToDebtFree": self.total_months_to_debt_free,
            "totalAmountPaid": self.total_amount_paid,
            "hitMonthCap": self.hit_month_cap,
        }
