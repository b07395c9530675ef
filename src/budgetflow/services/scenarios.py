"""Side-by-side payoff scenarios built on the simulator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Iterable, Sequence

from ..models.debt import Debt
from ..models.payoff import DebtPayoffResult, Strategy
from .debts import calculate_debt_payoff, round_currency

COMPARED_STRATEGIES = (Strategy.SNOWBALL, Strategy.AVALANCHE, Strategy.HYBRID)


def format_duration(months: int) -> str:
    """Render a month count as ``"Xy Ym"``."""

    years, remainder = divmod(max(int(months), 0), 12)
    return f"{years}y {remainder}m"


@dataclass(frozen=True, slots=True)
class StrategyComparison:
    """Results for several strategies with the best value of each metric."""

    results: dict[Strategy, DebtPayoffResult]
    best_interest: float
    best_months: int
    best_total: float

    def best_flags(self, strategy: Strategy) -> dict[str, bool]:
        result = self.results[strategy]
        return {
            "interest": result.total_interest_paid <= self.best_interest,
            "months": result.total_months_to_debt_free <= self.best_months,
            "total": result.total_amount_paid <= self.best_total,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "results": {
                strategy.value: {**result.to_dict(), "best": self.best_flags(strategy)}
                for strategy, result in self.results.items()
            },
            "bestInterest": self.best_interest,
            "bestMonths": self.best_months,
            "bestTotal": self.best_total,
        }


def compare_strategies(
    debts: Sequence[Debt],
    extra_monthly_payment: float,
    custom_order: Iterable[str] | None = None,
    *,
    include_custom: bool = False,
    today: date | None = None,
) -> StrategyComparison:
    """Simulate snowball, avalanche and hybrid (plus custom when requested)."""

    strategies = list(COMPARED_STRATEGIES)
    if include_custom:
        strategies.append(Strategy.CUSTOM)
    custom_order = list(custom_order or [])

    results = {
        strategy: calculate_debt_payoff(
            debts, extra_monthly_payment, strategy, custom_order, today=today
        )
        for strategy in strategies
    }
    return StrategyComparison(
        results=results,
        best_interest=min(r.total_interest_paid for r in results.values()),
        best_months=min(r.total_months_to_debt_free for r in results.values()),
        best_total=min(r.total_amount_paid for r in results.values()),
    )


@dataclass(frozen=True, slots=True)
class AcceleratedPayoff:
    """Minimum-payments-only baseline against the plan with extra payments."""

    baseline: DebtPayoffResult
    accelerated: DebtPayoffResult
    extra_monthly_payment: float

    @property
    def months_saved(self) -> int:
        return self.baseline.total_months_to_debt_free - self.accelerated.total_months_to_debt_free

    @property
    def interest_saved(self) -> float:
        # Never shown as negative savings
        return max(
            0.0,
            round_currency(
                self.baseline.total_interest_paid - self.accelerated.total_interest_paid
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "extraMonthlyPayment": self.extra_monthly_payment,
            "baseline": self.baseline.to_dict(),
            "accelerated": self.accelerated.to_dict(),
            "monthsSaved": self.months_saved,
            "interestSaved": self.interest_saved,
            "timeToDebtFree": format_duration(self.accelerated.total_months_to_debt_free),
            "timeSaved": format_duration(self.months_saved),
        }


def accelerate_payoff(
    debts: Sequence[Debt],
    extra_monthly_payment: float,
    strategy: Strategy | str,
    custom_order: Iterable[str] | None = None,
    *,
    today: date | None = None,
) -> AcceleratedPayoff:
    """Show what ``extra_monthly_payment`` buys over paying minimums only."""

    custom_order = list(custom_order or [])
    baseline = calculate_debt_payoff(debts, 0.0, strategy, custom_order, today=today)
    accelerated = calculate_debt_payoff(
        debts, extra_monthly_payment, strategy, custom_order, today=today
    )
    return AcceleratedPayoff(
        baseline=baseline,
        accelerated=accelerated,
        extra_monthly_payment=extra_monthly_payment,
    )
