"""Debt payoff simulator (snowball, avalanche, hybrid and custom ordering)."""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from ..logging_config import get_logger
from ..models.debt import Debt
from ..models.payoff import DebtPayoffResult, DebtPayoffScheduleItem, Strategy

logger = get_logger(__name__)

MAX_MONTHS = 600  # 50 years
PAID_OFF_EPSILON = 0.01
HYBRID_RATE_THRESHOLD = 15.0


def round_currency(amount: float) -> float:
    """Round to cents using half-up rounding."""

    return round(amount + 1e-9, 2)


def _coerce_strategy(strategy: Strategy | str) -> Strategy:
    if isinstance(strategy, Strategy):
        return strategy
    try:
        return Strategy(str(strategy).strip().lower())
    except ValueError:
        raise ValueError("Invalid debt payoff strategy.") from None


def _add_months(start: date, months: int) -> date:
    """Return the first day of the month ``months`` after ``start``."""

    month_index = start.month - 1 + months
    return date(start.year + month_index // 12, month_index % 12 + 1, 1)


def format_payoff_date(months: int, *, today: date | None = None) -> str:
    """Short month/year label for ``today`` plus ``months``, e.g. ``"Mar 2027"``."""

    return _add_months(today or date.today(), months).strftime("%b %Y")


def _apply_custom_order(debts: Sequence[Debt], custom_order: Iterable[str] | None) -> list[Debt]:
    by_id = {debt.id: debt for debt in debts}
    ordered: list[Debt] = []
    seen: set[str] = set()
    for debt_id in custom_order or ():
        debt = by_id.get(debt_id)
        # Unknown and repeated ids are dropped
        if debt is None or debt_id in seen:
            continue
        seen.add(debt_id)
        ordered.append(debt)
    ordered.extend(debt for debt in debts if debt.id not in seen)
    return ordered


def order_debts(
    debts: Sequence[Debt],
    strategy: Strategy | str,
    custom_order: Iterable[str] | None = None,
) -> list[Debt]:
    """Return debts in the order the extra payment pool is directed.

    Sorting is stable, so ties keep their input order.
    """

    strategy = _coerce_strategy(strategy)
    if strategy is Strategy.SNOWBALL:
        return sorted(debts, key=lambda d: d.balance)
    if strategy is Strategy.AVALANCHE:
        return sorted(debts, key=lambda d: d.interest_rate, reverse=True)
    if strategy is Strategy.HYBRID:
        high_rate = [d for d in debts if d.interest_rate >= HYBRID_RATE_THRESHOLD]
        remaining = [d for d in debts if d.interest_rate < HYBRID_RATE_THRESHOLD]
        return sorted(high_rate, key=lambda d: d.interest_rate, reverse=True) + sorted(
            remaining, key=lambda d: d.balance
        )
    return _apply_custom_order(debts, custom_order)


def _run_months(
    debts: Sequence[Debt], ordered: Sequence[Debt], extra_monthly_payment: float
) -> tuple[dict[str, float], dict[str, int]]:
    """Simulate month by month; return (interest per debt, payoff month per debt)."""

    balances = {debt.id: debt.balance for debt in debts}
    interest_paid = {debt.id: 0.0 for debt in debts}
    payoff_month: dict[str, int] = {}

    month = 0
    while len(payoff_month) < len(balances) and month < MAX_MONTHS:
        month += 1
        extra_pool = extra_monthly_payment

        # Interest capitalizes before this month's payments
        for debt in debts:
            if debt.id in payoff_month:
                continue
            monthly_rate = debt.interest_rate / 100 / 12
            interest = balances[debt.id] * monthly_rate
            interest_paid[debt.id] += interest
            balances[debt.id] += interest

        for debt in debts:
            if debt.id in payoff_month:
                continue
            payment = min(debt.minimum_payment, balances[debt.id])
            balances[debt.id] -= payment
            if balances[debt.id] <= PAID_OFF_EPSILON:
                balances[debt.id] = 0.0
                payoff_month[debt.id] = month
                # Unused part of the minimum joins this month's pool
                extra_pool += debt.minimum_payment - payment

        for debt in ordered:
            if debt.id in payoff_month or extra_pool <= 0:
                continue
            payment = min(extra_pool, balances[debt.id])
            balances[debt.id] -= payment
            extra_pool -= payment
            if balances[debt.id] <= PAID_OFF_EPSILON:
                balances[debt.id] = 0.0
                payoff_month[debt.id] = month
                extra_pool += debt.minimum_payment

    return interest_paid, payoff_month


def calculate_debt_payoff(
    debts: Sequence[Debt],
    extra_monthly_payment: float,
    strategy: Strategy | str,
    custom_order: Iterable[str] | None = None,
    *,
    today: date | None = None,
) -> DebtPayoffResult:
    """Simulate paying off ``debts`` and return the schedule plus totals.

    Every open debt accrues ``interest_rate / 100 / 12`` of its balance each
    month, then receives its minimum payment. The extra payment pool (plus any
    minimums freed by debts cleared this month) is applied in strategy order.
    The loop stops once every debt is cleared or after ``MAX_MONTHS``; debts
    still open at that point are reported with ``paid_off=False`` and
    ``months_to_payoff=MAX_MONTHS``, and the result sets ``hit_month_cap``.

    Monetary totals are rounded to cents only when the result is built.
    """

    strategy = _coerce_strategy(strategy)
    debts = list(debts)
    ordered = order_debts(debts, strategy, custom_order)
    if not debts:
        return DebtPayoffResult(
            strategy=strategy,
            order=(),
            schedule=(),
            total_interest_paid=0.0,
            total_months_to_debt_free=0,
            total_amount_paid=0.0,
        )

    today = today or date.today()
    interest_paid, payoff_month = _run_months(debts, ordered, extra_monthly_payment)

    schedule: list[DebtPayoffScheduleItem] = []
    cumulative = 0.0
    for debt in ordered:
        months = payoff_month.get(debt.id, MAX_MONTHS)
        cumulative += debt.balance + interest_paid[debt.id]
        schedule.append(
            DebtPayoffScheduleItem(
                debt_id=debt.id,
                months_to_payoff=months,
                total_interest_paid=round_currency(interest_paid[debt.id]),
                payoff_date=format_payoff_date(months, today=today),
                monthly_payment=debt.minimum_payment,
                cumulative_payment=round_currency(cumulative),
                paid_off=debt.id in payoff_month,
            )
        )

    total_interest = sum(interest_paid.values())
    hit_month_cap = len(payoff_month) < len(interest_paid)
    if hit_month_cap:
        logger.warning(
            "Payoff simulation reached the month cap with open debts",
            extra={
                "strategy": strategy.value,
                "max_months": MAX_MONTHS,
                "open_debts": [d.id for d in ordered if d.id not in payoff_month],
            },
        )

    result = DebtPayoffResult(
        strategy=strategy,
        order=tuple(debt.id for debt in ordered),
        schedule=tuple(schedule),
        total_interest_paid=round_currency(total_interest),
        total_months_to_debt_free=max(item.months_to_payoff for item in schedule),
        total_amount_paid=round_currency(sum(d.balance for d in debts) + total_interest),
        hit_month_cap=hit_month_cap,
    )
    logger.debug(
        "Simulated debt payoff",
        extra={
            "strategy": strategy.value,
            "debt_count": len(debts),
            "extra_monthly_payment": extra_monthly_payment,
            "months": result.total_months_to_debt_free,
        },
    )
    return result


def snowball_payoff(debts: Sequence[Debt], extra_monthly_payment: float, **kwargs) -> DebtPayoffResult:
    """Return payoff result prioritizing smallest balances first."""
    return calculate_debt_payoff(debts, extra_monthly_payment, Strategy.SNOWBALL, **kwargs)


def avalanche_payoff(debts: Sequence[Debt], extra_monthly_payment: float, **kwargs) -> DebtPayoffResult:
    """Return payoff result prioritizing highest interest rate first."""
    return calculate_debt_payoff(debts, extra_monthly_payment, Strategy.AVALANCHE, **kwargs)


def hybrid_payoff(debts: Sequence[Debt], extra_monthly_payment: float, **kwargs) -> DebtPayoffResult:
    """Return payoff result targeting high-rate debts, then smallest balances."""
    return calculate_debt_payoff(debts, extra_monthly_payment, Strategy.HYBRID, **kwargs)
