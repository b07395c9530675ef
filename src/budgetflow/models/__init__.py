"""Domain models for payoff planning."""

from .debt import Debt, DebtType, total_balance, total_minimum_payments
from .payoff import (
    STRATEGY_LABELS,
    STRATEGY_SUBTITLES,
    DebtPayoffResult,
    DebtPayoffScheduleItem,
    Strategy,
)

__all__ = [
    "Debt",
    "DebtType",
    "DebtPayoffResult",
    "DebtPayoffScheduleItem",
    "Strategy",
    "STRATEGY_LABELS",
    "STRATEGY_SUBTITLES",
    "total_balance",
    "total_minimum_payments",
]
