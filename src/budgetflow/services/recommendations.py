"""Strategy recommendation based on a user's impulsivity score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..models.payoff import DebtPayoffResult, Strategy
from .debts import round_currency

HYBRID_SCORE_RANGE = (40, 70)
SNOWBALL_SCORE_THRESHOLD = 60


@dataclass(frozen=True, slots=True)
class DebtRecommendation:
    recommended: Strategy
    title: str
    explanation: str
    savings_difference: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "recommended": self.recommended.value,
            "title": self.title,
            "explanation": self.explanation,
            "savingsDifference": self.savings_difference,
        }


def _money(amount: float) -> str:
    return f"${amount:,.0f}"


def recommend_strategy(
    impulsivity_score: float,
    snowball: DebtPayoffResult,
    avalanche: DebtPayoffResult,
    hybrid: DebtPayoffResult | None = None,
) -> DebtRecommendation:
    """Pick a payoff strategy for the given impulsivity score (0-100).

    A mid-range score picks hybrid when a hybrid result is supplied; otherwise
    scores above 60 favour snowball's quick wins and everything else
    avalanche. ``savings_difference`` always compares snowball against
    avalanche, whichever strategy is recommended.
    """

    savings_difference = round_currency(
        abs(snowball.total_interest_paid - avalanche.total_interest_paid)
    )
    low, high = HYBRID_SCORE_RANGE

    if hybrid is not None and low <= impulsivity_score <= high:
        hybrid_savings = snowball.total_interest_paid - hybrid.total_interest_paid
        return DebtRecommendation(
            recommended=Strategy.HYBRID,
            title="Hybrid Strategy Recommended",
            explanation=(
                f"Your impulsivity score of {impulsivity_score:g} sits in the middle range, "
                "so a blend works best: clear your high-interest debts first, then roll "
                "into the smallest balances for quick wins. Compared with snowball, hybrid "
                f"saves you {_money(max(hybrid_savings, 0.0))} in interest while keeping "
                f"momentum; avalanche and snowball differ by {_money(savings_difference)}."
            ),
            savings_difference=savings_difference,
        )

    if impulsivity_score > SNOWBALL_SCORE_THRESHOLD:
        return DebtRecommendation(
            recommended=Strategy.SNOWBALL,
            title="Snowball Strategy Recommended",
            explanation=(
                f"With an impulsivity score of {impulsivity_score:g}, early wins matter. "
                "Paying off the smallest balances first keeps you motivated, even though "
                f"avalanche would save about {_money(savings_difference)} in interest."
            ),
            savings_difference=savings_difference,
        )

    return DebtRecommendation(
        recommended=Strategy.AVALANCHE,
        title="Avalanche Strategy Recommended",
        explanation=(
            f"Your impulsivity score of {impulsivity_score:g} shows you can stay disciplined "
            "without quick wins. Targeting the highest interest rates first saves you "
            f"{_money(savings_difference)} in interest compared to snowball."
        ),
        savings_difference=savings_difference,
    )
