"""Tests for the impulsivity-based strategy recommendation."""

from __future__ import annotations

import pytest

from budgetflow.models import DebtPayoffResult, Strategy
from budgetflow.services.debts import avalanche_payoff, hybrid_payoff, snowball_payoff
from budgetflow.services.recommendations import recommend_strategy
from tests.conftest import TODAY


def _result(strategy: Strategy, interest: float) -> DebtPayoffResult:
    return DebtPayoffResult(
        strategy=strategy,
        order=(),
        schedule=(),
        total_interest_paid=interest,
        total_months_to_debt_free=24,
        total_amount_paid=10000.0 + interest,
    )


@pytest.fixture
def results():
    return (
        _result(Strategy.SNOWBALL, 1200.50),
        _result(Strategy.AVALANCHE, 1000.25),
        _result(Strategy.HYBRID, 1050.00),
    )


def test_high_score_without_hybrid_recommends_snowball(results):
    snowball, avalanche, _ = results
    recommendation = recommend_strategy(80, snowball, avalanche)
    assert recommendation.recommended is Strategy.SNOWBALL
    assert "80" in recommendation.explanation


def test_low_score_recommends_avalanche(results):
    snowball, avalanche, _ = results
    assert recommend_strategy(30, snowball, avalanche).recommended is Strategy.AVALANCHE


def test_mid_score_with_hybrid_recommends_hybrid(results):
    snowball, avalanche, hybrid = results
    recommendation = recommend_strategy(55, snowball, avalanche, hybrid)
    assert recommendation.recommended is Strategy.HYBRID
    assert recommendation.title == "Hybrid Strategy Recommended"
    # Hybrid's own savings over snowball are cited in the text
    assert "$150" in recommendation.explanation


def test_mid_score_without_hybrid_falls_back(results):
    snowball, avalanche, _ = results
    assert recommend_strategy(55, snowball, avalanche).recommended is Strategy.AVALANCHE
    assert recommend_strategy(65, snowball, avalanche).recommended is Strategy.SNOWBALL


@pytest.mark.parametrize(
    "score, expected",
    [
        (39, Strategy.AVALANCHE),
        (40, Strategy.HYBRID),
        (70, Strategy.HYBRID),
        (71, Strategy.SNOWBALL),
        (100, Strategy.SNOWBALL),
        (0, Strategy.AVALANCHE),
    ],
)
def test_hybrid_range_boundaries(results, score, expected):
    snowball, avalanche, hybrid = results
    assert recommend_strategy(score, snowball, avalanche, hybrid).recommended is expected


@pytest.mark.parametrize("score", [20, 55, 90])
def test_savings_difference_always_compares_snowball_and_avalanche(results, score):
    snowball, avalanche, hybrid = results
    recommendation = recommend_strategy(score, snowball, avalanche, hybrid)
    assert recommendation.savings_difference == 200.25


def test_savings_difference_is_absolute():
    snowball = _result(Strategy.SNOWBALL, 900.0)
    avalanche = _result(Strategy.AVALANCHE, 950.0)
    assert recommend_strategy(10, snowball, avalanche).savings_difference == 50.0


def test_recommendation_from_simulated_results(scenario_debts):
    snowball = snowball_payoff(scenario_debts, 200.0, today=TODAY)
    avalanche = avalanche_payoff(scenario_debts, 200.0, today=TODAY)
    hybrid = hybrid_payoff(scenario_debts, 200.0, today=TODAY)

    assert recommend_strategy(80, snowball, avalanche).recommended is Strategy.SNOWBALL
    assert recommend_strategy(30, snowball, avalanche).recommended is Strategy.AVALANCHE
    assert recommend_strategy(55, snowball, avalanche, hybrid).recommended is Strategy.HYBRID


def test_to_dict_uses_wire_keys(results):
    snowball, avalanche, _ = results
    payload = recommend_strategy(30, snowball, avalanche).to_dict()
    assert payload["recommended"] == "avalanche"
    assert payload["savingsDifference"] == 200.25
    assert set(payload) == {"recommended", "title", "explanation", "savingsDifference"}
