"""Debt payoff routes."""

from __future__ import annotations

import math

from flask import current_app, jsonify, request

from budgetflow.logging_config import get_logger
from budgetflow.models import total_balance, total_minimum_payments
from budgetflow.models.payoff import Strategy
from budgetflow.services.debts import calculate_debt_payoff
from budgetflow.services.demo import DEMO_PROFILE, NEW_DEBT_DEFAULTS, demo_debts
from budgetflow.services.recommendations import recommend_strategy
from budgetflow.services.risk import RISK_LEGEND, risk_tier
from budgetflow.services.scenarios import accelerate_payoff, compare_strategies

from . import bp
from .forms import DEFAULT_STRATEGIES, SimulationForm

logger = get_logger(__name__)


def _config():
    return current_app.config["BUDGETFLOW_CONFIG"]


def _invalid(form: SimulationForm):
    logger.info(
        "Rejected payoff payload",
        extra={"endpoint": request.endpoint, "fields": sorted(form.errors)},
    )
    return jsonify({"error": "invalid_payload", "errors": form.errors}), 400


def _bind_form(*, require_strategy: bool = True) -> SimulationForm:
    config = _config()
    form = SimulationForm.from_payload(request.get_json(silent=True))
    form.validate(
        strategies=DEFAULT_STRATEGIES,
        require_strategy=require_strategy,
        default_extra=config.DEFAULT_EXTRA_PAYMENT,
        default_score=config.IMPULSIVITY_SCORE,
    )
    return form


def _totals(form: SimulationForm) -> dict:
    return {
        "totalDebt": total_balance(form.parsed_debts),
        "monthlyMinimums": total_minimum_payments(form.parsed_debts),
    }


@bp.get("/demo")
def demo():
    """Expose the demo debts, profile and display metadata."""

    debts = demo_debts()
    return jsonify(
        {
            "debts": [debt.to_dict() for debt in debts],
            "profile": {
                "extraMonthlyPayment": DEMO_PROFILE.extra_monthly_payment,
                "impulsivityScore": DEMO_PROFILE.impulsivity_score,
            },
            "newDebtDefaults": NEW_DEBT_DEFAULTS,
            "strategies": DEFAULT_STRATEGIES,
            "riskLegend": RISK_LEGEND,
        }
    )


@bp.post("/simulate")
def simulate():
    """Run one strategy and return the payoff schedule."""

    form = _bind_form()
    if form.errors:
        return _invalid(form)

    result = calculate_debt_payoff(
        form.parsed_debts,
        form.extra_monthly_payment,
        form.strategy,
        form.custom_order,
    )
    return jsonify({**result.to_dict(), **_totals(form)})


@bp.post("/compare")
def compare():
    """Compare snowball, avalanche and hybrid (custom on request)."""

    form = _bind_form(require_strategy=False)
    if form.errors:
        return _invalid(form)

    comparison = compare_strategies(
        form.parsed_debts,
        form.extra_monthly_payment,
        form.custom_order,
        include_custom=form.include_custom,
    )
    return jsonify({**comparison.to_dict(), **_totals(form)})


@bp.post("/accelerate")
def accelerate():
    """Compare paying minimums only against paying the extra amount."""

    form = _bind_form()
    if form.errors:
        return _invalid(form)

    scenario = accelerate_payoff(
        form.parsed_debts,
        form.extra_monthly_payment,
        form.strategy,
        form.custom_order,
    )
    return jsonify({**scenario.to_dict(), **_totals(form)})


@bp.post("/recommend")
def recommend():
    """Recommend a strategy for the caller's impulsivity score."""

    form = _bind_form(require_strategy=False)
    if form.errors:
        return _invalid(form)

    comparison = compare_strategies(form.parsed_debts, form.extra_monthly_payment)
    results = comparison.results
    recommendation = recommend_strategy(
        form.impulsivity_score,
        results[Strategy.SNOWBALL],
        results[Strategy.AVALANCHE],
        results[Strategy.HYBRID],
    )
    return jsonify(
        {
            **recommendation.to_dict(),
            "impulsivityScore": form.impulsivity_score,
            "results": {strategy.value: result.to_dict() for strategy, result in results.items()},
        }
    )


@bp.get("/risk")
def risk():
    """Classify an interest rate into a display tier."""

    raw_rate = request.args.get("rate", "")
    try:
        rate = float(raw_rate)
    except ValueError:
        rate = math.nan
    if not math.isfinite(rate):
        return jsonify({"error": "invalid_rate", "rate": raw_rate}), 400
    tier = risk_tier(rate)
    return jsonify({"rate": rate, "tier": tier, "label": RISK_LEGEND[tier]})
