"""Flask CLI commands for BudgetFlow."""

from __future__ import annotations

import json
from pathlib import Path

import click
from flask import current_app

from .models import Debt, STRATEGY_LABELS, Strategy
from .models.payoff import DebtPayoffResult
from .services.risk import risk_tier
from .services.scenarios import format_duration

STRATEGY_CHOICES = [strategy.value for strategy in Strategy]


def _load_debt_payloads(path: str | None) -> list[dict]:
    """Read debts from a JSON file (a list, or an object with a ``debts`` key)."""

    if path is None:
        from .services.demo import demo_debts

        return [debt.to_dict() for debt in demo_debts()]

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"{path} is not valid JSON: {exc}", param_hint="--file") from exc
    if isinstance(data, dict):
        data = data.get("debts")
    if not isinstance(data, list):
        raise click.BadParameter("expected a list of debts", param_hint="--file")
    return data


def _bind(payload: dict, *, require_strategy: bool):
    from .blueprints.payoff.forms import SimulationForm

    config = current_app.config["BUDGETFLOW_CONFIG"]
    form = SimulationForm.from_payload(payload)
    if not form.validate(
        require_strategy=require_strategy,
        default_extra=config.DEFAULT_EXTRA_PAYMENT,
        default_score=config.IMPULSIVITY_SCORE,
    ):
        raise click.UsageError("; ".join(form.error_messages))
    return form


def _split_order(order: str | None) -> list[str]:
    return [item.strip() for item in (order or "").split(",") if item.strip()]


def _echo_schedule(debts: list[Debt], result: DebtPayoffResult) -> None:
    names = {debt.id: debt for debt in debts}
    click.echo(f"{'#':>2}  {'Debt':<20} {'Risk':<6} {'Months':>6}  {'Payoff':<8} {'Interest':>12} {'Cumulative':>13}")
    for index, item in enumerate(result.schedule, start=1):
        debt = names[item.debt_id]
        months = f"{item.months_to_payoff}" if item.paid_off else f">{item.months_to_payoff}"
        click.echo(
            f"{index:>2}  {debt.name[:20]:<20} {risk_tier(debt.interest_rate):<6} {months:>6}  "
            f"{item.payoff_date:<8} {item.total_interest_paid:>12,.2f} {item.cumulative_payment:>13,.2f}"
        )
    click.echo(
        f"Debt free in {result.total_months_to_debt_free} months "
        f"({format_duration(result.total_months_to_debt_free)}); "
        f"interest ${result.total_interest_paid:,.2f}; total paid ${result.total_amount_paid:,.2f}"
    )
    if result.hit_month_cap:
        click.echo("Warning: some debts never amortize with these payments.", err=True)


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("budgetflow-simulate")
    @click.option("--strategy", type=click.Choice(STRATEGY_CHOICES), default=None, help="Payoff strategy")
    @click.option("--extra", type=float, default=None, help="Extra monthly payment")
    @click.option("--order", default=None, help="Comma-separated debt ids for the custom strategy")
    @click.option("--file", "file_path", type=click.Path(exists=True, dir_okay=False), default=None,
                  help="JSON file with debts (demo debts when omitted)")
    def budgetflow_simulate(strategy, extra, order, file_path) -> None:
        """Simulate one payoff strategy and print the schedule."""

        from .services.debts import calculate_debt_payoff

        config = current_app.config["BUDGETFLOW_CONFIG"]
        form = _bind(
            {
                "debts": _load_debt_payloads(file_path),
                "extraMonthlyPayment": extra,
                "strategy": strategy or config.DEFAULT_STRATEGY,
                "customOrder": _split_order(order),
            },
            require_strategy=True,
        )
        result = calculate_debt_payoff(
            form.parsed_debts, form.extra_monthly_payment, form.strategy, form.custom_order
        )
        click.echo(
            f"{STRATEGY_LABELS[result.strategy]} strategy, "
            f"+${form.extra_monthly_payment:,.2f}/mo extra"
        )
        _echo_schedule(form.parsed_debts, result)

    @app.cli.command("budgetflow-compare")
    @click.option("--extra", type=float, default=None, help="Extra monthly payment")
    @click.option("--score", type=float, default=None, help="Impulsivity score (0-100)")
    @click.option("--order", default=None, help="Comma-separated debt ids; adds the custom strategy")
    @click.option("--file", "file_path", type=click.Path(exists=True, dir_okay=False), default=None,
                  help="JSON file with debts (demo debts when omitted)")
    def budgetflow_compare(extra, score, order, file_path) -> None:
        """Compare strategies and print a recommendation."""

        from .services.recommendations import recommend_strategy
        from .services.scenarios import compare_strategies

        custom_order = _split_order(order)
        form = _bind(
            {
                "debts": _load_debt_payloads(file_path),
                "extraMonthlyPayment": extra,
                "impulsivityScore": score,
                "customOrder": custom_order,
            },
            require_strategy=False,
        )
        comparison = compare_strategies(
            form.parsed_debts,
            form.extra_monthly_payment,
            form.custom_order,
            include_custom=bool(custom_order),
        )
        for strategy, result in comparison.results.items():
            flags = comparison.best_flags(strategy)
            marker = " *" if all(flags.values()) else ""
            click.echo(
                f"{STRATEGY_LABELS[strategy]:<10} interest ${result.total_interest_paid:>11,.2f}  "
                f"months {result.total_months_to_debt_free:>3}  "
                f"total ${result.total_amount_paid:>11,.2f}{marker}"
            )

        results = comparison.results
        recommendation = recommend_strategy(
            form.impulsivity_score,
            results[Strategy.SNOWBALL],
            results[Strategy.AVALANCHE],
            results[Strategy.HYBRID],
        )
        click.echo("")
        click.echo(recommendation.title)
        click.echo(recommendation.explanation)
