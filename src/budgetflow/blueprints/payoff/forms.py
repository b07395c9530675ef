"""Payload validation for payoff requests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping
from uuid import uuid4

from budgetflow.models import Debt, DebtType, Strategy
from budgetflow.models.payoff import STRATEGY_SUBTITLES

StrategyChoices = Dict[str, str]

DEFAULT_STRATEGIES: StrategyChoices = {
    strategy.value: subtitle for strategy, subtitle in STRATEGY_SUBTITLES.items()
}

DEBT_TYPES = tuple(debt_type.value for debt_type in DebtType)


def _parse_number(
    errors: Dict[str, List[str]],
    field_name: str,
    value: Any,
    *,
    minimum: Decimal,
    inclusive: bool = True,
    maximum: Decimal | None = None,
) -> Decimal | None:
    """Parse numeric input, storing errors when parsing or range checks fail."""

    if value is None or value == "":
        errors.setdefault(field_name, []).append("This field is required.")
        return None

    if isinstance(value, bool):
        errors.setdefault(field_name, []).append("Enter a valid number.")
        return None

    if not isinstance(value, Decimal):
        try:
            value = Decimal(str(value))
        except (InvalidOperation, TypeError, ValueError):
            errors.setdefault(field_name, []).append("Enter a valid number.")
            return None

    if not value.is_finite() or not math.isfinite(float(value)):
        errors.setdefault(field_name, []).append("Enter a valid number.")
        return None

    too_small = value < minimum if inclusive else value <= minimum
    if too_small:
        message = (
            "Amount must be greater than zero."
            if not inclusive and minimum == 0
            else f"Value must be at least {minimum}."
        )
        errors.setdefault(field_name, []).append(message)
    elif maximum is not None and value > maximum:
        errors.setdefault(field_name, []).append(f"Value must be at most {maximum}.")
    return value


@dataclass(slots=True)
class DebtForm:
    """Represents one debt row from the wire payload and its validation errors."""

    id: str | None = None
    name: str = ""
    balance: Decimal | str | float | None = None
    interest_rate: Decimal | str | float | None = None
    minimum_payment: Decimal | str | float | None = None
    type: str = DebtType.CREDIT_CARD.value
    errors: Dict[str, List[str]] = field(default_factory=dict, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "DebtForm":
        return cls(
            id=payload.get("id"),
            name=payload.get("name") or "",
            balance=payload.get("balance"),
            interest_rate=payload.get("interestRate"),
            minimum_payment=payload.get("minimumPayment"),
            type=payload.get("type") or DebtType.CREDIT_CARD.value,
        )

    def validate(self) -> bool:
        """Validate debt inputs returning True when all values are acceptable."""

        self.errors.clear()

        if not isinstance(self.name, str) or not self.name.strip():
            self.errors.setdefault("name", []).append("Enter the creditor or account name.")
        else:
            self.name = self.name.strip()

        if self.id is None or str(self.id).strip() == "":
            self.id = uuid4().hex[:9]
        else:
            self.id = str(self.id).strip()

        self.balance = _parse_number(
            self.errors, "balance", self.balance, minimum=Decimal("0"), inclusive=False
        )
        self.interest_rate = _parse_number(
            self.errors, "interestRate", self.interest_rate, minimum=Decimal("0")
        )
        self.minimum_payment = _parse_number(
            self.errors, "minimumPayment", self.minimum_payment, minimum=Decimal("0")
        )

        if self.type not in DEBT_TYPES:
            self.errors.setdefault("type", []).append(
                f"Choose one of: {', '.join(DEBT_TYPES)}."
            )

        return not self.errors

    def to_debt(self) -> Debt:
        if self.errors:
            raise ValueError("Cannot build a debt from an invalid form.")
        return Debt(
            id=str(self.id),
            name=self.name,
            balance=float(self.balance),
            interest_rate=float(self.interest_rate),
            minimum_payment=float(self.minimum_payment),
            type=DebtType(self.type),
        )


@dataclass(slots=True)
class SimulationForm:
    """Validates a simulation request: debts plus run parameters."""

    debts: Any = None
    extra_monthly_payment: Any = None
    strategy: Any = None
    custom_order: Any = None
    impulsivity_score: Any = None
    include_custom: Any = None
    errors: Dict[str, List[str]] = field(default_factory=dict, init=False)
    parsed_debts: List[Debt] = field(default_factory=list, init=False)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "SimulationForm":
        if not isinstance(payload, Mapping):
            payload = {}
        return cls(
            debts=payload.get("debts"),
            extra_monthly_payment=payload.get("extraMonthlyPayment"),
            strategy=payload.get("strategy"),
            custom_order=payload.get("customOrder"),
            impulsivity_score=payload.get("impulsivityScore"),
            include_custom=payload.get("includeCustom"),
        )

    def validate(
        self,
        *,
        strategies: StrategyChoices | None = None,
        require_strategy: bool = True,
        default_extra: float | None = None,
        default_score: int | None = None,
    ) -> bool:
        """Validate the request returning True when it can be simulated."""

        self.errors.clear()
        self.parsed_debts = []
        strategies = strategies or DEFAULT_STRATEGIES

        self._validate_debts()

        if self.extra_monthly_payment in (None, "") and default_extra is not None:
            self.extra_monthly_payment = default_extra
        parsed_extra = _parse_number(
            self.errors,
            "extraMonthlyPayment",
            self.extra_monthly_payment,
            minimum=Decimal("0"),
        )
        self.extra_monthly_payment = float(parsed_extra) if parsed_extra is not None else None

        if require_strategy:
            if not isinstance(self.strategy, str) or self.strategy.strip().lower() not in strategies:
                self.errors.setdefault("strategy", []).append("Choose a payoff strategy.")
            else:
                self.strategy = Strategy(self.strategy.strip().lower())

        if self.custom_order is None:
            self.custom_order = []
        elif not isinstance(self.custom_order, list) or not all(
            isinstance(item, str) for item in self.custom_order
        ):
            self.errors.setdefault("customOrder", []).append(
                "Custom order must be a list of debt ids."
            )

        if self.impulsivity_score in (None, "") and default_score is not None:
            self.impulsivity_score = default_score
        if self.impulsivity_score is not None:
            parsed_score = _parse_number(
                self.errors,
                "impulsivityScore",
                self.impulsivity_score,
                minimum=Decimal("0"),
                maximum=Decimal("100"),
            )
            self.impulsivity_score = float(parsed_score) if parsed_score is not None else None

        if self.include_custom is None:
            self.include_custom = False
        elif not isinstance(self.include_custom, bool):
            self.errors.setdefault("includeCustom", []).append("Must be true or false.")

        return not self.errors

    def _validate_debts(self) -> None:
        if not isinstance(self.debts, list):
            self.errors.setdefault("debts", []).append("Provide a list of debts.")
            return

        seen_ids: set[str] = set()
        for index, raw in enumerate(self.debts):
            if not isinstance(raw, Mapping):
                self.errors.setdefault(f"debts[{index}]", []).append("Each debt must be an object.")
                continue
            form = DebtForm.from_payload(raw)
            if not form.validate():
                for field_name, messages in form.errors.items():
                    self.errors.setdefault(f"debts[{index}].{field_name}", []).extend(messages)
                continue
            if form.id in seen_ids:
                self.errors.setdefault(f"debts[{index}].id", []).append(
                    f"Duplicate debt id {form.id!r}."
                )
                continue
            seen_ids.add(str(form.id))
            self.parsed_debts.append(form.to_debt())

    @property
    def error_messages(self) -> Iterable[str]:
        """Flattened iterable of error strings for summaries."""

        for field_name, messages in self.errors.items():
            for message in messages:
                yield f"{field_name}: {message}"
