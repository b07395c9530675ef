"""Interest-rate risk tiers used when presenting debts."""

from __future__ import annotations

from typing import Literal

RiskTier = Literal["red", "yellow", "green"]

HIGH_RISK_RATE = 15.0
MEDIUM_RISK_RATE = 7.0

RISK_LEGEND: dict[str, str] = {
    "red": "High Risk (≥15%)",
    "yellow": "Medium Risk (≥7%)",
    "green": "Low Risk (<7%)",
}


def risk_tier(interest_rate: float) -> RiskTier:
    """Map an APR percentage to a display tier."""

    if interest_rate >= HIGH_RISK_RATE:
        return "red"
    if interest_rate >= MEDIUM_RISK_RATE:
        return "yellow"
    return "green"
