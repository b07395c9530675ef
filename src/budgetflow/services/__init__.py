"""Service module exports."""

from . import debts, demo, recommendations, risk, scenarios

__all__ = [
    "debts",
    "demo",
    "recommendations",
    "risk",
    "scenarios",
]
