"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

STRATEGY_NAMES = ("snowball", "avalanche", "hybrid", "custom")


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {value!r}.") from exc


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {value!r}.") from exc


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "BudgetFlow"
    LOG_FILENAME = "budgetflow.log"

    def __init__(self) -> None:
        self.SECRET_KEY = os.getenv("BUDGETFLOW_SECRET_KEY", "replace-me")
        self.DEV_MODE = _env_bool("BUDGETFLOW_DEV_MODE", default=True)
        self.DATA_DIR = self._resolve_data_dir()
        self.DEFAULT_EXTRA_PAYMENT = _env_float("BUDGETFLOW_DEFAULT_EXTRA_PAYMENT", 500.0)
        self.IMPULSIVITY_SCORE = _env_int("BUDGETFLOW_IMPULSIVITY_SCORE", 65)
        self.DEFAULT_STRATEGY = os.getenv("BUDGETFLOW_DEFAULT_STRATEGY", "snowball").strip().lower()

        if not self.DEV_MODE and self.SECRET_KEY == "replace-me":
            raise ValueError("BUDGETFLOW_SECRET_KEY must be set in non-dev mode.")
        if self.DEFAULT_EXTRA_PAYMENT < 0:
            raise ValueError("BUDGETFLOW_DEFAULT_EXTRA_PAYMENT cannot be negative.")
        if not 0 <= self.IMPULSIVITY_SCORE <= 100:
            raise ValueError("BUDGETFLOW_IMPULSIVITY_SCORE must be between 0 and 100.")
        if self.DEFAULT_STRATEGY not in STRATEGY_NAMES:
            raise ValueError(
                f"BUDGETFLOW_DEFAULT_STRATEGY must be one of {', '.join(STRATEGY_NAMES)}."
            )

    def _resolve_data_dir(self) -> Path:
        """Return the directory where log files live."""

        data_root = os.getenv("BUDGETFLOW_DATA_DIR", "instance")
        base_path = Path(data_root).expanduser()
        try:
            path = base_path.resolve()
            path.mkdir(parents=True, exist_ok=True)
            return path
        except PermissionError:
            # Fall back to user-local storage when the configured root is read-only.
            fallback_path = Path.home() / f".{self.APP_NAME.lower()}"
            fallback_path.mkdir(parents=True, exist_ok=True)
            return fallback_path.resolve()


class DevConfig(BaseConfig):
    """Development configuration."""

    DEBUG = True
    TESTING = False


class TestingConfig(BaseConfig):
    """Configuration used by the test-suite."""

    DEBUG = False
    TESTING = True
