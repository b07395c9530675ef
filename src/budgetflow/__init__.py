"""BudgetFlow debt payoff planner application factory."""

from __future__ import annotations

from importlib import import_module
from typing import Iterable

from flask import Flask, jsonify

from . import cli as _cli
from .config import BaseConfig, DevConfig, TestingConfig
from .logging_config import setup_logging

_CONFIG_MAP = {
    "development": DevConfig,
    "testing": TestingConfig,
    "default": BaseConfig,
}


def _resolve_config(name: str | None) -> type[BaseConfig]:
    """Return the config class for the provided environment name."""

    if not name:
        return BaseConfig
    return _CONFIG_MAP.get(name.lower(), BaseConfig)


def _blueprint_paths() -> Iterable[str]:
    """Yield blueprint import paths registered on the app."""

    yield "budgetflow.blueprints.payoff"


def create_app(config_name: str | None = None) -> Flask:
    """Create and configure the Flask application instance."""

    app = Flask(__name__, instance_relative_config=True)
    config_obj = _resolve_config(config_name)()
    app.config.from_object(config_obj)
    app.config["BUDGETFLOW_CONFIG"] = config_obj
    app.json.sort_keys = False

    setup_logging(config_obj)
    _register_blueprints(app)
    _register_error_handlers(app)
    _cli.init_app(app)

    return app


def _register_blueprints(app: Flask) -> None:
    """Import and register all blueprints declared in `_blueprint_paths`."""

    for dotted_path in _blueprint_paths():
        module = import_module(dotted_path)
        blueprint = getattr(module, "bp")
        app.register_blueprint(blueprint)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(404)
    def _not_found(error):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(405)
    def _method_not_allowed(error):
        return jsonify({"error": "method_not_allowed"}), 405


__all__ = ["BaseConfig", "DevConfig", "TestingConfig", "create_app"]
