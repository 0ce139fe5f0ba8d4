"""Application factory and app-wide configuration."""

#setup: python -m venv .venv
#setup: source .venv/bin/activate   # (windows: .venv\Scripts\activate)
#setup: pip install -U pip -e ".[test]"
#setup: flask --app interest_calculator.app run --port 5000 --debug

from __future__ import annotations

from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from interest_calculator.app.api.routes import api_bp
from interest_calculator.logging_config import setup_logging

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]

ENV_PREFIX = "INTEREST_CALC"


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_mapping(
        CORS_ORIGINS=DEFAULT_CORS_ORIGINS,
        LOG_LEVEL="INFO",
    )
    # e.g. INTEREST_CALC_LOG_LEVEL=DEBUG, INTEREST_CALC_CORS_ORIGINS='["https://example.com"]'
    app.config.from_prefixed_env(ENV_PREFIX)
    if test_config is not None:
        app.config.from_mapping(test_config)

    setup_logging(app.config["LOG_LEVEL"])

    CORS(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
