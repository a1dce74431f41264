"""Application factory and app-wide configuration.

Run locally with ``flask --app vorsorge.app run --port 5000 --debug``.
"""

import logging
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from vorsorge.app.api.routes import api_bp
from vorsorge.config import Config


def _configure_logging(app: Flask) -> None:
    logging.basicConfig(format=app.config["LOG_FORMAT"])
    logging.getLogger("vorsorge").setLevel(app.config["LOG_LEVEL"])


def create_app(test_config: Optional[Mapping[str, Any]] = None) -> Flask:
    """Build the Flask app instance."""
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env("VORSORGE")
    if test_config is not None:
        app.config.update(test_config)

    _configure_logging(app)

    prefix = app.config["API_PREFIX"]
    CORS(
        app,
        resources={f"{prefix}/*": {"origins": app.config["CORS_ORIGINS"]}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix=prefix)
    return app
