"""Flask application factory.

Kept separate from `scriptures/__init__.py` so importing the engine
(used by one-off scripts) doesn't require Flask.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from flask import Flask

from .config import Config
from .extensions import api
from .gematria.registry import MethodRegistry, default_registry
from .routes import blp


def create_app(config: Mapping[str, Any] | None = None, registry: MethodRegistry | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    app.json.ensure_ascii = False

    logging.getLogger("scriptures").setLevel(app.config["LOG_LEVEL"])

    app.extensions["gematria_registry"] = registry or default_registry()
    api.init_app(app)

    api.register_blueprint(blp)

    @app.get("/")
    def index():
        return {
            "service": app.config["API_TITLE"],
            "swagger_ui": "/swagger-ui",
            "openapi_json": "/openapi.json",
            "endpoints": [
                "/gematria",
                "/gematria/systems",
                "/methods",
                "/temurah",
                "/verses/gematria",
                "/health",
            ],
        }

    @app.get("/health")
    def health():
        """
        Production-safe health endpoint.
        Verifies the method registry is populated.
        """
        methods = len(app.extensions["gematria_registry"])
        if not methods:
            return {"ok": False, "methods": 0}, 503
        return {"ok": True, "methods": methods}

    return app
