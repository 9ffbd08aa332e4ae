"""Flask application package."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(overrides: Mapping[str, Any] | None = None, store: Any | None = None) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied on top of the environment config,
            e.g. ``{"DATABASE_URL": "sqlite:///tmp.db"}``.
        store: Pre-built ``ItemStore``; one is built from ``DATABASE_URL``
            when omitted.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from inventory.config import get_config
    from inventory.db import init_db
    from inventory.error_handlers import register_error_handlers
    from inventory.logging_config import configure_logging
    from inventory.routes.health import health_bp
    from inventory.routes.items import items_bp
    from inventory.routes.web import web_bp

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app, store=store)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(items_bp, url_prefix="/api")

    return app
